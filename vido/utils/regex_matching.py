"""
Expressions regulieres stockees comme donnees.

Les motifs appris transportent une expression reguliere synthetisee au moment
de l'apprentissage, puis compilee et executee au moment du matching. Ce module
isole la synthese et le couple compilation/test pour que le reste du code
n'ait jamais a manipuler directement le moteur d'expressions regulieres.
"""

import re
from typing import Optional

from loguru import logger

# Separateur souple : "Breaking Bad" accepte Breaking.Bad, Breaking_Bad, Breaking-Bad...
FLEXIBLE_SEPARATOR = r"[.\s_-]+"

# Separateur entre le groupe de fansub et le titre
FANSUB_SEPARATOR = r"\s*"

# Suffixe tolerant episode, qualite, codec et extension
ANY_SUFFIX = ".*"

CASE_INSENSITIVE_FLAG = "(?i)"


def fansub_group_regex(group: str) -> str:
    """Groupe de fansub litteral entre crochets [] ou 【】."""
    return rf"[\[【]{re.escape(group)}[\]】]"


def flexible_title_regex(title: str) -> str:
    """
    Titre litteral dont chaque espace devient un separateur souple.

    Chaque mot est echappe individuellement : les espaces sont la seule
    partie du titre qui n'est pas inseree telle quelle.
    """
    return FLEXIBLE_SEPARATOR.join(re.escape(word) for word in title.split(" "))


def compile_pattern_regex(regex: str) -> Optional[re.Pattern]:
    """
    Compile une expression reguliere de motif, insensible a la casse.

    Args:
        regex: Expression stockee dans un motif appris

    Returns:
        L'expression compilee, ou None si elle est vide ou invalide
    """
    if not regex:
        return None
    try:
        return re.compile(regex, re.IGNORECASE)
    except re.error as e:
        logger.debug(f"Expression reguliere invalide ignoree: {regex!r} ({e})")
        return None


def regex_matches(regex: str, filename: str) -> bool:
    """
    Teste si un nom de fichier correspond a une expression de motif.

    La recherche n'est pas ancree : l'expression peut correspondre
    n'importe ou dans le nom.
    """
    compiled = compile_pattern_regex(regex)
    if compiled is None:
        return False
    return compiled.search(filename) is not None
