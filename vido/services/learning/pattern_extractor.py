"""
Extraction de motifs reutilisables a partir d'un nom de fichier.

PatternExtractor decompose un nom de fichier en trois elements :
- un groupe de fansub optionnel ([Groupe] ou 【Groupe】 en tete du nom)
- un titre generalise (sans episode, annee, tags de qualite/source/codec)
- une expression reguliere de matching quand le nom a une structure reconnue

Types de motifs:
- fansub: groupe en tete, "Titre - 01 [1080p]"
- standard: marqueur saison/episode ou annee, "Breaking.Bad.S01E01.720p"
- exact: aucune structure reconnue, le titre est le nom nettoye

L'extraction est totale : elle ne leve jamais d'erreur pour une chaine.
"""

import re

from vido.core.entities.learned_pattern import PatternType
from vido.core.value_objects import ExtractedPattern
from vido.utils.constants import CODEC_TAGS, QUALITY_BRACKET_TAGS, RESOLUTION_TAGS, SOURCE_TAGS
from vido.utils.regex_matching import (
    ANY_SUFFIX,
    CASE_INSENSITIVE_FLAG,
    FANSUB_SEPARATOR,
    FLEXIBLE_SEPARATOR,
    fansub_group_regex,
    flexible_title_regex,
)

# Les tags sont detectes en ASCII : \b, \d et \s ne s'etendent pas a l'Unicode
_TAG_FLAGS = re.IGNORECASE | re.ASCII

_EXTENSION_RE = re.compile(r"\.[a-zA-Z0-9]{2,4}$")

_FANSUB_SQUARE_RE = re.compile(r"^\[([^\]]+)\]")
_FANSUB_CHINESE_RE = re.compile(r"^【([^】]+)】")

# Marqueurs d'episode, dans l'ordre de suppression
_EPISODE_PATTERNS = (
    re.compile(r"[Ss]\d+[Ee]\d+(?:-?[Ee]?\d+)?", _TAG_FLAGS),  # S01E05, S01E05-E06
    re.compile(r"\s+-\s+\d{1,3}(?:\s|$|\[)", _TAG_FLAGS),  # - 01, - 100
    re.compile(r"(?:Episode|Ep)\.?\s*\d+", _TAG_FLAGS),  # Episode 01, Ep.01
    re.compile(r"\d+x\d+", _TAG_FLAGS),  # 1x05
    re.compile(r"第\d+[話话集]?", _TAG_FLAGS),  # 第01話, 第1集
)

_YEAR_RE = re.compile(r"(?:^|[.\s_-])((?:19|20)\d{2})(?:[.\s_-]|$)", re.ASCII)

# Tags techniques retires du titre standard, dans l'ordre
_TAG_PATTERNS = (
    re.compile(r"\b\d{3,4}[ip]\b", _TAG_FLAGS),
    re.compile(rf"\b(?:{'|'.join(RESOLUTION_TAGS)})\b", _TAG_FLAGS),
    re.compile(rf"\b(?:{'|'.join(SOURCE_TAGS)})\b", _TAG_FLAGS),
    re.compile(rf"\b(?:{'|'.join(CODEC_TAGS)})\b", _TAG_FLAGS),
)

_RELEASE_GROUP_RE = re.compile(r"-[a-z0-9]+$", _TAG_FLAGS)

# Crochets supplementaires apres le groupe : "[G1][G2] Titre"
_LEADING_BRACKETS_RE = re.compile(r"^(?:[\[【][^\]】]*[\]】]\s*)+", re.ASCII)

# Contenu entre crochets/parentheses en fin de nom fansub (qualite, codec...)
_TRAILING_BRACKETS_RE = re.compile(r"\s*[\[\(【].*$", re.ASCII)

_LEADING_DIGIT_RE = re.compile(r"^\d", re.ASCII)

_SEPARATOR_RE = re.compile(r"[._]+")
_MULTI_SPACE_RE = re.compile(r"\s+", re.ASCII)

# Separateur episode des noms fansub
_EPISODE_SEPARATOR = " - "


class PatternExtractionError(Exception):
    """Entree impossible a analyser (distincte d'une absence de correspondance)."""


def _extract_fansub_group(name: str) -> tuple[str, str]:
    """
    Extrait le groupe de fansub en tete du nom.

    Seul le premier crochet est consomme : "[G1][G2] Titre" donne "G1".
    Un crochet contenant un tag de qualite ([1080p]) n'est pas un groupe.

    Returns:
        Tuple (groupe, reste du nom) ; ("", nom) si aucun groupe
    """
    for pattern in (_FANSUB_SQUARE_RE, _FANSUB_CHINESE_RE):
        match = pattern.match(name)
        if match is None:
            continue
        group = match.group(1)
        if group.lower() in QUALITY_BRACKET_TAGS:
            return "", name
        return group, name[match.end():].strip()
    return "", name


def _extract_title_from_fansub(rest: str) -> str:
    """
    Extrait le titre d'un nom au format fansub.

    "Kimetsu no Yaiba - 26 (BD 1920x1080 x264 FLAC)" -> "Kimetsu no Yaiba"
    "Frieren - Beyond Journey's End - 01" -> "Frieren - Beyond Journey's End"
    "[Group2] Title - 01" -> "Title"
    """
    title = _LEADING_BRACKETS_RE.sub("", rest)
    title = _TRAILING_BRACKETS_RE.sub("", title)

    # Seul le dernier segment " - " commencant par un chiffre est un episode
    parts = title.split(_EPISODE_SEPARATOR)
    if len(parts) >= 2 and _LEADING_DIGIT_RE.match(parts[-1].strip()):
        title = _EPISODE_SEPARATOR.join(parts[:-1])

    return title.strip()


def _has_standard_markers(name: str) -> bool:
    """Verifie la presence d'un marqueur saison/episode ou d'une annee."""
    if any(pattern.search(name) for pattern in _EPISODE_PATTERNS):
        return True
    return _YEAR_RE.search(name) is not None


def _extract_title_from_standard(name: str) -> str:
    """
    Extrait le titre d'un nom au format TV/film standard.

    "Breaking.Bad.S01E01.720p.BluRay.x264-DEMAND" -> "Breaking Bad"

    Returns:
        Le titre, ou "" si le nom n'a ni episode ni annee
    """
    if not _has_standard_markers(name):
        return ""

    title = name
    for pattern in _TAG_PATTERNS:
        title = pattern.sub(" ", title)

    title = _RELEASE_GROUP_RE.sub("", title)

    for pattern in _EPISODE_PATTERNS:
        title = pattern.sub(" ", title)

    title = _YEAR_RE.sub(" ", title)

    return _clean_title(title)


def _clean_title(name: str) -> str:
    """Remplace les separateurs . et _ par des espaces et compacte les blancs ASCII."""
    title = _SEPARATOR_RE.sub(" ", name)
    title = _MULTI_SPACE_RE.sub(" ", title)
    return title.strip()


def _generate_regex(fansub_group: str, title: str, pattern_type: PatternType) -> str:
    """
    Synthetise l'expression de matching des fichiers de meme forme.

    Tout texte litteral est echappe ; seuls les espaces du titre deviennent
    une classe de separateurs souples.
    """
    parts = []
    if fansub_group:
        parts.append(fansub_group_regex(fansub_group))
    if title:
        parts.append(flexible_title_regex(title))
    parts.append(ANY_SUFFIX)

    separator = FLEXIBLE_SEPARATOR if pattern_type == PatternType.STANDARD else FANSUB_SEPARATOR
    return CASE_INSENSITIVE_FLAG + separator.join(parts)


class PatternExtractor:
    """
    Extracteur de motifs de noms de fichiers.

    Sans etat : une meme instance peut etre partagee entre appelants.

    Example:
        extractor = PatternExtractor()
        pattern = extractor.extract("[Leopard-Raws] Kimetsu no Yaiba - 26.mkv")
        pattern.fansub_group   # "Leopard-Raws"
        pattern.title_pattern  # "Kimetsu no Yaiba"
    """

    def extract(self, filename: str) -> ExtractedPattern:
        """
        Extrait un motif reutilisable d'un nom de fichier.

        Args:
            filename: Nom de fichier brut (avec ou sans extension)

        Returns:
            ExtractedPattern ; pour tout nom non vide, title_pattern est non vide

        Raises:
            PatternExtractionError: Si filename n'est pas une chaine
        """
        if not isinstance(filename, str):
            raise PatternExtractionError(
                f"Nom de fichier invalide: {type(filename).__name__}"
            )

        name = _EXTENSION_RE.sub("", filename)
        fansub_group, rest = _extract_fansub_group(name)

        if fansub_group:
            title = _extract_title_from_fansub(rest)
            pattern_type = PatternType.FANSUB
        else:
            title = _extract_title_from_standard(name)
            pattern_type = PatternType.STANDARD

        if not title:
            # Aucune structure exploitable : le nom nettoye sert de titre
            fansub_group = ""
            pattern_type = PatternType.EXACT
            title = _clean_title(name) or filename

        regex = ""
        if pattern_type != PatternType.EXACT:
            regex = _generate_regex(fansub_group, title, pattern_type)

        return ExtractedPattern(
            original_filename=filename,
            fansub_group=fansub_group,
            title_pattern=title,
            regex=regex,
            pattern_type=pattern_type,
        )
