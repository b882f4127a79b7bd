"""
Entité motif appris.

Un LearnedPattern est la generalisation persistee d'un nom de fichier,
construite une seule fois lors d'une correction manuelle puis reutilisee
pour resoudre automatiquement les fichiers de forme similaire.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


class PatternType(Enum):
    """Type de motif determine par l'extraction.

    Valeurs:
        EXACT: Nom sans structure reconnaissable, pas d'expression reguliere
        FANSUB: Nom prefixe par un groupe de fansub entre crochets
        STANDARD: Nom avec marqueur saison/episode ou annee
    """

    EXACT = "exact"
    FANSUB = "fansub"
    STANDARD = "standard"


class MetadataType(Enum):
    """Type de metadonnees vers lequel un motif resout."""

    MOVIE = "movie"
    SERIES = "series"


@dataclass
class LearnedPattern:
    """
    Motif de nom de fichier appris a partir d'une correction utilisateur.

    Seuls use_count et last_used_at evoluent apres la creation ;
    les champs du motif eux-memes ne sont jamais modifies.

    Attributs :
        id : Identifiant unique (UUID)
        pattern : Chaine d'affichage ("[groupe] titre" ou "titre")
        pattern_type : Type du motif (exact, fansub, standard)
        pattern_regex : Expression reguliere synthetisee ("" pour exact)
        fansub_group : Groupe de fansub ("" si absent)
        title_pattern : Titre generalise, jamais vide
        metadata_type : Type de metadonnees associees (film ou serie)
        metadata_id : ID interne des metadonnees associees
        tmdb_id : ID TMDB optionnel
        confidence : Confiance initiale du motif (1.0 a la creation)
        use_count : Nombre de fichiers resolus par ce motif
        created_at : Date de creation
        last_used_at : Date de derniere utilisation
    """

    id: str
    pattern: str
    pattern_type: PatternType
    title_pattern: str
    metadata_type: MetadataType
    metadata_id: str
    pattern_regex: str = ""
    fansub_group: str = ""
    tmdb_id: Optional[int] = None
    confidence: float = 1.0
    use_count: int = 0
    created_at: Optional[datetime] = None
    last_used_at: Optional[datetime] = None
