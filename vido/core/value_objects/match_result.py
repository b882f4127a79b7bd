"""
Objet valeur pour le resultat d'un matching de nom de fichier.

L'absence de correspondance est representee par None au niveau de l'API :
un MatchResult porte donc toujours un motif.
"""

from dataclasses import dataclass
from enum import Enum

from vido.core.entities.learned_pattern import LearnedPattern


class MatchType(Enum):
    """Etape de la cascade ayant produit la correspondance.

    Valeurs:
        EXACT: Chaine d'affichage identique au nom de fichier (confiance 1.0)
        PATTERN: Meme groupe de fansub et meme titre (confiance 0.95)
        REGEX: Expression reguliere du motif satisfaite (confiance 0.9)
        FUZZY: Titre proche au sens de la distance d'edition (confiance calculee)
    """

    EXACT = "exact"
    PATTERN = "pattern"
    REGEX = "regex"
    FUZZY = "fuzzy"


@dataclass(frozen=True)
class MatchResult:
    """
    Meilleure correspondance trouvee pour un nom de fichier.

    Attributs:
        pattern: Le motif appris retenu
        confidence: Confiance dans [0, 1]
        match_type: Etape de la cascade ayant produit le resultat
    """

    pattern: LearnedPattern
    confidence: float
    match_type: MatchType

    def __str__(self) -> str:
        return (
            f"Match[{self.pattern.id}]: {self.pattern.title_pattern} "
            f"(confidence: {self.confidence:.2f}, type: {self.match_type.value})"
        )
