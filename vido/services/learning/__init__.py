"""
Apprentissage et matching des motifs de noms de fichiers.

- PatternExtractor : decompose un nom de fichier en groupe, titre et expression
- PatternMatcher : cascade exact -> pattern -> regex -> fuzzy
- similarity : similarite normalisee par distance d'edition
- LearningService : cas d'utilisation autour des motifs appris
"""

from vido.services.learning.learning_service import LearningService, PatternStats
from vido.services.learning.pattern_extractor import PatternExtractionError, PatternExtractor
from vido.services.learning.pattern_matcher import PatternMatcher
from vido.services.learning.similarity import similarity

__all__ = [
    "LearningService",
    "PatternExtractionError",
    "PatternExtractor",
    "PatternMatcher",
    "PatternStats",
    "similarity",
]
