"""
Business entities representing core domain concepts.

Entities are mutable objects with identity that persist over time.

Exports:
- LearnedPattern: A filename pattern learned from a manual correction
- PatternType: Kind of learned pattern (exact, fansub, standard)
- MetadataType: Kind of metadata a pattern resolves to (movie, series)
"""

from vido.core.entities.learned_pattern import LearnedPattern, MetadataType, PatternType

__all__ = [
    "LearnedPattern",
    "MetadataType",
    "PatternType",
]
