"""
Modeles SQLModel pour la base de donnees Vido.

Ces modeles representent les tables de la base de donnees SQLite.
Ils sont distincts des entites de domaine (dataclass dans core/entities/)
selon l'architecture hexagonale.

Tables:
- learned_patterns: Motifs de noms de fichiers appris par correction manuelle

Les chaines optionnelles vides du domaine ("") sont stockees a NULL.
"""

from __future__ import annotations

from datetime import datetime, timezone

from sqlmodel import Field, SQLModel


class LearnedPatternModel(SQLModel, table=True):
    """
    Modele representant un motif appris dans la base de donnees.

    L'ID est un UUID genere a l'apprentissage, pas un auto-increment.
    """

    __tablename__ = "learned_patterns"

    id: str = Field(primary_key=True)
    pattern: str = Field(index=True)  # Chaine d'affichage "[groupe] titre"
    pattern_type: str  # exact, fansub, standard
    pattern_regex: str | None = None
    fansub_group: str | None = Field(default=None, index=True)
    title_pattern: str | None = Field(default=None, index=True)
    metadata_type: str  # movie, series
    metadata_id: str
    tmdb_id: int | None = None
    confidence: float = Field(default=1.0)
    use_count: int = Field(default=0, index=True)
    created_at: datetime | None = Field(default_factory=lambda: datetime.now(timezone.utc))
    last_used_at: datetime | None = None
