"""
Objet valeur pour le motif extrait d'un nom de fichier.

Produit par chaque appel a PatternExtractor.extract(), jamais persiste tel quel :
il est converti en LearnedPattern par l'appelant au moment de l'apprentissage.
"""

import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from vido.core.entities.learned_pattern import LearnedPattern, MetadataType, PatternType
from vido.utils.regex_matching import regex_matches


@dataclass(frozen=True)
class ExtractedPattern:
    """
    Motif generalise extrait d'un nom de fichier.

    Attributs:
        original_filename: Nom de fichier brut, conserve pour le debogage
        fansub_group: Groupe de fansub ("" si absent ou si le crochet est une qualite)
        title_pattern: Titre generalise (groupe, episode, annee, tags retires)
        regex: Expression de matching synthetisee ("" pour le type exact)
        pattern_type: Type de motif (exact, fansub, standard)
    """

    original_filename: str
    title_pattern: str
    pattern_type: PatternType
    fansub_group: str = ""
    regex: str = ""

    @property
    def display_pattern(self) -> str:
        """Chaine d'affichage : "[groupe] titre" ou "titre"."""
        if self.fansub_group:
            return f"[{self.fansub_group}] {self.title_pattern}"
        return self.title_pattern

    def matches_filename(self, filename: str) -> bool:
        """Verifie si un nom de fichier correspond a l'expression du motif."""
        return regex_matches(self.regex, filename)

    def to_learned_pattern(
        self,
        metadata_id: str,
        metadata_type: MetadataType,
        tmdb_id: Optional[int] = None,
    ) -> LearnedPattern:
        """
        Convertit le motif extrait en LearnedPattern pret a etre persiste.

        Args:
            metadata_id: ID interne des metadonnees associees
            metadata_type: Type de metadonnees (film ou serie)
            tmdb_id: ID TMDB optionnel

        Returns:
            Un nouveau LearnedPattern (confiance 1.0, jamais utilise)
        """
        return LearnedPattern(
            id=str(uuid.uuid4()),
            pattern=self.display_pattern,
            pattern_type=self.pattern_type,
            pattern_regex=self.regex,
            fansub_group=self.fansub_group,
            title_pattern=self.title_pattern,
            metadata_type=metadata_type,
            metadata_id=metadata_id,
            tmdb_id=tmdb_id,
            confidence=1.0,
            use_count=0,
            created_at=datetime.now(timezone.utc),
        )
