"""
Service d'apprentissage des motifs de noms de fichiers.

Le LearningService orchestre les cas d'utilisation autour des motifs appris,
pour le CLI comme pour toute autre interface.

Responsabilites:
- Apprentissage a partir d'une correction manuelle (sans doublon)
- Recherche du motif correspondant a un nouveau fichier
- Statistiques, liste, suppression des motifs
- Application d'un motif (compteur d'utilisation)
"""

from dataclasses import dataclass
from typing import Optional

from loguru import logger

from vido.core.entities.learned_pattern import LearnedPattern, MetadataType
from vido.core.ports.repositories import IPatternRepository
from vido.core.value_objects import MatchResult
from vido.services.learning.pattern_extractor import PatternExtractor
from vido.services.learning.pattern_matcher import PatternMatcher
from vido.utils.constants import DEFAULT_DUPLICATE_THRESHOLD, DEFAULT_FUZZY_THRESHOLD


@dataclass
class PatternStats:
    """
    Statistiques sur les motifs appris.

    Attributs:
        total_patterns: Nombre de motifs appris
        total_applied: Somme des compteurs d'utilisation
        most_used_pattern: Chaine d'affichage du motif le plus utilise
        most_used_count: Compteur d'utilisation de ce motif
    """

    total_patterns: int = 0
    total_applied: int = 0
    most_used_pattern: Optional[str] = None
    most_used_count: int = 0


def _parse_metadata_type(metadata_type: str | MetadataType) -> MetadataType:
    """Convertit "movie"/"series" en MetadataType, ValueError sinon."""
    if isinstance(metadata_type, MetadataType):
        return metadata_type
    try:
        return MetadataType(metadata_type)
    except ValueError:
        raise ValueError(
            f"metadata_type doit etre 'movie' ou 'series', pas {metadata_type!r}"
        ) from None


class LearningService:
    """
    Service des cas d'utilisation des motifs appris.

    Example:
        service = LearningService(repository=repo)

        # Apprentissage apres correction manuelle
        pattern = service.learn_from_correction(
            "[Leopard-Raws] Kimetsu no Yaiba - 26.mkv",
            metadata_id="series-123",
            metadata_type="series",
            tmdb_id=85937,
        )

        # Resolution d'un nouveau fichier
        result = service.find_matching_pattern("[Leopard-Raws] Kimetsu no Yaiba - 27.mkv")
        if result:
            service.apply_pattern(result.pattern.id)
    """

    def __init__(
        self,
        repository: IPatternRepository,
        extractor: Optional[PatternExtractor] = None,
        fuzzy_threshold: float = DEFAULT_FUZZY_THRESHOLD,
        duplicate_threshold: float = DEFAULT_DUPLICATE_THRESHOLD,
    ) -> None:
        """
        Initialise le service d'apprentissage.

        Args:
            repository: Stockage des motifs appris
            extractor: Extracteur de motifs (une instance par defaut sinon)
            fuzzy_threshold: Seuil de similarite de l'etape floue du matching
            duplicate_threshold: Confiance a partir de laquelle un motif existant
                est reutilise au lieu d'en creer un nouveau
        """
        self._repository = repository
        self._extractor = extractor or PatternExtractor()
        self._matcher = PatternMatcher(repository, self._extractor, fuzzy_threshold)
        self._duplicate_threshold = duplicate_threshold

    def learn_from_correction(
        self,
        filename: str,
        metadata_id: str,
        metadata_type: str | MetadataType,
        tmdb_id: Optional[int] = None,
    ) -> LearnedPattern:
        """
        Apprend un motif a partir d'une correction manuelle.

        Si un motif existant correspond deja au fichier avec une confiance
        suffisante, il est retourne tel quel et rien n'est sauvegarde.

        Args:
            filename: Nom du fichier corrige par l'utilisateur
            metadata_id: ID interne des metadonnees choisies
            metadata_type: "movie" ou "series"
            tmdb_id: ID TMDB optionnel

        Returns:
            Le motif appris (nouveau ou existant)

        Raises:
            ValueError: Si un parametre est vide ou invalide
        """
        if not filename:
            raise ValueError("filename ne peut pas etre vide")
        if not metadata_id:
            raise ValueError("metadata_id ne peut pas etre vide")
        media_type = _parse_metadata_type(metadata_type)

        logger.info(
            f"Apprentissage depuis correction: {filename} -> "
            f"{media_type.value} {metadata_id}"
        )

        extracted = self._extractor.extract(filename)

        existing = self._matcher.find_match(filename)
        if existing is not None and existing.confidence >= self._duplicate_threshold:
            logger.info(
                f"Motif similaire deja appris: {existing.pattern.pattern} "
                f"(confiance {existing.confidence:.2f})"
            )
            return existing.pattern

        pattern = extracted.to_learned_pattern(metadata_id, media_type, tmdb_id)
        saved = self._repository.save(pattern)

        logger.info(
            f"Motif appris: {saved.pattern} ({saved.pattern_type.value}, id={saved.id})"
        )
        return saved

    def find_matching_pattern(self, filename: str) -> Optional[MatchResult]:
        """
        Cherche le motif appris correspondant a un nom de fichier.

        Raises:
            ValueError: Si filename est vide
        """
        if not filename:
            raise ValueError("filename ne peut pas etre vide")

        result = self._matcher.find_match(filename)
        if result is not None:
            logger.info(f"Motif trouve pour {filename}: {result}")
        return result

    def get_pattern_stats(self) -> PatternStats:
        """Calcule les statistiques des motifs appris."""
        patterns = self._repository.list_all()

        stats = PatternStats(total_patterns=len(patterns))
        most_used: Optional[LearnedPattern] = None
        for pattern in patterns:
            stats.total_applied += pattern.use_count
            if most_used is None or pattern.use_count > most_used.use_count:
                most_used = pattern

        if most_used is not None and most_used.use_count > 0:
            stats.most_used_pattern = most_used.pattern
            stats.most_used_count = most_used.use_count

        return stats

    def list_patterns(self) -> list[LearnedPattern]:
        """Liste tous les motifs appris."""
        return self._repository.list_all()

    def get_pattern(self, pattern_id: str) -> Optional[LearnedPattern]:
        """Recupere un motif par son ID."""
        if not pattern_id:
            raise ValueError("pattern_id ne peut pas etre vide")
        return self._repository.get_by_id(pattern_id)

    def delete_pattern(self, pattern_id: str) -> bool:
        """Supprime un motif. Retourne True si supprime."""
        if not pattern_id:
            raise ValueError("pattern_id ne peut pas etre vide")

        logger.info(f"Suppression du motif {pattern_id}")
        deleted = self._repository.delete(pattern_id)
        if not deleted:
            logger.warning(f"Motif introuvable: {pattern_id}")
        return deleted

    def apply_pattern(self, pattern_id: str) -> bool:
        """Marque un motif comme utilise. Retourne True si le motif existe."""
        if not pattern_id:
            raise ValueError("pattern_id ne peut pas etre vide")

        logger.info(f"Application du motif {pattern_id}")
        applied = self._repository.increment_use_count(pattern_id)
        if not applied:
            logger.warning(f"Motif introuvable: {pattern_id}")
        return applied
