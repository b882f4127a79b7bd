"""
Matching d'un nom de fichier contre les motifs deja appris.

PatternMatcher essaie des strategies de plus en plus floues, par ordre de
confiance decroissante, et s'arrete a la premiere correspondance:

1. exact   (1.0)  : chaine d'affichage identique au nom de fichier
2. pattern (0.95) : meme groupe de fansub et meme titre
3. regex   (0.9)  : expression reguliere d'un motif satisfaite
4. fuzzy   (calculee) : titre proche, similarite strictement > seuil (0.8)

Au plus une requete au stockage par etape. Un echec du stockage vide l'etape
concernee sans interrompre la cascade ; un echec d'extraction l'interrompt.
"""

from functools import cached_property
from typing import Callable, Optional

from loguru import logger

from vido.core.entities.learned_pattern import LearnedPattern
from vido.core.ports.repositories import IPatternRepository, PatternStoreError
from vido.core.value_objects import ExtractedPattern, MatchResult, MatchType
from vido.services.learning.pattern_extractor import PatternExtractor
from vido.services.learning.similarity import similarity
from vido.utils.constants import (
    DEFAULT_FUZZY_THRESHOLD,
    EXACT_MATCH_CONFIDENCE,
    PATTERN_MATCH_CONFIDENCE,
    REGEX_MATCH_CONFIDENCE,
)
from vido.utils.regex_matching import regex_matches


class _MatchContext:
    """Nom de fichier en cours de matching, extrait au plus une fois a la demande."""

    def __init__(self, filename: str, extractor: PatternExtractor) -> None:
        self.filename = filename
        self._extractor = extractor

    @cached_property
    def extracted(self) -> ExtractedPattern:
        return self._extractor.extract(self.filename)


MatchStage = Callable[[_MatchContext], Optional[MatchResult]]


def _tie_break_key(pattern: LearnedPattern) -> tuple[int, str]:
    """Departage deux motifs de meme similarite : plus utilise, puis plus petit ID."""
    return (-pattern.use_count, pattern.id)


class PatternMatcher:
    """
    Cascade de matching des noms de fichiers contre les motifs appris.

    Sans etat entre deux appels : les expressions sont compilees et les
    scores calcules a chaque appel.

    Example:
        matcher = PatternMatcher(repository)
        result = matcher.find_match("[Leopard-Raws] Kimetsu no Yaiba - 27.mkv")
        if result:
            print(result.match_type, result.confidence)
    """

    def __init__(
        self,
        repository: IPatternRepository,
        extractor: Optional[PatternExtractor] = None,
        fuzzy_threshold: float = DEFAULT_FUZZY_THRESHOLD,
    ) -> None:
        """
        Initialise le matcher.

        Args:
            repository: Stockage des motifs appris
            extractor: Extracteur de motifs (une instance par defaut sinon)
            fuzzy_threshold: Similarite a depasser strictement pour un match flou
        """
        self._repository = repository
        self._extractor = extractor or PatternExtractor()
        self._fuzzy_threshold = fuzzy_threshold

        # Ordre de la cascade : confiance decroissante
        self._stages: tuple[MatchStage, ...] = (
            self._match_exact,
            self._match_fansub_title,
            self._match_regex,
            self._match_fuzzy,
        )

    def find_match(self, filename: str) -> Optional[MatchResult]:
        """
        Cherche le meilleur motif appris pour un nom de fichier.

        Args:
            filename: Nom de fichier brut

        Returns:
            Le resultat de la premiere etape qui trouve une correspondance,
            ou None si aucune etape n'aboutit

        Raises:
            PatternExtractionError: Si le nom de fichier ne peut pas etre analyse
        """
        context = _MatchContext(filename, self._extractor)

        for stage in self._stages:
            try:
                result = stage(context)
            except PatternStoreError as e:
                logger.warning(f"Stockage indisponible, etape {stage.__name__} ignoree: {e}")
                continue

            if result is not None:
                logger.debug(f"{filename} -> {result}")
                return result

        logger.debug(f"Aucun motif appris pour: {filename}")
        return None

    def _match_exact(self, context: _MatchContext) -> Optional[MatchResult]:
        """Chaine d'affichage stockee identique au nom de fichier brut."""
        pattern = self._repository.find_by_exact_pattern(context.filename)
        if pattern is None:
            return None
        return MatchResult(pattern, EXACT_MATCH_CONFIDENCE, MatchType.EXACT)

    def _match_fansub_title(self, context: _MatchContext) -> Optional[MatchResult]:
        """Meme couple (groupe de fansub, titre) que le nom extrait."""
        extracted = context.extracted
        if not extracted.fansub_group or not extracted.title_pattern:
            return None

        patterns = self._repository.find_by_fansub_and_title(
            extracted.fansub_group, extracted.title_pattern
        )
        if not patterns:
            return None
        return MatchResult(patterns[0], PATTERN_MATCH_CONFIDENCE, MatchType.PATTERN)

    def _match_regex(self, context: _MatchContext) -> Optional[MatchResult]:
        """Premiere expression stockee satisfaite par le nom brut, dans l'ordre du stockage."""
        for pattern in self._repository.list_with_regex():
            # Une expression corrompue ne correspond jamais : le motif est ignore
            if regex_matches(pattern.pattern_regex, context.filename):
                return MatchResult(pattern, REGEX_MATCH_CONFIDENCE, MatchType.REGEX)
        return None

    def _match_fuzzy(self, context: _MatchContext) -> Optional[MatchResult]:
        """Titre appris le plus proche du titre extrait, au-dessus du seuil."""
        title = context.extracted.title_pattern
        if not title:
            return None

        best_pattern: Optional[LearnedPattern] = None
        best_score = 0.0

        for pattern in self._repository.list_all():
            if not pattern.title_pattern:
                continue

            score = similarity(title, pattern.title_pattern)
            if (
                best_pattern is None
                or score > best_score
                or (score == best_score and _tie_break_key(pattern) < _tie_break_key(best_pattern))
            ):
                best_pattern = pattern
                best_score = score

        if best_pattern is None or best_score <= self._fuzzy_threshold:
            return None
        return MatchResult(best_pattern, best_score, MatchType.FUZZY)
