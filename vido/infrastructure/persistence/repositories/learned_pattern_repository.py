"""
Implementation SQLModel du repository LearnedPattern.

Repository concret pour la gestion des motifs appris
dans la base de donnees SQLite via SQLModel.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, col, func, select

from vido.core.entities.learned_pattern import LearnedPattern, MetadataType, PatternType
from vido.core.ports.repositories import IPatternRepository, PatternStoreError
from vido.infrastructure.persistence.models import LearnedPatternModel


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Les dates relues sans fuseau (SQLite) sont en UTC."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class SQLModelLearnedPatternRepository(IPatternRepository):
    """
    Repository SQLModel pour les motifs appris.

    Gere la persistance des LearnedPattern avec conversion
    bidirectionnelle entre entite et modele. Les erreurs SQLAlchemy
    sont converties en PatternStoreError.
    """

    def __init__(self, session: Session) -> None:
        """
        Initialise le repository avec une session SQLModel.

        Args :
            session : Session SQLModel active pour les operations DB
        """
        self._session = session

    @contextmanager
    def _store_errors(self, action: str) -> Iterator[None]:
        """Convertit les erreurs SQLAlchemy en PatternStoreError apres rollback."""
        try:
            yield
        except SQLAlchemyError as e:
            self._session.rollback()
            raise PatternStoreError(f"Echec {action}: {e}") from e

    def _to_entity(self, model: LearnedPatternModel) -> LearnedPattern:
        """Convertit un modele DB en entite domaine."""
        return LearnedPattern(
            id=model.id,
            pattern=model.pattern,
            pattern_type=PatternType(model.pattern_type),
            pattern_regex=model.pattern_regex or "",
            fansub_group=model.fansub_group or "",
            title_pattern=model.title_pattern or "",
            metadata_type=MetadataType(model.metadata_type),
            metadata_id=model.metadata_id,
            tmdb_id=model.tmdb_id,
            confidence=model.confidence,
            use_count=model.use_count,
            created_at=_as_utc(model.created_at),
            last_used_at=_as_utc(model.last_used_at),
        )

    def _apply_to_model(self, entity: LearnedPattern, model: LearnedPatternModel) -> None:
        """Copie les champs d'une entite sur un modele DB ("" -> NULL)."""
        model.pattern = entity.pattern
        model.pattern_type = entity.pattern_type.value
        model.pattern_regex = entity.pattern_regex or None
        model.fansub_group = entity.fansub_group or None
        model.title_pattern = entity.title_pattern or None
        model.metadata_type = entity.metadata_type.value
        model.metadata_id = entity.metadata_id
        model.tmdb_id = entity.tmdb_id
        model.confidence = entity.confidence
        model.use_count = entity.use_count
        model.last_used_at = entity.last_used_at
        if entity.created_at is not None:
            model.created_at = entity.created_at

    def _list(self, statement) -> list[LearnedPattern]:
        models = self._session.exec(statement).all()
        return [self._to_entity(model) for model in models]

    def get_by_id(self, pattern_id: str) -> Optional[LearnedPattern]:
        """Recupere un motif par son ID."""
        with self._store_errors("lecture du motif"):
            model = self._session.get(LearnedPatternModel, pattern_id)
        if model:
            return self._to_entity(model)
        return None

    def find_by_exact_pattern(self, pattern: str) -> Optional[LearnedPattern]:
        """Recupere le motif dont la chaine d'affichage est exactement `pattern`."""
        statement = select(LearnedPatternModel).where(LearnedPatternModel.pattern == pattern)
        with self._store_errors("recherche exacte"):
            model = self._session.exec(statement).first()
        if model:
            return self._to_entity(model)
        return None

    def find_by_fansub_and_title(
        self, fansub_group: str, title_pattern: str
    ) -> list[LearnedPattern]:
        """Liste les motifs ayant ce groupe de fansub et ce titre."""
        statement = (
            select(LearnedPatternModel)
            .where(LearnedPatternModel.fansub_group == fansub_group)
            .where(LearnedPatternModel.title_pattern == title_pattern)
            .order_by(col(LearnedPatternModel.created_at))
        )
        with self._store_errors("recherche groupe/titre"):
            return self._list(statement)

    def list_with_regex(self) -> list[LearnedPattern]:
        """Liste les motifs portant une expression reguliere, par ordre de creation."""
        statement = (
            select(LearnedPatternModel)
            .where(col(LearnedPatternModel.pattern_regex).isnot(None))
            .where(LearnedPatternModel.pattern_regex != "")
            .order_by(col(LearnedPatternModel.created_at))
        )
        with self._store_errors("liste des expressions"):
            return self._list(statement)

    def list_all(self) -> list[LearnedPattern]:
        """Liste tous les motifs, les plus utilises puis les plus recents en premier."""
        statement = select(LearnedPatternModel).order_by(
            col(LearnedPatternModel.use_count).desc(),
            col(LearnedPatternModel.created_at).desc(),
        )
        with self._store_errors("liste des motifs"):
            return self._list(statement)

    def save(self, pattern: LearnedPattern) -> LearnedPattern:
        """Sauvegarde un motif (insertion ou mise a jour)."""
        with self._store_errors("sauvegarde du motif"):
            model = self._session.get(LearnedPatternModel, pattern.id)
            if model is None:
                model = LearnedPatternModel(
                    id=pattern.id,
                    pattern=pattern.pattern,
                    pattern_type=pattern.pattern_type.value,
                    metadata_type=pattern.metadata_type.value,
                    metadata_id=pattern.metadata_id,
                )
            self._apply_to_model(pattern, model)
            self._session.add(model)
            self._session.commit()
            self._session.refresh(model)
        return self._to_entity(model)

    def increment_use_count(self, pattern_id: str) -> bool:
        """Incremente le compteur d'utilisation. Retourne False si le motif n'existe pas."""
        with self._store_errors("mise a jour du compteur"):
            model = self._session.get(LearnedPatternModel, pattern_id)
            if model is None:
                return False
            model.use_count += 1
            model.last_used_at = datetime.now(timezone.utc)
            self._session.add(model)
            self._session.commit()
        return True

    def delete(self, pattern_id: str) -> bool:
        """Supprime un motif par ID. Retourne True si supprime."""
        with self._store_errors("suppression du motif"):
            model = self._session.get(LearnedPatternModel, pattern_id)
            if model is None:
                return False
            self._session.delete(model)
            self._session.commit()
        return True

    def count(self) -> int:
        """Nombre total de motifs appris."""
        statement = select(func.count()).select_from(LearnedPatternModel)
        with self._store_errors("comptage des motifs"):
            return self._session.exec(statement).one()
