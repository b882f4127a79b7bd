"""
Tests pour SQLModelLearnedPatternRepository.

Tests couvrant:
- Sauvegarde (insertion, mise a jour) et lecture par ID
- Recherches utilisees par la cascade de matching
- Ordre de list_all et list_with_regex
- Compteur d'utilisation, suppression, comptage
- Stockage des chaines vides a NULL
- Conversion des erreurs SQLAlchemy en PatternStoreError
"""

from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError
from sqlmodel import Session, SQLModel, create_engine

from tests.fixtures.pattern_store import KIMETSU_REGEX, make_pattern
from vido.core.entities.learned_pattern import PatternType
from vido.core.ports.repositories import PatternStoreError
from vido.infrastructure.persistence.models import LearnedPatternModel
from vido.infrastructure.persistence.repositories import SQLModelLearnedPatternRepository
from vido.services.learning import LearningService


@pytest.fixture
def session():
    """Session sur une base SQLite en memoire."""
    engine = create_engine("sqlite:///:memory:")
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        yield session


@pytest.fixture
def repository(session) -> SQLModelLearnedPatternRepository:
    return SQLModelLearnedPatternRepository(session)


def _dated(pattern_id: str, day: int, **kwargs):
    """Motif cree le jour `day` de janvier 2024."""
    pattern = make_pattern(pattern_id=pattern_id, **kwargs)
    pattern.created_at = datetime(2024, 1, day, tzinfo=timezone.utc)
    return pattern


class TestSaveAndGet:
    """Tests pour save et get_by_id."""

    def test_save_and_get_round_trip(self, repository):
        """Un motif sauvegarde est relu a l'identique."""
        pattern = make_pattern(pattern_regex=KIMETSU_REGEX, use_count=2)

        repository.save(pattern)

        assert repository.get_by_id("1") == pattern

    def test_get_unknown_id(self, repository):
        assert repository.get_by_id("missing") is None

    def test_save_updates_existing(self, repository):
        """Sauvegarder un ID existant met le motif a jour."""
        pattern = make_pattern()
        repository.save(pattern)

        pattern.metadata_id = "series-456"
        pattern.confidence = 0.5
        saved = repository.save(pattern)

        assert saved.metadata_id == "series-456"
        assert repository.get_by_id("1").confidence == 0.5
        assert repository.count() == 1

    def test_empty_strings_stored_as_null(self, repository, session):
        """Les chaines vides du domaine sont stockees a NULL."""
        repository.save(
            make_pattern(
                pattern="My Movie",
                pattern_type=PatternType.EXACT,
                title_pattern="My Movie",
                fansub_group="",
                pattern_regex="",
            )
        )

        model = session.get(LearnedPatternModel, "1")
        assert model.fansub_group is None
        assert model.pattern_regex is None

        pattern = repository.get_by_id("1")
        assert pattern.fansub_group == ""
        assert pattern.pattern_regex == ""


class TestQueries:
    """Tests pour les recherches de la cascade."""

    def test_find_by_exact_pattern(self, repository):
        repository.save(make_pattern())

        assert repository.find_by_exact_pattern("[Leopard-Raws] Kimetsu no Yaiba").id == "1"
        assert repository.find_by_exact_pattern("Kimetsu no Yaiba") is None

    def test_find_by_fansub_and_title(self, repository):
        """Seuls les motifs avec ce groupe et ce titre, par ordre de creation."""
        repository.save(_dated("late", 3))
        repository.save(_dated("early", 1))
        repository.save(_dated("other", 2, fansub_group="SubsPlease"))

        patterns = repository.find_by_fansub_and_title("Leopard-Raws", "Kimetsu no Yaiba")

        assert [p.id for p in patterns] == ["early", "late"]

    def test_list_with_regex(self, repository):
        """Seuls les motifs avec une expression, par ordre de creation."""
        repository.save(_dated("2", 2, pattern_regex=KIMETSU_REGEX))
        repository.save(_dated("none", 1))
        repository.save(_dated("1", 1, pattern_regex="Kimetsu"))

        assert [p.id for p in repository.list_with_regex()] == ["1", "2"]

    def test_list_all_order(self, repository):
        """Les plus utilises puis les plus recents en premier."""
        repository.save(_dated("old-unused", 1))
        repository.save(_dated("new-unused", 5))
        repository.save(_dated("used", 2, use_count=4))

        assert [p.id for p in repository.list_all()] == ["used", "new-unused", "old-unused"]

    def test_empty_store(self, repository):
        assert repository.list_all() == []
        assert repository.list_with_regex() == []
        assert repository.count() == 0


class TestMutations:
    """Tests pour increment_use_count, delete et count."""

    def test_increment_use_count(self, repository):
        """Le compteur augmente et la date d'utilisation est renseignee."""
        repository.save(make_pattern(use_count=1))

        assert repository.increment_use_count("1") is True

        pattern = repository.get_by_id("1")
        assert pattern.use_count == 2
        assert pattern.last_used_at is not None

    def test_increment_unknown(self, repository):
        assert repository.increment_use_count("missing") is False

    def test_delete(self, repository):
        repository.save(make_pattern())

        assert repository.delete("1") is True
        assert repository.get_by_id("1") is None
        assert repository.delete("1") is False

    def test_count(self, repository):
        repository.save(make_pattern(pattern_id="1"))
        repository.save(make_pattern(pattern_id="2"))

        assert repository.count() == 2


class TestTimestamps:
    """Tests pour les dates, toujours avec fuseau UTC."""

    def test_learn_from_correction_persists(self, repository):
        """Un motif appris est sauvegarde puis relu depuis SQLite."""
        service = LearningService(repository=repository)

        learned = service.learn_from_correction(
            "[Leopard-Raws] Kimetsu no Yaiba - 26 (BD 1920x1080 x264 FLAC).mkv",
            "series-1",
            "series",
        )

        stored = repository.get_by_id(learned.id)
        assert stored.title_pattern == "Kimetsu no Yaiba"
        assert stored.created_at.tzinfo is not None
        assert repository.count() == 1

    def test_last_used_at_has_timezone(self, repository):
        repository.save(make_pattern())

        repository.increment_use_count("1")

        assert repository.get_by_id("1").last_used_at.tzinfo is not None

    def test_naive_model_dates_read_as_utc(self, repository, session):
        """Une date relue sans fuseau est interpretee en UTC."""
        repository.save(make_pattern())
        model = session.get(LearnedPatternModel, "1")
        model.created_at = datetime(2024, 1, 1)

        pattern = repository._to_entity(model)

        assert pattern.created_at == datetime(2024, 1, 1, tzinfo=timezone.utc)


class TestStoreErrors:
    """Tests pour la conversion des erreurs SQLAlchemy."""

    @pytest.fixture
    def broken_session(self):
        """Session dont toutes les requetes echouent."""
        session = MagicMock(spec=Session)
        error = OperationalError("SELECT", {}, Exception("database is locked"))
        session.get.side_effect = error
        session.exec.side_effect = error
        return session

    @pytest.mark.parametrize(
        "method,args",
        [
            ("get_by_id", ("1",)),
            ("find_by_exact_pattern", ("[Group] Title",)),
            ("find_by_fansub_and_title", ("Group", "Title")),
            ("list_with_regex", ()),
            ("list_all", ()),
            ("increment_use_count", ("1",)),
            ("delete", ("1",)),
            ("count", ()),
        ],
    )
    def test_errors_wrapped(self, broken_session, method, args):
        """Toute erreur SQLAlchemy devient PatternStoreError apres rollback."""
        repository = SQLModelLearnedPatternRepository(broken_session)

        with pytest.raises(PatternStoreError):
            getattr(repository, method)(*args)
        broken_session.rollback.assert_called_once()

    def test_save_error_wrapped(self, broken_session):
        repository = SQLModelLearnedPatternRepository(broken_session)

        with pytest.raises(PatternStoreError):
            repository.save(make_pattern())
