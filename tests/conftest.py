"""
Fixtures pytest partagees pour les tests Vido.

Ce module contient les fixtures communes utilisees dans les tests:
- Stockage de motifs en memoire et mock de IPatternRepository
- Extracteur de motifs
- Settings de test avec chemins temporaires
"""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from tests.fixtures.pattern_store import InMemoryPatternRepository
from vido.config import Settings
from vido.core.ports.repositories import IPatternRepository
from vido.services.learning import PatternExtractor


@pytest.fixture
def extractor() -> PatternExtractor:
    """Extracteur de motifs (sans etat)."""
    return PatternExtractor()


@pytest.fixture
def memory_repository() -> InMemoryPatternRepository:
    """Stockage de motifs vide, en memoire."""
    return InMemoryPatternRepository()


@pytest.fixture
def mock_repository() -> MagicMock:
    """
    Mock de IPatternRepository pour les tests.

    Vide par defaut : configurer return_value/side_effect dans chaque test.
    """
    mock = MagicMock(spec=IPatternRepository)
    mock.find_by_exact_pattern.return_value = None
    mock.find_by_fansub_and_title.return_value = []
    mock.list_with_regex.return_value = []
    mock.list_all.return_value = []
    mock.count.return_value = 0
    return mock


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec chemins temporaires.

    Utilise tmp_path de pytest pour isoler la base et les logs de chaque test.
    """
    return Settings(
        database_url=f"sqlite:///{tmp_path}/test.db",
        log_file=tmp_path / "test.log",
    )
