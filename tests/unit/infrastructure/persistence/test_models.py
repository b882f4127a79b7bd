"""
Tests pour les modeles SQLModel de persistance.

Verifie les valeurs par defaut de LearnedPatternModel.
"""

from vido.infrastructure.persistence.models import LearnedPatternModel


class TestLearnedPatternModel:
    """Tests pour LearnedPatternModel."""

    def test_defaults(self):
        """Un motif neuf a une confiance de 1.0 et n'a jamais servi."""
        model = LearnedPatternModel(
            id="abc",
            pattern="My Movie",
            pattern_type="exact",
            title_pattern="My Movie",
            metadata_type="movie",
            metadata_id="movie-1",
        )
        assert model.confidence == 1.0
        assert model.use_count == 0
        assert model.created_at is not None
        assert model.last_used_at is None

    def test_optional_fields_nullable(self):
        """Groupe, expression, titre et ID TMDB sont optionnels."""
        model = LearnedPatternModel(
            id="abc",
            pattern="My Movie",
            pattern_type="exact",
            metadata_type="movie",
            metadata_id="movie-1",
        )
        assert model.fansub_group is None
        assert model.pattern_regex is None
        assert model.title_pattern is None
        assert model.tmdb_id is None

    def test_table_name(self):
        assert LearnedPatternModel.__tablename__ == "learned_patterns"
