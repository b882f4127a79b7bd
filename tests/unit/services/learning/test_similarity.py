"""
Tests pour similarity - similarite normalisee par distance d'edition.
"""

import pytest

from vido.services.learning import similarity


class TestSimilarity:
    """Tests pour la fonction similarity."""

    def test_identical_strings(self):
        """Deux chaines identiques ont une similarite de 1.0."""
        assert similarity("Breaking Bad", "Breaking Bad") == 1.0

    def test_case_insensitive(self):
        """La casse est ignoree."""
        assert similarity("BREAKING BAD", "breaking bad") == 1.0

    def test_both_empty(self):
        """Deux chaines vides sont identiques."""
        assert similarity("", "") == 1.0

    def test_one_empty(self):
        """Une chaine vide face a une chaine non vide donne 0.0."""
        assert similarity("", "Breaking Bad") == 0.0

    def test_single_substitution(self):
        """Une substitution sur douze caracteres."""
        assert similarity("Breaking Bad", "Brfaking Bad") == pytest.approx(1 - 1 / 12)

    def test_single_deletion(self):
        """Une suppression : normalisee par la plus longue chaine."""
        assert similarity("Braking Bad", "Breaking Bad") == pytest.approx(1 - 1 / 12)

    def test_completely_different(self):
        """Des chaines sans rien en commun donnent 0.0."""
        assert similarity("abc", "xyz") == 0.0

    def test_symmetric(self):
        """L'ordre des arguments n'a pas d'importance."""
        assert similarity("Kimetsu", "Kimetsu no Yaiba") == similarity(
            "Kimetsu no Yaiba", "Kimetsu"
        )

    def test_normalized_by_original_length(self):
        """La longueur de normalisation est celle des chaines d'origine."""
        # "İ".lower() fait deux caracteres : la distance egale les deux octets de "İ"
        score = similarity("İ", "x")
        assert score == 0.0

    def test_cjk_normalized_by_utf8_bytes(self):
        """Un caractere CJK compte pour trois octets dans la longueur."""
        # Une substitution sur quatre caracteres de trois octets chacun
        assert similarity("鬼滅之刃", "鬼灭之刃") == pytest.approx(1 - 1 / 12)

    def test_accented_title_normalized_by_bytes(self):
        """Les lettres accentuees comptent pour deux octets."""
        # "Amélie" : 7 octets, "Amelie" : 6 octets, une substitution
        assert similarity("Amélie", "Amelie") == pytest.approx(1 - 1 / 7)

    @pytest.mark.parametrize(
        "a,b",
        [
            ("Kimetsu no Yaiba", "Kimetsu no Yaiba S2"),
            ("Frieren", "Sousou no Frieren"),
            ("a", "b"),
            ("鬼滅之刃", "鬼滅の刃"),
            ("", "x"),
        ],
    )
    def test_bounds(self, a, b):
        """La similarite est toujours dans [0, 1]."""
        assert 0.0 <= similarity(a, b) <= 1.0
