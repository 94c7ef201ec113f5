"""Tests for text normalization, digraph splitting and padding removal."""

import pytest

from polysquare.services.preprocessing.normalizer import DigraphSplitter, PaddingTrimmer, TextNormalizer


class TestTextNormalizer:

    @pytest.fixture
    def normalizer(self):
        return TextNormalizer()

    def test_strips_and_uppercases(self, normalizer):
        assert normalizer.normalize("Hide the gold, in the tree-stump!") == "HIDETHEGOLDINTHETREESTUMP"

    def test_folds_j_into_i(self, normalizer):
        assert normalizer.normalize("Jojo") == "IOIO"

    def test_empty_after_filtering(self, normalizer):
        assert normalizer.normalize("123 !?") == ""

    def test_unicode_is_compatibility_normalized(self, normalizer):
        """Full-width letters fold to ASCII; accented letters are dropped."""
        assert normalizer.normalize("\uff28\uff29 \u00e9t\u00e9") == "HIT"


class TestDigraphSplitter:

    @pytest.fixture
    def splitter(self):
        return DigraphSplitter()

    def test_even_length(self, splitter):
        assert splitter.split_digraphs("ABCD") == ["AB", "CD"]

    def test_odd_length_is_padded(self, splitter):
        assert splitter.split_digraphs("ABC") == ["AB", "CX"]

    def test_no_padding_when_disabled(self, splitter):
        assert splitter.split_digraphs("ABC", pad=False) == ["AB", "C"]

    def test_empty(self, splitter):
        assert splitter.split_digraphs("") == []

    def test_split_groups(self, splitter):
        assert splitter.split_groups("ABCDEF", 3) == ["ABC", "DEF"]


class TestPaddingTrimmer:

    @pytest.fixture
    def trimmer(self):
        return PaddingTrimmer()

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("STUMPX", "STUMP"),  # consonant before X: trimmed
            ("HELLOX", "HELLOX"),  # vowel before X: kept
            ("ONYX", "ONYX"),  # Y counts as a vowel
            ("LYNX", "LYN"),  # genuine X after a consonant is lost
            ("X", "X"),
            ("", ""),
            ("ABC", "ABC"),
        ],
    )
    def test_trailing_x_heuristic(self, trimmer, text, expected):
        assert trimmer.trim(text) == expected
