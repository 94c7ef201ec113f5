"""Tests for the two-square cipher engine."""

import random

import pytest

from polysquare.core.exceptions import InvalidCiphertextError, InvalidDirectionError, InvalidKeyError
from polysquare.models.schemas import Direction
from polysquare.services.engines.polybius.two_square import TwoSquareEngine
from polysquare.services.squares.keyed_square import ALPHABET, build_keyed_square


class TestTwoSquareEngine:
    """Test suite for the two-square cipher engine."""

    @pytest.fixture
    def engine(self):
        return TwoSquareEngine()

    @pytest.fixture
    def key(self):
        return {"key1": "leprachaun", "key2": "ghosts and goblins"}

    def test_encrypt_known_example(self, engine, key):
        """Reproduce the published example, including the pad X."""
        result = engine.transform("Hide the gold into the tree stump", key, Direction.ENCRYPT)

        assert result.plain == "HIDETHEGOLDINTOTHETREESTUMP"
        assert result.encrypted == "AFEDPAGEUHIDLRUEDFRTOFURAQOX"
        assert result.normalized_key == {"key1": "LEPRACHAUN", "key2": "GHOSTSANDGOBLINS"}

    def test_decrypt_known_example(self, engine, key):
        """The pad X follows P, a consonant, so it is removed."""
        result = engine.transform("AFEDPAGEUHIDLRUEDFRTOFURAQOX", key, Direction.DECRYPT)

        assert result.plain == "HIDETHEGOLDINTOTHETREESTUMP"
        assert result.encrypted == "AFEDPAGEUHIDLRUEDFRTOFURAQOX"

    def test_same_row_digraph_is_swapped(self, engine, key):
        """D and E share row 3 across the squares, so they swap."""
        square_a = build_keyed_square(key["key1"])
        square_b = build_keyed_square(key["key2"])
        assert square_a.locate("D")[0] == square_b.locate("E")[0]

        assert engine.encrypt("DE", key) == "ED"

    def test_same_row_digraphs_always_swap(self, engine, key):
        square_a = build_keyed_square(key["key1"])
        square_b = build_keyed_square(key["key2"])

        for first in ALPHABET:
            for second in ALPHABET:
                if square_a.locate(first)[0] == square_b.locate(second)[0]:
                    assert engine.encrypt(first + second, key) == second + first

    def test_rectangle_rule(self, engine, key):
        """H (row 2, col 2 of A) and I (row 3, col 1 of B) take opposite corners."""
        assert engine.encrypt("HI", key) == "AF"

    @pytest.mark.parametrize(
        "plaintext",
        ["ATTACKATDAWN", "THEQUICKBROWNFOXIUMPSOVERTHELAZYDOG", "EXAXIX", "AB"],
    )
    def test_even_length_round_trip(self, engine, key, plaintext):
        ciphertext = engine.encrypt(plaintext, key)
        assert engine.decrypt(ciphertext, key) == plaintext

    def test_round_trip_random_texts(self, engine):
        rng = random.Random(42)
        for _ in range(50):
            key = {"key1": engine._random_keyword(), "key2": engine._random_keyword()}
            text = "".join(rng.choice(ALPHABET) for _ in range(2 * rng.randint(1, 30)))
            if text.endswith("X"):
                text = text[:-1] + "Q"
            assert engine.decrypt(engine.encrypt(text, key), key) == text

    def test_all_digraphs_round_trip(self, engine, key):
        """Every digraph not ending in X survives a round trip."""
        for first in ALPHABET:
            for second in ALPHABET.replace("X", ""):
                digraph = first + second
                assert engine.decrypt(engine.encrypt(digraph, key), key) == digraph

    def test_odd_length_after_consonant_trims_pad(self, engine, key):
        assert engine.decrypt(engine.encrypt("HELPS", key), key) == "HELPS"

    def test_odd_length_after_vowel_keeps_pad(self, engine, key):
        """The heuristic cannot tell a pad X from a real one after a vowel."""
        assert engine.decrypt(engine.encrypt("HELLO", key), key) == "HELLOX"

    def test_genuine_trailing_x_after_consonant_is_lost(self, engine, key):
        assert engine.decrypt(engine.encrypt("LYNX", key), key) == "LYN"

    def test_string_key_form(self, engine):
        assert engine.encrypt("HIDE", "leprachaun, ghosts and goblins") == "AFED"

    def test_empty_keys_use_plain_squares(self, engine):
        """Both squares identical: every digraph on the same row swaps."""
        ciphertext = engine.encrypt("ABFG", {"key1": "", "key2": ""})
        assert ciphertext == "BAGF"

    def test_empty_text(self, engine, key):
        assert engine.encrypt("", key) == ""
        assert engine.decrypt("", key) == ""

    def test_odd_ciphertext_rejected(self, engine, key):
        with pytest.raises(InvalidCiphertextError):
            engine.decrypt("AFE", key)

    def test_invalid_direction_rejected(self, engine, key):
        with pytest.raises(InvalidDirectionError):
            engine.transform("HIDE", key, "sideways")
        with pytest.raises(InvalidDirectionError):
            engine.transform("HIDE", key, 0)

    def test_numeric_directions(self, engine, key):
        assert engine.transform("HIDE", key, 1).encrypted == "AFED"
        assert engine.transform("AFED", key, -1).plain == "HIDE"

    def test_invalid_key(self, engine):
        with pytest.raises(InvalidKeyError):
            engine.encrypt("HIDE", {"key1": "only one"})
        with pytest.raises(InvalidKeyError):
            engine.encrypt("HIDE", 12345)
        assert not engine.validate_key("a,b,c")
        assert engine.validate_key("a,b")

    def test_explain(self, engine, key):
        explanation = engine.explain("AFED", "HIDE", key)
        assert "LEPRACHAUN" in explanation
        assert "GHOSTSANDGOBLINS" in explanation
