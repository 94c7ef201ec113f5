"""
Tests shared by all square cipher engines.
"""
import random

import pytest

from polysquare.models.schemas import CipherFamily, CipherType, Direction
from polysquare.services.engines.base import parse_direction
from polysquare.services.engines.registry import EngineRegistry


class TestCipherRegistry:
    """Test the cipher registry."""

    def test_all_ciphers_registered(self):
        """Verify all expected ciphers are registered."""
        registered = EngineRegistry.list_registered()

        for cipher_type in (CipherType.CHECKERBOARD, CipherType.TWO_SQUARE, CipherType.THREE_SQUARE):
            assert cipher_type in registered, f"{cipher_type} not registered"
            assert EngineRegistry.is_registered(cipher_type)

    def test_get_engines_by_family(self):
        registry = EngineRegistry()

        engines = registry.get_engines_by_family(CipherFamily.POLYBIUS)

        assert len(engines) == 3

    def test_get_engine_is_cached(self):
        registry = EngineRegistry()

        assert registry.get_engine(CipherType.TWO_SQUARE) is registry.get_engine(CipherType.TWO_SQUARE)

    def test_get_engine_with_rng_is_fresh(self):
        registry = EngineRegistry()
        rng = random.Random(3)

        engine = registry.get_engine(CipherType.THREE_SQUARE, rng=rng)

        assert engine is not registry.get_engine(CipherType.THREE_SQUARE)
        assert engine.rng is rng


class TestDirection:

    @pytest.mark.parametrize(
        "value,expected",
        [
            (Direction.ENCRYPT, Direction.ENCRYPT),
            ("encrypt", Direction.ENCRYPT),
            ("DECRYPT", Direction.DECRYPT),
            (1, Direction.ENCRYPT),
            (-1, Direction.DECRYPT),
        ],
    )
    def test_parse_direction(self, value, expected):
        assert parse_direction(value) == expected

    @pytest.mark.parametrize("value", ["both", 0, 2, True, None, 1.0])
    def test_parse_direction_rejects(self, value):
        with pytest.raises(ValueError):
            parse_direction(value)


class TestSharedBehaviour:
    """Behaviour every engine must share."""

    @pytest.fixture(params=list(CipherType))
    def engine(self, request):
        return EngineRegistry().get_engine(request.param, rng=random.Random(99))

    def test_random_key_round_trip(self, engine):
        key = engine.generate_random_key()
        plaintext = "MEETMEATTHEOLDMILL"

        ciphertext = engine.encrypt(plaintext, key)

        assert engine.decrypt(ciphertext, key) == plaintext

    def test_empty_text_is_not_an_error(self, engine):
        key = engine.generate_random_key()

        encrypted = engine.transform("?!", key, Direction.ENCRYPT)
        decrypted = engine.transform("", key, Direction.DECRYPT)

        assert encrypted.plain == encrypted.encrypted == ""
        assert decrypted.plain == decrypted.encrypted == ""

    def test_key_is_echoed(self, engine):
        key = engine.generate_random_key()

        result = engine.transform("HELLO", key, Direction.ENCRYPT)

        assert result.key == key
        assert result.cipher_type == engine.cipher_type
        assert result.direction == Direction.ENCRYPT

    def test_explain_mentions_cipher(self, engine):
        key = engine.generate_random_key()
        ciphertext = engine.encrypt("HELLO", key)

        assert engine.name.split()[0] in engine.explain(ciphertext, "HELLO", key)
