import logging
import random
from abc import ABC, abstractmethod
from typing import Any

from polysquare.core.exceptions import InvalidDirectionError, InvalidKeyError
from polysquare.models.schemas import CipherFamily, CipherResult, CipherType, Direction, KeyMaterial
from polysquare.services.preprocessing.normalizer import DigraphSplitter, PaddingTrimmer, TextNormalizer
from polysquare.services.squares.keyed_square import ALPHABET

logger = logging.getLogger(__name__)


def parse_direction(direction: Direction | str | int) -> Direction:
    """
    Coerce a direction value.

    Accepts a Direction, the strings 'encrypt'/'decrypt' (any case), or the
    integers 1 (encrypt) and -1 (decrypt).
    """
    if isinstance(direction, Direction):
        return direction
    if isinstance(direction, bool):
        raise InvalidDirectionError(direction)
    if isinstance(direction, int):
        if direction == 1:
            return Direction.ENCRYPT
        if direction == -1:
            return Direction.DECRYPT
        raise InvalidDirectionError(direction)
    if isinstance(direction, str):
        try:
            return Direction(direction.strip().lower())
        except ValueError:
            raise InvalidDirectionError(direction) from None
    raise InvalidDirectionError(direction)


class CipherEngine(ABC):
    """
    Abstract base class for all square cipher engines.

    Each cipher implementation must provide:
    - normalize_key(): Validate key material and return its normalized echo
    - _encrypt() / _decrypt(): Transform normalized text with a normalized key
    - generate_random_key(): Produce a usable key
    - explain(): Generate human-readable explanation

    transform() runs the shared pipeline: direction and key validation first,
    then text normalization, then the cipher itself. Nothing is transformed
    until every check has passed.
    """

    # Cipher metadata
    name: str
    cipher_type: CipherType
    cipher_family: CipherFamily
    description: str
    randomized: bool = False

    def __init__(self, rng: random.Random | None = None):
        """
        Initialize the engine.

        Args:
            rng: Randomness source for randomized ciphers. Only encryption
                draws from it; decryption never depends on it.
        """
        self.rng = rng or random.Random()
        self.normalizer = TextNormalizer()
        self.splitter = DigraphSplitter()
        self.trimmer = PaddingTrimmer()

    def transform(
        self,
        text: str,
        key: KeyMaterial,
        direction: Direction | str | int,
    ) -> CipherResult:
        """
        Encrypt or decrypt text.

        Args:
            text: Plaintext (encrypt) or ciphertext (decrypt)
            key: Key material as accepted by normalize_key()
            direction: Encrypt or decrypt

        Returns:
            CipherResult with both sides of the transform and the key echo
        """
        direction = parse_direction(direction)
        normalized_key = self.normalize_key(key)
        normalized = self.normalizer.normalize(text)

        if direction == Direction.ENCRYPT:
            plain = normalized
            encrypted = self._encrypt(normalized, normalized_key)
        else:
            encrypted = normalized
            plain = self._decrypt(normalized, normalized_key)

        logger.debug(
            "%s %s: %d plain symbols, %d encrypted symbols",
            self.cipher_type.value,
            direction.value,
            len(plain),
            len(encrypted),
        )

        return CipherResult(
            cipher_type=self.cipher_type,
            direction=direction,
            plain=plain,
            encrypted=encrypted,
            key=key,
            normalized_key=normalized_key,
        )

    def encrypt(self, plaintext: str, key: KeyMaterial) -> str:
        """Encrypt plaintext with the given key."""
        return self.transform(plaintext, key, Direction.ENCRYPT).encrypted

    def decrypt(self, ciphertext: str, key: KeyMaterial) -> str:
        """Decrypt ciphertext with the given key."""
        return self.transform(ciphertext, key, Direction.DECRYPT).plain

    def validate_key(self, key: KeyMaterial) -> bool:
        """
        Validate that a key is valid for this cipher.

        Returns:
            True if key is valid
        """
        try:
            self.normalize_key(key)
        except InvalidKeyError:
            return False
        return True

    @abstractmethod
    def normalize_key(self, key: KeyMaterial) -> dict[str, Any]:
        """
        Validate key material and return its normalized form.

        Raises:
            InvalidKeyError: if the key is malformed
        """
        pass

    @abstractmethod
    def _encrypt(self, plaintext: str, key: dict[str, Any]) -> str:
        pass

    @abstractmethod
    def _decrypt(self, ciphertext: str, key: dict[str, Any]) -> str:
        pass

    @abstractmethod
    def generate_random_key(self) -> dict[str, Any]:
        """
        Generate a random valid key for this cipher.

        Returns:
            A randomly generated key
        """
        pass

    @abstractmethod
    def explain(
        self,
        ciphertext: str,
        plaintext: str,
        key: KeyMaterial,
    ) -> str:
        """
        Generate human-readable explanation of a transform.

        Args:
            ciphertext: The ciphertext
            plaintext: The plaintext
            key: The key used

        Returns:
            Explanation string
        """
        pass

    def _random_keyword(self, min_length: int = 5, max_length: int = 10) -> str:
        length = self.rng.randint(min_length, max_length)
        return "".join(self.rng.choice(ALPHABET) for _ in range(length))

    def _parse_keywords(self, key: KeyMaterial, names: tuple[str, ...]) -> dict[str, str]:
        """Parse a dict or comma-separated string into normalized keywords."""
        if isinstance(key, dict):
            missing = [name for name in names if name not in key]
            if missing:
                raise InvalidKeyError(
                    f"Key is missing {', '.join(missing)}",
                    {"missing": missing},
                )
            values = [key[name] for name in names]
        elif isinstance(key, str):
            values = [part.strip() for part in key.split(",")]
            if len(values) != len(names):
                raise InvalidKeyError(
                    f"Expected {len(names)} comma-separated keywords, got {len(values)}",
                    {"expected": len(names), "got": len(values)},
                )
        else:
            raise InvalidKeyError("Invalid key format")

        if not all(isinstance(value, str) for value in values):
            raise InvalidKeyError("Keywords must be strings")

        return {name: self.normalizer.normalize(value) for name, value in zip(names, values)}
