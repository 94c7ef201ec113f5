from typing import Any, ClassVar

from polysquare.core.exceptions import InvalidCiphertextError, InvalidKeyError
from polysquare.models.schemas import CipherFamily, CipherType, KeyMaterial
from polysquare.services.engines.base import CipherEngine
from polysquare.services.engines.registry import EngineRegistry
from polysquare.services.squares.aux_table import AuxKeyTable
from polysquare.services.squares.keyed_square import ALPHABET, KeyedSquare


@EngineRegistry.register
class CheckerboardEngine(CipherEngine):
    """
    Checkerboard cipher engine.

    Each plaintext letter is located in a keyed Polybius square and its
    (row, col) coordinate is written as two letters: the row through the
    row table (key1) and the column through the column table (key2).

        key1 rows  BLACK / GHOST       key2 rows  TRAIN / GHOUL

    With two-row tables the encoder picks a row at random for every letter,
    so the same plaintext encrypts differently on each run. Decryption looks
    the letter up in whichever row contains it, which recovers the same
    coordinate for every pick. A single-row table gives the deterministic
    variant of the cipher.
    """

    name = "Checkerboard Cipher"
    cipher_type = CipherType.CHECKERBOARD
    cipher_family = CipherFamily.POLYBIUS
    description = (
        "A Polybius-square cipher whose row and column coordinates are written "
        "with letters from two key tables. Two-row tables make encryption "
        "randomized while decryption stays exact."
    )
    randomized = True

    KEY_NAMES: ClassVar[tuple[str, ...]] = ("pskey", "key1", "key2")

    def normalize_key(self, key: KeyMaterial) -> dict[str, Any]:
        """
        Validate checkerboard key material.

        Accepts ``{"pskey": str, "key1": rows, "key2": rows}`` where ``rows``
        is a 5-letter string or a list of one or two 5-letter strings, or a
        string ``"pskey,ROW1/ROW2,ROW1/ROW2"``.
        """
        if isinstance(key, str):
            parts = [part.strip() for part in key.split(",")]
            if len(parts) != 3:
                raise InvalidKeyError(
                    f"Expected 'pskey,key1,key2', got {len(parts)} parts",
                    {"expected": 3, "got": len(parts)},
                )
            key = {
                "pskey": parts[0],
                "key1": parts[1].split("/"),
                "key2": parts[2].split("/"),
            }
        elif not isinstance(key, dict):
            raise InvalidKeyError("Invalid key format")

        missing = [name for name in self.KEY_NAMES if name not in key]
        if missing:
            raise InvalidKeyError(f"Key is missing {', '.join(missing)}", {"missing": missing})
        if not isinstance(key["pskey"], str):
            raise InvalidKeyError("pskey must be a string")

        row_table = AuxKeyTable.parse(key["key1"], "key1")
        col_table = AuxKeyTable.parse(key["key2"], "key2")

        return {
            "pskey": self.normalizer.normalize(key["pskey"]),
            "key1": list(row_table.rows),
            "key2": list(col_table.rows),
        }

    def _tables(self, key: dict[str, Any]) -> tuple[KeyedSquare, AuxKeyTable, AuxKeyTable]:
        return (
            KeyedSquare.from_keyword(key["pskey"]),
            AuxKeyTable(rows=tuple(key["key1"])),
            AuxKeyTable(rows=tuple(key["key2"])),
        )

    def _encrypt(self, plaintext: str, key: dict[str, Any]) -> str:
        """Encrypt letter by letter, drawing a table row per coordinate."""
        square, row_table, col_table = self._tables(key)

        result = []
        for char in plaintext:
            row, col = square.locate(char)
            result.append(row_table.encode(row, self.rng))
            result.append(col_table.encode(col, self.rng))

        return "".join(result)

    def _decrypt(self, ciphertext: str, key: dict[str, Any]) -> str:
        """Decrypt pairs by table membership."""
        square, row_table, col_table = self._tables(key)

        if len(ciphertext) % 2 != 0:
            raise InvalidCiphertextError(
                "Checkerboard ciphertext length must be even",
                {"length": len(ciphertext)},
            )

        coordinates = []
        for pair in self.splitter.split_groups(ciphertext, 2):
            row = row_table.decode(pair[0])
            col = col_table.decode(pair[1])
            if row is None or col is None:
                raise InvalidCiphertextError(
                    f"Pair {pair!r} does not belong to the key tables",
                    {"pair": pair},
                )
            coordinates.append((row, col))

        return "".join(square.at(row, col) for row, col in coordinates)

    def generate_random_key(self) -> dict[str, Any]:
        """Generate a random square keyword and two disjoint-row tables."""
        def table() -> list[str]:
            letters = "".join(self.rng.sample(ALPHABET, 10))
            return [letters[:5], letters[5:]]

        return {
            "pskey": self._random_keyword(),
            "key1": table(),
            "key2": table(),
        }

    def explain(
        self,
        ciphertext: str,
        plaintext: str,
        key: KeyMaterial,
    ) -> str:
        """Generate human-readable explanation."""
        normalized = self.normalize_key(key)
        key1 = " / ".join(normalized["key1"])
        key2 = " / ".join(normalized["key2"])

        return (
            f"Checkerboard cipher with square keyword '{normalized['pskey']}'. "
            f"Each letter's row is written with a letter from '{key1}' and its "
            f"column with a letter from '{key2}'. "
            f"{len(plaintext)} letters correspond to {len(ciphertext)} ciphertext letters."
        )
