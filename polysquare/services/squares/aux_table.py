import random
import string
from dataclasses import dataclass, field
from typing import Any

from polysquare.core.exceptions import InvalidKeyError

ROW_LENGTH = 5
MAX_ROWS = 2


@dataclass(frozen=True)
class AuxKeyTable:
    """
    Checkerboard coordinate table: one or two rows of five letters.

    Position ``i`` of any row stands for coordinate ``i`` of the square.
    With two rows the encoder may pick either row, so the decoder must find
    the letter by membership rather than by row. That only works when no
    letter appears twice anywhere in the table.
    """

    rows: tuple[str, ...]
    _index: dict[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        index: dict[str, int] = {}
        for row in self.rows:
            for position, letter in enumerate(row):
                index[letter] = position
        object.__setattr__(self, "_index", index)

    @classmethod
    def parse(cls, value: Any, name: str = "key") -> "AuxKeyTable":
        """
        Build a table from a 5-letter string or a list of 5-letter strings.

        Raises:
            InvalidKeyError: if the shape is wrong or letters repeat
        """
        if isinstance(value, str):
            raw_rows = [value]
        elif isinstance(value, (list, tuple)) and all(isinstance(r, str) for r in value):
            raw_rows = list(value)
        else:
            raise InvalidKeyError(
                f"{name} must be a 5-letter string or a list of 5-letter strings",
                {"key": name},
            )

        if not 1 <= len(raw_rows) <= MAX_ROWS:
            raise InvalidKeyError(
                f"{name} must have 1 or {MAX_ROWS} rows, got {len(raw_rows)}",
                {"key": name, "rows": len(raw_rows)},
            )

        rows = tuple(row.strip().upper().replace("J", "I") for row in raw_rows)
        for row in rows:
            if len(row) != ROW_LENGTH or any(c not in string.ascii_uppercase for c in row):
                raise InvalidKeyError(
                    f"{name} rows must be exactly {ROW_LENGTH} letters, got {row!r}",
                    {"key": name, "row": row},
                )
            if len(set(row)) != ROW_LENGTH:
                raise InvalidKeyError(
                    f"{name} row {row!r} repeats a letter",
                    {"key": name, "row": row},
                )

        if len(rows) == 2:
            shared = sorted(set(rows[0]) & set(rows[1]))
            if shared:
                raise InvalidKeyError(
                    f"{name} rows {rows[0]!r} and {rows[1]!r} must not share letters",
                    {"key": name, "shared": "".join(shared)},
                )

        return cls(rows=rows)

    def encode(self, coordinate: int, rng: random.Random) -> str:
        """Pick a row uniformly at random and return its letter for the coordinate."""
        if len(self.rows) == 1:
            return self.rows[0][coordinate]
        return rng.choice(self.rows)[coordinate]

    def decode(self, letter: str) -> int | None:
        """Return the coordinate a letter stands for, or None if it is not in the table."""
        return self._index.get(letter)
