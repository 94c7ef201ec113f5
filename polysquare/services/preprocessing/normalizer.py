import string
import unicodedata
from typing import ClassVar


class TextNormalizer:
    """
    Normalizes text for the 25-letter Polybius alphabet.

    Handles:
    - Unicode normalization (NFKC)
    - Case conversion
    - Non-letter removal
    - Folding J into I
    """

    ALLOWED: ClassVar[frozenset[str]] = frozenset(string.ascii_uppercase)

    def normalize(self, text: str) -> str:
        """
        Normalize text for a square cipher.

        Args:
            text: Input text to normalize

        Returns:
            Uppercase A-Z string with every J replaced by I
        """
        upper = unicodedata.normalize("NFKC", text).upper()
        return "".join(char for char in upper if char in self.ALLOWED).replace("J", "I")


class DigraphSplitter:
    """Groups normalized text into fixed-size units."""

    PAD: ClassVar[str] = "X"

    def split_digraphs(self, text: str, pad: bool = True) -> list[str]:
        """
        Split text into consecutive pairs.

        Odd-length text gets a trailing 'X' when ``pad`` is set; the decrypt
        path never needs it because ciphertext length is even.
        """
        if pad and len(text) % 2 == 1:
            text += self.PAD
        return self.split_groups(text, 2)

    def split_groups(self, text: str, size: int) -> list[str]:
        """Split text into consecutive groups of ``size`` symbols."""
        return [text[i:i + size] for i in range(0, len(text), size)]


class PaddingTrimmer:
    """
    Removes a probable pad 'X' from decrypted digraphic output.

    The rule is a heuristic: a trailing 'X' is dropped only when the letter
    before it is a consonant. A genuine final 'X' after a consonant is lost,
    and a pad 'X' after a vowel (or Y) survives.
    """

    PAD: ClassVar[str] = "X"
    KEEP_AFTER: ClassVar[frozenset[str]] = frozenset("AEIOUY")

    def trim(self, text: str) -> str:
        if len(text) >= 2 and text[-1] == self.PAD and text[-2] not in self.KEEP_AFTER:
            return text[:-1]
        return text
