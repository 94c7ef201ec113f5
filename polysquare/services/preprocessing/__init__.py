"""Text preprocessing for square ciphers."""

from polysquare.services.preprocessing.normalizer import (
    DigraphSplitter,
    PaddingTrimmer,
    TextNormalizer,
)

__all__ = [
    "DigraphSplitter",
    "PaddingTrimmer",
    "TextNormalizer",
]
