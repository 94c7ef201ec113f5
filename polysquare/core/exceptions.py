from typing import Any


class PolysquareError(Exception):
    """Base exception for all cipher toolkit errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(PolysquareError, ValueError):
    """Raised when input validation fails, before any transform runs."""

    pass


class InvalidKeyError(ValidationError):
    """Raised when key material is malformed."""

    pass


class InvalidDirectionError(ValidationError):
    """Raised when the requested direction is neither encrypt nor decrypt."""

    def __init__(self, direction: Any):
        super().__init__(
            f"Direction must be 'encrypt' or 'decrypt', got {direction!r}",
            {"direction": repr(direction)},
        )


class InvalidCiphertextError(ValidationError):
    """Raised when ciphertext cannot have been produced by the cipher."""

    pass


class TextTooLongError(ValidationError):
    """Raised when input text exceeds the configured maximum length."""

    def __init__(self, length: int, max_length: int):
        super().__init__(
            f"Text length {length} exceeds maximum {max_length}",
            {"length": length, "max_length": max_length},
        )


class EngineError(PolysquareError):
    """Base exception for cipher engine errors."""

    pass


class EngineNotFoundError(EngineError):
    """Raised when requested cipher engine is not found."""

    def __init__(self, engine_name: str):
        super().__init__(
            f"Cipher engine '{engine_name}' not found",
            {"engine_name": engine_name},
        )


class InvalidSquareError(EngineError):
    """Raised when square letters are not a permutation of the 25-letter alphabet."""

    def __init__(self, letters: str):
        super().__init__(
            f"Square letters {letters!r} are not a permutation of the 25-letter alphabet",
            {"letters": letters},
        )


class SquareLookupError(EngineError):
    """Raised when a symbol outside the 25-letter alphabet reaches a square."""

    def __init__(self, symbol: str):
        super().__init__(
            f"Symbol {symbol!r} is not part of the square alphabet",
            {"symbol": symbol},
        )
