from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# Enums
# ============================================================================


class CipherFamily(str, Enum):
    """Supported cipher families."""

    POLYBIUS = "polybius"


class CipherType(str, Enum):
    """Specific cipher types."""

    CHECKERBOARD = "checkerboard"
    TWO_SQUARE = "two_square"
    THREE_SQUARE = "three_square"


class Direction(str, Enum):
    """Direction of a cipher transform."""

    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"


# ============================================================================
# Key Schemas
# ============================================================================

KeyMaterial = str | dict[str, Any]


# ============================================================================
# Result Schemas
# ============================================================================


class CipherResult(BaseModel):
    """Outcome of a single transform call."""

    model_config = ConfigDict(from_attributes=True)

    cipher_type: CipherType
    direction: Direction
    plain: str
    encrypted: str
    key: KeyMaterial
    normalized_key: dict[str, Any]


class CipherInfo(BaseModel):
    """Metadata describing a registered engine."""

    name: str
    cipher_type: CipherType
    cipher_family: CipherFamily
    description: str
    randomized: bool


# ============================================================================
# Request Schemas
# ============================================================================


class EncryptRequest(BaseModel):
    """Request schema for /encrypt endpoint."""

    plaintext: str
    cipher_type: CipherType
    key: KeyMaterial | None = None


class DecryptRequest(BaseModel):
    """Request schema for /decrypt endpoint."""

    ciphertext: str
    cipher_type: CipherType
    key: KeyMaterial


class TransformRequest(BaseModel):
    """Request schema for /transform endpoint."""

    text: str
    cipher_type: CipherType
    key: KeyMaterial
    direction: Direction


# ============================================================================
# Response Schemas
# ============================================================================


class EncryptResponse(BaseModel):
    """Response schema for /encrypt endpoint."""

    ciphertext: str
    plaintext: str
    cipher_type: CipherType
    key_used: KeyMaterial
    normalized_key: dict[str, Any]


class DecryptResponse(BaseModel):
    """Response schema for /decrypt endpoint."""

    plaintext: str
    ciphertext: str
    cipher_type: CipherType
    key_used: KeyMaterial
    normalized_key: dict[str, Any]
    explanation: str


class CipherListResponse(BaseModel):
    """Response schema for /ciphers endpoint."""

    items: list[CipherInfo]
    total: int


# ============================================================================
# Error Schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    message: str
    details: dict[str, Any] = Field(default_factory=dict)
