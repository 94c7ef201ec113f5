from fastapi import APIRouter

from polysquare.core.exceptions import EngineNotFoundError, TextTooLongError
from polysquare.dependencies import RegistryDep, SettingsDep
from polysquare.models.schemas import DecryptRequest, DecryptResponse, ErrorResponse

router = APIRouter()


@router.post(
    "",
    response_model=DecryptResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
        404: {"model": ErrorResponse, "description": "Cipher type not supported"},
    },
    summary="Decrypt ciphertext",
    description="Decrypt ciphertext with a square cipher and its key.",
)
async def decrypt_ciphertext(
    request: DecryptRequest,
    settings: SettingsDep,
    registry: RegistryDep,
) -> DecryptResponse:
    """
    Decrypt ciphertext with a known key.

    Decryption is deterministic for every cipher, including the randomized ones.
    """
    if len(request.ciphertext) > settings.max_text_length:
        raise TextTooLongError(len(request.ciphertext), settings.max_text_length)

    engine = registry.get_engine(request.cipher_type)

    if engine is None:
        raise EngineNotFoundError(request.cipher_type.value)

    result = engine.transform(request.ciphertext, request.key, "decrypt")

    return DecryptResponse(
        plaintext=result.plain,
        ciphertext=result.encrypted,
        cipher_type=request.cipher_type,
        key_used=request.key,
        normalized_key=result.normalized_key,
        explanation=engine.explain(result.encrypted, result.plain, request.key),
    )
