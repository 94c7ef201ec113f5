from fastapi import APIRouter

from polysquare.core.exceptions import EngineNotFoundError, TextTooLongError
from polysquare.dependencies import RegistryDep, RngDep, SettingsDep
from polysquare.models.schemas import EncryptRequest, EncryptResponse, ErrorResponse

router = APIRouter()


@router.post(
    "",
    response_model=EncryptResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
        404: {"model": ErrorResponse, "description": "Cipher type not supported"},
    },
    summary="Encrypt plaintext",
    description="Encrypt plaintext with a square cipher. A random key is generated when none is given.",
)
async def encrypt_plaintext(
    request: EncryptRequest,
    settings: SettingsDep,
    registry: RegistryDep,
    rng: RngDep,
) -> EncryptResponse:
    """
    Encrypt plaintext with a specified cipher type.

    Randomized ciphers (checkerboard with two-row tables, three-square)
    return a different ciphertext on each call for the same input.
    """
    if len(request.plaintext) > settings.max_text_length:
        raise TextTooLongError(len(request.plaintext), settings.max_text_length)

    engine = registry.get_engine(request.cipher_type, rng=rng)

    if engine is None:
        raise EngineNotFoundError(request.cipher_type.value)

    key = request.key
    if key is None:
        key = engine.generate_random_key()

    result = engine.transform(request.plaintext, key, "encrypt")

    return EncryptResponse(
        ciphertext=result.encrypted,
        plaintext=result.plain,
        cipher_type=request.cipher_type,
        key_used=key,
        normalized_key=result.normalized_key,
    )
