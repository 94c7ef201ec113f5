from fastapi import APIRouter

from polysquare.core.exceptions import EngineNotFoundError, TextTooLongError
from polysquare.dependencies import RegistryDep, RngDep, SettingsDep
from polysquare.models.schemas import CipherResult, ErrorResponse, TransformRequest

router = APIRouter()


@router.post(
    "",
    response_model=CipherResult,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
        404: {"model": ErrorResponse, "description": "Cipher type not supported"},
    },
    summary="Run a cipher in either direction",
    description="Encrypt or decrypt text and return both sides along with the key echo.",
)
async def transform_text(
    request: TransformRequest,
    settings: SettingsDep,
    registry: RegistryDep,
    rng: RngDep,
) -> CipherResult:
    if len(request.text) > settings.max_text_length:
        raise TextTooLongError(len(request.text), settings.max_text_length)

    engine = registry.get_engine(request.cipher_type, rng=rng)

    if engine is None:
        raise EngineNotFoundError(request.cipher_type.value)

    return engine.transform(request.text, request.key, request.direction)
