from fastapi import APIRouter

from polysquare.dependencies import RegistryDep
from polysquare.models.schemas import CipherInfo, CipherListResponse

router = APIRouter()


@router.get(
    "",
    response_model=CipherListResponse,
    summary="List available ciphers",
    description="List the registered square cipher engines.",
)
async def list_ciphers(registry: RegistryDep) -> CipherListResponse:
    items = [
        CipherInfo(
            name=engine.name,
            cipher_type=engine.cipher_type,
            cipher_family=engine.cipher_family,
            description=engine.description,
            randomized=engine.randomized,
        )
        for engine in registry.get_all_engines()
    ]
    return CipherListResponse(items=items, total=len(items))
