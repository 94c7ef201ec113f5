from fastapi import APIRouter

from polysquare.api.v1.endpoints import ciphers, decrypt, encrypt, transform

api_router = APIRouter()

api_router.include_router(
    ciphers.router,
    prefix="/ciphers",
    tags=["Ciphers"],
)

api_router.include_router(
    encrypt.router,
    prefix="/encrypt",
    tags=["Encryption"],
)

api_router.include_router(
    decrypt.router,
    prefix="/decrypt",
    tags=["Decryption"],
)

api_router.include_router(
    transform.router,
    prefix="/transform",
    tags=["Transform"],
)
