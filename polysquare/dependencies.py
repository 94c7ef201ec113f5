import random
from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from polysquare.core.config import Settings, get_settings
from polysquare.services.engines.registry import EngineRegistry


# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]


@lru_cache
def _seeded_rng(seed: int) -> random.Random:
    return random.Random(seed)


def get_rng(settings: SettingsDep) -> random.Random | None:
    """Shared seeded randomness source, or None to use each engine's own."""
    if settings.random_seed is None:
        return None
    return _seeded_rng(settings.random_seed)


RngDep = Annotated[random.Random | None, Depends(get_rng)]


# Engine registry dependency
def get_registry() -> EngineRegistry:
    return EngineRegistry()


RegistryDep = Annotated[EngineRegistry, Depends(get_registry)]
