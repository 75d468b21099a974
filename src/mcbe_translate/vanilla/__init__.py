"""
원격 바닐라 번역 및 로컬 캐시 모듈
"""

from .cache import (
    CACHE_SCHEMA_VERSION,
    CacheStatus,
    CacheMetadata,
    VanillaCacheStore,
    evaluate_cache_status,
    now_millis,
)
from .provider import (
    DEFAULT_BASE_URL,
    VANILLA_LANGUAGES,
    LoadOutcome,
    VanillaTranslationProvider,
)

__all__ = [
    # 캐시
    'CACHE_SCHEMA_VERSION',
    'CacheStatus',
    'CacheMetadata',
    'VanillaCacheStore',
    'evaluate_cache_status',
    'now_millis',

    # 제공자
    'DEFAULT_BASE_URL',
    'VANILLA_LANGUAGES',
    'LoadOutcome',
    'VanillaTranslationProvider',
]
