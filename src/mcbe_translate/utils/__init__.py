"""
공용 유틸리티 모듈
"""

from .exceptions import TranslationEngineError, FetchError, CacheError

__all__ = [
    'TranslationEngineError',
    'FetchError',
    'CacheError',
]
