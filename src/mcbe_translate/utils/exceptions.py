# -*- coding: utf-8 -*-
"""
번역 엔진에서 사용될 커스텀 예외 클래스를 정의합니다.
"""

from typing import Optional


class TranslationEngineError(Exception):
    """번역 엔진의 기본이 되는 예외 클래스입니다."""
    pass


class FetchError(TranslationEngineError):
    """원격 바닐라 번역을 가져오는 중 발생하는 예외입니다."""

    def __init__(self, message: str, url: Optional[str] = None, status: Optional[int] = None):
        super().__init__(message)
        self.url = url
        self.status = status


class CacheError(TranslationEngineError):
    """로컬 캐시 파일 처리 중 발생하는 예외입니다."""
    pass
