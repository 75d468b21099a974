# -*- coding: utf-8 -*-
"""환경 설정 관리 모듈"""

import os
from dataclasses import dataclass, field
from typing import Any, List, Optional

from dotenv import load_dotenv

from .vanilla.provider import (
    DEFAULT_BASE_URL,
    DEFAULT_CACHE_DURATION_HOURS,
    DEFAULT_FETCH_TIMEOUT,
    DEFAULT_MAX_REDIRECTS,
)


class Config:
    """환경 변수 기반 설정 관리 클래스"""

    @staticmethod
    def get_env(key: str, default: Any = None, cast_type: type = str) -> Any:
        """환경 변수 값을 가져오고 타입 변환을 수행합니다.

        Args:
            key: 환경 변수 키
            default: 기본값
            cast_type: 변환할 타입 (str, int, float, bool, list)

        Returns:
            변환된 환경 변수 값 또는 기본값
        """
        value = os.getenv(key)

        if value is None:
            return default

        if cast_type == bool:
            return str(value).lower() in ('true', '1', 'yes', 'on')
        elif cast_type == int:
            try:
                return int(value)
            except (ValueError, TypeError):
                return default
        elif cast_type == float:
            try:
                return float(value)
            except (ValueError, TypeError):
                return default
        elif cast_type == list:
            # 경로 목록은 os.pathsep(':' 또는 ';')으로 구분
            return [item.strip() for item in value.split(os.pathsep) if item.strip()]
        else:
            return cast_type(value)


@dataclass
class Settings:
    """번역 엔진 설정"""
    default_language: str = 'en_US'
    use_vanilla: bool = True
    workspace_roots: List[str] = field(default_factory=list)
    resource_pack_paths: List[str] = field(default_factory=list)
    cache_dir: str = 'data/vanilla-translations'
    vanilla_base_url: str = DEFAULT_BASE_URL
    cache_duration_hours: float = DEFAULT_CACHE_DURATION_HOURS
    fetch_timeout: float = DEFAULT_FETCH_TIMEOUT
    max_redirects: int = DEFAULT_MAX_REDIRECTS
    log_level: str = 'INFO'

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> 'Settings':
        """
        .env 파일과 환경 변수에서 설정 로드

        Args:
            env_file: .env 파일 경로 (기본값: 현재 디렉토리의 .env)

        Returns:
            Settings: 설정 객체
        """
        load_dotenv(env_file)
        get_env = Config.get_env

        return cls(
            default_language=get_env('MCBE_DEFAULT_LANGUAGE', 'en_US'),
            use_vanilla=get_env('MCBE_USE_VANILLA', True, bool),
            workspace_roots=get_env('MCBE_WORKSPACE_ROOTS', [os.getcwd()], list),
            resource_pack_paths=get_env('MCBE_RESOURCE_PACK_PATHS', [], list),
            cache_dir=get_env('MCBE_CACHE_DIR', 'data/vanilla-translations'),
            vanilla_base_url=get_env('MCBE_VANILLA_BASE_URL', DEFAULT_BASE_URL),
            cache_duration_hours=get_env('MCBE_CACHE_DURATION_HOURS', DEFAULT_CACHE_DURATION_HOURS, float),
            fetch_timeout=get_env('MCBE_FETCH_TIMEOUT', DEFAULT_FETCH_TIMEOUT, float),
            max_redirects=get_env('MCBE_MAX_REDIRECTS', DEFAULT_MAX_REDIRECTS, int),
            log_level=get_env('LOG_LEVEL', 'INFO').upper(),
        )
