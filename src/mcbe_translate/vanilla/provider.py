"""
바닐라 번역 제공자

원격 바닐라 리소스 팩에서 로케일별 .lang 파일을 가져와 로컬에 캐시합니다.
가져오기에 실패하면 유효 기간과 관계없이 마지막으로 저장된 캐시를 사용합니다.
"""

import asyncio
import logging
from enum import Enum
from pathlib import Path
from typing import Awaitable, Callable, List, Optional, Union
from urllib.parse import urljoin

import aiohttp

from ..lang.models import TranslationTable, vanilla_source
from ..lang.parser import parse_lang_content
from ..utils.exceptions import CacheError, FetchError
from .cache import CacheStatus, MILLIS_PER_HOUR, VanillaCacheStore, now_millis

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://raw.githubusercontent.com/ZtechNetwork/MCBVanillaResourcePack/master/texts"
DEFAULT_CACHE_DURATION_HOURS = 24
DEFAULT_FETCH_TIMEOUT = 10.0
DEFAULT_MAX_REDIRECTS = 5

REDIRECT_STATUSES = frozenset({301, 302, 303, 307, 308})

# 원격 디렉토리 목록을 조회할 수 없으므로 바닐라 팩이 제공하는 로케일을 고정
VANILLA_LANGUAGES = [
    'en_US', 'en_GB', 'de_DE', 'es_ES', 'es_MX', 'fr_FR', 'fr_CA',
    'it_IT', 'ja_JP', 'ko_KR', 'nl_NL', 'pl_PL', 'pt_BR', 'pt_PT',
    'ru_RU', 'zh_CN', 'zh_TW', 'tr_TR', 'uk_UA', 'ar_SA', 'bg_BG',
    'cs_CZ', 'da_DK', 'el_GR', 'fi_FI', 'hu_HU', 'id_ID', 'nb_NO',
    'ro_RO', 'sk_SK', 'sv_SE', 'th_TH', 'vi_VN',
]

Fetcher = Callable[[str], Awaitable[str]]


class LoadOutcome(Enum):
    """바닐라 번역 로드 결과"""
    DISABLED = "disabled"
    CACHE_HIT = "cache-hit"
    CACHE_REFRESHED = "cache-refreshed"
    STALE_FALLBACK = "stale-fallback"
    COLD_MISS = "cold-miss"


class VanillaTranslationProvider:
    """바닐라 번역 제공 클래스"""

    def __init__(
        self,
        cache_dir: Union[str, Path],
        base_url: str = DEFAULT_BASE_URL,
        enabled: bool = True,
        cache_duration_hours: float = DEFAULT_CACHE_DURATION_HOURS,
        timeout: float = DEFAULT_FETCH_TIMEOUT,
        max_redirects: int = DEFAULT_MAX_REDIRECTS,
        fetcher: Optional[Fetcher] = None,
        clock: Callable[[], int] = now_millis,
    ):
        """
        VanillaTranslationProvider 초기화

        Args:
            cache_dir: 캐시 디렉토리 경로
            base_url: 로케일 파일을 가져올 기본 URL
            enabled: 바닐라 번역 사용 여부
            cache_duration_hours: 캐시 유효 기간 (시간)
            timeout: 가져오기 제한 시간 (초)
            max_redirects: 따라갈 최대 리다이렉트 횟수
            fetcher: URL 내용을 가져오는 코루틴 함수 (기본값: aiohttp)
            clock: 현재 시각 (epoch milliseconds) 함수
        """
        self.store = VanillaCacheStore(cache_dir)
        self.base_url = base_url.rstrip('/')
        self.max_age_ms = int(cache_duration_hours * MILLIS_PER_HOUR)
        self.timeout = timeout
        self.max_redirects = max_redirects
        self.last_outcome: Optional[LoadOutcome] = None

        self._enabled = enabled
        self._fetcher: Fetcher = fetcher or self.fetch_url
        self._clock = clock

        logger.info(f"VanillaTranslationProvider 초기화 (사용: {enabled})")

    def get_url(self, locale: str) -> str:
        return f"{self.base_url}/{locale}.lang"

    async def fetch_url(self, url: str) -> str:
        """
        URL 내용 가져오기 (리다이렉트는 직접 따라감)

        Args:
            url: 가져올 URL

        Returns:
            str: 응답 본문

        Raises:
            FetchError: 네트워크 오류, 시간 초과, 잘못된 상태 코드, 리다이렉트 실패
        """
        client_timeout = aiohttp.ClientTimeout(total=self.timeout)
        current_url = url

        try:
            async with aiohttp.ClientSession(timeout=client_timeout) as session:
                for _ in range(self.max_redirects + 1):
                    async with session.get(current_url, allow_redirects=False) as response:
                        if response.status in REDIRECT_STATUSES:
                            location = response.headers.get('Location')
                            if not location:
                                raise FetchError(
                                    "Location 헤더 없는 리다이렉트", url=current_url, status=response.status
                                )
                            logger.debug(f"리다이렉트: {current_url} -> {location}")
                            current_url = urljoin(current_url, location)
                            continue

                        if not 200 <= response.status < 300:
                            raise FetchError(
                                f"HTTP {response.status}: {current_url} 가져오기 실패",
                                url=current_url,
                                status=response.status,
                            )

                        try:
                            return await response.text(encoding='utf-8')
                        except UnicodeDecodeError as e:
                            raise FetchError(
                                f"UTF-8이 아닌 응답: {current_url} ({e})", url=current_url, status=response.status
                            ) from e

        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise FetchError(f"네트워크 오류: {e}", url=current_url) from e

        raise FetchError(f"리다이렉트 횟수 초과 ({self.max_redirects})", url=url)

    def _parse(self, content: str, locale: str) -> TranslationTable:
        return parse_lang_content(content, vanilla_source(locale))

    async def load_translations(self, locale: str) -> TranslationTable:
        """
        특정 로케일의 바닐라 번역 로드

        유효한 캐시가 있으면 캐시를 사용하고, 없으면 원격에서 가져옵니다.
        가져오기 실패는 호출자에게 전달되지 않습니다.

        Args:
            locale: 로케일 코드

        Returns:
            TranslationTable: 바닐라 번역 (사용할 수 없으면 빈 테이블)
        """
        if not self._enabled:
            self.last_outcome = LoadOutcome.DISABLED
            return {}

        # 캐시 확인
        status = self.store.status(locale, self.max_age_ms, self._clock())
        if status is CacheStatus.FRESH:
            cached = self.store.read_content(locale)
            if cached is not None:
                self.last_outcome = LoadOutcome.CACHE_HIT
                logger.info(f"캐시에서 바닐라 번역 로드: {locale}")
                return self._parse(cached, locale)

        url = self.get_url(locale)
        try:
            logger.info(f"바닐라 번역 가져오는 중: {locale}")
            content = await self._fetcher(url)
        except (FetchError, aiohttp.ClientError, asyncio.TimeoutError, OSError, UnicodeDecodeError) as e:
            logger.warning(f"바닐라 번역을 가져올 수 없음 ({locale}): {e}")

            # 오래된 캐시라도 있으면 사용
            stale = self.store.read_content(locale)
            if stale is not None:
                self.last_outcome = LoadOutcome.STALE_FALLBACK
                logger.info(f"오래된 캐시 사용: {locale}")
                return self._parse(stale, locale)

            self.last_outcome = LoadOutcome.COLD_MISS
            logger.warning(f"사용 가능한 바닐라 번역 캐시 없음: {locale}")
            return {}

        try:
            self.store.write(locale, content, self._clock())
        except CacheError as e:
            logger.warning(f"{e}")

        self.last_outcome = LoadOutcome.CACHE_REFRESHED
        logger.info(f"바닐라 번역 가져오기 및 캐시 완료: {locale}")
        return self._parse(content, locale)

    def clear_cache(self, locale: Optional[str] = None) -> None:
        """
        캐시 삭제 (다시 가져오지는 않음)

        Args:
            locale: 삭제할 로케일 (None이면 전체)
        """
        self.store.clear(locale)

    async def force_refresh(self, locale: str) -> TranslationTable:
        """캐시를 지우고 다시 가져오기"""
        self.clear_cache(locale)
        return await self.load_translations(locale)

    def get_available_languages(self) -> List[str]:
        """바닐라 팩이 제공하는 로케일 목록 반환"""
        return VANILLA_LANGUAGES.copy()

    def is_enabled(self) -> bool:
        return self._enabled

    def set_enabled(self, enabled: bool) -> None:
        self._enabled = enabled
        logger.info(f"바닐라 번역 사용 설정: {enabled}")
