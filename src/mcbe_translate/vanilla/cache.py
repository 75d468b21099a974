"""
바닐라 번역 로컬 캐시

로케일마다 원본 내용(<locale>.lang)과 메타데이터(<locale>.meta.json)
두 파일을 저장합니다. 메타데이터를 읽을 수 없으면 캐시는 오래된 것으로 취급합니다.
"""

import json
import logging
import time
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Set, Union

from ..utils.exceptions import CacheError

logger = logging.getLogger(__name__)

CACHE_SCHEMA_VERSION = "1.0"
CONTENT_SUFFIX = ".lang"
METADATA_SUFFIX = ".meta.json"

MILLIS_PER_HOUR = 60 * 60 * 1000


class CacheStatus(Enum):
    """캐시 상태"""
    FRESH = "fresh"
    STALE = "stale"
    ABSENT = "absent"


@dataclass(frozen=True)
class CacheMetadata:
    """캐시 메타데이터"""
    fetched_at: int  # epoch milliseconds
    version: str = CACHE_SCHEMA_VERSION

    def to_dict(self) -> dict:
        return {'fetchedAt': self.fetched_at, 'version': self.version}

    @classmethod
    def from_dict(cls, data: object) -> Optional['CacheMetadata']:
        """딕셔너리에서 생성 (형식이 맞지 않으면 None)"""
        if not isinstance(data, dict):
            return None
        fetched_at = data.get('fetchedAt')
        # bool은 int의 하위 클래스이므로 제외
        if isinstance(fetched_at, bool) or not isinstance(fetched_at, (int, float)):
            return None
        version = data.get('version', CACHE_SCHEMA_VERSION)
        return cls(fetched_at=int(fetched_at), version=str(version))


def now_millis() -> int:
    """현재 시각 (epoch milliseconds)"""
    return int(time.time() * 1000)


def evaluate_cache_status(
    content_exists: bool,
    metadata: Optional[CacheMetadata],
    now_ms: int,
    max_age_ms: int,
) -> CacheStatus:
    """
    캐시 상태 판정

    Args:
        content_exists: 캐시 내용 파일 존재 여부
        metadata: 읽어 들인 메타데이터 (없거나 손상되었으면 None)
        now_ms: 현재 시각 (epoch milliseconds)
        max_age_ms: 캐시 유효 기간 (milliseconds)

    Returns:
        CacheStatus: FRESH, STALE, ABSENT 중 하나
    """
    if not content_exists:
        return CacheStatus.ABSENT
    if metadata is None:
        return CacheStatus.STALE
    if now_ms - metadata.fetched_at < max_age_ms:
        return CacheStatus.FRESH
    return CacheStatus.STALE


class VanillaCacheStore:
    """로케일별 바닐라 번역 캐시 파일 관리 클래스"""

    def __init__(self, cache_dir: Union[str, Path]):
        """
        VanillaCacheStore 초기화

        Args:
            cache_dir: 캐시 디렉토리 경로
        """
        self.cache_dir = Path(cache_dir)
        self.cache_dir.mkdir(parents=True, exist_ok=True)

        logger.info(f"VanillaCacheStore 초기화: {self.cache_dir}")

    def get_content_path(self, locale: str) -> Path:
        return self.cache_dir / f"{locale}{CONTENT_SUFFIX}"

    def get_metadata_path(self, locale: str) -> Path:
        return self.cache_dir / f"{locale}{METADATA_SUFFIX}"

    def has_content(self, locale: str) -> bool:
        return self.get_content_path(locale).is_file()

    def read_content(self, locale: str) -> Optional[str]:
        """캐시된 내용 읽기 (없거나 읽기 실패 시 None)"""
        path = self.get_content_path(locale)
        if not path.is_file():
            return None

        try:
            return path.read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"캐시 내용 읽기 실패 ({path}): {e}")
            return None

    def read_metadata(self, locale: str) -> Optional[CacheMetadata]:
        """캐시 메타데이터 읽기 (없거나 손상되었으면 None)"""
        path = self.get_metadata_path(locale)
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except FileNotFoundError:
            return None
        except (OSError, ValueError) as e:
            logger.warning(f"캐시 메타데이터 손상 ({path}): {e}")
            return None

        return CacheMetadata.from_dict(data)

    def write(self, locale: str, content: str, fetched_at: Optional[int] = None) -> CacheMetadata:
        """
        캐시 쓰기 (내용과 메타데이터 모두 덮어씀)

        Args:
            locale: 로케일
            content: 원본 .lang 내용
            fetched_at: 가져온 시각 (기본값: 현재 시각)

        Returns:
            CacheMetadata: 기록된 메타데이터

        Raises:
            CacheError: 파일 쓰기 실패 시
        """
        metadata = CacheMetadata(fetched_at=fetched_at if fetched_at is not None else now_millis())

        try:
            self.cache_dir.mkdir(parents=True, exist_ok=True)
            self.get_content_path(locale).write_text(content, encoding='utf-8')
            with open(self.get_metadata_path(locale), 'w', encoding='utf-8') as f:
                json.dump(metadata.to_dict(), f)
        except OSError as e:
            raise CacheError(f"캐시 쓰기 실패 ({locale}): {e}") from e

        logger.debug(f"캐시 저장: {locale} ({len(content)} bytes)")
        return metadata

    def status(self, locale: str, max_age_ms: int, now_ms: Optional[int] = None) -> CacheStatus:
        """로케일 캐시 상태 반환"""
        return evaluate_cache_status(
            self.has_content(locale),
            self.read_metadata(locale),
            now_ms if now_ms is not None else now_millis(),
            max_age_ms,
        )

    def clear(self, locale: Optional[str] = None) -> int:
        """
        캐시 삭제

        Args:
            locale: 삭제할 로케일 (None이면 모든 로케일)

        Returns:
            int: 삭제된 파일 개수
        """
        if locale is not None:
            targets = [self.get_content_path(locale), self.get_metadata_path(locale)]
        elif self.cache_dir.is_dir():
            targets = [path for path in self.cache_dir.iterdir() if path.is_file()]
        else:
            targets = []

        removed = 0
        for path in targets:
            try:
                path.unlink()
                removed += 1
            except FileNotFoundError:
                continue
            except OSError as e:
                logger.warning(f"캐시 파일 삭제 실패 ({path}): {e}")

        logger.info(f"캐시 삭제: {locale or '전체'} ({removed}개 파일)")
        return removed

    def cached_languages(self) -> Set[str]:
        """캐시된 로케일 목록 반환"""
        if not self.cache_dir.is_dir():
            return set()
        return {
            path.name[:-len(CONTENT_SUFFIX)]
            for path in self.cache_dir.iterdir()
            if path.name.endswith(CONTENT_SUFFIX) and path.is_file()
        }
