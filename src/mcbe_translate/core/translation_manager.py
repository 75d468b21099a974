"""
번역 관리자 - 바닐라 번역과 리소스 팩 번역을 병합한 번역 테이블 관리
"""

import asyncio
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from ..config import Settings
from ..lang.models import TranslationEntry, TranslationTable, is_vanilla_source
from ..lang.parser import find_available_languages, load_pack_translations
from ..packs.scanner import ResourcePackInfo, discover_resource_packs
from ..vanilla.provider import VanillaTranslationProvider
from .event_bus import Event, EventBus, EventType

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

DEFAULT_SEARCH_LIMIT = 50


@dataclass(frozen=True)
class TranslationSnapshot:
    """한 번의 새로고침으로 만들어진 번역 상태 (교체만 되고 수정되지 않음)"""
    version: int
    language: str
    translations: TranslationTable = field(default_factory=dict)
    available_languages: List[str] = field(default_factory=list)
    resource_packs: List[ResourcePackInfo] = field(default_factory=list)


class TranslationManager:
    """번역 관리 클래스"""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        vanilla_provider: Optional[VanillaTranslationProvider] = None,
        event_bus: Optional[EventBus] = None,
    ):
        """
        TranslationManager 초기화

        Args:
            settings: 엔진 설정 (기본값: Settings())
            vanilla_provider: 바닐라 번역 제공자 (None이면 바닐라 번역 미사용)
            event_bus: 변경 알림용 이벤트 버스
        """
        self.settings = settings or Settings()
        self.vanilla_provider = vanilla_provider
        self.event_bus = event_bus or EventBus()

        self._snapshot = TranslationSnapshot(version=0, language=self.settings.default_language)
        self._refresh_lock = asyncio.Lock()

        logger.info(f"TranslationManager 초기화 (언어: {self._snapshot.language})")

    @classmethod
    def from_settings(cls, settings: Settings, event_bus: Optional[EventBus] = None) -> 'TranslationManager':
        """설정으로 바닐라 번역 제공자까지 구성한 관리자 생성"""
        provider = VanillaTranslationProvider(
            cache_dir=settings.cache_dir,
            base_url=settings.vanilla_base_url,
            enabled=settings.use_vanilla,
            cache_duration_hours=settings.cache_duration_hours,
            timeout=settings.fetch_timeout,
            max_redirects=settings.max_redirects,
        )
        return cls(settings=settings, vanilla_provider=provider, event_bus=event_bus)

    async def refresh(
        self,
        language: Optional[str] = None,
        use_vanilla: Optional[bool] = None,
        workspace_roots: Optional[Iterable[PathLike]] = None,
        configured_paths: Optional[Iterable[PathLike]] = None,
    ) -> TranslationTable:
        """
        리소스 팩을 다시 탐색하고 번역 테이블을 새로 만듦

        바닐라 번역을 먼저 적용하고, 탐색 순서대로 리소스 팩 번역을 덮어씁니다.
        새 테이블은 완성된 뒤에 한 번에 교체되며, 교체 후 변경 알림을 한 번 발행합니다.

        Args:
            language: 로드할 언어 (기본값: 현재 언어)
            use_vanilla: 바닐라 번역 적용 여부 (기본값: 제공자 설정)
            workspace_roots: 워크스페이스 루트 목록 (기본값: 설정값)
            configured_paths: 추가 리소스 팩 경로 목록 (기본값: 설정값)

        Returns:
            TranslationTable: 새로 설치된 번역 테이블
        """
        async with self._refresh_lock:
            # 요청된 언어는 새 테이블과 함께 설치될 때까지 지역 변수로만 유지
            language = language or self._snapshot.language

            if workspace_roots is None:
                workspace_roots = self.settings.workspace_roots
            if configured_paths is None:
                configured_paths = self.settings.resource_pack_paths

            translations: TranslationTable = {}
            all_languages = set()

            # 바닐라 번역 먼저 로드 (기본값 역할)
            if self.vanilla_provider is not None:
                apply_vanilla = self.vanilla_provider.is_enabled() if use_vanilla is None else use_vanilla
                if apply_vanilla:
                    try:
                        vanilla = await self.vanilla_provider.load_translations(language)
                        translations.update(vanilla)
                        logger.info(f"바닐라 번역 {len(vanilla)}개 로드")
                    except Exception as e:
                        logger.warning(f"바닐라 번역 로드 실패: {e}")
                all_languages.update(self.vanilla_provider.get_available_languages())

            try:
                resource_packs = discover_resource_packs(workspace_roots, configured_paths)
            except Exception as e:
                logger.warning(f"리소스 팩 탐색 실패: {e}")
                resource_packs = []

            # 리소스 팩 번역 로드 (바닐라와 앞선 팩을 덮어씀)
            for pack in resource_packs:
                if not pack.has_texts:
                    continue

                try:
                    all_languages.update(find_available_languages(pack.texts_path))
                    pack_translations = load_pack_translations(pack.path, language)
                except Exception as e:
                    logger.warning(f"리소스 팩 번역 로드 실패 ({pack.name}): {e}")
                    continue

                translations.update(pack_translations)
                logger.debug(f"리소스 팩 번역 {len(pack_translations)}개 로드: {pack.name}")

            # 검색 순서를 고정하기 위해 키 순으로 정렬
            ordered = {key: translations[key] for key in sorted(translations)}

            snapshot = TranslationSnapshot(
                version=self._snapshot.version + 1,
                language=language,
                translations=ordered,
                available_languages=sorted(all_languages),
                resource_packs=list(resource_packs),
            )
            self._snapshot = snapshot

        logger.info(f"번역 새로고침 완료: {len(ordered)}개 ({language}, 리소스 팩 {len(resource_packs)}개)")

        # 구독자가 다시 refresh를 호출할 수 있도록 잠금 해제 후 알림
        await self.event_bus.publish(Event(
            event_type=EventType.TRANSLATIONS_CHANGED,
            source="translation_manager",
            data={
                'version': snapshot.version,
                'language': language,
                'count': len(ordered),
            },
        ))

        return snapshot.translations

    def get_translation(self, key: str) -> Optional[TranslationEntry]:
        """번역 항목 조회"""
        return self._snapshot.translations.get(key)

    def get_translation_value(self, key: str) -> Optional[str]:
        """번역 값만 조회"""
        entry = self._snapshot.translations.get(key)
        return entry.value if entry else None

    def has_translation(self, key: str) -> bool:
        """번역 키 존재 여부 확인"""
        return key in self._snapshot.translations

    def search_translations(self, query: str, limit: int = DEFAULT_SEARCH_LIMIT) -> List[TranslationEntry]:
        """
        키 또는 값에 검색어가 포함된 번역 검색 (대소문자 무시)

        Args:
            query: 검색어
            limit: 최대 결과 개수

        Returns:
            List[TranslationEntry]: 키 순서로 찾은 처음 limit개의 항목
        """
        results: List[TranslationEntry] = []
        if limit <= 0:
            return results

        lower_query = query.lower()
        for entry in self._snapshot.translations.values():
            if lower_query not in entry.key.lower() and lower_query not in entry.value.lower():
                continue

            results.append(entry)
            if len(results) >= limit:
                break

        return results

    def get_all_translations(self) -> TranslationTable:
        """모든 번역 항목 반환 (복사본)"""
        return dict(self._snapshot.translations)

    def get_translation_count(self) -> int:
        return len(self._snapshot.translations)

    def get_available_languages(self) -> List[str]:
        """사용 가능한 언어 목록 반환"""
        return list(self._snapshot.available_languages)

    def get_current_language(self) -> str:
        return self._snapshot.language

    def get_resource_packs(self) -> List[ResourcePackInfo]:
        """마지막 새로고침에서 탐색된 리소스 팩 목록 반환"""
        return list(self._snapshot.resource_packs)

    def get_version(self) -> int:
        """설치된 번역 테이블 버전 (새로고침마다 증가)"""
        return self._snapshot.version

    async def set_language(self, language: str) -> None:
        """
        현재 언어를 바꾸고 번역을 다시 로드

        Args:
            language: 새 언어 코드
        """
        previous = self._snapshot.language
        await self.refresh(language=language)

        logger.info(f"언어 변경: {previous} -> {language}")
        await self.event_bus.publish(Event(
            event_type=EventType.LANGUAGE_CHANGED,
            source="translation_manager",
            data={'previous': previous, 'language': language},
        ))

    async def clear_vanilla_cache(self) -> None:
        """바닐라 번역 캐시를 모두 지우고 다시 로드"""
        if self.vanilla_provider is None:
            return

        self.vanilla_provider.clear_cache()
        await self.event_bus.publish(Event(
            event_type=EventType.VANILLA_CACHE_CLEARED,
            source="translation_manager",
        ))
        await self.refresh()

    def is_vanilla_enabled(self) -> bool:
        return self.vanilla_provider.is_enabled() if self.vanilla_provider else False

    def set_vanilla_enabled(self, enabled: bool) -> None:
        """바닐라 번역 사용 여부 설정 (다음 새로고침부터 적용)"""
        if self.vanilla_provider is not None:
            self.vanilla_provider.set_enabled(enabled)

    def get_status_text(self) -> str:
        """상태 표시 문자열 반환"""
        vanilla_status = " + vanilla" if self.is_vanilla_enabled() else ""
        snapshot = self._snapshot
        return f"MCBE: {len(snapshot.translations)} translations loaded ({snapshot.language}{vanilla_status})"

    def get_translation_stats(self) -> Dict[str, Any]:
        """번역 통계 반환"""
        snapshot = self._snapshot
        source_stats: Dict[str, int] = {}
        for entry in snapshot.translations.values():
            source_stats[entry.source] = source_stats.get(entry.source, 0) + 1

        return {
            'version': snapshot.version,
            'language': snapshot.language,
            'total_keys': len(snapshot.translations),
            'available_languages': list(snapshot.available_languages),
            'resource_packs': [pack.name for pack in snapshot.resource_packs],
            'vanilla_enabled': self.is_vanilla_enabled(),
            'vanilla_keys': sum(1 for entry in snapshot.translations.values() if is_vanilla_source(entry.source)),
            'source_stats': source_stats,
        }


# 전역 TranslationManager 인스턴스
_translation_manager: Optional[TranslationManager] = None


async def get_translation_manager(settings: Optional[Settings] = None) -> TranslationManager:
    """
    전역 TranslationManager 인스턴스 반환

    처음 호출될 때 설정을 읽어 관리자를 만들고 번역을 한 번 로드합니다.

    Args:
        settings: 엔진 설정 (기본값: 환경 변수에서 로드)

    Returns:
        TranslationManager: TranslationManager 인스턴스
    """
    global _translation_manager

    if _translation_manager is None:
        manager = TranslationManager.from_settings(settings or Settings.from_env())
        await manager.refresh()
        _translation_manager = manager

    return _translation_manager


async def close_translation_manager() -> None:
    """전역 TranslationManager 종료"""
    global _translation_manager

    if _translation_manager:
        _translation_manager = None
        logger.info("TranslationManager 종료 완료")
