"""
MCBE 번역 엔진

원격 바닐라 번역과 로컬 리소스 팩(.lang)을 병합하여 번역 키를 해석합니다.
"""

from .config import Config, Settings
from .core import (
    Event,
    EventBus,
    EventType,
    TranslationManager,
    TranslationSnapshot,
    get_translation_manager,
    close_translation_manager,
)
from .lang import TranslationEntry, TranslationTable, parse_lang_content, parse_lang_file, find_available_languages
from .packs import ResourcePackInfo, discover_resource_packs
from .vanilla import CacheStatus, LoadOutcome, VanillaCacheStore, VanillaTranslationProvider

__version__ = "0.1.0"

__all__ = [
    # 설정
    'Config',
    'Settings',

    # 관리자
    'TranslationManager',
    'TranslationSnapshot',
    'get_translation_manager',
    'close_translation_manager',
    'Event',
    'EventBus',
    'EventType',

    # 파서
    'TranslationEntry',
    'TranslationTable',
    'parse_lang_content',
    'parse_lang_file',
    'find_available_languages',

    # 리소스 팩
    'ResourcePackInfo',
    'discover_resource_packs',

    # 바닐라 번역
    'CacheStatus',
    'LoadOutcome',
    'VanillaCacheStore',
    'VanillaTranslationProvider',
]
