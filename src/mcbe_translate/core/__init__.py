"""
번역 엔진 핵심 모듈
"""

from .event_bus import Event, EventBus, EventType
from .translation_manager import (
    TranslationManager,
    TranslationSnapshot,
    get_translation_manager,
    close_translation_manager,
)

__all__ = [
    'Event',
    'EventBus',
    'EventType',
    'TranslationManager',
    'TranslationSnapshot',
    'get_translation_manager',
    'close_translation_manager',
]
