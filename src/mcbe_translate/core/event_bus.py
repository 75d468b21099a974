# -*- coding: utf-8 -*-
"""이벤트 버스 시스템"""

import asyncio
import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

logger = logging.getLogger(__name__)


class EventType(Enum):
    """이벤트 타입 정의"""
    # 번역 테이블 관련 이벤트
    TRANSLATIONS_CHANGED = "translations_changed"
    LANGUAGE_CHANGED = "language_changed"

    # 캐시 관련 이벤트
    VANILLA_CACHE_CLEARED = "vanilla_cache_cleared"


@dataclass
class Event:
    """이벤트 데이터 클래스"""
    event_type: EventType
    source: str  # 이벤트 발생원
    data: Dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=datetime.now)
    event_id: str = field(default_factory=lambda: str(uuid.uuid4()))


class EventBus:
    """이벤트 버스 - 이벤트 발행/구독 시스템"""

    def __init__(self, max_history: int = 100):
        """EventBus 초기화"""
        self._subscribers: Dict[EventType, List[Callable]] = {}
        self._event_history: List[Event] = []
        self._max_history: int = max_history

        logger.debug("EventBus 초기화 완료")

    def subscribe(self, event_type: EventType, callback: Callable[[Event], Any]) -> None:
        """
        이벤트 구독

        Args:
            event_type: 구독할 이벤트 타입
            callback: 이벤트 발생 시 호출될 콜백 함수 (동기 또는 코루틴 함수)
        """
        if event_type not in self._subscribers:
            self._subscribers[event_type] = []

        self._subscribers[event_type].append(callback)
        logger.debug(f"이벤트 구독 등록: {event_type.value} -> {getattr(callback, '__name__', callback)}")

    def unsubscribe(self, event_type: EventType, callback: Callable[[Event], Any]) -> bool:
        """
        이벤트 구독 해제

        Args:
            event_type: 구독 해제할 이벤트 타입
            callback: 제거할 콜백 함수

        Returns:
            bool: 구독 해제 성공 여부
        """
        if event_type in self._subscribers and callback in self._subscribers[event_type]:
            self._subscribers[event_type].remove(callback)
            logger.debug(f"이벤트 구독 해제: {event_type.value}")
            return True
        return False

    async def publish(self, event: Event) -> None:
        """
        이벤트 발행

        구독자들을 등록 순서대로 호출하며, 모든 구독자가 끝난 뒤 반환합니다.
        한 구독자의 오류는 다른 구독자 호출을 막지 않습니다.

        Args:
            event: 발행할 이벤트
        """
        self._add_to_history(event)

        subscribers = list(self._subscribers.get(event.event_type, []))
        if not subscribers:
            logger.debug(f"구독자가 없는 이벤트: {event.event_type.value}")
            return

        for callback in subscribers:
            try:
                result = callback(event)
                if asyncio.iscoroutine(result):
                    await result
            except Exception as e:
                logger.error(
                    f"이벤트 콜백 실행 중 오류 ({getattr(callback, '__name__', callback)}): {e}",
                    exc_info=True,
                )

        logger.debug(f"이벤트 처리 완료: {event.event_type.value} -> {len(subscribers)}개 구독자")

    def _add_to_history(self, event: Event) -> None:
        """이벤트를 히스토리에 추가"""
        self._event_history.append(event)

        # 히스토리 크기 제한
        if len(self._event_history) > self._max_history:
            self._event_history = self._event_history[-self._max_history:]

    def get_subscribers(self, event_type: EventType) -> List[Callable]:
        """특정 이벤트 타입의 구독자 목록 반환"""
        return self._subscribers.get(event_type, []).copy()

    def get_event_history(self, event_type: Optional[EventType] = None, limit: int = 100) -> List[Event]:
        """
        이벤트 히스토리 조회

        Args:
            event_type: 필터링할 이벤트 타입 (None이면 모든 타입)
            limit: 최대 반환 개수

        Returns:
            List[Event]: 이벤트 히스토리
        """
        history = self._event_history
        if event_type:
            history = [event for event in history if event.event_type == event_type]
        return history[-limit:] if limit > 0 else []

    def clear_history(self) -> None:
        """이벤트 히스토리 초기화"""
        self._event_history.clear()
