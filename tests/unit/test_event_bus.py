"""
이벤트 버스 단위 테스트
"""

import pytest

from mcbe_translate.core import Event, EventBus, EventType


class TestEventBus:
    """EventBus 테스트"""

    @pytest.mark.asyncio
    async def test_sync_and_async_subscribers(self):
        """동기/비동기 콜백 모두 호출"""
        bus = EventBus()
        received = []

        def sync_callback(event):
            received.append(("sync", event.event_type))

        async def async_callback(event):
            received.append(("async", event.event_type))

        bus.subscribe(EventType.TRANSLATIONS_CHANGED, sync_callback)
        bus.subscribe(EventType.TRANSLATIONS_CHANGED, async_callback)

        await bus.publish(Event(EventType.TRANSLATIONS_CHANGED, source="test"))

        assert received == [
            ("sync", EventType.TRANSLATIONS_CHANGED),
            ("async", EventType.TRANSLATIONS_CHANGED),
        ]

    @pytest.mark.asyncio
    async def test_failing_subscriber_does_not_block_others(self):
        """한 구독자의 오류가 다른 구독자를 막지 않음"""
        bus = EventBus()
        received = []

        def broken(event):
            raise RuntimeError("boom")

        bus.subscribe(EventType.LANGUAGE_CHANGED, broken)
        bus.subscribe(EventType.LANGUAGE_CHANGED, received.append)

        await bus.publish(Event(EventType.LANGUAGE_CHANGED, source="test"))

        assert len(received) == 1

    @pytest.mark.asyncio
    async def test_unsubscribe(self):
        bus = EventBus()
        received = []
        bus.subscribe(EventType.TRANSLATIONS_CHANGED, received.append)

        assert bus.unsubscribe(EventType.TRANSLATIONS_CHANGED, received.append) is True
        assert bus.unsubscribe(EventType.TRANSLATIONS_CHANGED, received.append) is False

        await bus.publish(Event(EventType.TRANSLATIONS_CHANGED, source="test"))

        assert received == []
        assert bus.get_subscribers(EventType.TRANSLATIONS_CHANGED) == []

    @pytest.mark.asyncio
    async def test_history_is_bounded(self):
        """히스토리는 최대 개수까지만 보관"""
        bus = EventBus(max_history=2)

        for _ in range(3):
            await bus.publish(Event(EventType.TRANSLATIONS_CHANGED, source="test"))
        await bus.publish(Event(EventType.VANILLA_CACHE_CLEARED, source="test"))

        assert len(bus.get_event_history()) == 2
        assert len(bus.get_event_history(EventType.VANILLA_CACHE_CLEARED)) == 1

        bus.clear_history()
        assert bus.get_event_history() == []
