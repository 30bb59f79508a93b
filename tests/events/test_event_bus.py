"""
Tests for the combat event bus.
"""

from events.event_bus import EventBus
from events.event_system import (
    CombatEvent,
    EventType,
    MonsterDiedEvent,
    TargetChangedEvent,
)


def test_subscribers_receive_matching_events(bus: EventBus):
    received = []
    bus.subscribe(TargetChangedEvent, received.append)

    bus.publish(TargetChangedEvent(slot_index=1))
    bus.publish(MonsterDiedEvent(slot_index=0, monster_name="Slime"))

    assert len(received) == 1
    assert received[0].slot_index == 1
    assert received[0].event_type == EventType.TARGET_CHANGED
    assert bus.published_count == 2


def test_base_class_subscribers_receive_everything(bus: EventBus):
    received = []
    bus.subscribe(CombatEvent, received.append)

    bus.publish(TargetChangedEvent(slot_index=0))
    bus.publish(MonsterDiedEvent(slot_index=0, monster_name="Slime", xp_awarded=5))

    assert [type(e) for e in received] == [TargetChangedEvent, MonsterDiedEvent]


def test_subscribe_is_idempotent(bus: EventBus):
    received = []
    bus.subscribe(TargetChangedEvent, received.append)
    bus.subscribe(TargetChangedEvent, received.append)

    bus.publish(TargetChangedEvent(slot_index=2))

    assert len(received) == 1
    assert bus.subscriber_count(TargetChangedEvent) == 1


def test_unsubscribe(bus: EventBus):
    received = []
    bus.subscribe(TargetChangedEvent, received.append)
    bus.unsubscribe(TargetChangedEvent, received.append)
    bus.unsubscribe(MonsterDiedEvent, received.append)

    bus.publish(TargetChangedEvent(slot_index=2))

    assert received == []


def test_failing_handler_does_not_stop_delivery(bus: EventBus):
    received = []

    def broken(_event):
        raise RuntimeError("boom")

    bus.subscribe(TargetChangedEvent, broken)
    bus.subscribe(TargetChangedEvent, received.append)

    bus.publish(TargetChangedEvent(slot_index=0))

    assert len(received) == 1
