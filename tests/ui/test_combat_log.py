"""
Tests for the console views of the combat core.
"""

from character.monster import MonsterTemplate
from combat.encounter_controller import EncounterController
from events.event_system import (
    AttackProgressEvent,
    DamageTakenEvent,
    MonsterDiedEvent,
)
from core.constants import ActorType
from ui.combat_log import CombatLog, status_text


def test_log_records_notable_events(bus, make_rng):
    log = CombatLog(echo=False)
    log.attach(bus)
    controller = EncounterController(events=bus, rng=make_rng())

    controller.start_combat([MonsterTemplate(name="Slime", health=10.0, attack_period=100.0)])
    controller.tick(1.5)

    text = "\n".join(log.lines)
    assert "Combat started against Slime" in text
    assert "Slime appears in slot 0" in text
    assert "Player hits slot 0 for 10.0" in text
    assert "Slime defeated" in text


def test_progress_events_are_not_logged():
    assert CombatLog.format_event(AttackProgressEvent(actor=ActorType.PLAYER, progress=0.5)) is None


def test_format_dodge_and_death():
    dodge = CombatLog.format_event(DamageTakenEvent(damage=0.0, was_dodged=True, slot_index=1))
    death = CombatLog.format_event(
        MonsterDiedEvent(slot_index=0, monster_name="Wolf", xp_awarded=12, gold_awarded=6)
    )

    assert "dodges" in dodge
    assert "+12 XP" in death
    assert "+6 gold" in death


def test_detach(bus):
    log = CombatLog(echo=False)
    log.attach(bus)
    log.detach(bus)

    bus.publish(MonsterDiedEvent(slot_index=0, monster_name="Wolf"))

    assert log.lines == []


def test_status_shows_every_combatant(bus, make_rng):
    controller = EncounterController(events=bus, rng=make_rng())
    controller.start_combat(
        [MonsterTemplate(name="Goblin", health=20.0)],
        mob_count=2,
    )

    text = status_text(controller)

    assert "Player" in text
    assert text.count("Goblin") == 2
    assert "100/100" in text
