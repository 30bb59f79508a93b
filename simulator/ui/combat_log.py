"""
Combat log module for the simulator.

A console observer of the combat events: prints a line for every notable
event and renders the encounter status as a rich table.
"""

from rich.table import Table

from combat.encounter_controller import EncounterController
from core.constants import ActorType
from core.utils import ccapture, cprint, make_bar
from events.event_bus import EventBus
from events.event_system import (
    CombatEndedEvent,
    CombatEvent,
    CombatStartedEvent,
    DamageDealtEvent,
    DamageTakenEvent,
    InventoryFullEvent,
    ItemDroppedEvent,
    MonsterDiedEvent,
    MonsterSpawnedEvent,
    PhaseChangedEvent,
)


class CombatLog:
    """
    Prints the combat events worth reading.

    Attack progress and health updates are left to `render_status`, they
    fire far too often for a log.
    """

    def __init__(self, echo: bool = True) -> None:
        self.echo = echo
        self.lines: list[str] = []

    def attach(self, events: EventBus) -> None:
        events.subscribe(CombatEvent, self.on_event)

    def detach(self, events: EventBus) -> None:
        events.unsubscribe(CombatEvent, self.on_event)

    def on_event(self, event: CombatEvent) -> None:
        line = self.format_event(event)
        if line is None:
            return
        self.lines.append(line)
        if self.echo:
            cprint(line)

    @staticmethod
    def format_event(event: CombatEvent) -> str | None:
        """
        Formats an event as a rich markup line.

        Args:
            event (CombatEvent): The event to format.

        Returns:
            str | None: The line, or None for events that are not logged.

        """
        if isinstance(event, CombatStartedEvent):
            return (
                f"⚔️  Combat started against {', '.join(event.monster_pool)} "
                f"({event.mob_count} at a time)"
            )
        if isinstance(event, CombatEndedEvent):
            return f"🏁 Combat ended, {event.monsters_defeated} monsters defeated"
        if isinstance(event, PhaseChangedEvent):
            return f"{event.phase.emoji} Phase: {event.phase.colored_name}"
        if isinstance(event, MonsterSpawnedEvent):
            return ActorType.MONSTER.colorize(
                f"{ActorType.MONSTER.emoji} {event.monster_name} appears in slot {event.slot_index}"
            )
        if isinstance(event, MonsterDiedEvent):
            return (
                f"💀 {event.monster_name} defeated: "
                f"[yellow]+{event.xp_awarded} XP[/], [gold1]+{event.gold_awarded} gold[/]"
            )
        if isinstance(event, DamageDealtEvent):
            critical = " [bold magenta]CRITICAL![/]" if event.was_critical else ""
            return ActorType.PLAYER.colorize(
                f"{ActorType.PLAYER.emoji} Player hits slot {event.slot_index} "
                f"for {event.damage:.1f}"
            ) + critical
        if isinstance(event, DamageTakenEvent):
            if event.was_dodged:
                return f"💨 Player dodges the attack of slot {event.slot_index}"
            return ActorType.MONSTER.colorize(
                f"{ActorType.MONSTER.emoji} Slot {event.slot_index} hits the player "
                f"for {event.damage:.1f}"
            )
        if isinstance(event, ItemDroppedEvent):
            return f"🎁 Looted {event.quantity}x [cyan]{event.item_name}[/]"
        if isinstance(event, InventoryFullEvent):
            return f"🎒 [red]Inventory full[/], lost {event.items_lost}x {event.item_name}"
        return None


def render_status(controller: EncounterController) -> Table:
    """
    Renders the player and the monster slots with health and cadence bars.

    Args:
        controller (EncounterController): The controller to display.

    Returns:
        Table: A rich table, one row per combatant.

    """
    table = Table(title=f"{controller.phase.emoji} {controller.phase.colored_name}")
    table.add_column("", justify="center")
    table.add_column("Name", style="bold")
    table.add_column("Health")
    table.add_column("Attack")

    player = controller.player
    if player is not None:
        table.add_row(
            ActorType.PLAYER.emoji,
            ActorType.PLAYER.colorize("Player"),
            f"{make_bar(player.current_health, player.max_health, color='green')} "
            f"{player.current_health:.0f}/{player.max_health:.0f}",
            make_bar(player.attack_progress, 1.0, color="blue"),
        )
    for slot in controller.slots:
        marker = "🎯" if slot.slot_index == controller.target_index else ""
        name = slot.name if slot.is_alive() else f"[strike]{slot.name}[/]"
        table.add_row(
            marker,
            name,
            f"{make_bar(slot.current_health, slot.max_health, color='red')} "
            f"{slot.current_health:.0f}/{slot.max_health:.0f}",
            make_bar(slot.attack_progress, 1.0, color="yellow"),
        )
    return table


def print_status(controller: EncounterController) -> None:
    cprint(render_status(controller))


def status_text(controller: EncounterController) -> str:
    """Plain string rendering of `render_status`."""
    return ccapture(render_status(controller))
