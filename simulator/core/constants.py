"""
Constants and enumerations for the simulator.

Defines the baseline combat values, the combat phases of an encounter, the
activity kinds reported to the activity tracker and the actor kinds used by
the combat events.
"""

from enum import Enum

# Baseline player values used when no progression service is available.
BASE_ATTACK_DAMAGE = 10.0
BASE_ATTACK_PERIOD = 1.5
DEFAULT_MAX_HEALTH = 100.0
BASE_CRIT_MULTIPLIER = 2.0

# Delay, in seconds, between the death of the last monster and the next group.
RESPAWN_DELAY = 0.5

# Bounds of the number of monsters fighting at the same time.
DEFAULT_MOB_COUNT = 1
MIN_MOB_COUNT = 1
MAX_MOB_COUNT = 3


class NiceEnum(Enum):
    """An enumeration that provides a nicer string representation."""

    def __str__(self) -> str:
        return self.name

    @property
    def display_name(self) -> str:
        return self.name.lower().capitalize()


class CombatPhase(NiceEnum):
    """Defines the phase of an encounter."""

    IDLE = "IDLE"
    FIGHTING = "FIGHTING"
    DEFEAT = "DEFEAT"

    @property
    def emoji(self) -> str:
        """Returns the emoji associated with this phase."""
        return {
            CombatPhase.IDLE: "💤",
            CombatPhase.FIGHTING: "⚔️",
            CombatPhase.DEFEAT: "💀",
        }.get(self, "❔")

    @property
    def color(self) -> str:
        """Returns the color string associated with this phase."""
        return {
            CombatPhase.IDLE: "dim white",
            CombatPhase.FIGHTING: "bold yellow",
            CombatPhase.DEFEAT: "bold red",
        }.get(self, "dim white")

    @property
    def colored_name(self) -> str:
        return self.colorize(self.display_name)

    def colorize(self, message: str) -> str:
        """Applies phase color formatting to a message."""
        return f"[{self.color}]{message}[/]"


class ActorType(NiceEnum):
    """Defines who performed or received an attack."""

    PLAYER = "PLAYER"
    MONSTER = "MONSTER"

    @property
    def emoji(self) -> str:
        """Returns the emoji associated with this actor type."""
        return {
            ActorType.PLAYER: "👤",
            ActorType.MONSTER: "👹",
        }.get(self, "❔")

    @property
    def color(self) -> str:
        """Returns the color string associated with this actor type."""
        return {
            ActorType.PLAYER: "bold blue",
            ActorType.MONSTER: "bold red",
        }.get(self, "dim white")

    def colorize(self, message: str) -> str:
        """Applies actor type color formatting to a message."""
        return f"[{self.color}]{message}[/]"


class ActivityType(NiceEnum):
    """Defines the activity reported to the away-activity tracker."""

    NONE = "NONE"
    FIGHTING = "FIGHTING"
