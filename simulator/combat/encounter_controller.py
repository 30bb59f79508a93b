"""
Encounter controller module for the simulator.

Runs the auto-battle: spawns monster groups, advances the attack cadence of
every combatant on each tick, resolves attacks through the animation layer,
and handles deaths, rewards, defeat and respawns.
"""

import random
from collections.abc import Sequence

from catchery import log_debug, log_warning

from character.character_stats import BaseStats, ResolvedStats, resolve_stats
from character.combatant import CombatantState, MonsterSlot
from character.monster import MonsterTemplate
from combat import targeting
from combat.combat_math import (
    calculate_lifesteal,
    calculate_monster_damage,
    calculate_player_damage,
)
from combat.encounter_state import EncounterState
from combat.rewards import RewardDistributor
from combat.scheduler import ScheduledAction, TickScheduler
from core.config import CombatConfig
from core.constants import ActivityType, ActorType, CombatPhase
from core.logging import log_info
from events.event_bus import EventBus
from events.event_system import (
    AttackProgressEvent,
    CombatEndedEvent,
    CombatStartedEvent,
    DamageDealtEvent,
    DamageTakenEvent,
    MonsterDiedEvent,
    MonsterHealthChangedEvent,
    MonsterSpawnedEvent,
    PhaseChangedEvent,
    PlayerHealthChangedEvent,
    TargetChangedEvent,
)
from items.loot import DropResolver
from services.interfaces import (
    ActivityTracker,
    AnimationCollaborator,
    EquipmentStatsProvider,
    InventoryService,
    ProgressionService,
    TalentStatsProvider,
)
from services.registry import ServiceRegistry


class EncounterController:
    """
    Drives one auto-battle engagement.

    The controller owns the encounter state. It is advanced by `tick(dt)`,
    called once per simulation step, and talks to its collaborators through
    narrow request/callback contracts:

    - progression, inventory, equipment and talents are injected at
      construction; any of them may be missing.
    - the animation layer and the activity tracker are optional integrations
      looked up in the service registry whenever they are needed.

    Without an animation layer, attacks resolve synchronously inside the tick
    that triggered them.
    """

    def __init__(
        self,
        progression: ProgressionService | None = None,
        inventory: InventoryService | None = None,
        equipment: EquipmentStatsProvider | None = None,
        talents: TalentStatsProvider | None = None,
        registry: ServiceRegistry | None = None,
        events: EventBus | None = None,
        config: CombatConfig | None = None,
        rng: random.Random | None = None,
    ) -> None:
        """
        Initialize the controller with its collaborators.

        Args:
            progression (ProgressionService | None):
                Owner of the player's level, experience, gold and health.
            inventory (InventoryService | None):
                Receives dropped items.
            equipment (EquipmentStatsProvider | None):
                Equipment bonuses.
            talents (TalentStatsProvider | None):
                Talent bonuses.
            registry (ServiceRegistry | None):
                Lookup of the optional animation layer and activity tracker.
            events (EventBus | None):
                Bus the combat events are published on.
            config (CombatConfig | None):
                Tuning values.
            rng (random.Random | None):
                Source of every random draw of the encounter.

        """
        self.progression = progression
        self.inventory = inventory
        self.equipment = equipment
        self.talents = talents
        self.registry: ServiceRegistry = registry or ServiceRegistry()
        self.events: EventBus = events or EventBus()
        self.config: CombatConfig = config or CombatConfig()
        self.rng: random.Random = rng or random.Random()

        self.scheduler = TickScheduler()
        self.rewards = RewardDistributor(
            DropResolver(self.rng),
            self.events,
            progression=progression,
            inventory=inventory,
        )

        self.state: EncounterState | None = None
        self.stats: ResolvedStats | None = None
        self._respawn: ScheduledAction | None = None

    # ============================================================================
    # ACCESSORS
    # ============================================================================

    @property
    def phase(self) -> CombatPhase:
        return self.state.phase if self.state is not None else CombatPhase.IDLE

    @property
    def is_fighting(self) -> bool:
        return self.phase == CombatPhase.FIGHTING

    @property
    def player(self) -> CombatantState | None:
        return self.state.player if self.state is not None else None

    @property
    def slots(self) -> list[MonsterSlot]:
        return list(self.state.active_slots) if self.state is not None else []

    @property
    def target_index(self) -> int:
        return self.state.target_index if self.state is not None else 0

    @property
    def current_target(self) -> MonsterSlot | None:
        return self.state.current_target() if self.state is not None else None

    @property
    def resolved_stats(self) -> ResolvedStats | None:
        return self.stats

    @property
    def respawn_pending(self) -> bool:
        return self._respawn is not None and not self._respawn.cancelled

    # ============================================================================
    # LIFECYCLE
    # ============================================================================

    def start_combat(
        self,
        monster_pool: Sequence[MonsterTemplate],
        mob_count: int | None = None,
    ) -> bool:
        """
        Starts an encounter against monsters drawn from a pool.

        Every slot draws its monster independently, with replacement. Starting
        while an encounter is running replaces that encounter.

        Args:
            monster_pool (Sequence[MonsterTemplate]):
                The candidate monsters.
            mob_count (int | None):
                Monsters per group; None uses the configured default. The value
                is clamped to the configured bounds.

        Returns:
            bool: False if the pool is empty (nothing happens).

        """
        pool = tuple(monster_pool or ())
        if not pool:
            log_warning(
                "No monsters to fight, combat not started",
                {"mob_count": mob_count},
            )
            return False

        if self.state is not None:
            self.end_combat()

        mob_count = self.config.clamp_mob_count(mob_count)
        self.stats = self._resolve_player_stats()
        self.state = EncounterState(
            monster_pool=pool,
            player=self._build_player(self.stats),
            mob_count=mob_count,
        )
        self._spawn_group()
        self._change_phase(CombatPhase.FIGHTING)

        self.events.publish(
            CombatStartedEvent(
                monster_pool=[monster.name for monster in pool],
                mob_count=mob_count,
            )
        )
        self._publish_player_health()

        tracker = self.registry.get(ActivityTracker)
        if tracker is not None:
            tracker.start_activity(
                ActivityType.FIGHTING,
                monsters=[monster.name for monster in pool],
                mob_count=mob_count,
            )

        log_info(
            "Combat started",
            {
                "pool": [monster.name for monster in pool],
                "mob_count": mob_count,
                "health": f"{self.state.player.current_health:.1f}/{self.state.player.max_health:.1f}",
                "attack": f"{self.stats.attack_damage:.1f}",
            },
        )
        return True

    def resume_after_defeat(self) -> bool:
        """
        Resumes fighting after a defeat.

        The player is healed to full, stats are resolved again (a level-up may
        have happened) and a fresh group of the previous size is spawned.

        Returns:
            bool: False if the encounter is not in the DEFEAT phase.

        """
        if self.state is None or self.state.phase != CombatPhase.DEFEAT:
            return False

        if self.progression is not None:
            self.progression.heal_to_full()
        self.stats = self._resolve_player_stats()
        self.state.player = self._build_player(self.stats)
        self.state.player.current_health = self.state.player.max_health

        self._spawn_group()
        self._change_phase(CombatPhase.FIGHTING)
        self._publish_player_health()
        log_info("Combat resumed after defeat", {"mob_count": self.state.mob_count})
        return True

    def end_combat(self) -> None:
        """
        Ends the encounter from any phase and discards its state.

        Attacks still playing in the animation layer resolve as no-ops.
        """
        self.scheduler.cancel_all()
        self._respawn = None

        state = self.state
        if state is not None:
            defeated = state.monsters_defeated
            state.active_slots.clear()
            state.target_index = 0
            self._change_phase(CombatPhase.IDLE)
            self.state = None
            self.events.publish(CombatEndedEvent(monsters_defeated=defeated))
            log_info("Combat ended", {"monsters_defeated": defeated})

            tracker = self.registry.get(ActivityTracker)
            if tracker is not None:
                tracker.stop_activity()

    def refresh_player_stats(self) -> None:
        """
        Resolves the player's stats again after a level-up or a change of
        equipment or talents. Current health is kept, within the new maximum.

        Only applies while fighting; resuming after a defeat resolves the
        stats again anyway.
        """
        if not self.is_fighting:
            return
        self.stats = self._resolve_player_stats()
        player = self.state.player
        player.max_health = self.stats.max_health
        player.attack_damage = self.stats.attack_damage
        player.attack_period = self.stats.attack_period
        player.current_health = min(player.current_health, player.max_health)
        self._publish_player_health()

    # ============================================================================
    # TARGETING
    # ============================================================================

    def cycle_target(self) -> int:
        """Targets the next living monster. Returns the target index."""
        if not self.is_fighting:
            return self.target_index
        assert self.state is not None
        previous = self.state.target_index
        index = targeting.cycle_target(self.state)
        if index != previous:
            self.events.publish(TargetChangedEvent(slot_index=index))
        return index

    def set_target(self, index: int) -> bool:
        """Targets a specific slot; dead or unknown slots are ignored."""
        if not self.is_fighting:
            return False
        assert self.state is not None
        previous = self.state.target_index
        if not targeting.set_target(self.state, index):
            return False
        if index != previous:
            self.events.publish(TargetChangedEvent(slot_index=index))
        return True

    def get_slot_world_position(self, index: int) -> object | None:
        """Where the animation layer draws a slot, None when unknown."""
        animation = self.registry.get(AnimationCollaborator)
        if animation is None or self.state is None or self.state.slot_at(index) is None:
            return None
        return animation.get_slot_world_position(index)

    # ============================================================================
    # SIMULATION
    # ============================================================================

    def tick(self, dt: float) -> None:
        """
        Advances the encounter by `dt` seconds.

        Only a FIGHTING encounter moves. Scheduled actions (the respawn) run
        first, then the player's cadence, then each monster's.

        Args:
            dt (float): Elapsed seconds since the previous tick.

        """
        if not self.is_fighting:
            return
        self.scheduler.advance(dt)
        if self.is_fighting:
            self._update_player(dt)
        if self.is_fighting:
            self._update_monsters(dt)

    def _update_player(self, dt: float) -> None:
        assert self.state is not None
        player = self.state.player
        due = player.advance_timer(dt)
        self.events.publish(
            AttackProgressEvent(actor=ActorType.PLAYER, progress=player.attack_progress)
        )
        if not due:
            return
        # No living monster (respawn pending): the attack waits for a target.
        if not self._retarget():
            return
        # The cadence restarts on trigger, not when the hit lands.
        player.reset_timer()
        self._trigger_player_attack()

    def _update_monsters(self, dt: float) -> None:
        assert self.state is not None
        state = self.state
        animation = self.registry.get(AnimationCollaborator)
        for slot in list(state.active_slots):
            # A synchronous attack may have defeated the player.
            if self.state is not state or state.phase != CombatPhase.FIGHTING:
                return
            if slot.is_dead() or slot.pending_attack:
                continue
            if animation is not None and not animation.is_slot_in_range(slot.slot_index):
                continue
            due = slot.advance_timer(dt)
            self.events.publish(
                AttackProgressEvent(
                    actor=ActorType.MONSTER,
                    slot_index=slot.slot_index,
                    progress=slot.attack_progress,
                )
            )
            if due:
                slot.reset_timer()
                self._trigger_monster_attack(slot)

    # ============================================================================
    # PLAYER ATTACKS
    # ============================================================================

    def _trigger_player_attack(self) -> None:
        assert self.state is not None and self.stats is not None
        state = self.state
        group_id = state.group_id
        target_index = state.target_index
        damage, was_critical = calculate_player_damage(
            self.stats.attack_damage, self.stats, self.rng
        )
        log_debug(
            "Player attack triggered",
            {"target": target_index, "damage": damage, "critical": was_critical},
        )

        def on_hit(applied_damage: float, slot_index: int) -> None:
            self._on_player_hit(state, group_id, applied_damage, slot_index, was_critical)

        animation = self.registry.get(AnimationCollaborator)
        if animation is None:
            on_hit(damage, target_index)
        else:
            animation.request_player_attack(damage, target_index, on_hit)

    def _on_player_hit(
        self,
        state: EncounterState,
        group_id: int,
        applied_damage: float,
        slot_index: int,
        was_critical: bool,
    ) -> None:
        if not self._accepts_callback(state, group_id):
            log_debug("Ignoring stale player hit", {"slot": slot_index})
            return
        assert self.stats is not None
        slot = state.slot_at(slot_index)
        # Several player attacks can be in flight against the same monster.
        if slot is None or slot.is_dead():
            return

        if self.stats.lifesteal_fraction > 0:
            self._heal_player(calculate_lifesteal(applied_damage, self.stats.lifesteal_fraction))

        slot.adjust_health(-applied_damage)
        self.events.publish(
            DamageDealtEvent(
                damage=applied_damage,
                was_critical=was_critical,
                slot_index=slot_index,
            )
        )
        self.events.publish(
            MonsterHealthChangedEvent(
                slot_index=slot_index,
                current=slot.current_health,
                maximum=slot.max_health,
            )
        )
        if slot.is_dead():
            self._handle_monster_death(slot)

    # ============================================================================
    # MONSTER ATTACKS
    # ============================================================================

    def _trigger_monster_attack(self, slot: MonsterSlot) -> None:
        assert self.state is not None
        state = self.state
        group_id = state.group_id
        slot.pending_attack = True
        log_debug("Monster attack triggered", {"slot": slot.slot_index, "monster": slot.name})

        def on_complete() -> None:
            self._on_monster_attack_complete(state, group_id, slot)

        animation = self.registry.get(AnimationCollaborator)
        if animation is None:
            on_complete()
        else:
            animation.request_monster_attack(slot.slot_index, on_complete)

    def _on_monster_attack_complete(
        self,
        state: EncounterState,
        group_id: int,
        slot: MonsterSlot,
    ) -> None:
        if not self._accepts_callback(state, group_id):
            log_debug("Ignoring stale monster attack", {"slot": slot.slot_index})
            return
        slot.pending_attack = False
        assert self.stats is not None

        damage, was_dodged = calculate_monster_damage(slot.attack_damage, self.stats, self.rng)
        if not was_dodged:
            self._damage_player(damage)
        self.events.publish(
            DamageTakenEvent(damage=damage, was_dodged=was_dodged, slot_index=slot.slot_index)
        )

        if state.player.is_dead():
            self._change_phase(CombatPhase.DEFEAT)
            log_info(
                "Player defeated",
                {"monster": slot.name, "slot": slot.slot_index},
            )

    # ============================================================================
    # DEATHS AND SPAWNS
    # ============================================================================

    def _handle_monster_death(self, slot: MonsterSlot) -> None:
        assert self.state is not None and self.stats is not None
        state = self.state
        state.monsters_defeated += 1

        result = self.rewards.distribute(slot.template, self.stats)
        self.events.publish(
            MonsterDiedEvent(
                slot_index=slot.slot_index,
                monster_name=slot.name,
                xp_awarded=result.xp,
                gold_awarded=result.gold,
            )
        )
        log_debug(
            f"{slot.name} defeated",
            {
                "slot": slot.slot_index,
                "xp": result.xp,
                "gold": result.gold,
                "drops": [str(item) for item in result.items_added],
            },
        )

        if slot.slot_index == state.target_index:
            self._retarget()
        if state.all_monsters_dead():
            self._schedule_respawn()

    def _schedule_respawn(self) -> None:
        if self.respawn_pending:
            return
        self._respawn = self.scheduler.schedule(
            self.config.respawn_delay,
            self._respawn_group,
            name="respawn",
        )

    def _respawn_group(self) -> None:
        self._respawn = None
        if self.is_fighting:
            self._spawn_group()

    def _spawn_group(self) -> None:
        """Replaces every slot with a fresh monster and resets the cadences."""
        assert self.state is not None
        state = self.state
        if self._respawn is not None:
            self.scheduler.cancel(self._respawn)
            self._respawn = None

        state.group_id += 1
        state.active_slots = [
            MonsterSlot.spawn(self._draw_monster(state.monster_pool), index)
            for index in range(state.mob_count)
        ]
        state.target_index = 0
        state.player.reset_timer()

        for slot in state.active_slots:
            self.events.publish(
                MonsterSpawnedEvent(slot_index=slot.slot_index, monster_name=slot.name)
            )
            self.events.publish(
                MonsterHealthChangedEvent(
                    slot_index=slot.slot_index,
                    current=slot.current_health,
                    maximum=slot.max_health,
                )
            )
        self.events.publish(TargetChangedEvent(slot_index=state.target_index))

    def _draw_monster(self, pool: tuple[MonsterTemplate, ...]) -> MonsterTemplate:
        """Uniform draw, with replacement, consuming a single random value."""
        index = min(int(self.rng.random() * len(pool)), len(pool) - 1)
        return pool[index]

    # ============================================================================
    # HELPERS
    # ============================================================================

    def _accepts_callback(self, state: EncounterState, group_id: int) -> bool:
        """True if a callback issued for `state`/`group_id` may still mutate it."""
        return (
            self.state is state
            and state.phase == CombatPhase.FIGHTING
            and state.group_id == group_id
        )

    def _retarget(self) -> bool:
        assert self.state is not None
        previous = self.state.target_index
        if not targeting.ensure_valid_target(self.state):
            return False
        if self.state.target_index != previous:
            self.events.publish(TargetChangedEvent(slot_index=self.state.target_index))
        return True

    def _change_phase(self, phase: CombatPhase) -> None:
        assert self.state is not None
        previous = self.state.phase
        if previous == phase:
            return
        self.state.phase = phase
        self.events.publish(PhaseChangedEvent(previous=previous, phase=phase))
        log_debug(f"Combat phase {previous} -> {phase}", {"phase": str(phase)})

    def _resolve_player_stats(self) -> ResolvedStats:
        max_health = (
            self.progression.max_health
            if self.progression is not None
            else self.config.default_max_health
        )
        base = BaseStats(
            attack_damage=self.config.base_attack_damage,
            attack_period=self.config.base_attack_period,
            max_health=max_health,
            crit_damage_multiplier=self.config.base_crit_multiplier,
        )
        return resolve_stats(
            base,
            self.equipment.get_total_stats() if self.equipment is not None else None,
            self.talents.get_total_bonuses() if self.talents is not None else None,
        )

    def _build_player(self, stats: ResolvedStats) -> CombatantState:
        current = (
            self.progression.current_health
            if self.progression is not None
            else stats.max_health
        )
        return CombatantState(
            id="player",
            current_health=max(0.0, min(current, stats.max_health)),
            max_health=max(0.0, stats.max_health),
            attack_damage=stats.attack_damage,
            attack_period=stats.attack_period,
        )

    def _damage_player(self, amount: float) -> None:
        assert self.state is not None
        taken = -self.state.player.adjust_health(-amount)
        if taken <= 0:
            return
        if self.progression is not None:
            self.progression.take_damage(taken)
        self._publish_player_health(-taken)

    def _heal_player(self, amount: float) -> None:
        assert self.state is not None
        healed = self.state.player.adjust_health(amount)
        if healed <= 0:
            return
        if self.progression is not None:
            self.progression.heal(healed)
        self._publish_player_health(healed)

    def _publish_player_health(self, delta: float = 0.0) -> None:
        assert self.state is not None
        player = self.state.player
        self.events.publish(
            PlayerHealthChangedEvent(
                current=player.current_health,
                maximum=player.max_health,
                delta=delta,
            )
        )
