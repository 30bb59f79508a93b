"""
Main entry point for the Idle Auto-Battle Simulator.

This script loads the item and monster content and the combat configuration,
wires headless progression and inventory services, then runs an auto-battle
with a fixed simulation step and prints what happens.

The demo supports:
- Choosing the monster pool and the number of simultaneous monsters
- Seeding the random source for reproducible runs
- Automatically resuming after a defeat, a limited number of times
- A final report of the progression and the inventory
"""

import argparse
import logging
import random
from pathlib import Path

from character.character_stats import EquipmentBonuses
from combat.encounter_controller import EncounterController
from core.config import load_config
from core.constants import CombatPhase
from core.content import ContentRepository
from core.logging import setup_logging
from core.utils import cprint, crule
from events.event_bus import EventBus
from events.event_system import MonsterDiedEvent
from services.memory import FixedEquipmentStats, InMemoryInventory, InMemoryProgression
from services.registry import ServiceRegistry
from ui.combat_log import CombatLog, print_status

# Get the path to the data folder.
data_dir = (Path(__file__).parent / ".." / "data").resolve()


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run a headless idle auto-battle.")
    parser.add_argument("--data-dir", type=Path, default=data_dir)
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Combat configuration file (defaults to <data-dir>/combat.json).",
    )
    parser.add_argument(
        "--monster",
        action="append",
        dest="monsters",
        help="Monster to include in the pool; repeat for several. Defaults to all.",
    )
    parser.add_argument("--mob-count", type=int, default=None)
    parser.add_argument("--duration", type=float, default=60.0, help="Simulated seconds.")
    parser.add_argument("--dt", type=float, default=0.1, help="Simulation step, in seconds.")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--max-resumes", type=int, default=3)
    parser.add_argument("--status-every", type=float, default=10.0)
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    args = parser.parse_args(argv)
    if not args.data_dir.is_dir():
        parser.error(f"data folder not found: {args.data_dir} (pass --data-dir)")
    return args


def run(args: argparse.Namespace) -> EncounterController:
    """
    Runs the auto-battle described by the command line arguments.

    Args:
        args (argparse.Namespace): The parsed arguments.

    Returns:
        EncounterController: The controller, after the combat ended.

    """
    crule("Initialize Data", style="bold green")
    repo = ContentRepository(args.data_dir)
    config = load_config(args.config or args.data_dir / "combat.json")
    pool = repo.get_monster_pool(args.monsters)

    events = EventBus()
    log = CombatLog()
    log.attach(events)

    progression = InMemoryProgression()
    inventory = InMemoryInventory()
    controller = EncounterController(
        progression=progression,
        inventory=inventory,
        equipment=FixedEquipmentStats(EquipmentBonuses(critical_chance=0.1, armor=0.05)),
        registry=ServiceRegistry(),
        events=events,
        config=config,
        rng=random.Random(args.seed),
    )

    # Level-ups raise the max health.
    events.subscribe(MonsterDiedEvent, lambda _: controller.refresh_player_stats())

    crule(":crossed_swords:  Combat Started", style="bold green")
    if not controller.start_combat(pool, args.mob_count):
        cprint("No monster to fight.", style="bold red")
        return controller

    elapsed = 0.0
    next_status = args.status_every
    resumes = 0
    try:
        while elapsed < args.duration:
            controller.tick(args.dt)
            elapsed += args.dt
            if controller.phase == CombatPhase.DEFEAT:
                print_status(controller)
                if resumes >= args.max_resumes:
                    break
                resumes += 1
                controller.resume_after_defeat()
            if args.status_every > 0 and elapsed >= next_status:
                print_status(controller)
                next_status += args.status_every
    except KeyboardInterrupt:
        cprint("")
        crule(":crossed_swords:  Combat Interrupted", style="bold red")
    finally:
        controller.end_combat()

    crule(":crossed_swords:  Combat Finished", style="bold green")
    cprint(
        f"Level {progression.level}, {progression.experience}/"
        f"{progression.xp_required_for_next_level()} XP, {progression.gold} gold",
        style="bold yellow",
    )
    for item in inventory.slots:
        if item is not None:
            cprint(f"  {item}", style="cyan")
    return controller


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)
    run(args)


if __name__ == "__main__":
    main()
