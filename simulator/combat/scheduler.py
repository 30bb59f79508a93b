"""
Scheduler module for the simulator.

One-shot timers advanced by the same tick that drives combat, so delayed
actions (the monster respawn) run inside the simulation step instead of on a
separate thread.
"""

import heapq
import itertools
from collections.abc import Callable
from dataclasses import dataclass, field

from catchery import log_debug


@dataclass(order=True)
class ScheduledAction:
    """A callback due at a given simulation time."""

    due: float
    sequence: int
    name: str = field(compare=False)
    callback: Callable[[], None] = field(compare=False)
    cancelled: bool = field(default=False, compare=False)


class TickScheduler:
    """Runs callbacks once their delay has elapsed in simulation time."""

    def __init__(self) -> None:
        self.now: float = 0.0
        self._queue: list[ScheduledAction] = []
        self._sequence = itertools.count()

    def schedule(self, delay: float, callback: Callable[[], None], name: str = "") -> ScheduledAction:
        """
        Schedules a callback after `delay` seconds of simulation time.

        Args:
            delay (float): Seconds from now.
            callback (Callable[[], None]): The action to run.
            name (str): Label used in logs.

        Returns:
            ScheduledAction: The handle, usable with `cancel`.

        """
        action = ScheduledAction(
            due=self.now + max(0.0, delay),
            sequence=next(self._sequence),
            name=name,
            callback=callback,
        )
        heapq.heappush(self._queue, action)
        log_debug(f"Scheduled {name or 'action'}", {"due": action.due, "now": self.now})
        return action

    def cancel(self, action: ScheduledAction) -> None:
        action.cancelled = True

    def cancel_all(self) -> None:
        for action in self._queue:
            action.cancelled = True
        self._queue.clear()

    def advance(self, dt: float) -> int:
        """
        Advances the clock and runs every action that became due, in due order.

        Args:
            dt (float): Elapsed seconds.

        Returns:
            int: The number of actions run.

        """
        self.now += dt
        ran = 0
        while self._queue and self._queue[0].due <= self.now:
            action = heapq.heappop(self._queue)
            if action.cancelled:
                continue
            action.callback()
            ran += 1
        return ran

    def pending(self) -> int:
        return sum(1 for action in self._queue if not action.cancelled)
