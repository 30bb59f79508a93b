"""
Utilities module for the simulator.

Provides common utility functions and helpers, including console printing
with rich formatting, progress bars and the numeric helpers shared by the
combat formulas.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from rich.console import Console
from rich.rule import Rule

# Initialize the rich console.
_console = Console(markup=True, width=120, force_terminal=True, force_jupyter=False)


def cprint(*args: Any, **kwargs: Any) -> None:
    """
    Custom print function to handle colored output.

    Args:
        *args: Arguments to pass to the console print function.
        **kwargs: Keyword arguments to pass to the console print function.

    """
    _console.print(*args, **kwargs)


def crule(*args: Any, **kwargs: Any) -> None:
    """
    Custom print function to handle colored output with a rule.

    Args:
        *args: Arguments to pass to the Rule constructor.
        **kwargs: Keyword arguments to pass to the Rule constructor.

    """
    _console.print(Rule(*args, **kwargs))


def ccapture(content: Any) -> str:
    """
    Captures console output as a string.

    Args:
        content (Any): The content to capture.

    Returns:
        str: The captured output as a string.

    """
    with _console.capture() as capture:
        _console.print(content, markup=True, end="")
    return capture.get()


def clamp01(value: float) -> float:
    """Clamps a value to the [0, 1] range."""
    return max(0.0, min(1.0, value))


def round_half_away_from_zero(value: float | Decimal) -> int:
    """
    Rounds to the nearest integer, resolving ties away from zero.

    Floats are converted through their shortest string form, so that a value
    like `10 * 1.15` computed in decimal lands exactly on the tie.

    Args:
        value (float | Decimal): The value to round.

    Returns:
        int: The rounded value.

    """
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    # ROUND_HALF_UP on Decimal rounds ties away from zero for both signs.
    return int(value.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def scale_reward(base: int, bonus: float) -> int:
    """
    Applies a multiplicative bonus to a reward and rounds the result.

    Args:
        base (int): The base reward.
        bonus (float): The bonus fraction (0.15 means +15%).

    Returns:
        int: `round(base * (1 + bonus))`, ties away from zero.

    """
    return round_half_away_from_zero(
        Decimal(str(base)) * (Decimal(1) + Decimal(str(bonus)))
    )


def make_bar(current: float, maximum: float, length: int = 10, color: str = "white") -> str:
    """
    Creates a visual progress bar representation.

    Args:
        current (float): The current value.
        maximum (float): The maximum value.
        length (int): The length of the bar in characters. Defaults to 10.
        color (str): The color for the filled portion. Defaults to "white".

    Returns:
        str: A formatted progress bar string.

    """
    ratio = clamp01(current / maximum) if maximum > 0 else 0.0
    # Compute the filled part of the bar.
    filled = int(ratio * length)
    # Compute the empty part of the bar.
    empty = length - filled
    bar = f"[{color}]" + "▮" * filled
    if empty > 0:
        bar += "[dim white]" + "▯" * empty + "[/]"
    bar += "[/]"
    return bar
