"""Index arithmetic over fixed, ordered catalogues."""

from __future__ import annotations

from typing import Sequence, TypeVar

T = TypeVar("T")


def step_index(index: int, count: int, step: int) -> int:
    """Move ``index`` by ``step`` positions, wrapping modulo ``count``."""
    if count <= 0:
        return 0
    return (index + step) % count


def cycle(options: Sequence[T], current: T, step: int = 1) -> T:
    """Return the option ``step`` places after ``current``, wrapping.

    A ``current`` value missing from ``options`` restarts at the first option.
    """
    if not options:
        raise ValueError("cannot cycle an empty catalogue")
    try:
        index = list(options).index(current)
    except ValueError:
        return options[0]
    return options[step_index(index, len(options), step)]
