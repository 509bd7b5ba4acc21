"""Shared test doubles."""

from __future__ import annotations

from typing import List, Sequence


class ScriptedRandom:
    """Stand-in for ``random.Random`` that replays fixed draws.

    ``values`` feed :meth:`random`, ``picks`` are indices used by :meth:`choice`.
    Running out of either raises ``IndexError``, which makes unexpected draws
    visible in tests.
    """

    def __init__(self, values: Sequence[float] = (), picks: Sequence[int] = ()) -> None:
        self.values: List[float] = list(values)
        self.picks: List[int] = list(picks)

    def random(self) -> float:
        return self.values.pop(0)

    def choice(self, seq):
        return seq[self.picks.pop(0)]

    def exhausted(self) -> bool:
        return not self.values and not self.picks


class RecordingSink:
    def __init__(self) -> None:
        self.calls = []

    def clear(self, color) -> None:
        self.calls.append(("clear", color))

    def fill_rects(self, color, rects) -> None:
        self.calls.append(("fill", color, list(rects)))
