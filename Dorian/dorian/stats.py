"""Grid-wide summary statistics."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from .emotions import EmotionKind
from .grid import Grid

NO_EMOTION = "none"


@dataclass
class Stats:
    generation: int
    active_cells: int
    dominant_emotion: Optional[EmotionKind]
    dominant_name: str


def emotion_counts(grid: Grid) -> Dict[EmotionKind, int]:
    counts = {kind: 0 for kind in grid.catalog.all_kinds()}
    for cell in grid:
        if cell.alive:
            counts[cell.emotion] += 1
    return counts


def summarize(grid: Grid) -> Stats:
    """Count alive cells and find the most common emotion among them.

    Ties go to the kind that comes first in catalog order.
    """
    counts = emotion_counts(grid)
    active = sum(counts.values())
    dominant: Optional[EmotionKind] = None
    best = 0
    for kind, count in counts.items():
        if count > best:
            dominant = kind
            best = count
    return Stats(
        generation=grid.generation,
        active_cells=active,
        dominant_emotion=dominant,
        dominant_name=grid.catalog.name_of(dominant) if dominant is not None else NO_EMOTION,
    )
