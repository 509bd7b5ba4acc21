"""Fixed-size emotion grid and the generation step."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple
import random

from . import config
from .cells import Cell, CellState, transition
from .config import RuleConfig
from .emotions import EmotionCatalog, EmotionKind
from .zones import Zone, ZoneMap


class InvalidGridSize(ValueError):
    """Raised when a grid is built with non-positive or non-integer dimensions."""


@dataclass
class StepStats:
    generation: int
    births: int
    deaths: int
    active_cells: int


class Grid:
    def __init__(
        self,
        width: int = config.GRID_WIDTH,
        height: int = config.GRID_HEIGHT,
        rng: Optional[random.Random] = None,
        rules: Optional[RuleConfig] = None,
        zone_map: Optional[ZoneMap] = None,
        catalog: Optional[EmotionCatalog] = None,
        seed_radius: int = config.SEED_RADIUS,
    ) -> None:
        for name, value in (("width", width), ("height", height)):
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise InvalidGridSize(f"grid {name} must be a positive integer, got {value!r}")
        if seed_radius < 0:
            raise ValueError(f"seed_radius must be non-negative, got {seed_radius}")
        self.width = width
        self.height = height
        self.rng = rng if rng is not None else random.Random()
        self.rules = rules if rules is not None else RuleConfig()
        self.zone_map = zone_map if zone_map is not None else ZoneMap()
        self.catalog = catalog if catalog is not None else EmotionCatalog()
        self.seed_radius = seed_radius
        self.kinds: Tuple[EmotionKind, ...] = self.catalog.all_kinds()
        self.generation = 0

        self.zone_map.validate(width, height)
        self.zones = self._generate_zones()
        self.cells: List[List[Cell]] = [
            [
                Cell(
                    x=x,
                    y=y,
                    emotion=self.rng.choice(self.kinds),
                    intensity=self.rules.fresh_intensity,
                    energy=self.rules.fresh_energy,
                )
                for x in range(width)
            ]
            for y in range(height)
        ]

    def _generate_zones(self) -> List[List[Zone]]:
        return [
            [self.zone_map.zone_of(x, y, self.width, self.height) for x in range(self.width)]
            for y in range(self.height)
        ]

    @property
    def center(self) -> Tuple[int, int]:
        return self.width // 2, self.height // 2

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cell_at(self, x: int, y: int) -> Cell:
        if not self.in_bounds(x, y):
            raise IndexError(f"({x}, {y}) is outside a {self.width}x{self.height} grid")
        return self.cells[y][x]

    def zone_at(self, x: int, y: int) -> Zone:
        return self.zones[y][x]

    def __iter__(self) -> Iterator[Cell]:
        for row in self.cells:
            yield from row

    def _neighbor_positions(self, x: int, y: int) -> List[Tuple[int, int]]:
        positions: List[Tuple[int, int]] = []
        for dy in (-1, 0, 1):
            for dx in (-1, 0, 1):
                if dx == 0 and dy == 0:
                    continue
                nx = x + dx
                ny = y + dy
                if 0 <= nx < self.width and 0 <= ny < self.height:
                    positions.append((nx, ny))
        return positions

    def neighbors_of(self, x: int, y: int) -> List[Cell]:
        if not self.in_bounds(x, y):
            raise IndexError(f"({x}, {y}) is outside a {self.width}x{self.height} grid")
        return [self.cells[ny][nx] for nx, ny in self._neighbor_positions(x, y)]

    def step(self, rng: Optional[random.Random] = None) -> StepStats:
        """Advance one generation.

        Neighbor reads go through a snapshot of ``alive``/``emotion`` taken
        before any cell changes, and new states are committed only after every
        cell has been evaluated, so no cell sees another's post-step value.
        """
        rng = rng if rng is not None else self.rng
        alive = [[cell.alive for cell in row] for row in self.cells]
        emotion = [[cell.emotion for cell in row] for row in self.cells]

        updates: List[Tuple[Cell, CellState]] = []
        births = 0
        deaths = 0
        active = 0
        for y in range(self.height):
            for x in range(self.width):
                cell = self.cells[y][x]
                if cell.alive:
                    active += 1
                    live: List[EmotionKind] = []
                else:
                    live = [emotion[ny][nx] for nx, ny in self._neighbor_positions(x, y) if alive[ny][nx]]
                new_state = transition(cell.state(), live, self.zones[y][x], self.rules, self.kinds, rng)
                if new_state is None:
                    continue
                if new_state.alive and not cell.alive:
                    births += 1
                elif cell.alive and not new_state.alive:
                    deaths += 1
                updates.append((cell, new_state))

        for cell, new_state in updates:
            cell.apply(new_state)
        self.generation += 1
        return StepStats(
            generation=self.generation,
            births=births,
            deaths=deaths,
            active_cells=active + births - deaths,
        )

    def seed(
        self,
        cx: int,
        cy: int,
        radius: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> int:
        """Force every cell within Chebyshev ``radius`` of the center alive.

        The square is clipped to the grid. Returns the number of seeded cells.
        """
        rng = rng if rng is not None else self.rng
        radius = self.seed_radius if radius is None else radius
        seeded = 0
        for y in range(max(0, cy - radius), min(self.height, cy + radius + 1)):
            for x in range(max(0, cx - radius), min(self.width, cx + radius + 1)):
                self.cells[y][x].revive(rng.choice(self.kinds), self.rules)
                seeded += 1
        return seeded

    def reset(self, rng: Optional[random.Random] = None) -> None:
        for cell in self:
            cell.clear(self.rules)
        self.generation = 0
        cx, cy = self.center
        self.seed(cx, cy, rng=rng)
