"""Cell model and the per-generation transition rule."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple
import random

from .config import RuleConfig
from .emotions import EmotionKind
from .zones import Zone


@dataclass
class Cell:
    x: int
    y: int
    emotion: EmotionKind
    alive: bool = False
    intensity: float = 0.5
    age: int = 0
    energy: float = 10.0
    memory: List[EmotionKind] = field(default_factory=list)

    def state(self) -> CellState:
        return CellState(
            alive=self.alive,
            emotion=self.emotion,
            intensity=self.intensity,
            age=self.age,
            energy=self.energy,
            memory=tuple(self.memory),
        )

    def apply(self, state: CellState) -> None:
        self.alive = state.alive
        self.emotion = state.emotion
        self.intensity = state.intensity
        self.age = state.age
        self.energy = state.energy
        self.memory = list(state.memory)

    def revive(self, emotion: EmotionKind, rules: RuleConfig) -> None:
        """Force the cell alive with birth values; used by seeding."""
        self.alive = True
        self.emotion = emotion
        self.intensity = rules.birth_intensity
        self.energy = rules.birth_energy
        self.age = 0

    def clear(self, rules: RuleConfig) -> None:
        self.alive = False
        self.intensity = rules.fresh_intensity
        self.energy = rules.fresh_energy
        self.age = 0
        self.memory = []


@dataclass(frozen=True)
class CellState:
    alive: bool
    emotion: EmotionKind
    intensity: float
    age: int
    energy: float
    memory: Tuple[EmotionKind, ...] = ()


def remember(memory: Sequence[EmotionKind], emotion: EmotionKind, length: int) -> Tuple[EmotionKind, ...]:
    return (tuple(memory) + (emotion,))[-length:]


def decay_rate(emotion: EmotionKind, zone: Zone, rules: RuleConfig) -> float:
    decay = rules.decay_base * zone.decay_modifier
    # Both multipliers apply when a kind sits in both sets.
    if emotion in zone.suppress:
        decay *= rules.suppress_multiplier
    if emotion in zone.boost:
        decay *= rules.boost_multiplier
    return decay


def transition(
    cell: CellState,
    live_neighbors: Sequence[EmotionKind],
    zone: Zone,
    rules: RuleConfig,
    kinds: Sequence[EmotionKind],
    rng: random.Random,
) -> Optional[CellState]:
    """Next state of one cell, or ``None`` when a dead cell stays untouched.

    ``live_neighbors`` holds the emotions of the neighbors that were alive at
    the start of the generation, in neighbor order. Randomness is drawn only
    when the live count falls inside the birth range: birth draw, donor pick,
    mutation draw, then the mutated kind.
    """
    if not cell.alive:
        count = len(live_neighbors)
        if not rules.birth_min_neighbors <= count <= rules.birth_max_neighbors:
            return None
        if rng.random() >= rules.birth_probability:
            return None
        emotion = rng.choice(live_neighbors)
        if rng.random() < rules.mutation_chance:
            emotion = rng.choice(kinds)
        return CellState(
            alive=True,
            emotion=emotion,
            intensity=rules.birth_intensity,
            age=0,
            energy=rules.birth_energy,
            memory=cell.memory,
        )

    age = cell.age + 1
    intensity = max(rules.min_intensity, cell.intensity - decay_rate(cell.emotion, zone, rules))
    energy = cell.energy - rules.energy_depletion
    if age > rules.max_age or energy <= 0:
        return CellState(
            alive=False,
            emotion=cell.emotion,
            intensity=intensity,
            age=age,
            energy=energy,
            memory=remember(cell.memory, cell.emotion, rules.memory_length),
        )
    return CellState(
        alive=True,
        emotion=cell.emotion,
        intensity=intensity,
        age=age,
        energy=energy,
        memory=cell.memory,
    )
