"""Default rule constants and the injectable rule configuration."""

from __future__ import annotations

from dataclasses import dataclass

# Grid
GRID_WIDTH = 150
GRID_HEIGHT = 150
CANVAS_SIZE = 600

# Lifecycle
MAX_AGE = 800
MUTATION_CHANCE = 0.002
MIN_INTENSITY = 0.1
MEMORY_LENGTH = 3

# Birth
BIRTH_MIN_NEIGHBORS = 3
BIRTH_MAX_NEIGHBORS = 4
BIRTH_PROBABILITY = 0.25
BIRTH_INTENSITY = 1.0
BIRTH_ENERGY = 10.0

# Fresh (never-alive or reset) cells
FRESH_INTENSITY = 0.5
FRESH_ENERGY = 10.0

# Decay
DECAY_BASE = 0.01
ENERGY_DEPLETION = 0.2
SUPPRESS_MULTIPLIER = 1.5
BOOST_MULTIPLIER = 0.6

# Seeding
SEED_RADIUS = 2

# Display
COLOR_GAIN = 1.5

# Cadence (frames)
EVALUATE_EVERY_FRAMES = 4
STATS_EVERY_FRAMES = 60
DEFAULT_SPEED = 5
MIN_SPEED = 1
MAX_SPEED = 10

# Zones
ZONE_SANCTUARY = "sanctuary"
ZONE_CONFLICT = "conflict"


@dataclass(frozen=True)
class RuleConfig:
    max_age: int = MAX_AGE
    mutation_chance: float = MUTATION_CHANCE
    min_intensity: float = MIN_INTENSITY
    memory_length: int = MEMORY_LENGTH
    birth_min_neighbors: int = BIRTH_MIN_NEIGHBORS
    birth_max_neighbors: int = BIRTH_MAX_NEIGHBORS
    birth_probability: float = BIRTH_PROBABILITY
    birth_intensity: float = BIRTH_INTENSITY
    birth_energy: float = BIRTH_ENERGY
    fresh_intensity: float = FRESH_INTENSITY
    fresh_energy: float = FRESH_ENERGY
    decay_base: float = DECAY_BASE
    energy_depletion: float = ENERGY_DEPLETION
    suppress_multiplier: float = SUPPRESS_MULTIPLIER
    boost_multiplier: float = BOOST_MULTIPLIER

    def __post_init__(self) -> None:
        if self.max_age < 0:
            raise ValueError(f"max_age must be non-negative, got {self.max_age}")
        for name in ("mutation_chance", "birth_probability"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be within [0, 1], got {value}")
        if not 0.0 < self.min_intensity <= 1.0:
            raise ValueError(f"min_intensity must be within (0, 1], got {self.min_intensity}")
        if self.memory_length < 1:
            raise ValueError(f"memory_length must be at least 1, got {self.memory_length}")
        if not 1 <= self.birth_min_neighbors <= self.birth_max_neighbors <= 8:
            # A birth copies a live donor, so at least one live neighbor is required.
            raise ValueError(
                "birth neighbor range must satisfy 1 <= min <= max <= 8, "
                f"got [{self.birth_min_neighbors}, {self.birth_max_neighbors}]"
            )
        if self.decay_base < 0.0 or self.energy_depletion < 0.0:
            raise ValueError("decay_base and energy_depletion must be non-negative")
