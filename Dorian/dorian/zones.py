"""Terrain zones: grid partition and per-zone decay modulation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, FrozenSet, Mapping

from . import config
from .emotions import EmotionKind

Partition = Callable[[int, int, int, int], str]


@dataclass(frozen=True)
class Zone:
    name: str
    decay_modifier: float
    boost: FrozenSet[EmotionKind] = field(default_factory=frozenset)
    suppress: FrozenSet[EmotionKind] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        if self.decay_modifier <= 0.0:
            raise ValueError(f"zone {self.name!r}: decay_modifier must be positive, got {self.decay_modifier}")
        object.__setattr__(self, "boost", frozenset(EmotionKind(k) for k in self.boost))
        object.__setattr__(self, "suppress", frozenset(EmotionKind(k) for k in self.suppress))


def midline_partition(x: int, y: int, width: int, height: int) -> str:
    """Top half is sanctuary, bottom half is conflict."""
    return config.ZONE_SANCTUARY if y < height / 2 else config.ZONE_CONFLICT


DEFAULT_ZONES: Dict[str, Zone] = {
    config.ZONE_SANCTUARY: Zone(
        config.ZONE_SANCTUARY,
        decay_modifier=0.8,
        boost=frozenset({EmotionKind.LOVE, EmotionKind.HOPE}),
        suppress=frozenset({EmotionKind.FEAR, EmotionKind.ANGER}),
    ),
    config.ZONE_CONFLICT: Zone(
        config.ZONE_CONFLICT,
        decay_modifier=1.2,
        boost=frozenset({EmotionKind.FEAR, EmotionKind.ANGER}),
        suppress=frozenset({EmotionKind.CALM, EmotionKind.HOPE}),
    ),
}


class ZoneMap:
    def __init__(
        self,
        partition: Partition = midline_partition,
        zones: Mapping[str, Zone] | None = None,
    ) -> None:
        zones = DEFAULT_ZONES if zones is None else zones
        if not zones:
            raise ValueError("zone table must not be empty")
        for name, zone in zones.items():
            if zone.name != name:
                raise ValueError(f"zone table key {name!r} does not match zone name {zone.name!r}")
        self.partition = partition
        self.zones: Dict[str, Zone] = dict(zones)

    def zone_of(self, x: int, y: int, width: int, height: int) -> Zone:
        return self.zones[self.partition(x, y, width, height)]

    def zone_named(self, name: str) -> Zone:
        return self.zones[name]

    def decay_modifier(self, zone: Zone | str) -> float:
        return self._resolve(zone).decay_modifier

    def boost_set(self, zone: Zone | str) -> FrozenSet[EmotionKind]:
        return self._resolve(zone).boost

    def suppress_set(self, zone: Zone | str) -> FrozenSet[EmotionKind]:
        return self._resolve(zone).suppress

    def validate(self, width: int, height: int) -> None:
        """Check that the partition maps every coordinate onto a known zone."""
        unknown = set()
        for y in range(height):
            for x in range(width):
                name = self.partition(x, y, width, height)
                if name not in self.zones:
                    unknown.add(name)
        if unknown:
            raise ValueError(f"partition yields zones missing from the table: {sorted(map(str, unknown))}")

    def _resolve(self, zone: Zone | str) -> Zone:
        if isinstance(zone, Zone):
            return zone
        return self.zones[zone]
