"""Emotion kinds and the static catalog describing them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Dict, Mapping, Tuple

RGB = Tuple[int, int, int]


class InvalidEmotionKind(KeyError):
    """Raised when a catalog lookup uses an identifier outside the catalog."""


class EmotionKind(IntEnum):
    JOY = 0
    FEAR = 1
    ANGER = 2
    CALM = 3
    ENVY = 4
    LOVE = 5
    SADNESS = 6
    HOPE = 7
    CURIOSITY = 8
    PRIDE = 9


class Archetype(str, Enum):
    VITAL = "vital"
    SHADOW = "shadow"
    NEUTRAL = "neutral"
    EGO = "ego"
    HOPE = "hope"
    CURIOUS = "curious"


@dataclass(frozen=True)
class EmotionInfo:
    name: str
    color: RGB
    vector: Tuple[int, int]
    archetype: Archetype

    def __post_init__(self) -> None:
        if len(self.color) != 3 or any(not 0 <= c <= 255 for c in self.color):
            raise ValueError(f"{self.name}: color channels must be within 0-255, got {self.color}")
        if len(self.vector) != 2:
            raise ValueError(f"{self.name}: influence vector must be 2-D, got {self.vector}")


DEFAULT_EMOTIONS: Dict[EmotionKind, EmotionInfo] = {
    EmotionKind.JOY: EmotionInfo("Joy", (255, 230, 70), (1, -1), Archetype.VITAL),
    EmotionKind.FEAR: EmotionInfo("Fear", (90, 130, 255), (-1, 1), Archetype.SHADOW),
    EmotionKind.ANGER: EmotionInfo("Anger", (255, 60, 60), (1, 0), Archetype.SHADOW),
    EmotionKind.CALM: EmotionInfo("Calm", (100, 255, 180), (-1, 0), Archetype.NEUTRAL),
    EmotionKind.ENVY: EmotionInfo("Envy", (200, 100, 255), (0, -1), Archetype.EGO),
    EmotionKind.LOVE: EmotionInfo("Love", (255, 160, 210), (0, 1), Archetype.VITAL),
    EmotionKind.SADNESS: EmotionInfo("Sadness", (130, 150, 255), (-1, -1), Archetype.SHADOW),
    EmotionKind.HOPE: EmotionInfo("Hope", (100, 255, 200), (1, 1), Archetype.HOPE),
    EmotionKind.CURIOSITY: EmotionInfo("Curiosity", (255, 200, 120), (0, 0), Archetype.CURIOUS),
    EmotionKind.PRIDE: EmotionInfo("Pride", (255, 245, 100), (1, 0), Archetype.EGO),
}


class EmotionCatalog:
    """Read-only registry of emotion kinds.

    Iteration order is the ``EmotionKind`` order and is what the stats
    tie-break relies on, so it never changes for the lifetime of a catalog.
    """

    def __init__(self, entries: Mapping[EmotionKind, EmotionInfo] | None = None) -> None:
        entries = DEFAULT_EMOTIONS if entries is None else entries
        missing = [kind.name for kind in EmotionKind if kind not in entries]
        if missing:
            raise ValueError(f"catalog is missing entries for: {', '.join(missing)}")
        extra = [key for key in entries if not isinstance(key, EmotionKind)]
        if extra:
            raise ValueError(f"catalog keys must be EmotionKind members, got {extra!r}")
        self._entries: Dict[EmotionKind, EmotionInfo] = {kind: entries[kind] for kind in EmotionKind}
        self._kinds: Tuple[EmotionKind, ...] = tuple(self._entries)
        self._by_name: Dict[str, EmotionKind] = {
            info.name.lower(): kind for kind, info in self._entries.items()
        }

    def __len__(self) -> int:
        return len(self._kinds)

    def __iter__(self):
        return iter(self._kinds)

    def __contains__(self, kind: object) -> bool:
        return kind in self._entries

    def info(self, kind: EmotionKind | int) -> EmotionInfo:
        try:
            return self._entries[EmotionKind(kind)]
        except (ValueError, KeyError, TypeError):
            raise InvalidEmotionKind(kind) from None

    def color_of(self, kind: EmotionKind | int) -> RGB:
        return self.info(kind).color

    def archetype_of(self, kind: EmotionKind | int) -> Archetype:
        return self.info(kind).archetype

    def name_of(self, kind: EmotionKind | int) -> str:
        return self.info(kind).name

    def vector_of(self, kind: EmotionKind | int) -> Tuple[int, int]:
        return self.info(kind).vector

    def kind_named(self, name: str) -> EmotionKind:
        try:
            return self._by_name[name.lower()]
        except KeyError:
            raise InvalidEmotionKind(name) from None

    def all_kinds(self) -> Tuple[EmotionKind, ...]:
        return self._kinds
