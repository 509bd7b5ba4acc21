"""Rendering utilities: draw batches, frame sinks, ASCII and PPM output."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Protocol, Tuple
import math

import numpy as np

from . import config
from .emotions import RGB
from .grid import Grid

Rect = Tuple[float, float, float, float]

BACKGROUND: RGB = (0, 0, 0)
DEAD_CHAR = "."


def display_color(base: RGB, intensity: float, gain: float = config.COLOR_GAIN) -> RGB:
    fade = min(1.0, intensity * gain)
    r, g, b = (min(255, int(channel * fade)) for channel in base)
    return r, g, b


@dataclass
class DrawBatch:
    color: RGB
    rects: List[Rect] = field(default_factory=list)


class FrameSink(Protocol):
    def clear(self, color: RGB) -> None: ...

    def fill_rects(self, color: RGB, rects: List[Rect]) -> None: ...


def cell_size_for(grid: Grid, surface_width: float) -> float:
    return surface_width / grid.width


def draw_batches(grid: Grid, cell_size: float = 1.0) -> List[DrawBatch]:
    """Group alive cells by display color, one batch per color.

    Batches appear in the order their color is first met in a row-major scan.
    """
    batches: Dict[RGB, DrawBatch] = {}
    for cell in grid:
        if not cell.alive:
            continue
        color = display_color(grid.catalog.color_of(cell.emotion), cell.intensity)
        batch = batches.get(color)
        if batch is None:
            batch = batches[color] = DrawBatch(color)
        batch.rects.append((cell.x * cell_size, cell.y * cell_size, cell_size, cell_size))
    return list(batches.values())


def emit_frame(grid: Grid, sink: FrameSink, cell_size: float) -> int:
    """Clear the sink and paint every alive cell. Returns the batch count."""
    sink.clear(BACKGROUND)
    batches = draw_batches(grid, cell_size)
    for batch in batches:
        sink.fill_rects(batch.color, batch.rects)
    return len(batches)


class RasterSink:
    """Frame sink backed by an ``(height, width, 3)`` uint8 array."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.pixels = np.zeros((height, width, 3), dtype=np.uint8)

    def clear(self, color: RGB) -> None:
        self.pixels[:, :] = color

    def fill_rects(self, color: RGB, rects: List[Rect]) -> None:
        for x, y, w, h in rects:
            x0 = max(0, int(round(x)))
            y0 = max(0, int(round(y)))
            x1 = min(self.width, int(round(x + w)))
            y1 = min(self.height, int(round(y + h)))
            if x1 > x0 and y1 > y0:
                self.pixels[y0:y1, x0:x1] = color


def render_raster(grid: Grid, scale: int = 1) -> np.ndarray:
    scale = max(1, int(scale))
    sink = RasterSink(grid.width * scale, grid.height * scale)
    emit_frame(grid, sink, float(scale))
    return sink.pixels


def render_ascii(grid: Grid, max_width: int = 120, max_height: int = 60) -> str:
    scale_x = max(1, int(math.ceil(grid.width / max_width)))
    scale_y = max(1, int(math.ceil(grid.height / max_height)))
    out_width = int(math.ceil(grid.width / scale_x))
    out_height = int(math.ceil(grid.height / scale_y))

    lines = []
    for sy in range(out_height):
        row = []
        y = min(grid.height - 1, sy * scale_y)
        for sx in range(out_width):
            x = min(grid.width - 1, sx * scale_x)
            cell = grid.cells[y][x]
            row.append(grid.catalog.name_of(cell.emotion)[0] if cell.alive else DEAD_CHAR)
        lines.append("".join(row))
    return "\n".join(lines)


def render_ppm(grid: Grid, path: str, scale: int = 4) -> None:
    pixels = render_raster(grid, scale)
    img_h, img_w, _ = pixels.shape
    with open(path, "w", encoding="ascii") as handle:
        handle.write(f"P3\n{img_w} {img_h}\n255\n")
        for row in pixels:
            handle.write(" ".join(f"{r} {g} {b}" for r, g, b in row.tolist()) + "\n")
