"""Interactive viewer for the emotion grid (matplotlib)."""

from __future__ import annotations

import argparse
import random

try:
    import matplotlib.pyplot as plt
    from matplotlib.animation import FuncAnimation
except Exception as exc:  # pragma: no cover - optional dependency
    raise RuntimeError(
        "Viewer requires matplotlib. Install with: pip install matplotlib"
    ) from exc

from . import config
from .grid import Grid
from .renderer import RasterSink
from .simulation import SimulationController
from .stats import Stats


def _title(stats: Stats, controller: SimulationController) -> str:
    state = "" if controller.running else "  [paused]"
    return (
        f"Generation {controller.grid.generation}  Active {stats.active_cells}  "
        f"Dominant {stats.dominant_name}  Speed {controller.speed}{state}"
    )


def run_viewer(
    width: int = config.GRID_WIDTH,
    height: int = config.GRID_HEIGHT,
    canvas_size: int = config.CANVAS_SIZE,
    seed: int | None = None,
    interval_ms: int = 16,
    speed: int = config.DEFAULT_SPEED,
) -> None:
    rng = random.Random(seed)
    grid = Grid(width, height, rng=rng)
    cell_size = canvas_size / grid.width
    sink = RasterSink(canvas_size, int(round(cell_size * grid.height)))
    controller = SimulationController(grid, sink=sink, cell_size=cell_size, speed=speed)
    controller.reset()

    fig, ax = plt.subplots(figsize=(7, 7))
    fig.patch.set_facecolor("black")
    ax.set_axis_off()
    image = ax.imshow(sink.pixels, interpolation="nearest")
    title = ax.set_title(_title(controller.stats, controller), color="white")

    def on_stats(stats: Stats) -> None:
        title.set_text(_title(stats, controller))

    controller.add_listener(on_stats)

    def on_key(event) -> None:
        if event.key == " ":
            controller.toggle()
            on_stats(controller.stats)
        elif event.key == "r":
            controller.reset()
        elif event.key in ("+", "="):
            controller.set_speed(controller.speed + 1)
            on_stats(controller.stats)
        elif event.key in ("-", "_"):
            controller.set_speed(controller.speed - 1)
            on_stats(controller.stats)

    fig.canvas.mpl_connect("key_press_event", on_key)

    def update(_frame: int):
        controller.advance_frame()
        image.set_data(sink.pixels)
        return (image, title)

    # Hold a reference while the window is open.
    anim = FuncAnimation(fig, update, interval=interval_ms, blit=False, cache_frame_data=False)
    plt.show()


def main() -> None:
    parser = argparse.ArgumentParser(description="Dorian interactive viewer")
    parser.add_argument("--width", type=int, default=config.GRID_WIDTH)
    parser.add_argument("--height", type=int, default=config.GRID_HEIGHT)
    parser.add_argument("--canvas-size", type=int, default=config.CANVAS_SIZE)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--interval", type=int, default=16, help="Milliseconds between frames")
    parser.add_argument("--speed", type=int, default=config.DEFAULT_SPEED)
    args = parser.parse_args()

    run_viewer(
        width=args.width,
        height=args.height,
        canvas_size=args.canvas_size,
        seed=args.seed,
        interval_ms=args.interval,
        speed=args.speed,
    )


if __name__ == "__main__":
    main()
