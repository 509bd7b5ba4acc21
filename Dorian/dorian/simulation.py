"""Simulation drivers: frame-paced controller and headless runner."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Callable, Dict, List, Optional
import csv
import os
import random

from . import config
from .config import RuleConfig
from .grid import Grid, StepStats
from .renderer import FrameSink, emit_frame, render_ascii, render_ppm
from .stats import NO_EMOTION, Stats, emotion_counts, summarize

StatsListener = Callable[[Stats], None]


def evaluation_interval(speed: int, evaluate_every: int = config.EVALUATE_EVERY_FRAMES) -> int:
    """Frames between evaluations at a given speed; the default speed keeps ``evaluate_every``."""
    speed = min(config.MAX_SPEED, max(config.MIN_SPEED, int(speed)))
    return max(1, round(evaluate_every * config.DEFAULT_SPEED / speed))


class SimulationController:
    """Frame-paced driver around a grid.

    Each call to :meth:`advance_frame` stands for one rendered frame. The grid
    is evaluated every ``evaluation_interval`` frames, the sink is repainted
    every frame, and stats are resampled once more than ``stats_every`` frames
    have passed since the last sample.
    """

    def __init__(
        self,
        grid: Grid,
        sink: Optional[FrameSink] = None,
        cell_size: float = 1.0,
        evaluate_every: int = config.EVALUATE_EVERY_FRAMES,
        stats_every: int = config.STATS_EVERY_FRAMES,
        speed: int = config.DEFAULT_SPEED,
    ) -> None:
        if evaluate_every < 1 or stats_every < 1:
            raise ValueError("evaluate_every and stats_every must be at least 1")
        self.grid = grid
        self.sink = sink
        self.cell_size = cell_size
        self.evaluate_every = evaluate_every
        self.stats_every = stats_every
        self.set_speed(speed)
        self.running = True
        self.frame_count = 0
        self.last_stats_frame = 0
        self.listeners: List[StatsListener] = []
        self.stats = summarize(grid)

    def add_listener(self, listener: StatsListener) -> None:
        self.listeners.append(listener)

    def set_speed(self, speed: int) -> None:
        self.speed = min(config.MAX_SPEED, max(config.MIN_SPEED, int(speed)))

    @property
    def interval(self) -> int:
        return evaluation_interval(self.speed, self.evaluate_every)

    def toggle(self) -> bool:
        self.running = not self.running
        return self.running

    def reset(self) -> Stats:
        self.grid.reset()
        return self.refresh_stats()

    def refresh_stats(self) -> Stats:
        self.stats = summarize(self.grid)
        self.last_stats_frame = self.frame_count
        for listener in self.listeners:
            listener(self.stats)
        return self.stats

    def advance_frame(self) -> Optional[StepStats]:
        if not self.running:
            return None
        step_stats = None
        if self.frame_count % self.interval == 0:
            step_stats = self.grid.step()
        if self.sink is not None:
            emit_frame(self.grid, self.sink, self.cell_size)
        self.frame_count += 1
        if self.frame_count - self.last_stats_frame > self.stats_every:
            self.refresh_stats()
        return step_stats


@dataclass
class SimulationSample:
    generation: int
    active_cells: int
    births: int
    deaths: int
    dominant_emotion: str
    counts: Dict[str, int] = field(default_factory=dict)


def _sample(grid: Grid, births: int, deaths: int) -> SimulationSample:
    stats = summarize(grid)
    return SimulationSample(
        generation=stats.generation,
        active_cells=stats.active_cells,
        births=births,
        deaths=deaths,
        dominant_emotion=stats.dominant_name,
        counts={grid.catalog.name_of(kind): count for kind, count in emotion_counts(grid).items()},
    )


def _flatten(sample: SimulationSample) -> Dict[str, object]:
    row = asdict(sample)
    counts = row.pop("counts")
    row.update({f"count_{name.lower()}": value for name, value in counts.items()})
    return row


def _write_csv(samples: List[SimulationSample], csv_path: str) -> None:
    if not samples:
        with open(csv_path, "w", newline="") as handle:
            handle.write("")
        return
    rows = [_flatten(sample) for sample in samples]
    fieldnames = list(rows[0].keys())
    with open(csv_path, "w", newline="") as handle:
        writer = csv.DictWriter(handle, fieldnames=fieldnames)
        writer.writeheader()
        for row in rows:
            writer.writerow(row)


def _summarize(samples: List[SimulationSample]) -> Dict[str, object]:
    if not samples:
        return {
            "generations": 0,
            "final_active": 0,
            "peak_active": 0,
            "avg_active": 0.0,
            "total_births": 0,
            "total_deaths": 0,
            "final_dominant": NO_EMOTION,
        }
    last = samples[-1]
    return {
        "generations": last.generation,
        "final_active": last.active_cells,
        "peak_active": max(s.active_cells for s in samples),
        "avg_active": sum(s.active_cells for s in samples) / len(samples),
        "total_births": sum(s.births for s in samples),
        "total_deaths": sum(s.deaths for s in samples),
        "final_dominant": last.dominant_emotion,
    }


def _print_summary(summary: Dict[str, object]) -> None:
    print("summary:")
    print(f"  generations={summary['generations']} final_active={summary['final_active']}")
    print(f"  total_births={summary['total_births']} total_deaths={summary['total_deaths']}")
    print(
        f"  peak_active={summary['peak_active']} avg_active={float(summary['avg_active']):.1f} "
        f"final_dominant={summary['final_dominant']}"
    )


def _resolve_render_path(base: str, generation: int) -> str:
    if "{generation}" in base:
        return base.format(generation=generation)
    if base.lower().endswith(".ppm"):
        return base
    return os.path.join(base, f"frame_{generation}.ppm")


def run_simulation(
    steps: int,
    width: int = config.GRID_WIDTH,
    height: int = config.GRID_HEIGHT,
    seed: Optional[int] = None,
    seed_radius: int = config.SEED_RADIUS,
    rules: Optional[RuleConfig] = None,
    stats_every: int = config.STATS_EVERY_FRAMES // config.EVALUATE_EVERY_FRAMES,
    log_every: int = 100,
    csv_path: Optional[str] = None,
    summary: bool = True,
    render_every: int = 0,
    render_path: Optional[str] = None,
    render_ascii_enabled: bool = False,
    render_scale: int = 4,
) -> List[SimulationSample]:
    """Step a freshly reset grid ``steps`` times and collect stats samples.

    A sample is taken after the reset and then every ``stats_every``
    generations (plus the last one); births and deaths are totals since the
    previous sample.
    """
    rng = random.Random(seed)
    grid = Grid(width, height, rng=rng, rules=rules, seed_radius=seed_radius)
    grid.reset()

    stats_every = max(1, stats_every)
    samples: List[SimulationSample] = [_sample(grid, births=0, deaths=0)]
    births = 0
    deaths = 0
    for _ in range(steps):
        step_stats = grid.step()
        births += step_stats.births
        deaths += step_stats.deaths
        generation = step_stats.generation
        if generation % stats_every == 0 or generation == steps:
            samples.append(_sample(grid, births, deaths))
            births = 0
            deaths = 0
        if log_every and generation % log_every == 0:
            current = summarize(grid)
            print(
                f"generation={generation} active={step_stats.active_cells} "
                f"births={step_stats.births} deaths={step_stats.deaths} "
                f"dominant={current.dominant_name}"
            )
        if render_every and generation % render_every == 0:
            if render_ascii_enabled:
                print(render_ascii(grid))
            if render_path:
                target = _resolve_render_path(render_path, generation)
                os.makedirs(os.path.dirname(target) or ".", exist_ok=True)
                render_ppm(grid, target, scale=render_scale)
    if csv_path:
        _write_csv(samples, csv_path)
    if summary:
        _print_summary(_summarize(samples))
    return samples
