"""CLI entry point."""

from __future__ import annotations

import argparse
from typing import List, Optional

from . import config
from .config import RuleConfig
from .simulation import run_simulation


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Dorian emotion automaton")
    parser.add_argument("--steps", type=int, default=1000)
    parser.add_argument("--width", type=int, default=config.GRID_WIDTH)
    parser.add_argument("--height", type=int, default=config.GRID_HEIGHT)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--seed-radius", type=int, default=config.SEED_RADIUS)
    parser.add_argument("--max-age", type=int, default=config.MAX_AGE)
    parser.add_argument("--mutation-chance", type=float, default=config.MUTATION_CHANCE)
    parser.add_argument("--birth-probability", type=float, default=config.BIRTH_PROBABILITY)
    parser.add_argument(
        "--stats-every",
        type=int,
        default=config.STATS_EVERY_FRAMES // config.EVALUATE_EVERY_FRAMES,
        help="Sample stats every N generations",
    )
    parser.add_argument("--log-every", type=int, default=100)
    parser.add_argument("--csv", type=str, default=None, help="Write stats samples to CSV")
    parser.add_argument("--no-summary", action="store_true", help="Disable summary output")
    parser.add_argument("--render-every", type=int, default=0, help="Render every N generations")
    parser.add_argument("--render-path", type=str, default=None, help="Output path or dir for PPM frames")
    parser.add_argument("--render-ascii", action="store_true", help="Print ASCII map at render steps")
    parser.add_argument("--render-scale", type=int, default=4, help="PPM scale factor")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.width <= 0 or args.height <= 0:
        parser.error(f"grid size must be positive, got {args.width}x{args.height}")
    if args.seed_radius < 0:
        parser.error(f"--seed-radius must be non-negative, got {args.seed_radius}")
    try:
        rules = RuleConfig(
            max_age=args.max_age,
            mutation_chance=args.mutation_chance,
            birth_probability=args.birth_probability,
        )
    except ValueError as exc:
        raise SystemExit(f"error: {exc}") from exc

    run_simulation(
        steps=args.steps,
        width=args.width,
        height=args.height,
        seed=args.seed,
        seed_radius=args.seed_radius,
        rules=rules,
        stats_every=args.stats_every,
        log_every=args.log_every,
        csv_path=args.csv,
        summary=not args.no_summary,
        render_every=args.render_every,
        render_path=args.render_path,
        render_ascii_enabled=args.render_ascii,
        render_scale=args.render_scale,
    )


if __name__ == "__main__":
    main()
