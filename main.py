#!/usr/bin/env python3
"""
Minefield - Main entry point.

Usage:
    python main.py daily [--date YYYY-MM-DD | --seed SEED] [--show]
    python main.py compare [--difficulty NAME] [--games N]
    python main.py strategy [--difficulty NAME]
"""
import argparse
import datetime
import logging
import random

from minefield import (
    BoardConfig,
    DailyPuzzleConfig,
    Difficulty,
    DIFFICULTY_CONFIGS,
    generate_daily,
    select_strategy,
)
from minefield.diagnostics import LayoutComparer
from minefield.grid import render_text
from minefield.strategies import STRATEGIES


def resolve_config(args: argparse.Namespace) -> BoardConfig:
    """Board config from --difficulty, overridden by explicit dimensions."""
    preset = DIFFICULTY_CONFIGS[Difficulty(args.difficulty)]
    return BoardConfig(
        width=args.width or preset.width,
        height=args.height or preset.height,
        num_mines=args.mines or preset.num_mines,
    )


def daily(args: argparse.Namespace) -> None:
    """Print the deterministic board for a seed or date."""
    if args.seed:
        puzzle = DailyPuzzleConfig(
            seed=args.seed,
            width=args.width or 16,
            height=args.height or 16,
            num_mines=args.mines or 40,
        )
    else:
        date = (
            datetime.date.fromisoformat(args.date)
            if args.date
            else datetime.date.today()
        )
        puzzle = DailyPuzzleConfig.for_date(date)

    board = generate_daily(puzzle)
    print(f"Seed: {puzzle.seed}")
    print(f"Board: {puzzle.width}x{puzzle.height} with {puzzle.num_mines} mines")
    print(render_text(board, show_mines=args.show))


def compare(args: argparse.Namespace) -> None:
    """Compare uniform placement against the scored strategies."""
    config = resolve_config(args)
    comparer = LayoutComparer(config, runs=args.games, rng=random.Random(args.seed))

    strategies = {"scored": None}
    for name in args.strategy or []:
        strategies[name] = STRATEGIES[name]()
    report = comparer.compare(strategies)

    print("\n" + "=" * 60)
    print(f"Layout Comparison ({config.width}x{config.height}, {config.num_mines} mines)")
    print("=" * 60)
    print(f"{'Strategy':<26} {'Score':>10} {'50/50 cells':>12} {'Improvement':>10}")
    print("-" * 60)

    rows = [(report.baseline, None)] + [
        (summary, report.improvement(name))
        for name, summary in report.candidates.items()
    ]
    for summary, improvement in rows:
        gain = "" if improvement is None else f"{improvement:.1%}"
        print(
            f"{summary.name:<26} {summary.mean_score:>10.1f} "
            f"{summary.mean_fifty_fifty:>12.1f} {gain:>10}"
        )


def strategy(args: argparse.Namespace) -> None:
    """Show which strategy advanced placement would use."""
    config = resolve_config(args)
    chosen = select_strategy(config.width, config.height, config.density)
    print(
        f"{config.width}x{config.height}, {config.num_mines} mines "
        f"({config.density:.1%} density): {chosen.name} "
        f"(up to {chosen.max_attempts(config)} attempts)"
    )


def add_board_arguments(parser: argparse.ArgumentParser) -> None:
    """Add the shared board-size options to a subcommand."""
    parser.add_argument(
        "--difficulty",
        choices=[d.value for d in DIFFICULTY_CONFIGS],
        default=Difficulty.BEGINNER.value,
        help="Preset board size",
    )
    parser.add_argument("--width", type=int, default=None, help="Override columns")
    parser.add_argument("--height", type=int, default=None, help="Override rows")
    parser.add_argument("--mines", type=int, default=None, help="Override mine count")


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="Minefield - mine placement and daily puzzle tools"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Log placement details"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Daily puzzle command
    daily_parser = subparsers.add_parser("daily", help="Print a daily puzzle board")
    daily_parser.add_argument("--date", default=None, help="Date as YYYY-MM-DD")
    daily_parser.add_argument("--seed", default=None, help="Explicit seed string")
    daily_parser.add_argument("--width", type=int, default=None, help="Columns")
    daily_parser.add_argument("--height", type=int, default=None, help="Rows")
    daily_parser.add_argument("--mines", type=int, default=None, help="Mine count")
    daily_parser.add_argument(
        "--show", action="store_true", help="Show mines and numbers"
    )

    # Compare command
    compare_parser = subparsers.add_parser(
        "compare", help="Compare placement strategies"
    )
    add_board_arguments(compare_parser)
    compare_parser.add_argument(
        "--games", type=int, default=20, help="Layouts per strategy"
    )
    compare_parser.add_argument(
        "--strategy",
        action="append",
        choices=sorted(STRATEGIES),
        help="Extra strategy to compare (repeatable)",
    )
    compare_parser.add_argument(
        "--seed", type=int, default=None, help="Random seed for reproducibility"
    )

    # Strategy command
    strategy_parser = subparsers.add_parser(
        "strategy", help="Show the strategy picked for a board"
    )
    add_board_arguments(strategy_parser)

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    if args.command == "daily":
        daily(args)
    elif args.command == "compare":
        compare(args)
    elif args.command == "strategy":
        strategy(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
