"""
Command line entry point.

Usage:
    minefield
    minefield gui [--difficulty {easy,medium,hard}] [--seed N]
    minefield console [--difficulty ...] [--columns C --rows R --mines M]
"""
import argparse
import random
from typing import Optional

from minefield import BoardConfig, PRESETS, get_preset

from .console import ConsoleGame


def board_config(args: argparse.Namespace) -> Optional[BoardConfig]:
    """Build the requested board, or None to let the player choose."""
    custom = (args.columns, args.rows, args.mines)
    if any(value is not None for value in custom):
        base = get_preset(args.difficulty or "easy")
        return BoardConfig(
            width=args.columns if args.columns is not None else base.width,
            height=args.rows if args.rows is not None else base.height,
            num_mines=args.mines if args.mines is not None else base.num_mines,
        )
    if args.difficulty:
        return get_preset(args.difficulty)
    return None


def make_rng(args: argparse.Namespace) -> Optional[random.Random]:
    if args.seed is None:
        return None
    return random.Random(args.seed)


def gui(args: argparse.Namespace) -> None:
    """Open the game window."""
    from .app import run_gui

    run_gui(start=board_config(args), rng=make_rng(args))


def console(args: argparse.Namespace) -> None:
    """Play in the terminal."""
    config = board_config(args) or get_preset("easy")
    print(
        f"Board: {config.width}x{config.height} with {config.num_mines} mines "
        f"({100 * config.num_mines / config.total_cells:.1f}% density)"
    )
    ConsoleGame(config, rng=make_rng(args)).run()


def add_board_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--difficulty", choices=list(PRESETS), default=None,
        help="Start directly on a preset board",
    )
    parser.add_argument("--columns", type=int, default=None, help="Board width")
    parser.add_argument("--rows", type=int, default=None, help="Board height")
    parser.add_argument(
        "--mines", type=int, default=None,
        help="Number of mines (clamped to leave one safe cell)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for mine placement")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Minesweeper")
    subparsers = parser.add_subparsers(dest="command", help="Front end to run")

    gui_parser = subparsers.add_parser("gui", help="Play in a window (default)")
    add_board_options(gui_parser)

    console_parser = subparsers.add_parser("console", help="Play in the terminal")
    add_board_options(console_parser)

    parser.set_defaults(
        difficulty=None, columns=None, rows=None, mines=None, seed=None
    )
    return parser


def main(argv: Optional[list] = None) -> None:
    """Parse arguments and run the appropriate front end."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        if args.command == "console":
            console(args)
        else:
            gui(args)
    except ValueError as exc:
        parser.error(str(exc))
