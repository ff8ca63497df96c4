#!/usr/bin/env python3
"""
Mines - Main entry point.

Usage:
    python main.py generate [--width W] [--height H] [--difficulty D] [--seed S] [--solvable]
    python main.py check FILE
    python main.py survey [--width W] [--height H] [--difficulty D] [--boards N]
"""
import argparse
import json
import logging
import sys
from pathlib import Path

from src.mines.game.board import ConfigurationError, Difficulty, GameConfig
from src.mines.game.generator import generate
from src.mines.game.notation import BoardFormatError, format_board, parse_board
from src.mines.solver import (
    GenerationConfig,
    MinefieldSolver,
    SolverConfig,
    find_solvable,
    survey_solvability,
)


def build_config(args: argparse.Namespace) -> GameConfig:
    """Build a board configuration from command-line arguments."""
    return GameConfig(
        width=args.width,
        height=args.height,
        difficulty=Difficulty.parse(args.difficulty),
        mine_count=args.mines,
    )


def generate_board(args: argparse.Namespace) -> None:
    """Generate a board and print it in the text format."""
    config = build_config(args)
    solver_config = SolverConfig(max_iterations=args.max_iterations)

    if args.solvable:
        outcome = find_solvable(
            config,
            args.seed,
            GenerationConfig(max_attempts=args.max_attempts, solver=solver_config),
        )
        minefield = outcome.minefield
        print(format_board(minefield))
        print()
        print(f"Seed: {minefield.seed} (after {outcome.attempts} attempts)")
        print(f"Solvable: {outcome.solvable}")
    else:
        minefield = generate(config, args.seed)
        result = MinefieldSolver(minefield, solver_config).solve()
        print(format_board(minefield))
        print()
        print(f"Seed: {minefield.seed}")
        print(f"Solvable: {result.solvable}")


def check_board(args: argparse.Namespace) -> None:
    """Run the solver on a board stored in the text format."""
    text = Path(args.file).read_text(encoding="utf-8")
    minefield = parse_board(text)
    result = MinefieldSolver(
        minefield, SolverConfig(max_iterations=args.max_iterations)
    ).solve()

    print(f"Board: {minefield.width}x{minefield.height}, "
          f"{minefield.mine_count()} mines")
    print(f"Consistent: {result.consistent}")
    print(f"Rounds: {result.rounds}")
    print(f"Revealed: {result.revealed_count} | Flagged: {result.flagged_count}")
    print(f"Solvable: {result.solvable}")


def survey(args: argparse.Namespace) -> None:
    """Report what share of plain boards are solvable."""
    config = build_config(args)
    seeds = range(args.seed, args.seed + args.boards)
    result = survey_solvability(
        config, seeds, SolverConfig(max_iterations=args.max_iterations)
    )

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
        return

    print("=" * 50)
    print(f"Solvability survey: {config.width}x{config.height} "
          f"{config.difficulty.name} ({config.mine_count} mines)")
    print("=" * 50)
    print(f"  Boards:     {result.total}")
    print(f"  Solvable:   {result.solvable}")
    print(f"  Rate:       {result.rate:.1%}")
    print(f"  Avg rounds: {result.avg_rounds:.1f}")


def add_board_arguments(parser: argparse.ArgumentParser) -> None:
    """Add the board configuration options to a subcommand."""
    parser.add_argument("--width", type=int, default=10, help="Board width")
    parser.add_argument("--height", type=int, default=10, help="Board height")
    parser.add_argument(
        "--difficulty",
        choices=[difficulty.name.lower() for difficulty in Difficulty],
        default="medium",
        help="Difficulty (sets the mine density)",
    )
    parser.add_argument(
        "--mines", type=int, default=None, help="Explicit mine count"
    )
    parser.add_argument("--seed", type=int, default=1, help="(First) seed")


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="Mines - Generate boards that need no guessing"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--max-iterations", type=int, default=100,
        help="Maximum solver deduction rounds",
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Generate command
    generate_parser = subparsers.add_parser("generate", help="Generate a board")
    add_board_arguments(generate_parser)
    generate_parser.add_argument(
        "--solvable", action="store_true",
        help="Retry with the next seed until the board is solvable",
    )
    generate_parser.add_argument(
        "--max-attempts", type=int, default=1000,
        help="Maximum boards to try with --solvable",
    )

    # Check command
    check_parser = subparsers.add_parser("check", help="Check a text board")
    check_parser.add_argument("file", help="Board file in the text format")

    # Survey command
    survey_parser = subparsers.add_parser(
        "survey", help="Measure the solvable share of generated boards"
    )
    add_board_arguments(survey_parser)
    survey_parser.add_argument(
        "--boards", type=int, default=100, help="Number of boards to generate"
    )
    survey_parser.add_argument(
        "--json", action="store_true", help="Print results as JSON"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "generate":
            generate_board(args)
        elif args.command == "check":
            check_board(args)
        elif args.command == "survey":
            survey(args)
        else:
            parser.print_help()
    except (ConfigurationError, BoardFormatError, ValueError, OSError) as error:
        print(f"Error: {error}", file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__":
    main()
