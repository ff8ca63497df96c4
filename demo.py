#!/usr/bin/env python3
"""Watch the solver clear a board round by round."""
import time
import os

from src.mines.environment import render_observation
from src.mines.game.board import Difficulty, GameConfig
from src.mines.solver import MinefieldSolver, SolverRound, find_solvable


def clear_screen():
    os.system('cls' if os.name == 'nt' else 'clear')


def demo(
    delay: float = 0.5,
    width: int = 10,
    height: int = 10,
    difficulty: str = "medium",
    seed: int = 1,
):
    """Generate a solvable board and replay the solver's deductions."""
    config = GameConfig(width, height, Difficulty.parse(difficulty))
    outcome = find_solvable(config, seed)
    minefield = outcome.minefield

    print(f"Board: {width}x{height} with {config.mine_count} mines "
          f"({100 * config.mine_count / config.area:.1f}% density)")
    print(f"Seed {minefield.seed} found after {outcome.attempts} attempts")
    print("Starting in 2 seconds...")
    time.sleep(2)

    def show_round(summary: SolverRound) -> None:
        clear_screen()
        print(f"=== Round {summary.number} ===")
        print(f"Revealed +{summary.revealed} | Flagged +{summary.flagged}\n")
        print(render_observation(summary.play_state.observation()))
        time.sleep(delay)

    result = MinefieldSolver(minefield, on_round=show_round).solve()

    if result.solvable:
        print(f"\n*** SOLVED in {result.rounds} rounds ***")
    else:
        print(f"\n*** STUCK after {result.rounds} rounds (guess needed) ***")


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser()
    parser.add_argument("--delay", type=float, default=0.5, help="Delay between rounds")
    parser.add_argument("--width", type=int, default=10, help="Board width")
    parser.add_argument("--height", type=int, default=10, help="Board height")
    parser.add_argument("--difficulty", default="medium", help="easy, medium or hard")
    parser.add_argument("--seed", type=int, default=1, help="First seed to try")
    args = parser.parse_args()

    demo(
        delay=args.delay,
        width=args.width,
        height=args.height,
        difficulty=args.difficulty,
        seed=args.seed,
    )
