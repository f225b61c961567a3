#!/usr/bin/env python3
"""
Minefield - Main entry point.

Usage:
    python main.py simulate [--games N] [--size S] [--mines M] [--seed N]
    python main.py play [--size S] [--mines M] [--seed N]
"""
import argparse
import logging
import random
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent / "src"))

from agents import RandomAgent
from evaluation import Evaluator
from minefield import (
    BoardConfig,
    FlagOutcome,
    GameStatus,
    InvalidConfiguration,
    RevealResult,
    cell_view,
    disclose_mines,
    new_game_from_config,
    reveal,
    toggle_flag,
)


def simulate(args: argparse.Namespace) -> None:
    """Evaluate the random agent over many games."""
    config = BoardConfig(board_size=args.size, num_mines=args.mines)
    evaluator = Evaluator(
        config,
        num_episodes=args.games,
        max_steps=config.total_cells,
        seed=args.seed,
    )
    agent = RandomAgent(config.board_size, seed=args.seed)

    print(f"\nEvaluating Random over {args.games} games...")
    results = evaluator.evaluate(agent)

    print("Results for Random:")
    print(f"  Win rate: {results['win_rate']:.1%}")
    print(f"  Avg reward: {results['avg_reward']:.2f}")
    print(f"  Avg steps: {results['avg_steps']:.1f}")
    print(f"  Avg revealed: {results['avg_revealed']:.1f} cells")


def render(state) -> str:
    """Render a game as text, one row per line."""
    lines = []
    for y in range(state.board_size):
        row = []
        for x in range(state.board_size):
            view = cell_view(state, y * state.board_size + x)
            if view.detonated:
                row.append("*")
            elif view.has_mine:
                row.append("m")
            elif view.flagged:
                row.append("F")
            elif not view.revealed:
                row.append(".")
            else:
                row.append(str(view.adjacent_mines or " "))
        lines.append(" ".join(row))
    return "\n".join(lines)


def play(args: argparse.Namespace) -> None:
    """Play a game on the terminal: ``r X Y`` reveals, ``f X Y`` flags."""
    config = BoardConfig(board_size=args.size, num_mines=args.mines)
    rng = random.Random(args.seed) if args.seed is not None else None
    state = new_game_from_config(config, rng=rng)

    while state.is_playing:
        print(render(state))
        try:
            command, x, y = input("> ").split()
            position = int(y) * state.board_size + int(x)
        except ValueError:
            print("Commands: r X Y | f X Y")
            continue
        except EOFError:
            return

        if command == "f":
            if toggle_flag(state, position) == FlagOutcome.REJECTED:
                print("Cannot flag that cell")
        elif command == "r":
            outcome = reveal(state, position)
            if outcome.result == RevealResult.IGNORED:
                print("Off the board")
            elif outcome.result == RevealResult.BLOCKED:
                print("Cell is flagged or already cleared")

    disclose_mines(state)
    print(render(state))
    print("You Win!" if state.status == GameStatus.WON else "You Lose!")


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="Minefield - play and evaluate the mine puzzle"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    for name, help_text in (
        ("simulate", "Evaluate the random agent"),
        ("play", "Play a game in the terminal"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("--size", type=int, default=8, help="Board size (NxN)")
        sub.add_argument("--mines", type=int, default=4, help="Number of mines")
        sub.add_argument("--seed", type=int, default=None, help="Random seed")
        if name == "simulate":
            sub.add_argument(
                "--games", type=int, default=100, help="Number of games to play"
            )

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        if args.command == "simulate":
            simulate(args)
        elif args.command == "play":
            play(args)
        else:
            parser.print_help()
    except InvalidConfiguration as exc:
        parser.error(str(exc))


if __name__ == "__main__":
    main()
