#!/usr/bin/env python3
"""
Minefield - Main entry point.

Usage:
    python main.py play [--size N] [--mines M] [--seed S] [--verbose]
    python main.py evaluate [--games N] [--size N] [--mines M] [--seed S]
"""
import argparse
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent / "src"))

from minefield import (
    CheckWin,
    FlagCell,
    GameConfig,
    GameState,
    InvalidConfiguration,
    InvalidIndex,
    Reset,
    RevealCell,
    new_game,
    render_ansi,
)
from minefield.agents import RandomAgent
from minefield.simulation import Evaluator

PLAY_HELP = """Commands:
  r ROW COL   reveal a cell
  f ROW COL   flag or unflag a cell
  c           check for a win
  n           new game (after a win or loss)
  q           quit"""


def parse_command(line: str, size: int):
    """
    Turn a line of player input into a machine event.

    Returns:
        An event, "quit", or None if the line was not understood.

    Raises:
        InvalidIndex: If the row or column is off the board.
    """
    parts = line.split()
    if not parts:
        return None
    verb = parts[0].lower()

    if verb == "q":
        return "quit"
    if verb == "c":
        return CheckWin()
    if verb == "n":
        return Reset()
    if verb in ("r", "f") and len(parts) == 3:
        try:
            row, col = int(parts[1]), int(parts[2])
        except ValueError:
            return None
        if not (0 <= row < size and 0 <= col < size):
            raise InvalidIndex(f"({row}, {col}) is off the {size}x{size} board")
        index = row * size + col
        return RevealCell(index) if verb == "r" else FlagCell(index)
    return None


def play(args: argparse.Namespace) -> None:
    """Play an interactive game in the terminal."""
    try:
        machine = new_game(args.size, args.mines, seed=args.seed)
    except InvalidConfiguration as err:
        print(f"Cannot start game: {err}")
        return

    print(f"Board: {args.size}x{args.size} with {args.mines} mines")
    print(PLAY_HELP)
    state, snapshot = machine.state, machine.snapshot()

    while True:
        print()
        print(render_ansi(snapshot, show_mines=machine.is_over))
        print(f"[{state.name}]")

        try:
            line = input("> ")
        except EOFError:
            break

        try:
            event = parse_command(line, args.size)
            if event == "quit":
                break
            if event is None:
                print(PLAY_HELP)
                continue
            state, snapshot = machine.dispatch(event)
        except InvalidIndex as err:
            print(f"Invalid move: {err}")
            continue

        if state == GameState.WON:
            print("\n*** WIN! ***  (n for a new game)")
        elif state == GameState.LOST:
            print("\n*** LOST (hit mine) ***  (n for a new game)")


def evaluate(args: argparse.Namespace) -> None:
    """Evaluate the random agent."""
    try:
        config = GameConfig(args.size, args.mines)
    except InvalidConfiguration as err:
        print(f"Cannot evaluate: {err}")
        return

    agent = RandomAgent(args.size, seed=args.seed)
    evaluator = Evaluator(config, num_episodes=args.games, seed=args.seed)

    print(f"\nEvaluating Random over {args.games} games...")
    results = evaluator.evaluate(agent)

    print("Results for Random:")
    print(f"  Win rate: {results['win_rate']:.1%}")
    print(f"  Avg reward: {results['avg_reward']:.2f}")
    print(f"  Avg steps: {results['avg_steps']:.1f}")
    print(f"  Avg revealed: {results['avg_revealed']:.1f} cells")


def add_board_arguments(parser: argparse.ArgumentParser) -> None:
    """Add the options shared by every command."""
    parser.add_argument("--size", type=int, default=9, help="Rows and columns")
    parser.add_argument("--mines", type=int, default=10, help="Number of mines")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--verbose", action="store_true", help="Log engine transitions"
    )


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="Minefield - Play or evaluate the rules engine"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    add_board_arguments(play_parser)

    eval_parser = subparsers.add_parser(
        "evaluate", help="Evaluate the random agent"
    )
    add_board_arguments(eval_parser)
    eval_parser.add_argument(
        "--games", type=int, default=100, help="Number of games to play"
    )

    args = parser.parse_args()

    if getattr(args, "verbose", False):
        logging.basicConfig(
            level=logging.DEBUG, format="%(name)s %(levelname)s: %(message)s"
        )

    if args.command == "play":
        play(args)
    elif args.command == "evaluate":
        evaluate(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
