"""
cli.py
Console front end: validates the dice given on the command line, plays one game against the
computer, and maps errors to process exit codes.
Usage: fair-dice 2,2,4,4,9,9 1,1,6,6,8,8 3,3,5,5,7,7
"""
import argparse
import dataclasses
import logging
import sys
from typing import List, Optional

from tabulate import tabulate

from fair_dice.agents import AGENT_MAP
from fair_dice.core.config import GameConfig
from fair_dice.core.dice_set import DiceSet, parse_dice_set
from fair_dice.core.die import Die
from fair_dice.core.errors import CommitmentVerificationError, GameAborted, ValidationError
from fair_dice.core.fair_random import Reveal
from fair_dice.core.game import USER, GameOrchestrator
from fair_dice.core.interface import GameInterface
from fair_dice.core.probability import ProbabilityMatrix
from fair_dice.core.rules import Outcome

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_INTEGRITY = 2

EXIT_COMMANDS = ("x", "exit", "quit")
HELP_COMMANDS = ("?", "help")

OUTCOME_LABELS = {
    Outcome.USER_WINS: "You win!",
    Outcome.COMPUTER_WINS: "Computer wins!",
    Outcome.DRAW: "It's a draw!",
}


def render_help_table(matrix: ProbabilityMatrix, precision: int = 4) -> str:
    """
    Render the probability matrix as a grid: rows are the user's die, columns the computer's.
    """
    labels = matrix.labels()
    headers = ["User dice vs. Computer"] + labels
    rows = [[label] + cells for label, cells in zip(labels, matrix.formatted(precision))]
    return tabulate(rows, headers=headers, tablefmt="grid", disable_numparse=True)


class ConsoleInterface(GameInterface):
    """
    GameInterface backed by input() and print().
    Typing x at any prompt leaves the game.
    """
    def __init__(self, precision: int = 4):
        self.precision = precision

    def _read(self, prompt: str) -> str:
        text = input(prompt).strip()
        if text.lower() in EXIT_COMMANDS:
            raise GameAborted("user exit")
        return text

    def show_commitment(self, range_: int, commitment: str) -> None:
        print(f"I selected a random value in 0..{range_ - 1} (HMAC={commitment})")

    def ask_number(self, range_: int) -> int:
        while True:
            text = self._read(f"Enter your number (0..{range_ - 1}), x to exit: ")
            try:
                return int(text)
            except ValueError:
                print("Please enter a valid integer.")

    def show_invalid_number(self, range_: int, value) -> None:
        print(f"Invalid input: {value} is not in 0..{range_ - 1}.")

    def show_reveal(self, reveal: Reveal) -> None:
        print(f"Computer value: {reveal.computer_value}")
        print(f"Key: {reveal.secret}")
        print(f"Final result: ({reveal.computer_value} + {reveal.user_value}) mod {reveal.range} = {reveal.final}")

    def show_first_mover(self, user_first: bool) -> None:
        print("You will choose first!" if user_first else "Computer will choose first!")

    def wants_help(self) -> bool:
        choice = self._read("Type 'help' to see the probability table or press Enter to continue: ")
        return choice.lower() in HELP_COMMANDS

    def show_help(self, matrix: ProbabilityMatrix) -> None:
        print("\nProbability of the user's die (rows) beating the computer's die (columns):")
        print(render_help_table(matrix, self.precision))

    def ask_die(self, dice_set: DiceSet, taken=None) -> int:
        print("\nAvailable dice:")
        for idx, die in enumerate(dice_set):
            marker = " (taken)" if idx == taken else ""
            print(f"{idx + 1}: [{', '.join(str(f) for f in die.get_all_faces())}]{marker}")
        while True:
            choice = self._read(f"Select your die (1..{dice_set.get_dice_count()}), ? for help: ")
            if choice.lower() in HELP_COMMANDS:
                self.show_help(ProbabilityMatrix(dice_set))
                continue
            try:
                return int(choice) - 1
            except ValueError:
                # the orchestrator rejects anything that is not a valid index
                return -1

    def show_computer_choice(self, index: int, die: Die) -> None:
        print(f"Computer chose die {index + 1}: [{', '.join(str(f) for f in die.get_all_faces())}]")

    def show_roll(self, party: str, value: int) -> None:
        print(f"Your roll: {value}" if party == USER else f"Computer roll: {value}")

    def show_outcome(self, result) -> None:
        print(f"\nYou rolled {result.user_roll}, computer rolled {result.computer_roll}.")
        print(OUTCOME_LABELS[result.outcome])


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fair-dice",
        description="Play non-transitive dice against the computer with provably fair rolls.",
        epilog="Example: fair-dice 2,2,4,4,9,9 1,1,6,6,8,8 3,3,5,5,7,7",
    )
    parser.add_argument("dice", nargs="*", help="Comma-separated integer faces, one argument per die")
    parser.add_argument("--agent", type=str, default="random",
                        help=f"Computer selection strategy (one of: {', '.join(sorted(AGENT_MAP))})")
    parser.add_argument("--allow-shared-die", action="store_true", help="Let both players pick the same die")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the computer's die choice only")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the CLI. Returns the process exit code.
    """
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    if args.agent.lower() not in AGENT_MAP:
        print(f"Error: unknown agent {args.agent}. Supported: {sorted(AGENT_MAP)}", file=sys.stderr)
        return EXIT_INVALID

    config = dataclasses.replace(
        GameConfig(),
        allow_shared_die=args.allow_shared_die,
        computer_agent=args.agent.lower(),
        rng_seed=args.seed,
    )
    try:
        dice_set = parse_dice_set(args.dice, config)
    except ValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        print("Usage: fair-dice 2,2,4,4,9,9 1,1,6,6,8,8 3,3,5,5,7,7", file=sys.stderr)
        return EXIT_INVALID

    print("Welcome to the Non-Transitive Dice Fair Play Simulator!")
    print("Type x at any prompt to exit.")
    print("\nLet's decide who picks a die first!")
    game = GameOrchestrator(dice_set, ConsoleInterface(config.probability_precision), config=config)
    try:
        game.play()
    except (GameAborted, KeyboardInterrupt, EOFError):
        print("\nGoodbye!")
        return EXIT_OK
    except IndexError as e:
        print(f"Invalid selection: {e}", file=sys.stderr)
        return EXIT_INVALID
    except CommitmentVerificationError as e:
        print(f"Integrity failure: {e}", file=sys.stderr)
        return EXIT_INTEGRITY
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
