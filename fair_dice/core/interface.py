"""
interface.py
Defines GameInterface, the boundary between the GameOrchestrator and whoever plays the user's side
(a console, a test script, a simulated player).
Any prompt method may raise GameAborted to leave the game.
Related modules:
- game.py: Drives a GameInterface through the game phases.
- UI/cli.py: ConsoleInterface implementation.
"""

from abc import ABC, abstractmethod

from .die import Die
from .dice_set import DiceSet
from .fair_random import Reveal
from .probability import ProbabilityMatrix


class GameInterface(ABC):
    """
    Prompts and notifications used by the orchestrator. Prompts return plain values;
    notifications return nothing.
    """

    @abstractmethod
    def show_commitment(self, range_: int, commitment: str) -> None:
        """Publish the computer's commitment before asking for the user's number."""
        raise NotImplementedError

    @abstractmethod
    def ask_number(self, range_: int) -> int:
        """Ask the user for a number in [0, range_). May return out-of-range values; they are re-asked."""
        raise NotImplementedError

    @abstractmethod
    def show_invalid_number(self, range_: int, value) -> None:
        raise NotImplementedError

    @abstractmethod
    def show_reveal(self, reveal: Reveal) -> None:
        raise NotImplementedError

    @abstractmethod
    def show_first_mover(self, user_first: bool) -> None:
        raise NotImplementedError

    @abstractmethod
    def wants_help(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def show_help(self, matrix: ProbabilityMatrix) -> None:
        raise NotImplementedError

    @abstractmethod
    def ask_die(self, dice_set: DiceSet, taken=None) -> int:
        """Ask the user to pick a die; returns a 0-based index (validated by the orchestrator)."""
        raise NotImplementedError

    @abstractmethod
    def show_computer_choice(self, index: int, die: Die) -> None:
        raise NotImplementedError

    @abstractmethod
    def show_roll(self, party: str, value: int) -> None:
        raise NotImplementedError

    @abstractmethod
    def show_outcome(self, result) -> None:
        raise NotImplementedError
