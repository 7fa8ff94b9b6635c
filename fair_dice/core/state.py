"""
state.py
Defines the game phase enum and the GameState dataclass filled in by the orchestrator.
Related modules:
- game.py: Mutates GameState while moving through the phases.
- fair_random.py: Reveal records stored in GameState.draws.
- rules.py: Outcome stored at the end of the game.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .fair_random import Reveal
from .rules import Outcome


class Phase(str, Enum):
    NOT_STARTED = "NotStarted"
    DETERMINE_FIRST_MOVER = "DetermineFirstMover"
    OPTIONAL_HELP = "OptionalHelp"
    SELECT_USER_DIE = "SelectUserDie"
    SELECT_COMPUTER_DIE = "SelectComputerDie"
    ROLL_USER = "RollUser"
    ROLL_COMPUTER = "RollComputer"
    RESOLVE = "Resolve"
    DONE = "Done"
    ABORTED = "Aborted"


@dataclass
class GameState:
    """
    Everything decided during one game.
    Fields:
        phase (Phase): Current phase.
        user_first (bool|None): True if the user selects a die first.
        user_die_index (int|None): Index of the user's die.
        computer_die_index (int|None): Index of the computer's die.
        user_roll (int|None): Face rolled by the user.
        computer_roll (int|None): Face rolled by the computer.
        outcome (Outcome|None): Final result.
        draws (list[Reveal]): Every completed fair draw, in order.
    """
    phase: Phase = Phase.NOT_STARTED
    user_first: Optional[bool] = None
    user_die_index: Optional[int] = None
    computer_die_index: Optional[int] = None
    user_roll: Optional[int] = None
    computer_roll: Optional[int] = None
    outcome: Optional[Outcome] = None
    draws: List[Reveal] = field(default_factory=list)
