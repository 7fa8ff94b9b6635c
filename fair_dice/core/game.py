"""
game.py
Implements the GameOrchestrator, which walks one game through its phases, runs every
outcome-determining draw through the commit-reveal protocol, and emits events.
Related modules:
- config.py: GameConfig is used to configure the orchestrator.
- state.py: Phase and GameState hold the game data.
- fair_random.py: One FairRandomValue per draw (turn order, each roll).
- interface.py: GameInterface supplies the user's side.
- rules.py: resolve compares the two rolls.
- agents: Pick the computer's die with local randomness.
"""

import logging
import random
from typing import Dict, Optional

from fair_dice.agents import create_agent
from fair_dice.agents.base import Agent
from .config import GameConfig
from .dice_set import DiceSet
from .entropy import SecureRandomSource
from .errors import GameAborted, InvalidSelectionError, RangeError, ValidationError
from .fair_random import FairRandomValue
from .interface import GameInterface
from .probability import ProbabilityMatrix
from .rules import resolve
from .state import GameState, Phase

logger = logging.getLogger(__name__)

USER = "user"
COMPUTER = "computer"


class GameOrchestrator:
    """
    State machine for one game: DetermineFirstMover -> OptionalHelp -> die selection
    (user then computer, or the reverse) -> RollUser -> RollComputer -> Resolve -> Done.
    At most one draw is in flight at a time (active_draw).
    """
    def __init__(self, dice_set: DiceSet, interface: GameInterface, config: Optional[GameConfig] = None,
                 agent: Optional[Agent] = None, source: Optional[SecureRandomSource] = None):
        """
        Args:
            dice_set (DiceSet): Dice on offer.
            interface (GameInterface): The user's side.
            config (GameConfig, optional): Game configuration. If None, uses default config.
            agent (Agent, optional): Computer selection strategy; defaults to config.computer_agent.
            source (SecureRandomSource, optional): Entropy for fair draws; defaults to the OS source.
        Raises:
            ValidationError: If the set cannot give each party its own die.
        """
        self.config = config or GameConfig()
        if not self.config.allow_shared_die and dice_set.get_dice_count() < 2:
            raise ValidationError("at least 2 dice are needed when dice cannot be shared")
        self.dice_set = dice_set
        self.interface = interface
        self.source = source
        self.rng = random.Random(self.config.rng_seed)
        self.agent = agent or create_agent(self.config.computer_agent, rng=self.rng)
        self.matrix = ProbabilityMatrix(dice_set)
        self.state = GameState()
        self.active_draw: Optional[FairRandomValue] = None
        self._events = []

    def _emit(self, event: Dict):
        self._events.append(event)

    def pop_events(self):
        """
        Return and clear all emitted events since last call.
        """
        ev = list(self._events)
        self._events.clear()
        return ev

    def get_events(self):
        """
        Return all events emitted so far (does not clear).
        """
        return list(self._events)

    @property
    def phase(self) -> Phase:
        return self.state.phase

    def is_terminal(self) -> bool:
        return self.state.phase in (Phase.DONE, Phase.ABORTED)

    def _enter(self, phase: Phase) -> None:
        self.state.phase = phase
        self._emit({"type": "PhaseEntered", "phase": phase.value})
        logger.debug("phase %s", phase.value)

    def fair_draw(self, range_: int, purpose: str) -> int:
        """
        Run one commit-reveal draw against the interface.
        The commitment is shown before the user's number is requested; out-of-range numbers
        are re-asked without consuming the draw.
        Args:
            range_ (int): Size of the value space.
            purpose (str): Label recorded in events.
        Returns:
            int: (computer_value + user_value) mod range_.
        Raises:
            GameAborted: If the user leaves; the draw is cancelled and nothing is revealed.
            CommitmentVerificationError: If the reveal does not match the commitment.
        """
        if self.active_draw is not None:
            raise RuntimeError("a fair draw is already in progress")
        draw = FairRandomValue(range_, source=self.source, key_bytes=self.config.key_bytes)
        self.active_draw = draw
        try:
            self.interface.show_commitment(range_, draw.commitment)
            self._emit({"type": "CommitmentPublished", "purpose": purpose, "range": range_,
                        "commitment": draw.commitment})
            while True:
                value = self.interface.ask_number(range_)
                try:
                    reveal = draw.reveal(value)
                    break
                except RangeError:
                    self.interface.show_invalid_number(range_, value)
        except GameAborted:
            draw.cancel()
            raise
        finally:
            self.active_draw = None
        self.state.draws.append(reveal)
        self._emit({"type": "DrawRevealed", "purpose": purpose, "range": range_,
                    "computer_value": reveal.computer_value, "user_value": reveal.user_value,
                    "final": reveal.final, "secret": reveal.secret})
        self.interface.show_reveal(reveal)
        return reveal.final

    def _check_selection(self, index, taken: Optional[int]) -> int:
        count = self.dice_set.get_dice_count()
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < count:
            raise InvalidSelectionError(f"die selection {index!r} is outside 1..{count}")
        if taken is not None and index == taken and not self.config.allow_shared_die:
            raise InvalidSelectionError(f"die {index + 1} is already taken")
        return index

    def _select_user_die(self) -> None:
        self._enter(Phase.SELECT_USER_DIE)
        taken = self.state.computer_die_index
        index = self._check_selection(self.interface.ask_die(self.dice_set, taken), taken)
        self.state.user_die_index = index
        self._emit({"type": "DieSelected", "party": USER, "index": index})

    def _select_computer_die(self) -> None:
        self._enter(Phase.SELECT_COMPUTER_DIE)
        taken = self.state.user_die_index
        index = self.agent.choose_die(self.dice_set, self.matrix, taken, self.config.allow_shared_die)
        index = self._check_selection(index, taken)
        self.state.computer_die_index = index
        self._emit({"type": "DieSelected", "party": COMPUTER, "index": index})
        self.interface.show_computer_choice(index, self.dice_set.get_die(index))

    def _roll(self, party: str, die_index: int) -> int:
        die = self.dice_set.get_die(die_index)
        face_index = self.fair_draw(die.get_sides_count(), purpose=f"roll_{party}")
        value = die.get_face(face_index)
        self._emit({"type": "DieRolled", "party": party, "face_index": face_index, "value": value})
        self.interface.show_roll(party, value)
        return value

    def play(self) -> GameState:
        """
        Play one full game.
        Returns:
            GameState: The final state, with outcome set.
        Raises:
            GameAborted: If the user leaves at any prompt.
            InvalidSelectionError: If a die selection is invalid.
            CommitmentVerificationError: If a reveal fails verification.
        """
        if self.state.phase != Phase.NOT_STARTED:
            raise RuntimeError("a GameOrchestrator plays a single game")
        try:
            self._enter(Phase.DETERMINE_FIRST_MOVER)
            self.state.user_first = self.fair_draw(2, purpose="first_mover") == 1
            self.interface.show_first_mover(self.state.user_first)

            self._enter(Phase.OPTIONAL_HELP)
            if self.interface.wants_help():
                self.interface.show_help(self.matrix)

            if self.state.user_first:
                self._select_user_die()
                self._select_computer_die()
            else:
                self._select_computer_die()
                self._select_user_die()

            self._enter(Phase.ROLL_USER)
            self.state.user_roll = self._roll(USER, self.state.user_die_index)
            self._enter(Phase.ROLL_COMPUTER)
            self.state.computer_roll = self._roll(COMPUTER, self.state.computer_die_index)

            self._enter(Phase.RESOLVE)
            self.state.outcome = resolve(self.state.user_roll, self.state.computer_roll)
            self._emit({"type": "GameResolved", "outcome": self.state.outcome.value,
                        "user_roll": self.state.user_roll, "computer_roll": self.state.computer_roll})
            self.interface.show_outcome(self.state)
            self._enter(Phase.DONE)
        except GameAborted:
            aborted_in = self.state.phase
            self.state.phase = Phase.ABORTED
            self._emit({"type": "GameAborted", "phase": aborted_in.value})
            logger.debug("game aborted during %s", aborted_in.value)
            raise
        return self.state
