from typing import Optional

from .base import Agent
from . import register_agent
from fair_dice.core.dice_set import DiceSet
from fair_dice.core.probability import ProbabilityMatrix


@register_agent("random")
class RandomAgent(Agent):
    """
    Picks uniformly among the dice still available, ignoring the probabilities.
    """
    def choose_die(self, dice_set: DiceSet, matrix: ProbabilityMatrix, taken: Optional[int] = None,
                   allow_shared: bool = False) -> int:
        return self.rng.choice(self.available(dice_set, taken, allow_shared))
