from typing import Optional

from .base import Agent
from . import register_agent
from fair_dice.core.dice_set import DiceSet
from fair_dice.core.probability import ProbabilityMatrix


@register_agent("counter")
class CounterAgent(Agent):
    """
    Exploits non-transitivity: when the user has already chosen, pick the die most likely
    to beat it (ties broken at random). When picking first there is nothing to counter,
    so it picks uniformly like RandomAgent.
    """
    def choose_die(self, dice_set: DiceSet, matrix: ProbabilityMatrix, taken: Optional[int] = None,
                   allow_shared: bool = False) -> int:
        if taken is None:
            return self.rng.choice(self.available(dice_set, taken, allow_shared))
        best = matrix.best_response(taken)
        if not best:
            # single-die set with sharing allowed
            return taken
        return self.rng.choice(best)
