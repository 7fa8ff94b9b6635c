import random
from abc import ABC, abstractmethod
from typing import List, Optional

from fair_dice.core.dice_set import DiceSet
from fair_dice.core.probability import ProbabilityMatrix


class Agent(ABC):
    """
    Abstract base class for the computer's die-selection strategy.
    The computer's pick is a free choice, so agents use local randomness (random.Random),
    not the commit-reveal protocol.
    """
    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    @abstractmethod
    def choose_die(self, dice_set: DiceSet, matrix: ProbabilityMatrix, taken: Optional[int] = None,
                   allow_shared: bool = False) -> int:
        """
        Pick the computer's die.
        Args:
            dice_set (DiceSet): Dice on offer.
            matrix (ProbabilityMatrix): Pairwise win probabilities for dice_set.
            taken (int|None): Index already chosen by the user, or None if the computer picks first.
            allow_shared (bool): If True, the computer may pick the taken die too.
        Returns:
            int: Index of the chosen die.
        """
        raise NotImplementedError

    def available(self, dice_set: DiceSet, taken: Optional[int], allow_shared: bool) -> List[int]:
        """
        Indices the computer may pick from.
        """
        return [i for i in range(dice_set.get_dice_count()) if allow_shared or i != taken]
