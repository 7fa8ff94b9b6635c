"""
dice_set.py
Defines DiceSet, the ordered collection of dice offered to both players, and the
parser that turns command-line specifications into a validated set.
Related modules:
- die.py: Die elements.
- config.py: Side-count policy and minimum number of dice.
"""

from typing import Iterator, List, Optional, Sequence, Tuple

from .config import GameConfig
from .die import Die
from .errors import ValidationError


class DiceSet:
    """
    Ordered, read-only collection of dice. Order is the user-facing numbering.
    Args:
        dice (Sequence[Die]): Dice in display order.
        require_equal_sides (bool): If True, all dice must have the same number of faces.
    Raises:
        ValidationError: If the set is empty or side counts differ.
    """
    def __init__(self, dice: Sequence[Die], require_equal_sides: bool = True):
        dice = tuple(dice)
        if not dice:
            raise ValidationError("a dice set needs at least one die")
        if require_equal_sides:
            sides = dice[0].get_sides_count()
            for idx, die in enumerate(dice):
                if die.get_sides_count() != sides:
                    raise ValidationError(
                        f"all dice must have the same number of sides: die {idx + 1} has "
                        f"{die.get_sides_count()}, die 1 has {sides}"
                    )
        self._dice: Tuple[Die, ...] = dice

    def get_die(self, index: int) -> Die:
        """
        Return the die at index.
        Raises:
            IndexError: If index is outside [0, count).
        """
        if not 0 <= index < len(self._dice):
            raise IndexError(f"die index {index} out of range 0..{len(self._dice) - 1}")
        return self._dice[index]

    def get_all_dice(self) -> Tuple[Die, ...]:
        return self._dice

    def get_dice_count(self) -> int:
        return len(self._dice)

    def __len__(self) -> int:
        return len(self._dice)

    def __iter__(self) -> Iterator[Die]:
        return iter(self._dice)

    def __repr__(self) -> str:
        return f"DiceSet({[str(d) for d in self._dice]})"


def parse_dice_set(specs: Sequence[str], config: Optional[GameConfig] = None) -> DiceSet:
    """
    Validate command-line die specifications and build a DiceSet.
    Args:
        specs (Sequence[str]): One comma-separated face list per die.
        config (GameConfig, optional): Policy; defaults to GameConfig().
    Returns:
        DiceSet: The validated set, in argument order.
    Raises:
        ValidationError: Too few dice, a malformed die, or inconsistent side counts.
    """
    config = config or GameConfig()
    if len(specs) < config.min_dice:
        raise ValidationError(f"at least {config.min_dice} dice are required, got {len(specs)}")
    dice: List[Die] = []
    for idx, spec in enumerate(specs):
        try:
            dice.append(Die.parse(spec, config.min_sides))
        except ValidationError as e:
            raise ValidationError(f"die {idx + 1}: {e}") from e
    return DiceSet(dice, require_equal_sides=config.require_equal_sides)
