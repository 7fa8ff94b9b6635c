"""
config.py
Defines the GameConfig dataclass, which centralizes the dice policy and protocol constants for the fair dice engine.
Related modules:
- die.py / dice_set.py: Use min_sides, require_equal_sides and min_dice for validation.
- fair_random.py: Uses key_bytes for the commitment secret.
- game.py: Uses allow_shared_die, computer_agent and rng_seed.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class GameConfig:
    """
    Centralizes all rule options and numeric constraints for a fair dice game.
    Fields:
        min_sides (int): Minimum number of faces per die.
        require_equal_sides (bool): If True, every die in a set must have the same number of faces.
        min_dice (int): Minimum number of dice specifications accepted on the command line.
        key_bytes (int): Size of the per-draw HMAC secret key in bytes.
        probability_precision (int): Decimals shown in the probability table.
        allow_shared_die (bool): If True, both parties may pick the same die.
        computer_agent (str): Name of the registered agent that picks the computer's die.
        rng_seed (int|None): Seed for the computer's local selection randomness (never the protocol entropy).
    """
    min_sides: int = 2
    require_equal_sides: bool = True
    min_dice: int = 3
    key_bytes: int = 32
    probability_precision: int = 4
    allow_shared_die: bool = False
    computer_agent: str = "random"
    rng_seed: Optional[int] = None
