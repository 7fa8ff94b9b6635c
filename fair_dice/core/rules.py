"""
rules.py
Defines the outcome of a game and the comparison rule that decides it.
Related modules:
- game.py: Calls resolve once both dice are rolled.
"""

from enum import Enum


class Outcome(str, Enum):
    USER_WINS = "UserWins"
    COMPUTER_WINS = "ComputerWins"
    DRAW = "Draw"


def resolve(user_roll: int, computer_roll: int) -> Outcome:
    """
    Compare two rolled face values. Higher face wins; equal faces are a draw.
    Args:
        user_roll (int): Face rolled on the user's die.
        computer_roll (int): Face rolled on the computer's die.
    Returns:
        Outcome: The game result.
    """
    if user_roll > computer_roll:
        return Outcome.USER_WINS
    if computer_roll > user_roll:
        return Outcome.COMPUTER_WINS
    return Outcome.DRAW
