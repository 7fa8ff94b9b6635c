"""
errors.py
Defines the exception hierarchy for the fair dice engine.
Related modules:
- die.py, dice_set.py: Raise ValidationError for malformed dice.
- fair_random.py: Raises RangeError, CommitmentVerificationError and DrawConsumedError.
- game.py: Raises InvalidSelectionError and propagates GameAborted.
"""


class FairDiceError(Exception):
    """
    Base class for all errors raised by the fair dice engine.
    """
    pass


class ValidationError(FairDiceError, ValueError):
    """
    Raised when a die specification or a dice set is malformed
    (non-integer face, too few faces, too few dice, inconsistent side counts).
    """
    pass


class RangeError(FairDiceError, ValueError):
    """
    Raised when the user's number for a fair draw is outside [0, range).
    Recoverable: the caller re-prompts.
    """
    def __init__(self, value, upper: int):
        self.value = value
        self.upper = upper
        super().__init__(f"value {value!r} is outside 0..{upper - 1}")


class InvalidSelectionError(FairDiceError, IndexError):
    """
    Raised when a die selection index does not refer to an available die.
    """
    pass


class CommitmentVerificationError(FairDiceError):
    """
    Raised when the revealed (secret, value) pair does not match the published commitment.
    """
    pass


class DrawConsumedError(FairDiceError):
    """
    Raised when a fair draw is revealed twice or after being cancelled.
    """
    pass


class GameAborted(FairDiceError):
    """
    Raised by a game interface when the user asks to leave the game.
    """
    pass
