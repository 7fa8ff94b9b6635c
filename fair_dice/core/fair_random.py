"""
fair_random.py
Implements FairRandomValue, the single-use commit-reveal draw that lets the computer and
the user jointly produce a value in [0, range) that neither side can bias.

Protocol:
  1. The computer draws a secret key and a value, and publishes HMAC-SHA3-256(key, str(value)).
  2. The user picks a number in [0, range) after seeing only the commitment.
  3. The computer reveals (value, key); the commitment is recomputed and checked.
  4. The result is (computer_value + user_value) mod range.

Related modules:
- entropy.py: Byte source and unbiased sampler.
- game.py: Runs one FairRandomValue per outcome-determining draw.
"""

import hashlib
import hmac
import logging
from dataclasses import dataclass
from typing import Optional

from .entropy import DEFAULT_SOURCE, SecureRandomSource, secure_random_below
from .errors import CommitmentVerificationError, DrawConsumedError, RangeError, ValidationError

logger = logging.getLogger(__name__)

KEY_BYTES = 32


def compute_hmac(key: bytes, value: int) -> str:
    """
    Lowercase hex HMAC-SHA3-256 of the decimal string of value, keyed with key.
    """
    return hmac.new(key, str(value).encode("utf-8"), hashlib.sha3_256).hexdigest()


def verify_commitment(commitment: str, secret_hex: str, computer_value: int) -> bool:
    """
    Check a revealed (secret, value) pair against a previously published commitment.
    Args:
        commitment (str): Hex digest published before the user's input.
        secret_hex (str): Revealed key, hex encoded.
        computer_value (int): Revealed computer value.
    Returns:
        bool: True if the pair matches the commitment.
    """
    try:
        key = bytes.fromhex(secret_hex)
    except ValueError:
        return False
    return hmac.compare_digest(compute_hmac(key, computer_value), commitment.lower())


@dataclass(frozen=True)
class Reveal:
    """
    Everything disclosed when a draw completes.
    Fields:
        range (int): Size of the value space.
        computer_value (int): The computer's committed value.
        user_value (int): The user's number.
        final (int): (computer_value + user_value) % range.
        secret (str): The HMAC key, hex encoded.
        commitment (str): The digest published before the user's input.
    """
    range: int
    computer_value: int
    user_value: int
    final: int
    secret: str
    commitment: str


class FairRandomValue:
    """
    One commit-reveal draw over [0, range). Commits at construction; reveal can succeed only once.
    Args:
        range_ (int): Size of the value space, >= 2.
        source (SecureRandomSource, optional): Entropy; defaults to the OS source.
        key_bytes (int): Secret key size in bytes.
    Raises:
        ValidationError: If range_ is not an integer >= 2.
    """
    def __init__(self, range_: int, source: Optional[SecureRandomSource] = None, key_bytes: int = KEY_BYTES):
        if isinstance(range_, bool) or not isinstance(range_, int) or range_ < 2:
            raise ValidationError(f"range must be an integer >= 2, got {range_!r}")
        source = source or DEFAULT_SOURCE
        self.range = range_
        self._secret = source.next_bytes(key_bytes)
        self._computer_value = secure_random_below(range_, source)
        self._commitment = compute_hmac(self._secret, self._computer_value)
        self._state = "COMMITTED"  # COMMITTED | REVEALED | CANCELLED
        logger.debug("committed draw over range %d: %s", range_, self._commitment)

    @property
    def commitment(self) -> str:
        return self._commitment

    def get_commitment(self) -> str:
        return self._commitment

    @property
    def is_open(self) -> bool:
        return self._state == "COMMITTED"

    def check_user_value(self, user_value) -> int:
        """
        Validate the user's number without consuming the draw.
        Raises:
            RangeError: If user_value is not an integer in [0, range).
        """
        if isinstance(user_value, bool) or not isinstance(user_value, int):
            raise RangeError(user_value, self.range)
        if not 0 <= user_value < self.range:
            raise RangeError(user_value, self.range)
        return user_value

    def reveal(self, user_value: int) -> Reveal:
        """
        Combine the user's number with the committed value and disclose the secret.
        Args:
            user_value (int): The user's number in [0, range).
        Returns:
            Reveal: Computer value, secret, final result and the original commitment.
        Raises:
            RangeError: If user_value is out of range (draw stays open).
            DrawConsumedError: If the draw was already revealed or cancelled.
            CommitmentVerificationError: If the disclosed pair does not match the commitment.
        """
        if not self.is_open:
            raise DrawConsumedError(f"draw is already {self._state.lower()}")
        self.check_user_value(user_value)
        self._state = "REVEALED"
        secret_hex = self._secret.hex()
        if not verify_commitment(self._commitment, secret_hex, self._computer_value):
            raise CommitmentVerificationError(
                f"revealed value {self._computer_value} does not match commitment {self._commitment}"
            )
        final = (self._computer_value + user_value) % self.range
        logger.debug("revealed draw: (%d + %d) mod %d = %d", self._computer_value, user_value, self.range, final)
        return Reveal(
            range=self.range,
            computer_value=self._computer_value,
            user_value=user_value,
            final=final,
            secret=secret_hex,
            commitment=self._commitment,
        )

    def cancel(self) -> None:
        """Abandon the draw without disclosing the secret."""
        if self.is_open:
            self._state = "CANCELLED"
            logger.debug("cancelled draw %s", self._commitment)

    def __repr__(self) -> str:
        return f"FairRandomValue(range={self.range}, commitment={self._commitment}, state={self._state})"
