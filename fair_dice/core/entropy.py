"""
entropy.py
Byte sources used by the fair draw protocol, and the unbiased integer sampler built on top of them.
Related modules:
- fair_random.py: Draws the secret key and the computer's value from a source.
"""

import random
import secrets
from abc import ABC, abstractmethod
from typing import Optional


class SecureRandomSource(ABC):
    """
    Capability that yields random bytes. Injected into FairRandomValue so tests
    can substitute a deterministic source.
    """

    @abstractmethod
    def next_bytes(self, n: int) -> bytes:
        raise NotImplementedError


class OsRandomSource(SecureRandomSource):
    """Cryptographically secure bytes from the operating system."""

    def next_bytes(self, n: int) -> bytes:
        return secrets.token_bytes(n)


class SeededRandomSource(SecureRandomSource):
    """
    Deterministic, NOT secure source for tests and simulations.
    Args:
        seed (int|None): Seed for the underlying random.Random.
    """
    def __init__(self, seed: Optional[int] = None):
        self.rng = random.Random(seed)

    def next_bytes(self, n: int) -> bytes:
        return self.rng.randbytes(n)


DEFAULT_SOURCE = OsRandomSource()


def secure_random_below(upper: int, source: SecureRandomSource) -> int:
    """
    Uniform integer in [0, upper) by rejection sampling over source bytes.
    Samples at or above the largest multiple of upper that fits in the byte width
    are discarded, so the final reduction modulo upper has no bias.
    Args:
        upper (int): Exclusive upper bound, >= 1.
        source (SecureRandomSource): Byte source.
    Returns:
        int: Value in [0, upper).
    """
    if upper < 1:
        raise ValueError("upper bound must be positive")
    width = max(1, ((upper - 1).bit_length() + 7) // 8)
    space = 256 ** width
    limit = (space // upper) * upper
    while True:
        sample = int.from_bytes(source.next_bytes(width), "big")
        if sample < limit:
            return sample % upper
