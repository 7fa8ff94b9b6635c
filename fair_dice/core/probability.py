"""
probability.py
Computes pairwise win probabilities between the dice of a DiceSet.
Cell (i, j) is the probability that a roll of die i is strictly higher than a roll of die j.
Related modules:
- dice_set.py: Source of the dice.
- agents/counter_agent.py: Uses best_response to pick a winning die.
- UI/cli.py: Renders the formatted matrix as the help table.
"""

from bisect import bisect_left, bisect_right
from typing import List

from .dice_set import DiceSet
from .die import Die


def win_probability(a: Die, b: Die) -> float:
    """
    Probability that die a rolls strictly higher than die b.
    """
    faces_b = sorted(b.get_all_faces())
    wins = sum(bisect_left(faces_b, face) for face in a.get_all_faces())
    return wins / (a.get_sides_count() * b.get_sides_count())


def tie_probability(a: Die, b: Die) -> float:
    """
    Probability that dice a and b roll the same value.
    """
    faces_b = sorted(b.get_all_faces())
    ties = sum(bisect_right(faces_b, face) - bisect_left(faces_b, face) for face in a.get_all_faces())
    return ties / (a.get_sides_count() * b.get_sides_count())


class ProbabilityMatrix:
    """
    Pairwise win probabilities for every ordered pair of dice in a set.
    Not symmetric in general; the diagonal is a self-comparison and is only shown as "n/a".
    Args:
        dice_set (DiceSet): The dice to compare.
    """
    DIAGONAL_LABEL = "n/a"

    def __init__(self, dice_set: DiceSet):
        self.dice_set = dice_set
        dice = dice_set.get_all_dice()
        self._table: List[List[float]] = [[win_probability(a, b) for b in dice] for a in dice]

    def probability(self, i: int, j: int) -> float:
        """
        Probability that die i beats die j.
        Raises:
            IndexError: If i or j is not a valid die index.
        """
        self.dice_set.get_die(i)
        self.dice_set.get_die(j)
        return self._table[i][j]

    def tie_rate(self, i: int, j: int) -> float:
        return tie_probability(self.dice_set.get_die(i), self.dice_set.get_die(j))

    def rows(self) -> List[List[float]]:
        return [list(row) for row in self._table]

    def formatted(self, precision: int = 4) -> List[List[str]]:
        """
        Matrix cells as fixed-precision strings, with the diagonal replaced by "n/a".
        """
        return [
            [self.DIAGONAL_LABEL if i == j else f"{p:.{precision}f}" for j, p in enumerate(row)]
            for i, row in enumerate(self._table)
        ]

    def labels(self) -> List[str]:
        return [str(d) for d in self.dice_set.get_all_dice()]

    def best_response(self, i: int) -> List[int]:
        """
        Indices of the dice most likely to beat die i (all ties returned, in order).
        Die i itself is never a candidate.
        """
        self.dice_set.get_die(i)
        candidates = [j for j in range(len(self._table)) if j != i]
        if not candidates:
            return []
        best = max(self._table[j][i] for j in candidates)
        return [j for j in candidates if self._table[j][i] == best]
