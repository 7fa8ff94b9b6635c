"""
die.py
Defines the Die model: an immutable, validated sequence of integer faces.
Related modules:
- dice_set.py: Groups Die instances into an ordered DiceSet.
- probability.py: Compares faces of two dice.
- game.py: Reads the rolled face with get_face.
"""

from dataclasses import dataclass, field, InitVar
from typing import Iterable, Tuple

from .errors import ValidationError


@dataclass(frozen=True)
class Die:
    """
    A die with an ordered, immutable list of integer faces.
    Args:
        faces (Iterable[int]): Face values, in order. Stored as a tuple.
        min_sides (int): Minimum number of faces accepted (default 2).
    Raises:
        ValidationError: If a face is not an integer or there are too few faces.
    """
    faces: Tuple[int, ...]
    min_sides: InitVar[int] = 2

    def __post_init__(self, min_sides: int):
        try:
            faces = tuple(self.faces)
        except TypeError:
            raise ValidationError("die faces must be a sequence of integers") from None
        for face in faces:
            # bool is an int subclass but never a meaningful face
            if isinstance(face, bool) or not isinstance(face, int):
                raise ValidationError(f"die face {face!r} is not an integer")
        if len(faces) < min_sides:
            raise ValidationError(f"a die must have at least {min_sides} faces, got {len(faces)}")
        object.__setattr__(self, "faces", faces)

    @classmethod
    def parse(cls, text: str, min_sides: int = 2) -> "Die":
        """
        Build a die from a comma-separated specification such as "2,2,4,4,9,9".
        Args:
            text (str): Comma-separated integer faces.
            min_sides (int): Minimum number of faces accepted.
        Returns:
            Die: The parsed die.
        Raises:
            ValidationError: If a token is empty or not an integer.
        """
        faces = []
        for token in text.split(","):
            token = token.strip()
            try:
                faces.append(int(token))
            except ValueError:
                raise ValidationError(f"'{text}': face {token!r} is not an integer") from None
        return cls(faces, min_sides)

    def get_sides_count(self) -> int:
        return len(self.faces)

    def get_face(self, index: int) -> int:
        """
        Return the face at index.
        Raises:
            IndexError: If index is outside [0, sides).
        """
        if not 0 <= index < len(self.faces):
            raise IndexError(f"face index {index} out of range 0..{len(self.faces) - 1}")
        return self.faces[index]

    def get_all_faces(self) -> Tuple[int, ...]:
        return self.faces

    def __len__(self) -> int:
        return len(self.faces)

    def __str__(self) -> str:
        return ",".join(str(f) for f in self.faces)
