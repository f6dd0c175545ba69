# dice_royale/dice.py
from __future__ import annotations

import random
from typing import Iterable, List, Optional

DIE_FACES = (1, 2, 3, 4, 5, 6)


class DiceRoller:
    """Six-sided die source backed by its own ``random.Random`` (seedable)."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self.seed = seed
        self._rng = random.Random(seed)

    def roll(self) -> int:
        return self._rng.randint(1, 6)


class FixedDice:
    """
    Scripted dice: returns the given faces in order.

    Faces are consumed in roll order, which for a round is
    player die 1, computer die 1, player die 2, computer die 2.
    """

    def __init__(self, faces: Iterable[int]) -> None:
        self._faces: List[int] = [int(f) for f in faces]
        for f in self._faces:
            if f not in DIE_FACES:
                raise ValueError(f"die face out of range: {f}")
        self._pos = 0

    @classmethod
    def for_round(cls, player: tuple[int, int], computer: tuple[int, int]) -> "FixedDice":
        return cls([player[0], computer[0], player[1], computer[1]])

    @property
    def remaining(self) -> int:
        return len(self._faces) - self._pos

    def roll(self) -> int:
        if self._pos >= len(self._faces):
            raise IndexError("scripted dice exhausted")
        face = self._faces[self._pos]
        self._pos += 1
        return face


__all__ = ["DIE_FACES", "DiceRoller", "FixedDice"]
