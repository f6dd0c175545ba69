# dice_royale/rounds.py
"""
rounds.py — Round resolution

One round: the player and the computer each roll two dice and the player's
bet is settled. Rules are checked in order, first match wins:

  1. snake eyes   player (1, 1)  → lose the whole balance
  2. double sixes player (6, 6)  → win 3x the bet
  3. totals       higher wins the bet, lower loses it, equal is a push
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol, Tuple

from .dice import DiceRoller
from .errors import InvalidBetError

log = logging.getLogger(__name__)

Pair = Tuple[int, int]

DOUBLE_SIXES_MULTIPLIER = 3


class DiceSource(Protocol):
    def roll(self) -> int: ...


class OutcomeKind(str, Enum):
    SNAKE_EYES = "snake_eyes"
    DOUBLE_SIXES = "double_sixes"
    WIN = "win"
    LOSS = "loss"
    TIE = "tie"


@dataclass(frozen=True)
class RoundOutcome:
    player_dice: Pair
    computer_dice: Pair
    bet: int
    delta: int
    kind: OutcomeKind

    @property
    def player_total(self) -> int:
        return sum(self.player_dice)

    @property
    def computer_total(self) -> int:
        return sum(self.computer_dice)

    def to_dict(self) -> dict:
        return {
            "player_dice": list(self.player_dice),
            "computer_dice": list(self.computer_dice),
            "player_total": self.player_total,
            "computer_total": self.computer_total,
            "bet": self.bet,
            "delta": self.delta,
            "kind": self.kind.value,
        }


def classify(player_dice: Pair, computer_dice: Pair) -> OutcomeKind:
    if player_dice == (1, 1):
        return OutcomeKind.SNAKE_EYES
    if player_dice == (6, 6):
        return OutcomeKind.DOUBLE_SIXES
    player_total = sum(player_dice)
    computer_total = sum(computer_dice)
    if player_total > computer_total:
        return OutcomeKind.WIN
    if player_total < computer_total:
        return OutcomeKind.LOSS
    return OutcomeKind.TIE


def settle(kind: OutcomeKind, balance: int, bet: int) -> int:
    """Balance change for an outcome kind."""
    if kind is OutcomeKind.SNAKE_EYES:
        return -balance
    if kind is OutcomeKind.DOUBLE_SIXES:
        return DOUBLE_SIXES_MULTIPLIER * bet
    if kind is OutcomeKind.WIN:
        return bet
    if kind is OutcomeKind.LOSS:
        return -bet
    return 0


def resolve_round(balance: int, bet: int, dice: Optional[DiceSource] = None) -> RoundOutcome:
    if not 0 < bet <= balance:
        raise InvalidBetError(f"bet must be between 1 and {balance}, got {bet}")

    dice = dice if dice is not None else DiceRoller()
    # roll order matches the table: player, computer, player, computer
    p1 = dice.roll()
    c1 = dice.roll()
    p2 = dice.roll()
    c2 = dice.roll()

    player_dice = (p1, p2)
    computer_dice = (c1, c2)
    kind = classify(player_dice, computer_dice)
    outcome = RoundOutcome(
        player_dice=player_dice,
        computer_dice=computer_dice,
        bet=bet,
        delta=settle(kind, balance, bet),
        kind=kind,
    )
    log.debug("round resolved: %s", outcome.to_dict())
    return outcome


def apply_outcome(balance: int, outcome: RoundOutcome) -> int:
    return max(0, balance + outcome.delta)


__all__ = [
    "OutcomeKind",
    "RoundOutcome",
    "classify",
    "settle",
    "resolve_round",
    "apply_outcome",
]
