# dice_royale/__init__.py
"""
Dice Royale — a console dice-betting game against the computer, with a
persistent top-3 leaderboard per round count.
"""

__version__ = "1.0.0"

from .scoreboard import ScoreEntry, load, save, parse_score
from .ranking import Leaderboard, top_scores, update
from .rounds import OutcomeKind, RoundOutcome, apply_outcome, resolve_round
from .session import GameSession, SessionState, Terminal
from .errors import (
    DiceRoyaleError,
    InvalidInputError,
    InvalidBetError,
    SessionStateError,
    ConfigError,
)

__all__ = [
    # Scoreboard store
    "ScoreEntry",
    "load",
    "save",
    "parse_score",
    # Ranking
    "Leaderboard",
    "top_scores",
    "update",
    # Rounds
    "OutcomeKind",
    "RoundOutcome",
    "resolve_round",
    "apply_outcome",
    # Session
    "GameSession",
    "SessionState",
    "Terminal",
    # Errors
    "DiceRoyaleError",
    "InvalidInputError",
    "InvalidBetError",
    "SessionStateError",
    "ConfigError",
    # Package version
    "__version__",
]
