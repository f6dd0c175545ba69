# dice_royale/events.py
"""
events.py — Canonical game events

Every event is a flat dict with a ``type`` key plus a small payload. The
session emits them as it changes state; ``display.render_event`` turns them
into text.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Set

from .scoreboard import ScoreEntry

SESSION_STARTED = "session_started"
ROUND_STARTED = "round_started"
DIE_ROLLED = "die_rolled"
ROUND_RESOLVED = "round_resolved"
BANKRUPT = "bankrupt"
QUIT_EARLY = "quit_early"
SESSION_COMPLETED = "session_completed"
LEADERBOARD = "leaderboard"
GAME_OVER = "game_over"

CANONICAL_EVENT_TYPES: Set[str] = {
    SESSION_STARTED,
    ROUND_STARTED,
    DIE_ROLLED,
    ROUND_RESOLVED,
    BANKRUPT,
    QUIT_EARLY,
    SESSION_COMPLETED,
    LEADERBOARD,
    GAME_OVER,
}


def session_started(player_name: str, round_count: int, balance: int) -> Dict[str, Any]:
    return {
        "type": SESSION_STARTED,
        "player_name": player_name,
        "round_count": round_count,
        "balance": balance,
    }


def round_started(round_number: int, balance: int) -> Dict[str, Any]:
    return {"type": ROUND_STARTED, "round": round_number, "balance": balance}


def die_rolled(roller: str, index: int, value: int) -> Dict[str, Any]:
    """``roller`` is "player" or "computer"; ``index`` is 1 or 2."""
    return {"type": DIE_ROLLED, "roller": roller, "index": index, "value": value}


def round_resolved(round_number: int, outcome: Any, balance: int) -> Dict[str, Any]:
    ev = {"type": ROUND_RESOLVED, "round": round_number, "balance": balance}
    ev.update(outcome.to_dict())
    return ev


def bankrupt(round_number: int) -> Dict[str, Any]:
    return {"type": BANKRUPT, "round": round_number, "balance": 0}


def quit_early(round_number: int, balance: int) -> Dict[str, Any]:
    return {"type": QUIT_EARLY, "round": round_number, "balance": balance}


def session_completed(player_name: str, round_count: int, balance: int) -> Dict[str, Any]:
    return {
        "type": SESSION_COMPLETED,
        "player_name": player_name,
        "round_count": round_count,
        "balance": balance,
    }


def leaderboard(round_count: int, entries: Iterable[ScoreEntry]) -> Dict[str, Any]:
    return {
        "type": LEADERBOARD,
        "round_count": round_count,
        "entries": [{"name": e.name, "score": e.score} for e in entries],
    }


def game_over(balance: int) -> Dict[str, Any]:
    return {"type": GAME_OVER, "balance": balance}
