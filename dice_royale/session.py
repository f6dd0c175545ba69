# dice_royale/session.py
"""
session.py — Game session state machine

    SETUP ──start()──▶ ROUND_IN_PROGRESS ──play_round(bet)──▶ BANKRUPT
                             ▲                     │        ├─▶ COMPLETED  (records score)
                             │                     ▼        │
                          continue_() ◀── AWAITING_CONTINUE ─┴─quit()──▶ QUIT_EARLY

Only COMPLETED writes to the leaderboard. The session does no I/O of its own:
the bet, the continue/quit choice and the dice are supplied by the caller, and
every transition is appended to ``events`` for whoever renders the game.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Dict, List, Optional

from . import events as ev
from .config import STARTING_BALANCE
from .errors import SessionStateError
from .ranking import Leaderboard
from .rounds import DiceSource, RoundOutcome, apply_outcome, resolve_round

log = logging.getLogger(__name__)


class SessionState(str, Enum):
    SETUP = "setup"
    ROUND_IN_PROGRESS = "round_in_progress"
    AWAITING_CONTINUE = "awaiting_continue"
    BANKRUPT = "bankrupt"
    QUIT_EARLY = "quit_early"
    COMPLETED = "completed"


class Terminal(str, Enum):
    BANKRUPT = "bankrupt"
    QUIT_EARLY = "quit_early"
    COMPLETED = "completed"


_TERMINAL_BY_STATE = {
    SessionState.BANKRUPT: Terminal.BANKRUPT,
    SessionState.QUIT_EARLY: Terminal.QUIT_EARLY,
    SessionState.COMPLETED: Terminal.COMPLETED,
}


class GameSession:
    def __init__(
        self,
        player_name: str,
        round_count: int,
        leaderboard: Optional[Leaderboard] = None,
        *,
        starting_balance: int = STARTING_BALANCE,
        dice: Optional[DiceSource] = None,
    ) -> None:
        self.player_name = player_name
        self.round_count = round_count
        self.leaderboard = leaderboard
        self.starting_balance = starting_balance
        self.dice = dice

        self.state = SessionState.SETUP
        self.balance = 0
        self.current_round = 0
        self.last_outcome: Optional[RoundOutcome] = None
        self.events: List[Dict[str, Any]] = []

    # -----------------------------
    # Introspection
    # -----------------------------
    @property
    def terminal(self) -> Optional[Terminal]:
        return _TERMINAL_BY_STATE.get(self.state)

    @property
    def is_over(self) -> bool:
        return self.terminal is not None

    def _require(self, *states: SessionState) -> None:
        if self.state not in states:
            allowed = ", ".join(s.value for s in states)
            raise SessionStateError(f"session is {self.state.value}; expected {allowed}")

    def _emit(self, event: Dict[str, Any]) -> None:
        self.events.append(event)

    def drain_events(self) -> List[Dict[str, Any]]:
        out, self.events = self.events, []
        return out

    # -----------------------------
    # Transitions
    # -----------------------------
    def start(self) -> None:
        self._require(SessionState.SETUP)
        self.balance = self.starting_balance
        self.current_round = 1
        self.state = SessionState.ROUND_IN_PROGRESS
        self._emit(ev.session_started(self.player_name, self.round_count, self.balance))
        self._emit(ev.round_started(self.current_round, self.balance))

    def play_round(self, bet: int) -> RoundOutcome:
        self._require(SessionState.ROUND_IN_PROGRESS)

        outcome = resolve_round(self.balance, bet, self.dice)
        self.balance = apply_outcome(self.balance, outcome)
        self.last_outcome = outcome
        self._emit(ev.round_resolved(self.current_round, outcome, self.balance))

        if self.balance <= 0:
            self.state = SessionState.BANKRUPT
            log.info("%s went bankrupt in round %d", self.player_name, self.current_round)
            self._emit(ev.bankrupt(self.current_round))
        elif self.current_round < self.round_count:
            self.state = SessionState.AWAITING_CONTINUE
        else:
            self.state = SessionState.COMPLETED
            log.info(
                "%s completed %d round(s) with %d",
                self.player_name,
                self.round_count,
                self.balance,
            )
            self._emit(ev.session_completed(self.player_name, self.round_count, self.balance))
            if self.leaderboard is not None:
                top = self.leaderboard.record(self.round_count, self.player_name, self.balance)
                self._emit(ev.leaderboard(self.round_count, top))
        return outcome

    def continue_(self) -> None:
        self._require(SessionState.AWAITING_CONTINUE)
        self.current_round += 1
        self.state = SessionState.ROUND_IN_PROGRESS
        self._emit(ev.round_started(self.current_round, self.balance))

    def quit(self) -> None:
        self._require(SessionState.AWAITING_CONTINUE)
        self.state = SessionState.QUIT_EARLY
        log.info("%s quit after round %d", self.player_name, self.current_round)
        self._emit(ev.quit_early(self.current_round, self.balance))


__all__ = ["SessionState", "Terminal", "GameSession"]
