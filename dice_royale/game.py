# dice_royale/game.py
from __future__ import annotations

import logging
import time
from typing import Any, Callable, Dict, Iterable, Optional

from . import events as ev
from .config import GameConfig
from .dice import DiceRoller
from .display import Renderer
from .prompts import Choice, ConsolePrompter
from .ranking import Leaderboard
from .rounds import DiceSource
from .session import GameSession, SessionState

log = logging.getLogger(__name__)

# pause before a computer roll, and before the totals are shown
COMPUTER_ROLL_PAUSE = 1.0
RESULT_PAUSE = 0.8


class _TableDice:
    """
    Wraps a dice source so each roll is announced as it happens.

    Rolls alternate player/computer; the player waits for Enter before each of
    their dice and the computer's rolls are paced by ``delay``.
    """

    _ORDER = (("player", 1), ("computer", 1), ("player", 2), ("computer", 2))

    def __init__(
        self,
        dice: DiceSource,
        prompter: ConsolePrompter,
        emit: Callable[[Dict[str, Any]], None],
        pause: Callable[[float], None],
    ) -> None:
        self.dice = dice
        self.prompter = prompter
        self.emit = emit
        self.pause = pause
        self._n = 0

    def roll(self) -> int:
        roller, index = self._ORDER[self._n % len(self._ORDER)]
        self._n += 1
        ordinal = "first" if index == 1 else "second"
        if roller == "player":
            self.prompter.wait_for_roll(ordinal.upper())
        else:
            self.prompter.output_fn(f"Computer rolling {ordinal} die...")
            self.pause(COMPUTER_ROLL_PAUSE)
        value = self.dice.roll()
        self.emit(ev.die_rolled(roller, index, value))
        if self._n % len(self._ORDER) == 0:
            self.prompter.output_fn("Calculating results...")
            self.pause(RESULT_PAUSE)
        return value


class Game:
    """Process-level loop: sessions are played until the player declines a replay."""

    def __init__(
        self,
        prompter: ConsolePrompter,
        leaderboard: Leaderboard,
        *,
        config: Optional[GameConfig] = None,
        dice: Optional[DiceSource] = None,
        renderer: Optional[Renderer] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.prompter = prompter
        self.leaderboard = leaderboard
        self.config = config or GameConfig()
        self.dice = dice if dice is not None else DiceRoller(self.config.seed)
        self.renderer = renderer or Renderer(color=self.config.color)
        self.sleep = sleep
        self.sessions: list[GameSession] = []

    def _out(self, lines: Iterable[str]) -> None:
        for line in lines:
            self.prompter.output_fn(line)

    def _show(self, event: Dict[str, Any]) -> None:
        self._out(self.renderer.render_event(event))

    def _flush(self, session: GameSession) -> None:
        for event in session.drain_events():
            self._show(event)

    def _pause(self, factor: float) -> None:
        if self.config.delay > 0:
            self.sleep(self.config.delay * factor)

    def play_session(self) -> GameSession:
        name = self.prompter.request_name()
        round_count = self.prompter.request_round_count()

        self._out(["", f"Current leaderboard for {round_count} round(s):"])
        self._show(ev.leaderboard(round_count, self.leaderboard.top(round_count)))

        table_dice = _TableDice(self.dice, self.prompter, self._show, self._pause)
        session = GameSession(
            name,
            round_count,
            self.leaderboard,
            starting_balance=self.config.starting_balance,
            dice=table_dice,
        )
        self.sessions.append(session)
        session.start()
        self._flush(session)

        while not session.is_over:
            if session.state is SessionState.ROUND_IN_PROGRESS:
                bet = self.prompter.request_bet(session.balance)
                self._out(["", f"You bet: ${bet}", ""])
                session.play_round(bet)
            elif self.prompter.request_continue_or_quit() is Choice.QUIT:
                session.quit()
            else:
                session.continue_()
            self._flush(session)

        self._show(ev.game_over(session.balance))
        log.info("session over: %s (%s)", name, session.terminal.value)
        return session

    def run(self) -> int:
        """Play until the player declines; returns the number of sessions played."""
        self._out(self.renderer.welcome(self.config.starting_balance))
        while True:
            self.play_session()
            if not self.prompter.request_play_again():
                self._out(self.renderer.farewell())
                return len(self.sessions)


__all__ = ["Game", "COMPUTER_ROLL_PAUSE", "RESULT_PAUSE"]
