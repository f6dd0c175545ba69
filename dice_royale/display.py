# dice_royale/display.py
"""Text rendering for game events. Pure: returns lines, never prints."""

from __future__ import annotations

from typing import Any, Dict, Iterable, List

from . import events as ev
from .config import STARTING_BALANCE
from .rounds import DOUBLE_SIXES_MULTIPLIER, OutcomeKind

RESET = "\033[0m"
RED = "\033[31m"
BOLD_RED = "\033[1;31m"
BOLD_BLUE = "\033[1;34m"
BOLD_YELLOW = "\033[1;33m"
BOLD_CYAN = "\033[1;36m"
BOLD_MAGENTA = "\033[1;35m"
CYAN = "\033[36m"
YELLOW = "\033[33m"

RULE = "=" * 30
THIN_RULE = "-" * 30


class Renderer:
    def __init__(self, color: bool = False) -> None:
        self.color = color

    def paint(self, text: str, code: str) -> str:
        if not self.color or not text:
            return text
        return f"{code}{text}{RESET}"

    def error(self, text: str) -> str:
        return self.paint(text, RED)

    # -----------------------------
    # Banners
    # -----------------------------
    def welcome(self, starting_balance: int = STARTING_BALANCE) -> List[str]:
        return [
            self.paint("Welcome to Dice Royale!", BOLD_BLUE),
            "",
            self.paint("Instructions:", BOLD_YELLOW),
            f"1. You start with ${starting_balance}.",
            "2. Before each round, place a bet on your roll.",
            "3. You and the computer each roll two dice.",
            "4. Highest total wins the round. Tie = no change in money.",
            "5. Special rolls:",
            "   - Snake Eyes (1+1) = you lose all your money!",
            f"   - Double Sixes (6+6) = win {DOUBLE_SIXES_MULTIPLIER}x your bet!",
            "6. If you go bankrupt, the game ends immediately.",
            "7. After each round, you can choose to continue or quit.",
            "",
        ]

    def farewell(self) -> List[str]:
        return ["", "Thanks for playing Dice Royale!"]

    def leaderboard(self, round_count: int, entries: Iterable[Dict[str, Any]]) -> List[str]:
        lines = ["", self.paint(f"Top Scores for {round_count} Round(s)", BOLD_BLUE)]
        entries = list(entries)
        if not entries:
            lines.append("No scores yet!")
        for i, entry in enumerate(entries, start=1):
            lines.append(f"{i}. {entry['name']} - ${entry['score']}")
        return lines

    # -----------------------------
    # Events
    # -----------------------------
    def _round_result(self, event: Dict[str, Any]) -> List[str]:
        lines = [
            self.paint(THIN_RULE, CYAN),
            self.paint(f"Your total: {event['player_total']}", CYAN),
            self.paint(f"Computer total: {event['computer_total']}", YELLOW),
            self.paint(THIN_RULE, CYAN),
        ]
        kind = OutcomeKind(event["kind"])
        bet = event["bet"]
        if kind is OutcomeKind.SNAKE_EYES:
            lines.append(self.paint("DISASTER! Snake Eyes! You lose everything!", BOLD_RED))
        elif kind is OutcomeKind.DOUBLE_SIXES:
            lines.append(
                self.paint(
                    f"JACKPOT! Double sixes! You win {DOUBLE_SIXES_MULTIPLIER}x your bet!",
                    BOLD_YELLOW,
                )
            )
        elif kind is OutcomeKind.WIN:
            lines.append(self.paint(f"You win the round! +${bet}", BOLD_CYAN))
        elif kind is OutcomeKind.LOSS:
            lines.append(self.paint(f"You lose the round! -${bet}", BOLD_MAGENTA))
        else:
            lines.append(self.paint("It's a tie! No money lost or gained.", BOLD_YELLOW))
        return lines

    def render_event(self, event: Dict[str, Any]) -> List[str]:
        etype = event.get("type")

        if etype == ev.SESSION_STARTED:
            return [
                "",
                self.paint(RULE, BOLD_YELLOW),
                self.paint(f"Welcome {event['player_name']}!", BOLD_YELLOW),
                self.paint(f"You will play {event['round_count']} rounds.", BOLD_YELLOW),
                self.paint(RULE, BOLD_YELLOW),
            ]
        if etype == ev.ROUND_STARTED:
            return [
                "",
                self.paint(f"--- ROUND {event['round']} ---", BOLD_BLUE),
                "",
                self.paint(RULE, BOLD_BLUE),
                self.paint(f"Current money: ${event['balance']}", BOLD_BLUE),
                self.paint(RULE, BOLD_BLUE),
                "",
            ]
        if etype == ev.DIE_ROLLED:
            ordinal = "first" if event["index"] == 1 else "second"
            if event["roller"] == "player":
                return [self.paint(f"Your {ordinal} roll: {event['value']}", CYAN), ""]
            return [self.paint(f"Computer rolled: {event['value']}", YELLOW), ""]
        if etype == ev.ROUND_RESOLVED:
            return self._round_result(event)
        if etype == ev.BANKRUPT:
            return ["", self.paint("You are bankrupt!", BOLD_RED)]
        if etype == ev.QUIT_EARLY:
            return [
                "",
                self.paint(
                    "You chose to quit the game early. Scores will not be recorded.",
                    BOLD_YELLOW,
                ),
            ]
        if etype == ev.SESSION_COMPLETED:
            return []
        if etype == ev.LEADERBOARD:
            return self.leaderboard(event["round_count"], event["entries"])
        if etype == ev.GAME_OVER:
            return [
                "",
                self.paint(RULE, BOLD_BLUE),
                self.paint("GAME OVER", BOLD_BLUE),
                self.paint(f"Final money: ${event['balance']}", BOLD_BLUE),
                self.paint(RULE, BOLD_BLUE),
            ]
        return []


__all__ = ["Renderer"]
