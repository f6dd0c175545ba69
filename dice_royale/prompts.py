# dice_royale/prompts.py
from __future__ import annotations

from enum import Enum
from typing import Callable, Optional

from .config import MAX_NAME_LENGTH, MAX_ROUNDS, MIN_ROUNDS
from .errors import InvalidInputError


class Choice(str, Enum):
    CONTINUE = "continue"
    QUIT = "quit"


def _parse_int(raw: Optional[str]) -> Optional[int]:
    if raw is None:
        return None
    try:
        return int(raw.strip())
    except ValueError:
        return None


def validate_name(raw: Optional[str]) -> str:
    """Letters and spaces only, at most 25 characters; returns the stripped name."""
    if raw is None or not raw.strip():
        raise InvalidInputError("Invalid name. Please enter text before starting.")
    if len(raw) > MAX_NAME_LENGTH:
        raise InvalidInputError(f"Invalid name (max length of {MAX_NAME_LENGTH} characters).")
    if not all(ch.isalpha() or ch.isspace() for ch in raw):
        raise InvalidInputError("Invalid name (must contain letters and spaces only).")
    return raw.strip()


def validate_round_count(raw: Optional[str]) -> int:
    number = _parse_int(raw)
    if number is None:
        raise InvalidInputError("Invalid rounds. Please enter a number.")
    if not MIN_ROUNDS <= number <= MAX_ROUNDS:
        raise InvalidInputError(
            f"Invalid rounds. Please enter a number between {MIN_ROUNDS} and {MAX_ROUNDS}."
        )
    return number


def validate_bet(raw: Optional[str], balance: int) -> int:
    bet = _parse_int(raw)
    if bet is None:
        raise InvalidInputError("Invalid bet. Please enter a number.")
    if bet < 1:
        raise InvalidInputError("Bet must be greater than 0.")
    if bet > balance:
        raise InvalidInputError(
            f"You cannot bet more money than you currently have (${balance})."
        )
    return bet


def parse_continue_choice(raw: Optional[str]) -> Choice:
    text = (raw or "").strip()
    if not text:
        return Choice.CONTINUE
    if text.lower() == "x":
        return Choice.QUIT
    raise InvalidInputError("Invalid input. Press Enter to continue, or 'x' to quit.")


def parse_play_again(raw: Optional[str]) -> bool:
    text = (raw or "").strip().lower()
    if text == "y":
        return True
    if text == "n":
        return False
    raise InvalidInputError("Invalid input. Please type 'y' for yes or 'n' for no.")


class ConsolePrompter:
    """
    Line-based input collaborator.

    Each ``request_*`` call loops until the validator accepts the input,
    printing the validator's message on rejection. ``EOFError`` from
    ``input_fn`` propagates so the caller can end the game.
    """

    def __init__(
        self,
        input_fn: Optional[Callable[[str], str]] = None,
        output_fn: Optional[Callable[[str], None]] = None,
        error_style: Callable[[str], str] = str,
    ) -> None:
        self.input_fn = input_fn or input
        self.output_fn = output_fn or print
        self.error_style = error_style

    def _ask(self, prompt: str, validate: Callable[[str], object]):
        while True:
            raw = self.input_fn(prompt)
            try:
                return validate(raw)
            except InvalidInputError as e:
                self.output_fn(self.error_style(str(e)))

    def request_name(self) -> str:
        return self._ask(
            f"Enter your name (letters and spaces only, max {MAX_NAME_LENGTH} characters): ",
            validate_name,
        )

    def request_round_count(self) -> int:
        return self._ask(
            f"How many rounds would you like to play? ({MIN_ROUNDS}-{MAX_ROUNDS}) ",
            validate_round_count,
        )

    def request_bet(self, balance: int) -> int:
        return self._ask(
            f"Enter your bet (Available: ${balance}): ",
            lambda raw: validate_bet(raw, balance),
        )

    def request_continue_or_quit(self) -> Choice:
        return self._ask(
            "\nPress Enter to continue, or type 'x' to quit: ",
            parse_continue_choice,
        )

    def request_play_again(self) -> bool:
        return self._ask("\nDo you want to play again? (y/n) ", parse_play_again)

    def wait_for_roll(self, label: str) -> None:
        self.input_fn(f"Press Enter to roll your {label} die...")


__all__ = [
    "Choice",
    "validate_name",
    "validate_round_count",
    "validate_bet",
    "parse_continue_choice",
    "parse_play_again",
    "ConsolePrompter",
]
