"""Runtime configuration defaults and flag normalization helpers."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple

STARTING_BALANCE: int = 100
MIN_ROUNDS: int = 1
MAX_ROUNDS: int = 10
MAX_NAME_LENGTH: int = 25
LEADERBOARD_SIZE: int = 3

SCOREBOARD_PATH_DEFAULT: str = "scoreboard.txt"
SCOREBOARD_PATH_ENV: str = "DICE_ROYALE_SCOREBOARD"
DELAY_DEFAULT: float = 0.0
COLOR_DEFAULT: bool = False

_TRUE_STRINGS = {"true", "1", "yes", "on"}
_FALSE_STRINGS = {"false", "0", "no", "off"}
_DEFAULT_STRINGS = {"default", "auto", "inherit"}


def coerce_flag(value: Any, *, default: Optional[bool] = None) -> Tuple[Optional[bool], bool]:
    """Coerce a loosely-typed flag value into ``True``/``False``/``None``.

    ``default`` is returned when ``value`` is ``None`` or explicitly requests
    inheritance (``"default"``/``"auto"``). The boolean in the return tuple
    indicates whether the coercion succeeded.
    """

    if isinstance(value, bool):
        return value, True
    if value is None:
        return default, True
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUE_STRINGS:
            return True, True
        if text in _FALSE_STRINGS:
            return False, True
        if default is not None and text in _DEFAULT_STRINGS:
            return default, True
        return None, False
    if isinstance(value, (int, float)):
        if value == 1:
            return True, True
        if value == 0:
            return False, True
        return None, False
    return None, False


def _coerce_delay(value: Any) -> float:
    try:
        delay = float(value)
    except (TypeError, ValueError):
        return DELAY_DEFAULT
    return max(0.0, delay)


def _coerce_balance(value: Any) -> int:
    try:
        balance = int(value)
    except (TypeError, ValueError):
        return STARTING_BALANCE
    return balance if balance > 0 else STARTING_BALANCE


@dataclass
class GameConfig:
    scoreboard_path: str = SCOREBOARD_PATH_DEFAULT
    starting_balance: int = STARTING_BALANCE
    delay: float = DELAY_DEFAULT
    color: bool = COLOR_DEFAULT
    seed: Optional[int] = None

    @classmethod
    def from_mapping(
        cls,
        data: Optional[Mapping[str, Any]] = None,
        env: Optional[Mapping[str, str]] = None,
    ) -> "GameConfig":
        """Build a config from a loaded file mapping, falling back to env and defaults."""
        data = data or {}
        env = os.environ if env is None else env

        path = data.get("scoreboard_path") or env.get(SCOREBOARD_PATH_ENV) or SCOREBOARD_PATH_DEFAULT

        color, ok = coerce_flag(data.get("color"), default=COLOR_DEFAULT)
        if not ok or color is None:
            color = COLOR_DEFAULT

        seed = data.get("seed")
        try:
            seed = int(seed) if seed is not None else None
        except (TypeError, ValueError):
            seed = None

        return cls(
            scoreboard_path=str(path),
            starting_balance=_coerce_balance(data.get("starting_balance", STARTING_BALANCE)),
            delay=_coerce_delay(data.get("delay", DELAY_DEFAULT)),
            color=bool(color),
            seed=seed,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "scoreboard_path": self.scoreboard_path,
            "starting_balance": self.starting_balance,
            "delay": self.delay,
            "color": self.color,
            "seed": self.seed,
        }
