# dice_royale/scoreboard.py
"""
scoreboard.py — Leaderboard store (line-oriented text file)

File layout
-----------
    rounds:3
    John:250
    Alice:180

    rounds:5
    Molly:130

Each ``rounds:<N>`` header opens the bucket for that round count; the
``name:score`` lines that follow belong to it. A blank line separates
buckets and may be missing at end of file.

Parsing is deliberately lenient:
  • a score token that is not an integer reads as 0 (see ``parse_score``)
  • lines before any header, and lines that match neither shape, are skipped
  • a header whose round count is not a positive integer closes the current
    bucket, so the entries under it are skipped too
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

from .utils.io_atomic import write_text_atomic

log = logging.getLogger(__name__)

HEADER_PREFIX = "rounds:"


@dataclass(frozen=True)
class ScoreEntry:
    name: str
    score: int


# round_count -> entries in ranked order
Scoreboard = Dict[int, List[ScoreEntry]]


def parse_score(token: str) -> int:
    """Parse a persisted score token, defaulting to 0 when it is not an integer."""
    try:
        return int(token.strip())
    except ValueError:
        log.debug("unparsable score token %r; recorded as 0", token)
        return 0


def _parse_header(line: str) -> Optional[int]:
    try:
        rounds = int(line[len(HEADER_PREFIX):].strip())
    except ValueError:
        return None
    return rounds if rounds > 0 else None


def loads(text: str) -> Scoreboard:
    """Parse the text form of a scoreboard."""
    board: Scoreboard = {}
    current: Optional[int] = None

    for raw in text.splitlines():
        line = raw.strip()
        if not line:
            continue

        if line.startswith(HEADER_PREFIX):
            current = _parse_header(line)
            if current is None:
                log.debug("ignoring malformed section header %r", line)
                continue
            board[current] = []
            continue

        if ":" in line and current is not None:
            name, _, score = line.partition(":")
            board[current].append(ScoreEntry(name, parse_score(score)))

    return board


def dumps(board: Scoreboard) -> str:
    """Serialize every bucket, ascending by round count."""
    lines: List[str] = []
    for rounds in sorted(board):
        lines.append(f"{HEADER_PREFIX}{rounds}")
        for entry in board[rounds]:
            lines.append(f"{entry.name}:{entry.score}")
        lines.append("")
    return "\n".join(lines) + ("\n" if lines else "")


def load(path: str | Path) -> Scoreboard:
    """Read the scoreboard at ``path``; a missing file is an empty scoreboard."""
    p = Path(path)
    if not p.exists():
        log.info("no scoreboard at %s; starting empty", p)
        return {}
    # undecodable bytes become U+FFFD so one bad line cannot abort the load
    board = loads(p.read_text(encoding="utf-8", errors="replace"))
    log.info("loaded scoreboard from %s (%d bucket(s))", p, len(board))
    return board


def save(board: Scoreboard, path: str | Path) -> None:
    """Rewrite the whole scoreboard file atomically."""
    p = Path(path)
    write_text_atomic(p, dumps(board))
    log.info("saved scoreboard to %s (%d bucket(s))", p, len(board))


__all__ = [
    "ScoreEntry",
    "Scoreboard",
    "parse_score",
    "loads",
    "dumps",
    "load",
    "save",
]
