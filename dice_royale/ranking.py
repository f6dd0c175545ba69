# dice_royale/ranking.py
from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import List, Optional

from . import scoreboard as store
from .config import LEADERBOARD_SIZE
from .scoreboard import ScoreEntry, Scoreboard

log = logging.getLogger(__name__)


def update(
    board: Scoreboard,
    round_count: int,
    name: str,
    score: int,
    *,
    path: str | Path | None = None,
) -> Scoreboard:
    """
    Record a finished game in the bucket for ``round_count``.

    The bucket is re-sorted descending by score (stable, so earlier entries win
    ties) and truncated to the top ``LEADERBOARD_SIZE``. When ``path`` is given
    the whole scoreboard is saved afterwards.
    """
    bucket = board.setdefault(round_count, [])
    bucket.append(ScoreEntry(name, score))
    bucket.sort(key=lambda e: e.score, reverse=True)
    dropped = bucket[LEADERBOARD_SIZE:]
    del bucket[LEADERBOARD_SIZE:]
    if dropped:
        log.debug("rounds=%d dropped %s", round_count, dropped)

    if path is not None:
        store.save(board, path)
    return board


def top_scores(board: Scoreboard, round_count: int) -> List[ScoreEntry]:
    return list(board.get(round_count, []))


class Leaderboard:
    """
    Owning handle for the process's scoreboard.

    Loaded once via ``Leaderboard.open(path)``; every ``record`` updates the
    in-memory board and rewrites the file while holding the lock.
    """

    def __init__(self, board: Optional[Scoreboard] = None, path: str | Path | None = None) -> None:
        self.board: Scoreboard = board if board is not None else {}
        self.path: Optional[Path] = Path(path) if path is not None else None
        self._lock = threading.Lock()

    @classmethod
    def open(cls, path: str | Path) -> "Leaderboard":
        return cls(store.load(path), path)

    def record(self, round_count: int, name: str, score: int) -> List[ScoreEntry]:
        with self._lock:
            update(self.board, round_count, name, score, path=self.path)
            log.info("recorded %s:%d for rounds=%d", name, score, round_count)
            return top_scores(self.board, round_count)

    def top(self, round_count: int) -> List[ScoreEntry]:
        return top_scores(self.board, round_count)

    def round_counts(self) -> List[int]:
        return sorted(self.board)


__all__ = ["update", "top_scores", "Leaderboard"]
