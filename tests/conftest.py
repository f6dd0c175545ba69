"""Pytest configuration for Dice Royale."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


def _ensure_repo_on_path() -> None:
    """Make the repository importable without an editable install."""
    repo_root = Path(__file__).resolve().parent.parent
    if repo_root.exists():
        path_str = str(repo_root)
        if path_str not in sys.path:
            sys.path.insert(0, path_str)


_ensure_repo_on_path()


@pytest.fixture
def board_path(tmp_path: Path) -> Path:
    return tmp_path / "scoreboard.txt"


@pytest.fixture(autouse=True)
def _no_scoreboard_env(monkeypatch):
    monkeypatch.delenv("DICE_ROYALE_SCOREBOARD", raising=False)
