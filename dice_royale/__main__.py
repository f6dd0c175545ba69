"""
Module entrypoint:

  python -m dice_royale [play|scores] ...
"""
from __future__ import annotations

from .cli import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
