from __future__ import annotations

import argparse
import logging
import os
import sys
import traceback
from typing import Any, Dict, List

from . import __version__ as DICE_ROYALE_VERSION
from .config import MAX_ROUNDS, MIN_ROUNDS, GameConfig, coerce_flag
from .config_loader import load_config_file
from .display import Renderer
from .errors import ConfigError
from .game import Game
from .logging_utils import setup_logging
from .prompts import ConsolePrompter
from .ranking import Leaderboard

log = logging.getLogger(__name__)


# ------------------------------- Helpers ------------------------------------ #


def _round_count_arg(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {text!r}")
    if not MIN_ROUNDS <= value <= MAX_ROUNDS:
        raise argparse.ArgumentTypeError(f"must be between {MIN_ROUNDS} and {MAX_ROUNDS}")
    return value


def _resolve_config(args: argparse.Namespace) -> GameConfig:
    """
    Merge config sources. Precedence (high → low):
      CLI flags → config file → DICE_ROYALE_SCOREBOARD env → defaults
    """
    data: Dict[str, Any] = {}
    if getattr(args, "config", None):
        data = load_config_file(args.config)

    if getattr(args, "scoreboard", None):
        data["scoreboard_path"] = args.scoreboard
    if getattr(args, "seed", None) is not None:
        data["seed"] = args.seed
    if getattr(args, "delay", None) is not None:
        data["delay"] = args.delay
    color, ok = coerce_flag(getattr(args, "color", None))
    if ok and color is not None:
        data["color"] = color

    cfg = GameConfig.from_mapping(data)
    log.debug("resolved config: %s", cfg.to_dict())
    return cfg


# ------------------------------- Commands ----------------------------------- #


def _cmd_play(args: argparse.Namespace) -> int:
    cfg = _resolve_config(args)
    renderer = Renderer(color=cfg.color)
    prompter = ConsolePrompter(error_style=renderer.error)
    leaderboard = Leaderboard.open(cfg.scoreboard_path)
    game = Game(prompter, leaderboard, config=cfg, renderer=renderer)
    try:
        played = game.run()
    except (EOFError, KeyboardInterrupt):
        print()
        log.info("input closed; leaving after %d session(s)", len(game.sessions))
        return 0
    log.info("played %d session(s)", played)
    return 0


def _cmd_scores(args: argparse.Namespace) -> int:
    cfg = _resolve_config(args)
    leaderboard = Leaderboard.open(cfg.scoreboard_path)
    renderer = Renderer(color=cfg.color)

    round_counts = [args.rounds] if args.rounds is not None else leaderboard.round_counts()
    if not round_counts:
        print("No scores yet!")
        return 0
    for rounds in round_counts:
        entries = [{"name": e.name, "score": e.score} for e in leaderboard.top(rounds)]
        for line in renderer.leaderboard(rounds, entries):
            print(line)
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dice-royale",
        description="Dice Royale - bet against the computer, one pair of dice at a time",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {DICE_ROYALE_VERSION}")
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="increase verbosity (use -vv for debug)",
    )
    parser.add_argument("--config", help="Path to a JSON or YAML config file")
    parser.add_argument(
        "--scoreboard",
        help="Path to the leaderboard file (default: scoreboard.txt or $DICE_ROYALE_SCOREBOARD)",
    )

    sub = parser.add_subparsers(dest="subcommand", required=False)

    # play
    p_play = sub.add_parser("play", help="Play Dice Royale (default)")
    p_play.add_argument("--seed", type=int, help="Seed the dice for reproducibility")
    p_play.add_argument(
        "--delay",
        type=float,
        help="Pacing multiplier for dramatic pauses (1.0 = full pauses, 0 = none; default 0)",
    )
    p_play.add_argument(
        "--color",
        dest="color",
        action="store_true",
        default=None,
        help="Use ANSI colors",
    )
    p_play.add_argument("--no-color", dest="color", action="store_false", help="Plain output")
    p_play.set_defaults(func=_cmd_play)

    # scores
    p_scores = sub.add_parser("scores", help="Show the leaderboard")
    p_scores.add_argument(
        "--rounds",
        type=_round_count_arg,
        default=None,
        help=f"Only show the board for this round count ({MIN_ROUNDS}-{MAX_ROUNDS})",
    )
    p_scores.set_defaults(func=_cmd_scores)

    return parser


def main(argv: List[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    parser = _build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    func = getattr(args, "func", None) or _cmd_play
    try:
        return func(args)
    except ConfigError as e:
        print(f"failed: {e}", file=sys.stderr)
        return 2
    except Exception:
        if os.environ.get("DICE_ROYALE_DEBUG", "0").lower() in ("1", "true", "yes"):
            print("\n--- DICE ROYALE DEBUG TRACEBACK ---", flush=True)
            traceback.print_exc()
            print("--- END DEBUG ---\n", flush=True)
        raise


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
