# src/bowling/cli/main.py
"""
Command line interface for the :mod:`bowling` package.

``bowling score 10 5,3`` prints 26; ``bowling watch`` narrates one random
game; ``bowling simulate`` reports the score distribution of many.
"""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from bowling.config import AppConfig, apply_dot_overrides, load_app_config
from bowling.game.engine import Game
from bowling.game.exceptions import RollError
from bowling.simulation.simulation import simulate_many_games, summarize_scores
from bowling.simulation.watch_game import score_sheet, watch_game
from bowling.utils.logging import configure_logging

LOGGER = logging.getLogger(__name__)

# Exit status for rejected rolls, matching argparse's usage-error status
EXIT_BAD_ROLL = 2

# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------


def parse_frame(text: str) -> list[int]:
    """Parse ``"5,3"`` into ``[5, 3]``; ``"X"`` is shorthand for a strike."""
    if text.strip().upper() == "X":
        return [10]
    try:
        rolls = [int(part) for part in text.split(",") if part.strip()]
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid frame {text!r}: pins must be integers") from exc
    if any(pins < 0 for pins in rolls):
        raise argparse.ArgumentTypeError(f"invalid frame {text!r}: pins must be non-negative")
    return rolls


def build_parser() -> argparse.ArgumentParser:
    """Construct the top-level CLI parser."""
    parser = argparse.ArgumentParser(prog="bowling")
    parser.add_argument("--config", type=Path, help="Path to YAML configuration")
    parser.add_argument(
        "--set",
        dest="overrides",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Override configuration values",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Root logging level (default: logging.level from the config)",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    # score
    score_parser = sub.add_parser("score", help="Score a game given frame by frame")
    score_parser.add_argument(
        "frames",
        nargs="*",
        type=parse_frame,
        metavar="FRAME",
        help="Comma separated pins per frame, e.g. 10 5,3 (default: game.frames from config)",
    )
    score_parser.add_argument(
        "--per-frame",
        action="store_true",
        help="Also print the per-frame score sheet",
    )

    # watch
    watch_parser = sub.add_parser("watch", help="Watch one random game being bowled")
    watch_parser.add_argument("--seed", type=int, default=None, help="Seed for deterministic play")
    watch_parser.add_argument("--frames", dest="n_frames", type=int, default=None, help="Frames to bowl")

    # simulate
    sim_parser = sub.add_parser("simulate", help="Score distribution of many random games")
    sim_parser.add_argument("--n-games", dest="n_games", type=int, default=None, help="Games to play")
    sim_parser.add_argument("--seed", type=int, default=None, help="Batch seed")
    sim_parser.add_argument("--frames", dest="n_frames", type=int, default=None, help="Frames per game")

    return parser


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def _score(cfg: AppConfig, frames: list[list[int]], per_frame: bool) -> int:
    """Build the game, print its total and return it."""
    if frames:
        game = Game.from_frames(frames, start=cfg.game.first_position)
    else:
        game = cfg.game.build()
    total = game.total_score()
    LOGGER.info(
        "Scored game",
        extra={"stage": "cli", "command": "score", "n_frames": len(game), "total": total},
    )
    if per_frame:
        print(score_sheet(game))
    print(total)
    return total


def _simulate(cfg: AppConfig) -> None:
    totals = simulate_many_games(
        cfg.sim.n_games,
        n_frames=cfg.sim.n_frames,
        seed=cfg.sim.seed,
        strike_bias=cfg.sim.strike_bias,
    )
    summary = summarize_scores(totals)
    LOGGER.info(
        "games=%d mean=%.2f std=%.2f min=%s max=%s",
        summary["n_games"],
        summary["mean"],
        summary["std"],
        summary["min"],
        summary["max"],
        extra={"stage": "cli", "command": "simulate"},
    )


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(argv: Sequence[str] | None = None) -> None:
    """Entry point for the ``bowling`` CLI dispatcher.

    Raises
    ------
    SystemExit
        With status 2 when a roll is rejected while building the game, or
        when a ``--set`` override cannot be applied.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    cfg = load_app_config(args.config) if args.config is not None else AppConfig()
    try:
        cfg = apply_dot_overrides(cfg, list(args.overrides or []))
    except (ValueError, AttributeError) as exc:
        parser.error(str(exc))

    configure_logging(
        level=args.log_level if args.log_level is not None else cfg.logging.level,
        log_file=cfg.logging.log_file,
    )
    LOGGER.info(
        "CLI arguments parsed",
        extra={
            "stage": "cli",
            "command": args.command,
            "config_path": str(args.config) if args.config is not None else None,
            "overrides": list(args.overrides or []),
        },
    )

    if args.command == "score":
        try:
            _score(cfg, args.frames, args.per_frame)
        except ValueError as exc:
            # RollError, or a config pin that is not a non-negative int
            code = exc.code if isinstance(exc, RollError) else "invalid_pins"
            LOGGER.error(
                "Rejected roll: %s",
                exc,
                extra={"stage": "cli", "command": "score", "code": code},
            )
            raise SystemExit(EXIT_BAD_ROLL) from exc
    elif args.command == "watch":
        if args.n_frames is not None:
            cfg.sim.n_frames = args.n_frames
        seed = args.seed if args.seed is not None else cfg.sim.seed
        watch_game(seed=seed, n_frames=cfg.sim.n_frames, strike_bias=cfg.sim.strike_bias)
    elif args.command == "simulate":
        if args.n_games is not None:
            cfg.sim.n_games = args.n_games
        if args.seed is not None:
            cfg.sim.seed = args.seed
        if args.n_frames is not None:
            cfg.sim.n_frames = args.n_frames
        _simulate(cfg)
    else:  # pragma: no cover - argparse enforces valid choices
        parser.error(f"Unknown command {args.command}")


if __name__ == "__main__":  # pragma: no cover
    main()
