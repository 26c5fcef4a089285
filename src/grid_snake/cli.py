"""Command-line tools for running headless snake sessions."""

from __future__ import annotations

import argparse
import json
import logging
import sys

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="grid-snake",
        description="Grid Snake headless simulation and config tools.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- simulate ---
    sim_p = sub.add_parser(
        "simulate", help="Run a session on a virtual clock.",
    )
    sim_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file.",
    )
    sim_p.add_argument("--ticks", type=int, default=50)
    sim_p.add_argument(
        "--moves", type=str, default="",
        help="Comma-separated directions, one per tick (blank keeps course).",
    )
    sim_p.add_argument("--seed", type=int, default=None)
    sim_p.add_argument(
        "--frames", action="store_true",
        help="Print a text frame after every tick.",
    )

    # --- config ---
    cfg_p = sub.add_parser("config", help="Write the default config as JSON.")
    cfg_p.add_argument("--output", type=str, default=None)

    return parser


def _run_simulate(args: argparse.Namespace) -> int:
    from dataclasses import replace

    from grid_snake.config import GameConfig
    from grid_snake.direction import Direction
    from grid_snake.render import render_text
    from grid_snake.scheduler import ManualScheduler
    from grid_snake.session import GameSession

    config = GameConfig.load(args.config) if args.config else GameConfig()
    if args.seed is not None:
        config = replace(config, seed=args.seed)

    moves: list[Direction | None] = []
    for token in args.moves.split(",") if args.moves else []:
        moves.append(Direction.parse(token) if token.strip() else None)

    scheduler = ManualScheduler()
    session = GameSession(config, scheduler=scheduler)
    if args.frames:
        session.subscribe(lambda snap: print(render_text(snap) + "\n"))  # noqa: T201

    session.start()
    for i in range(args.ticks):
        if i < len(moves) and moves[i] is not None:
            session.request_direction(moves[i])
        if scheduler.advance_ticks(1) == 0:
            break

    print(json.dumps(session.snapshot().to_dict(), indent=2))  # noqa: T201
    return 0


def _run_config(args: argparse.Namespace) -> int:
    from grid_snake.config import GameConfig

    config = GameConfig()
    if args.output:
        config.save(args.output)
    else:
        print(json.dumps(config.to_dict(), indent=2))  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``grid-snake`` CLI."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "simulate": _run_simulate,
        "config": _run_config,
    }
    try:
        return handlers[args.command](args)
    except ValueError as exc:
        logger.error("%s", exc)
        return 2


if __name__ == "__main__":
    sys.exit(main())
