"""Command line entrypoint.

Usage:
  python -m lotto_game [--seed 42] [--locale en] [--json] [--log-level INFO]
"""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
from collections.abc import Sequence

from lotto_game import create_game
from lotto_game.config import BaseConfig, get_config, load_environment
from lotto_game.schemas.result import GameResultSchema

logger = logging.getLogger(__name__)

_result_schema = GameResultSchema()


def parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Buy lotto tickets and check them against a winning draw.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for ticket generation (overrides LOTTO_RANDOM_SEED)")
    parser.add_argument("--locale", choices=("ko", "en"), default=None, help="Message language")
    parser.add_argument("--json", action="store_true", help="Print the final result as JSON instead of statistics text")
    parser.add_argument("--log-level", default=None, help="DEBUG|INFO|WARNING|ERROR")
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> BaseConfig:
    """Environment (and ``.env``) config with command line flags applied on top."""

    load_environment()
    config = get_config()()

    overrides: dict[str, object] = {}
    if args.seed is not None:
        overrides["LOTTO_RANDOM_SEED"] = args.seed
    if args.locale is not None:
        overrides["MESSAGE_LOCALE"] = args.locale
    if args.log_level is not None:
        overrides["LOG_LEVEL"] = args.log_level
    if overrides:
        config = dataclasses.replace(config, **overrides)
    return config


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    game = create_game(build_config(args))

    try:
        result = game.run(show_statistics=not args.json)
    except (EOFError, KeyboardInterrupt):
        logger.warning("Input closed before the session finished")
        return 1

    if args.json:
        print(json.dumps(_result_schema.dump(result.to_payload()), ensure_ascii=False, indent=2))
    return 0
