"""Logging configuration."""

from __future__ import annotations

import logging

from lotto_game.config import BaseConfig


def configure_logging(config: BaseConfig, level_name: str | None = None) -> None:
    """Configure plain-text logs on stderr.

    Note: Using stdlib logging only (no extra deps).
    """

    name = str(level_name or config.LOG_LEVEL or "WARNING").upper()
    level = getattr(logging, name, logging.WARNING)

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
