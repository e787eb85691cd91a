"""Environment-based configuration.

Values are read from the environment when a config object is created, so a
``.env`` loaded beforehand (see ``load_environment``) takes effect.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from dotenv import find_dotenv, load_dotenv


def load_environment(dotenv_path: str | None = None) -> bool:
    """Load ``.env`` from ``dotenv_path`` or the nearest one above the cwd.

    Variables already present in the environment win.
    """

    return load_dotenv(dotenv_path or find_dotenv(usecwd=True))


def _env(name: str, default: str) -> str:
    return os.getenv(name, default)


def resolve_random_seed() -> int | None:
    """Resolve the optional RNG seed.

    Unset or non-integer values mean "seed from OS entropy".
    """

    raw = os.getenv("LOTTO_RANDOM_SEED", "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def resolve_profit_rate_decimals() -> int:
    raw = os.getenv("PROFIT_RATE_DECIMALS", "").strip()
    try:
        decimals = int(raw) if raw else 1
    except ValueError:
        decimals = 1
    return max(1, decimals)


@dataclass(frozen=True)
class BaseConfig:
    """Base configuration shared by all environments."""

    APP_ENV: str = field(default_factory=lambda: _env("APP_ENV", "development"))
    LOG_LEVEL: str = field(default_factory=lambda: _env("LOG_LEVEL", "WARNING"))
    MESSAGE_LOCALE: str = field(default_factory=lambda: _env("MESSAGE_LOCALE", "ko").lower().strip())  # "ko" | "en"

    LOTTO_RANDOM_SEED: int | None = field(default_factory=resolve_random_seed)
    PROFIT_RATE_DECIMALS: int = field(default_factory=resolve_profit_rate_decimals)


@dataclass(frozen=True)
class DevelopmentConfig(BaseConfig):
    """Development configuration."""

    DEBUG: bool = True


@dataclass(frozen=True)
class ProductionConfig(BaseConfig):
    """Production configuration."""

    DEBUG: bool = False


def get_config() -> type[BaseConfig]:
    """Resolve configuration class based on APP_ENV."""

    env = os.getenv("APP_ENV", "development").lower().strip()
    if env == "production":
        return ProductionConfig
    return DevelopmentConfig
