"""
Settings
========
Startup configuration: defaults, overridable from environment variables
(DLL_NOISE, DLL_SEED, DLL_LOG_LEVEL) and then from command-line flags in main.py.
"""
import logging
import os
from dataclasses import dataclass

from .state import TOTAL_POINTS, DRAG_TOLERANCE

ENV_PREFIX = "DLL_"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Settings:
    n_points: int = TOTAL_POINTS
    noise: int = 20
    seed: int | None = None
    drag_tolerance: float = DRAG_TOLERANCE
    log_level: str = "INFO"
    geometry: str = "1200x760"

    @classmethod
    def from_env(cls, environ=None) -> "Settings":
        env = os.environ if environ is None else environ
        s = cls()
        if env.get(ENV_PREFIX + "NOISE"):
            s.noise = parse_int(env[ENV_PREFIX + "NOISE"], "DLL_NOISE")
        if env.get(ENV_PREFIX + "SEED"):
            s.seed = parse_int(env[ENV_PREFIX + "SEED"], "DLL_SEED")
        if env.get(ENV_PREFIX + "LOG_LEVEL"):
            s.log_level = parse_log_level(env[ENV_PREFIX + "LOG_LEVEL"])
        return s


def parse_int(value, name: str) -> int:
    try:
        return int(str(value).strip())
    except ValueError:
        raise ValueError(f"{name}: expected an integer, got {value!r}") from None


def parse_log_level(value: str) -> str:
    level = str(value).strip().upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"Unknown log level {value!r} (expected one of {', '.join(LOG_LEVELS)})")
    return level


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logging.getLogger("matplotlib").setLevel(logging.WARNING)
    logging.getLogger("PIL").setLevel(logging.WARNING)
