"""Runtime settings read from the environment (and a local .env file)."""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

ENV_PREFIX = "PAINLESS_INPUT_"


def _env(name: str, default: str) -> str:
    return os.getenv(f"{ENV_PREFIX}{name}", default).strip()


def env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(f"{ENV_PREFIX}{name}")
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def env_float(name: str, default: float) -> float:
    raw = _env(name, "")
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("%s%s must be a number, got %r; using %s", ENV_PREFIX, name, raw, default)
        return default


LOG_LEVEL = _env("LOG_LEVEL", "WARNING").upper()
LOG_FILE = _env("LOG_FILE", "")

# Raw mode turns Ctrl+C into an ordinary key; re-raise it as an interrupt.
CTRL_C_INTERRUPTS = env_flag("CTRL_C", True)

# Seconds to wait for the rest of an escape sequence before reporting Escape.
ESCAPE_TIMEOUT = env_float("ESCAPE_TIMEOUT", 0.05)
