"""Environment-driven settings.

Values are read once at import time. Functions that depend on them look the
module attribute up at call time, so explicit arguments (or monkeypatching in
tests) take precedence.
"""

from __future__ import annotations

import logging
import os

logger = logging.getLogger(__name__)


def env_flag(name: str, default: bool) -> bool:
    """Return True/False for typical truthy env encodings."""
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def env_int(name: str, default: int) -> int:
    """Return an int env value, keeping `default` when the value is not a number."""
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value.strip())
    except ValueError:
        logger.warning("Ignoring %s=%r, expected an integer; using %d", name, value, default)
        return default


DEFAULT_LANGUAGE = os.getenv("JSONMEND_LANGUAGE", "en")

# Recombine \uD8xx\uDCxx pairs in the permissive decoder; off keeps each unit independent
PAIR_SURROGATES = env_flag("JSONMEND_PAIR_SURROGATES", False)

PRETTY_INDENT = env_int("JSONMEND_PRETTY_INDENT", 2)

LOG_LEVEL = os.getenv("JSONMEND_LOG_LEVEL", "WARNING").upper()
