from __future__ import annotations
import logging
import os


_DEFAULT_PROMPT = ">"
_DEFAULT_LOG_LEVEL = "WARNING"


def value_from_env(var: str, default: str) -> str:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw


def get_prompt() -> str:
    return value_from_env('KAPPA_PROMPT', _DEFAULT_PROMPT)


def get_log_level() -> int:
    name = value_from_env('KAPPA_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    # getLevelName returns a "Level X" string for unknown names
    return level if isinstance(level, int) else logging.WARNING
