from __future__ import annotations
import os
from pathlib import Path

# Defaults
_DEFAULT_HISTORY_NAME = ".sprig_history"
_DEFAULT_HISTORY_SIZE = 100
_DEFAULT_PROMPT = "sprig> "
_DEFAULT_LOG_LEVEL = "WARNING"

_TRUE = ("1", "true", "yes", "on")
_FALSE = ("0", "false", "no", "off")


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def bool_from_env(var: str, default: bool) -> bool:
    raw = (os.environ.get(var) or "").strip().lower()
    if raw in _TRUE:
        return True
    if raw in _FALSE:
        return False
    return default


def get_history_file() -> Path:
    raw = os.environ.get("SPRIG_HISTORY_FILE")
    return Path(raw).expanduser() if raw else Path.home() / _DEFAULT_HISTORY_NAME


def get_history_size() -> int:
    return int_from_env("SPRIG_HISTORY_SIZE", _DEFAULT_HISTORY_SIZE)


def get_prompt() -> str:
    return os.environ.get("SPRIG_PROMPT", _DEFAULT_PROMPT)


def get_log_level() -> str:
    return os.environ.get("SPRIG_LOG_LEVEL", _DEFAULT_LOG_LEVEL).upper()


def get_eager_if() -> bool:
    # True restores `if` as an ordinary builtin that evaluates both branches.
    return bool_from_env("SPRIG_EAGER_IF", False)
