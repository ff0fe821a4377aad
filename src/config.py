"""Settings loaded from environment variables (+ optional .env file).

All variables share the ``TODO_`` prefix. A ``.env`` file in the working
directory is read once at import; real environment variables win over it.
Malformed values fall back to the defaults.
"""
from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "TODO"
HEX_DIGITS = set("0123456789abcdefABCDEF")

load_dotenv(find_dotenv(usecwd=True), override=False)


def _k(suffix: str) -> str:
    return f"{ENV_PREFIX}_{suffix}"


def truthy_env(value: Optional[str], default: bool) -> bool:
    if value is None:
        return default
    return value.strip().lower() not in {"0", "false", "no", "off", ""}


def env_hex(suffix: str, default: str) -> str:
    """Hex color from ``TODO_<suffix>``; invalid codes yield ``default``."""
    raw = (os.getenv(_k(suffix)) or "").strip().lstrip('#')
    if len(raw) == 6 and all(c in HEX_DIGITS for c in raw):
        return '#' + raw
    return default


def parse_level(raw: Optional[str], default: int = logging.WARNING) -> int:
    if not raw:
        return default
    level = logging.getLevelName(raw.strip().upper())
    return level if isinstance(level, int) else default


@dataclass(frozen=True)
class Settings:
    log_level: int = logging.WARNING
    log_file: Optional[Path] = None
    show_menu_once: bool = False


def load_settings() -> Settings:
    log_file = (os.getenv(_k("LOG_FILE")) or "").strip()
    return Settings(
        log_level=parse_level(os.getenv(_k("LOG_LEVEL"))),
        log_file=Path(log_file).expanduser() if log_file else None,
        show_menu_once=truthy_env(os.getenv(_k("SHOW_MENU_ONCE")), False),
    )
