"""Color & style helpers.

Decisions:
- Truecolor preferred; falls back to 256-color cube if unsupported.
- Disables automatically when not a TTY unless FORCE_COLOR=1.
- Honors NO_COLOR for complete disable.
- Palette overrides come from TODO_PRIMARY / TODO_PENDING / TODO_DONE
  (environment or .env, see config).
"""
from __future__ import annotations
import os, sys
from config import env_hex

_FORCE = os.environ.get("FORCE_COLOR", "").lower() in {"1", "true", "yes", "on"}
_NO_COLOR = os.environ.get("NO_COLOR") is not None
_ENABLE = (_FORCE or sys.stdout.isatty()) and not _NO_COLOR
_COLORTERM = os.environ.get("COLORTERM", "").lower()
_USE_TRUECOLOR = _ENABLE and any(tok in _COLORTERM for tok in ("truecolor", "24bit"))

def _code(part: str) -> str:
    return f"\033[{part}m" if _ENABLE else ''

def _hex_to_rgb(hex_code: str) -> tuple[int,int,int]:
    h = hex_code.lstrip('#')
    return int(h[0:2],16), int(h[2:4],16), int(h[4:6],16)

def _fg_256(r: int, g: int, b: int) -> str:
    """Approximate RGB to xterm 256-color cube."""
    def to_6(x: int) -> int:
        return int(round(x / 255 * 5))
    idx = 16 + 36 * to_6(r) + 6 * to_6(g) + to_6(b)
    return f"\033[38;5;{idx}m"

def _from_hex(hex_code: str) -> str:
    if not _ENABLE:
        return ''
    r, g, b = _hex_to_rgb(hex_code)
    if _USE_TRUECOLOR:
        return f"\033[38;2;{r};{g};{b}m"
    return _fg_256(r, g, b)

RESET = _code('0')
BOLD = _code('1')
DIM = _code('2')

HEX_PRIMARY = env_hex('PRIMARY', '#476EAE')
HEX_PENDING = env_hex('PENDING', '#48B3AF')
HEX_DONE = env_hex('DONE', '#A7E399')

PRIMARY = _from_hex(HEX_PRIMARY)

STATUS_COLOR = {
    False: _from_hex(HEX_PENDING),
    True: _from_hex(HEX_DONE),
}

HEADER_COLOR = PRIMARY
ID_COLOR = PRIMARY + BOLD
EMPTY_COLOR = DIM + PRIMARY
ERROR_COLOR = _from_hex('#E06C75')

def color(text: str, *styles: str) -> str:
    """Apply ANSI styles to a given text."""
    if not _ENABLE:
        return text
    return ''.join(styles) + text + RESET

__all__ = [
    'color','RESET','BOLD','DIM','STATUS_COLOR','HEADER_COLOR','ID_COLOR','EMPTY_COLOR',
    'ERROR_COLOR','HEX_PRIMARY','HEX_PENDING','HEX_DONE',
]
