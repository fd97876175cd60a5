"""Fixed color palette shared by every column tracker."""
from __future__ import annotations

from typing import Dict, Tuple

Color = str

WHITE: Color = "white"
MAGENTA: Color = "magenta"
CYAN: Color = "cyan"
BLUE: Color = "blue"
GREEN: Color = "green"
YELLOW: Color = "yellow"
RED: Color = "red"

# Order is observable: slot ``s`` always renders as ``PALETTE[s]``.
PALETTE: Tuple[Color, ...] = (WHITE, MAGENTA, CYAN, BLUE, GREEN, YELLOW, RED)

RESET = "\x1b[0m"

_COLOR_NAME_TO_ANSI: Dict[Color, str] = {
    "black": "\x1b[30m",
    "red": "\x1b[31m",
    "green": "\x1b[32m",
    "yellow": "\x1b[33m",
    "blue": "\x1b[34m",
    "magenta": "\x1b[35m",
    "cyan": "\x1b[36m",
    "white": "\x1b[37m",
}


def ansi_for(color: Color) -> str:
    """Return the SGR foreground sequence for *color* (empty when unknown)."""
    return _COLOR_NAME_TO_ANSI.get(color.lower(), "")


__all__ = [
    "Color",
    "WHITE",
    "MAGENTA",
    "CYAN",
    "BLUE",
    "GREEN",
    "YELLOW",
    "RED",
    "PALETTE",
    "RESET",
    "ansi_for",
]
