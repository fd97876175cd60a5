from __future__ import annotations

from typing import List, Sequence, TextIO

from tailfeather.config import COLOR_ANSI, COLOR_TAGGED, Config
from tailfeather.palette import RESET, Color, ansi_for


class Renderer:
    """Write colored fields to *stream* according to ``config.color``."""

    def __init__(self, config: Config, stream: TextIO) -> None:
        self.config = config
        self.stream = stream

    def _paint(self, value: str, color: Color) -> str:
        mode = self.config.color
        if mode == COLOR_ANSI:
            return f"{ansi_for(color)}{value}"
        if mode == COLOR_TAGGED:
            return f"<{color}>{value}</{color}>"
        return value

    def format_line(self, fields: Sequence[str], colors: Sequence[Color]) -> str:
        if len(fields) != len(colors):
            raise ValueError(f"got {len(colors)} colors for {len(fields)} fields")
        pieces: List[str] = [self._paint(value, color) for value, color in zip(fields, colors)]
        return self.config.output_delimiter.join(pieces) + "\n"

    def write_line(self, fields: Sequence[str], colors: Sequence[Color]) -> None:
        self.stream.write(self.format_line(fields, colors))

    def reset(self) -> None:
        """Return the terminal to its default color."""
        if self.config.color == COLOR_ANSI:
            self.stream.write(RESET)
        self.stream.flush()


__all__ = ["Renderer"]
