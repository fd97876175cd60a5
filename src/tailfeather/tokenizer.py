"""Line splitting helpers."""
from __future__ import annotations

from typing import List


def strip_newline(raw: str) -> str:
    """Drop one trailing ``\\n`` and then one trailing ``\\r``."""
    if raw.endswith("\n"):
        raw = raw[:-1]
    if raw.endswith("\r"):
        raw = raw[:-1]
    return raw


def split_fields(line: str, delimiter: str) -> List[str]:
    """Split *line* on the exact *delimiter*.

    Runs of delimiters produce empty fields and an empty line is a single
    empty field. An empty delimiter splits the line into characters, which
    leaves no fields at all for an empty line.
    """
    if delimiter == "":
        return list(line)
    return line.split(delimiter)


__all__ = ["strip_newline", "split_fields"]
