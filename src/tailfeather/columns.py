from __future__ import annotations

import logging
from typing import List, Sequence

from tailfeather.palette import PALETTE, Color
from tailfeather.tracker import FieldTracker

LOG = logging.getLogger(__name__)


class ColumnSet:
    """One :class:`FieldTracker` per column, rebuilt whenever the shape changes.

    A line whose field count differs from the previous one throws away every
    tracker, so identical values on both sides of the change are novel again.
    Lines with no fields at all leave the trackers untouched.
    """

    def __init__(self, palette: Sequence[Color] = PALETTE) -> None:
        self.palette = tuple(palette)
        self.trackers: List[FieldTracker] = []
        self.resets = 0

    @property
    def width(self) -> int:
        return len(self.trackers)

    def reshape(self, width: int) -> None:
        LOG.debug("field count changed %d -> %d; resetting trackers", self.width, width)
        self.trackers = [FieldTracker(self.palette) for _ in range(width)]
        self.resets += 1

    def colors_for(self, fields: Sequence[str]) -> List[Color]:
        """Return one color per field, reshaping first if the width changed."""
        if not fields:
            return []
        if len(fields) != self.width:
            self.reshape(len(fields))
        return [tracker.assign(value) for tracker, value in zip(self.trackers, fields)]


__all__ = ["ColumnSet"]
