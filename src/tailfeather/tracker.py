from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence

from tailfeather.palette import PALETTE, Color

LOG = logging.getLogger(__name__)


class FieldTracker:
    """Color cache for a single column.

    Each palette entry is a slot. ``slot_of_value`` maps a value to its slot
    and ``value_of_slot`` is the inverse, so the list works as a ring buffer
    of the last ``K`` novel values. New values take the slot under the
    ``next_slot`` cursor; when that slot's color is the one shown last on this
    column, the cursor skips ahead by one so a fresh value never renders in
    the same color as the previous line.
    """

    def __init__(self, palette: Sequence[Color] = PALETTE) -> None:
        if len(palette) < 2:
            raise ValueError("palette needs at least two colors")
        self.palette: tuple[Color, ...] = tuple(palette)
        self.slot_of_value: Dict[str, int] = {}
        self.value_of_slot: List[Optional[str]] = [None] * len(self.palette)
        self.next_slot = 0
        # Seeded so the first comparison never matches slot 0.
        self.last_color: Color = self.palette[-1]

    def __len__(self) -> int:
        return len(self.slot_of_value)

    def __contains__(self, value: object) -> bool:
        return value in self.slot_of_value

    @property
    def capacity(self) -> int:
        return len(self.palette)

    def assign(self, value: str) -> Color:
        """Return the color for *value*, inserting it when it is novel."""
        slot = self.slot_of_value.get(value)
        if slot is None:
            slot = self._insert(value)
        color = self.palette[slot]
        self.last_color = color
        return color

    def _insert(self, value: str) -> int:
        size = len(self.palette)
        slot = self.next_slot
        if self.palette[slot] == self.last_color:
            slot = (slot + 1) % size

        evicted = self.value_of_slot[slot]
        if evicted is not None:
            del self.slot_of_value[evicted]
            LOG.debug("evicted %r from slot %d", evicted, slot)

        self.value_of_slot[slot] = value
        self.slot_of_value[value] = slot
        self.next_slot = (slot + 1) % size
        return slot

    def color_of(self, value: str) -> Optional[Color]:
        """Peek at the color of a tracked value without touching any state."""
        slot = self.slot_of_value.get(value)
        if slot is None:
            return None
        return self.palette[slot]

    def tracked(self) -> List[str]:
        """Live values in slot order."""
        return [v for v in self.value_of_slot if v is not None]


__all__ = ["FieldTracker"]
