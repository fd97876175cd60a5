"""Color delimited fields so repeated values line up visually."""

from tailfeather.palette import PALETTE
from tailfeather.tracker import FieldTracker

__version__ = "0.1.0"

__all__ = ["PALETTE", "FieldTracker", "__version__"]
