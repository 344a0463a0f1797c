"""Common utility functions for cmsdoc."""

from cmsdoc.utils.text import capitalize
from cmsdoc.utils.timestamps import get_iso_timestamp

__all__ = [
    "capitalize",
    "get_iso_timestamp",
]
