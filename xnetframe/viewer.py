"""Log viewers: sinks that show timestamped lines."""

from __future__ import annotations

import abc
import time

from .platform import to_signed

DATE_FORMAT = "%Y/%m/%d %H:%M:%S"


class ViewerError(Exception):
    """A viewer could not show a line."""


def format_date(timestamp) -> str:
    """Format a Unix timestamp as local ``YYYY/MM/DD HH:MM:SS``."""
    try:
        return time.strftime(DATE_FORMAT, time.localtime(timestamp))
    except (OverflowError, OSError, ValueError):
        return f"Abnormal Time {to_signed(int(timestamp), 32)}"


class Viewer(abc.ABC):
    """Base class for named line viewers."""

    def __init__(self, name: str = "") -> None:
        self.name = name

    @abc.abstractmethod
    def view(self, timestamp, line: str) -> None:
        """Show ``line`` logged at ``timestamp``; raise :class:`ViewerError` on failure."""