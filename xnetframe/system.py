"""Host information: the working home directory and the processor count."""

from __future__ import annotations

import os

GAME_HOME_VARIABLE = "GAME_HOME"


class WorkHomeNotSetError(LookupError):
    """The ``GAME_HOME`` environment variable is not set."""


def work_home_directory() -> str:
    """Return the directory named by ``GAME_HOME``.

    Raises :class:`WorkHomeNotSetError` when the variable is not set.
    """
    value = os.environ.get(GAME_HOME_VARIABLE)
    if value is None:
        raise WorkHomeNotSetError(f"{GAME_HOME_VARIABLE} is not set")
    return value


def current_directory() -> str:
    """Return ``GAME_HOME`` if it is set, otherwise the process working directory."""
    try:
        return work_home_directory()
    except WorkHomeNotSetError:
        return os.getcwd()


def processor_count() -> int:
    """Return the number of processors currently online."""
    try:
        count = os.sysconf("SC_NPROCESSORS_ONLN")
    except (AttributeError, ValueError, OSError):
        count = os.cpu_count() or 1
    return max(int(count), 1)