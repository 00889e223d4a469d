"""Tagged results returned by fill_path providers.

A provider answers every level of the walk with either ``Continue(value)``
(assign ``value``, which may be ABSENT, and go on) or ``STOP`` (leave this
level untouched and end the walk).
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Continue:
    """Assign ``value`` at the current level and continue the walk."""
    value: Any


class Stop:
    """End the fill walk at the current level."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "STOP"


STOP = Stop()
