"""The value/priority pair stored by every priority queue in the package."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Element:
    """A value together with the priority it is queued under."""

    value: int
    priority: int

    def __str__(self) -> str:
        return f"({self.value}:{self.priority})"