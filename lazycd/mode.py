"""Input modes gating which component receives key presses."""

from __future__ import annotations

from enum import Enum


class Mode(Enum):
    NORMAL = "Normal"
    SEARCH = "Search"

    def __str__(self) -> str:
        return self.value


__all__ = ["Mode"]
