"""Directory scanning into immutable listing entries."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Entry:
    """One member of a listed directory."""

    name: str
    path: Path
    is_dir: bool
    is_symlink: bool = False

    @property
    def label(self) -> str:
        """Display text: directories get a trailing ``/``, symlinks ``@``."""
        if self.is_dir:
            return self.name + "/"
        if self.is_symlink:
            return self.name + "@"
        return self.name


def _sort_key(entry: Entry) -> tuple[str, str]:
    return (entry.name.casefold(), entry.name)


def read_listing(directory: Path, show_hidden: bool = True) -> tuple[Entry, ...]:
    """Return sorted entries of ``directory``.

    ``OSError`` from opening the directory propagates unchanged so callers can
    decide whether it is a navigation or a filesystem failure. Per-entry stat
    failures only downgrade that entry to a non-directory.
    """
    entries: list[Entry] = []
    with os.scandir(directory) as it:
        for child in it:
            name = child.name
            if not show_hidden and name.startswith("."):
                continue
            try:
                is_dir = child.is_dir(follow_symlinks=False)
            except OSError:
                is_dir = False
            try:
                is_symlink = child.is_symlink()
            except OSError:
                is_symlink = False
            entries.append(
                Entry(
                    name=name,
                    path=Path(directory) / name,
                    is_dir=is_dir,
                    is_symlink=is_symlink,
                )
            )
    entries.sort(key=_sort_key)
    return tuple(entries)


__all__ = ["Entry", "read_listing"]
