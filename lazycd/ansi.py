"""Display-width aware text shaping for terminal rows.

Text passed here is plain (no escape sequences); styling is applied after a
row has been clipped and padded to its final width.
"""

from __future__ import annotations

import unicodedata

TAB_STOP = 8


def char_display_width(ch: str, col: int) -> int:
    """Return terminal column width for one character at visual column ``col``.

    Tabs expand to the next 8-column stop, combining marks consume no columns,
    and East Asian wide/fullwidth characters consume two.
    """
    if ch == "\t":
        return TAB_STOP - (col % TAB_STOP)
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    col = 0
    for ch in text:
        col += char_display_width(ch, col)
    return col


def printable(text: str) -> str:
    """Replace control characters (possible in file names) with ``?``."""
    return "".join(ch if ch.isprintable() or ch == "\t" else "?" for ch in text)


def clip_text(text: str, max_cols: int) -> str:
    """Trim ``text`` to at most ``max_cols`` display columns.

    Tabs are expanded into spaces so clipping aligns with rendered cells.
    """
    if max_cols <= 0 or not text:
        return ""
    out: list[str] = []
    col = 0
    for ch in text:
        w = char_display_width(ch, col)
        if col + w > max_cols:
            break
        out.append(" " * w if ch == "\t" else ch)
        col += w
    return "".join(out)


def clip_text_left(text: str, max_cols: int, marker: str = "…") -> str:
    """Keep the tail of ``text`` within ``max_cols``, prefixing ``marker``."""
    if max_cols <= 0:
        return ""
    if display_width(text) <= max_cols:
        return text
    budget = max_cols - display_width(marker)
    if budget <= 0:
        return clip_text(marker, max_cols)
    tail: list[str] = []
    used = 0
    for ch in reversed(text):
        w = char_display_width(ch, 0)
        if used + w > budget:
            break
        tail.append(ch)
        used += w
    return marker + "".join(reversed(tail))


def fit_text(text: str, width: int) -> str:
    """Clip ``text`` to ``width`` columns and right-pad it with spaces."""
    clipped = clip_text(text, width)
    return clipped + " " * max(0, width - display_width(clipped))


__all__ = [
    "TAB_STOP",
    "char_display_width",
    "display_width",
    "printable",
    "clip_text",
    "clip_text_left",
    "fit_text",
]
