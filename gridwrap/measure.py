from dataclasses import dataclass
import os

import grapheme


@dataclass
class Size:
    rows: int
    cols: int


def viewpoint():
    size = os.get_terminal_size()
    return Size(rows=int(size.lines), cols=int(size.columns))


def graphemes(text: str) -> list[str]:
    """
    Split a string into grapheme clusters.

    Surrogate pairs and combining sequences stay together as a single unit.
    """
    if not text:
        return []
    return list(grapheme.graphemes(text))


def char_width(unit: str) -> int:
    """
    Check if a unit is narrow (1 column) or wide (2 columns).

    Only units made entirely of ASCII code points are narrow. The empty string
    marks the end of input and has no width.
    """
    if not unit:
        return 0
    return 1 if unit.isascii() else 2


def text_display_width(text: str) -> int:
    """
    Calculate the display width of a string.
    """
    return sum(char_width(u) for u in graphemes(text))


def measure_text(text: str, wrap: int | None = None) -> tuple[Size, list[str]]:
    """
    Measure a block of text in rows and columns.

    With `wrap`, lines wider than `wrap` columns are hard-split at grapheme
    boundaries before measuring.
    """
    if wrap is not None:
        assert wrap > 0, "wrap must be greater than 0"
    rows: list[str] = []
    width: list[int] = []
    for line in text.splitlines():
        width.append(0)
        rows.append("")
        for u in graphemes(line):
            w = char_width(u)
            if wrap and width[-1] > 0 and width[-1] + w > wrap:
                # start a new row
                width.append(w)
                rows.append(u)
            else:
                width[-1] += w
                rows[-1] += u
    return Size(len(rows), max(width, default=0)), rows
