import os
from enum import Enum
from typing import Iterable

from .kinsoku import is_line_end_prohibited, is_line_start_prohibited
from .measure import char_width, graphemes, text_display_width
from .units import TextUnits

BREAK = "\n"
BRACKET_OPEN = "<"
BRACKET_CLOSE = ">"


class WidthError(ValueError):
    def __init__(self, width: object):
        super().__init__(f"max_width must be a positive integer, got {width!r}")
        self.width = width


class LineEnd(Enum):
    SOURCE_BREAK = "source_break"
    """The source text had a line break here."""

    WRAP = "wrap"
    """The line was full and a legal break point was found."""


class LineBuffer:
    """
    The units of the line being built, seeded with the indent.
    """

    def __init__(self, indent: str = ""):
        self.units: list[str] = graphemes(indent)
        self.width = sum(char_width(u) for u in self.units)
        self.__indent_length = len(self.units)

    @property
    def content_length(self) -> int:
        return len(self.units) - self.__indent_length

    @property
    def last(self) -> str:
        return self.units[-1] if len(self.units) > 0 else ""

    def append(self, unit: str):
        self.units.append(unit)
        self.width += char_width(unit)

    def extend(self, units: Iterable[str]):
        for u in units:
            self.append(u)

    def pop(self) -> str:
        unit = self.units.pop()
        self.width -= char_width(unit)
        return unit

    def is_blank(self) -> bool:
        return str(self).strip() == ""

    def __str__(self) -> str:
        return "".join(self.units)


def normalize(text: str) -> str:
    """
    Trim surrounding line breaks and turn every line break into a single `BREAK` unit.
    """
    content = text.strip("\r\n")
    return content.replace("\r\n", BREAK).replace("\r", BREAK)


def effective_width(indent: str, max_width: int) -> int:
    indent_width = text_display_width(indent)
    half = max_width // 2
    if max_width - indent_width < half:
        # The indent is too long. Keep at least half of max_width for the text.
        return indent_width + half
    return max_width


def can_break(prev_unit: str, next_unit: str) -> bool:
    """
    Check if a line may end between `prev_unit` and `next_unit`.

    Runs of narrow units are never split, so words and URLs stay intact. Any
    boundary touching a wide unit is a legal break point.
    """
    if not next_unit or next_unit.isspace():
        return True
    if prev_unit == BREAK:
        return True
    if char_width(prev_unit) == 1:
        return char_width(next_unit) != 1
    return True


def fill(
    units: TextUnits, index: int, line: LineBuffer, width: int
) -> tuple[int, LineEnd]:
    """
    Append units to `line` starting at `index` until the line is complete.

    Returns the index of the first unit of the next line and the reason the
    line ended. A line break in the source is consumed, never appended.
    """
    while True:
        current = units.at(index)
        if current == BREAK:
            return index + 1, LineEnd.SOURCE_BREAK

        line.append(current)
        index += 1

        if current == BRACKET_OPEN:
            # <...> is appended in one piece. An unclosed "<" is a plain unit.
            close = units.find(BRACKET_CLOSE, index)
            if close != -1:
                line.extend(units.take(index, close + 1))
                index += close + 1

        next_unit = units.at(index)
        if next_unit == BREAK:
            return index + 1, LineEnd.SOURCE_BREAK

        if (line.width >= width or index >= len(units)) and can_break(current, next_unit):
            return index, LineEnd.WRAP


def correct(units: TextUnits, index: int, line: LineBuffer) -> int:
    """
    Apply the kinsoku rules to a wrapped line. Returns the adjusted index.
    """
    # Pull up units that may not start the next line, even past the width.
    while is_line_start_prohibited(units.at(index)):
        line.append(units.at(index))
        index += 1

    # Push back a unit that may not end this line, unless it is all we have.
    if is_line_end_prohibited(line.last) and line.content_length > 1:
        line.pop()
        index -= 1

    return index


class LineWrapper:
    def __init__(self, indent: str = "", max_width: int = 80):
        if (
            isinstance(max_width, bool)
            or not isinstance(max_width, int)
            or max_width <= 0
        ):
            raise WidthError(max_width)
        self.indent = indent
        self.max_width = max_width
        self.width = effective_width(indent, max_width)

    def wrap_lines(self, text: str) -> list[str]:
        units = TextUnits(normalize(text))
        lines: list[str] = []
        index = 0
        while index < len(units):
            line = LineBuffer(self.indent)
            index, end = fill(units, index, line, self.width)
            if end == LineEnd.WRAP:
                index = correct(units, index, line)
            if not line.is_blank():
                lines.append(str(line))
            elif len(lines) > 0:
                # Blank lines before the first real line are dropped.
                lines.append("")
        return lines

    def wrap(self, text: str, newline: str = os.linesep) -> str:
        return newline.join(self.wrap_lines(text))


def wrap_lines(text: str, indent: str = "", max_width: int = 80) -> list[str]:
    return LineWrapper(indent, max_width).wrap_lines(text)


def wrap(
    text: str, indent: str = "", max_width: int = 80, newline: str = os.linesep
) -> str:
    """
    Wrap `text` into lines of at most `max_width` columns, `indent` included.

    Wide (non-ASCII) units count as two columns. Line breaks in `text` are
    kept, runs of narrow units and `<...>` spans are never split, and lines
    are adjusted so that closing punctuation does not start a line and opening
    brackets do not end one. Such adjustments may exceed `max_width`.
    """
    return LineWrapper(indent, max_width).wrap(text, newline)
