from dataclasses import dataclass, field
from typing import Iterator

from .measure import char_width, graphemes


@dataclass(frozen=True)
class TextUnits:
    """
    An immutable view over the grapheme units of a string.

    All positions count units, not code points. Every accessor is clamped to
    the bounds of the view: reading outside it yields an empty result instead
    of raising.
    """

    text: str
    units: tuple[str, ...] = field(init=False, repr=False)

    def __post_init__(self):
        object.__setattr__(self, "units", tuple(graphemes(self.text)))

    def __len__(self) -> int:
        return len(self.units)

    def __iter__(self) -> Iterator[str]:
        return iter(self.units)

    def at(self, index: int) -> str:
        """The unit at `index`, or "" when `index` is out of range."""
        if index < 0 or index >= len(self.units):
            return ""
        return self.units[index]

    def take(self, start: int, length: int | None = None) -> tuple[str, ...]:
        start = max(start, 0)
        if length is None:
            return self.units[start:]
        if length < 1:
            return ()
        return self.units[start : start + length]

    def slice(self, start: int, length: int | None = None) -> str:
        return "".join(self.take(start, length))

    def find(self, unit: str, start: int = 0) -> int:
        """
        Offset of the first `unit` at or after `start`, relative to `start`.
        Returns -1 when there is none.
        """
        for offset, u in enumerate(self.take(start)):
            if u == unit:
                return offset
        return -1

    def width(self) -> int:
        return sum(char_width(u) for u in self.units)
