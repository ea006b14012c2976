from .measure import char_width, graphemes, measure_text, text_display_width, Size
from .units import TextUnits
from .wrapper import LineWrapper, WidthError, can_break, effective_width, wrap, wrap_lines

__all__ = [
    "LineWrapper",
    "Size",
    "TextUnits",
    "WidthError",
    "can_break",
    "char_width",
    "effective_width",
    "graphemes",
    "measure_text",
    "text_display_width",
    "wrap",
    "wrap_lines",
]
