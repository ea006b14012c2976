# Japanese line breaking rules (kinsoku shori).

# Units that must never start a line: closing brackets and quotes,
# sentence punctuation, prolonged sound mark, small kana and iteration marks.
LINE_START_PROHIBITED: frozenset[str] = frozenset(
    [
        *"。.?!‼⁇⁈⁉,)）]｝、〕〉》」』】〙〗〟’”｠»ゝゞ\"ー",
        *"ァィゥェォッャュョヮヵヶ",
        *"ぁぃぅぇぉっゃゅょゎゕゖ",
        *"ㇰㇱㇲㇳㇴㇵㇶㇷㇸㇹㇺㇻㇼㇽㇾㇿ",
        "\u31f7\u309a",  # small ku with handakuten, one cluster
        *"々〻",
    ]
)

# Units that must never end a line: opening brackets and quotes.
LINE_END_PROHIBITED: frozenset[str] = frozenset("(（[｛〔〈《「『【〘〖〝‘“｟«\"")


def is_line_start_prohibited(unit: str) -> bool:
    return unit in LINE_START_PROHIBITED


def is_line_end_prohibited(unit: str) -> bool:
    return unit in LINE_END_PROHIBITED
