import pytest

from gridwrap.kinsoku import (
    LINE_END_PROHIBITED,
    LINE_START_PROHIBITED,
    is_line_end_prohibited,
    is_line_start_prohibited,
)


@pytest.mark.parametrize("unit", ["。", "、", "」", "）", "っ", "ャ", "ー", "々", "\u31f7\u309a", "!", "?"])
def test_line_start_prohibited(unit: str):
    assert is_line_start_prohibited(unit)
    assert not is_line_end_prohibited(unit)


@pytest.mark.parametrize("unit", ["「", "（", "【", "“", "«", "("])
def test_line_end_prohibited(unit: str):
    assert is_line_end_prohibited(unit)
    assert not is_line_start_prohibited(unit)


def test_ascii_quote_is_in_both_tables():
    assert is_line_start_prohibited('"')
    assert is_line_end_prohibited('"')


@pytest.mark.parametrize("unit", ["", "あ", "a", " ", "\n", "<"])
def test_ordinary_units(unit: str):
    assert not is_line_start_prohibited(unit)
    assert not is_line_end_prohibited(unit)


def test_tables_hold_single_units():
    for unit in LINE_START_PROHIBITED | LINE_END_PROHIBITED:
        assert 1 <= len(unit) <= 2
