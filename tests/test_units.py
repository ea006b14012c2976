import dataclasses

import pytest

from gridwrap.units import TextUnits


@pytest.fixture
def units() -> TextUnits:
    return TextUnits("aあ𠀋b")


def test_length_counts_graphemes(units: TextUnits):
    assert len(units) == 4
    assert list(units) == ["a", "あ", "𠀋", "b"]
    assert len(TextUnits("")) == 0


def test_at_is_clamped(units: TextUnits):
    assert units.at(0) == "a"
    assert units.at(2) == "𠀋"
    assert units.at(-1) == ""
    assert units.at(4) == ""


def test_slice_is_clamped(units: TextUnits):
    assert units.slice(1, 2) == "あ𠀋"
    assert units.slice(-3, 2) == "aあ"
    assert units.slice(2) == "𠀋b"
    assert units.slice(2, 100) == "𠀋b"
    assert units.slice(10) == ""
    assert units.slice(10, 1) == ""
    assert units.slice(1, 0) == ""


def test_take(units: TextUnits):
    assert units.take(1, 2) == ("あ", "𠀋")
    assert units.take(5) == ()


def test_find(units: TextUnits):
    assert units.find("b") == 3
    assert units.find("b", 2) == 1
    assert units.find("a", 1) == -1
    assert units.find("z") == -1


def test_width(units: TextUnits):
    assert units.width() == 6


def test_is_immutable(units: TextUnits):
    with pytest.raises(dataclasses.FrozenInstanceError):
        units.text = "x"  # type: ignore[misc]
