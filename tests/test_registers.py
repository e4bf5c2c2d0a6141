import pytest

from handrouter.registers import format_bin, format_hex


def test_format_hex_layout():
    assert format_hex(0x00000753) == "00:00:07:53"


@pytest.mark.parametrize("value", [0, 1, 0x753, 0xDEADBEEF, 0xFFFFFFFF])
def test_format_hex_round_trip(value):
    text = format_hex(value)
    assert len(text) == 11
    assert int(text.replace(":", ""), 16) == value
    assert text == text.upper()


@pytest.mark.parametrize("value", [0, 5, 0x753, 0x80000001, 0xFFFFFFFF])
def test_format_bin_round_trip(value):
    text = format_bin(value)
    groups = text.split(".")
    assert [len(g) for g in groups] == [8, 8, 8, 8]
    assert int("".join(groups), 2) == value


def test_format_bin_top_bit_first():
    assert format_bin(0x80000000).startswith("1")
    assert format_bin(1).endswith("1")


@pytest.mark.parametrize("value", [-1, 0x100000000])
def test_out_of_range_rejected(value):
    with pytest.raises(ValueError):
        format_hex(value)
    with pytest.raises(ValueError):
        format_bin(value)