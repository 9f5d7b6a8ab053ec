import pytest

from bitcalc.values import calc_int, format_value, is_calc_value, unsigned_bits


@pytest.mark.parametrize(
    "value,expected",
    [
        (0, 0),
        (1, 1),
        (-1, -1),
        (2**63 - 1, 2**63 - 1),
        (2**63, -(2**63)),
        (2**64, 0),
        (2**64 + 5, 5),
        (-(2**63) - 1, 2**63 - 1),
    ],
)
def test_calc_int_wraps(value: int, expected: int):
    result = calc_int(value)
    assert is_calc_value(result)
    assert result == expected


def test_is_calc_value():
    assert not is_calc_value(1)
    assert not is_calc_value("1")


def test_unsigned_bits():
    assert unsigned_bits(calc_int(-1)) == 2**64 - 1
    assert unsigned_bits(calc_int(5)) == 5


@pytest.mark.parametrize(
    "value,expected",
    [
        (0, "0  0x0  0b0"),
        (10, "10  0xa  0b1010"),
        (64, "64  0x40  0b1000000"),
        (-1, "-1  0xffffffffffffffff  0b" + "1" * 64),
        (-(2**63), f"{-(2**63)}  0x8000000000000000  0b1" + "0" * 63),
    ],
)
def test_format_value(value: int, expected: str):
    assert format_value(calc_int(value)) == expected
