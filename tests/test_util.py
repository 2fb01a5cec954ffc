import pytest

from firgraph.kinds import OPType
from firgraph.util import (
    ShiftDir,
    fir_str_base,
    shift_bits,
    str2op_expr1,
    str2op_expr1int1,
    str2op_expr2,
    to_hex_string,
    upper_log2,
    upper_power2,
)


@pytest.mark.parametrize(
    "literal, expected",
    [
        ("0h1f", (16, "1f")),
        ("-0h1f", (16, "-1f")),
        ("0b101", (2, "101")),
        ("0o17", (8, "17")),
        ("0d42", (10, "42")),
        ("42", (10, "42")),
        ("-42", (10, "-42")),
        ("7", (10, "7")),
        ("", (10, "")),
        ("00", (10, "00")),
        ("-0", (10, "-0")),
    ],
)
def test_fir_str_base(literal, expected):
    assert fir_str_base(literal) == expected


@pytest.mark.parametrize("value", [0, 1, 15, 16, 255, 2**70 + 3])
def test_to_hex_string_round_trip(value):
    text = to_hex_string(value)
    assert int(text, 16) == value
    assert text == text.lower()


def test_to_hex_string_zero():
    assert to_hex_string(0) == "0"


def test_to_hex_string_negative():
    with pytest.raises(ValueError):
        to_hex_string(-1)


@pytest.mark.parametrize(
    "name, op",
    [("add", OPType.ADD), ("dshr", OPType.DSHR), ("cat", OPType.CAT), ("neq", OPType.NEQ)],
)
def test_str2op_expr2(name, op):
    assert str2op_expr2(name) == op


@pytest.mark.parametrize(
    "name, op",
    [("asUInt", OPType.ASUINT), ("asAsyncReset", OPType.ASASYNCRESET), ("xorr", OPType.XORR)],
)
def test_str2op_expr1(name, op):
    assert str2op_expr1(name) == op


@pytest.mark.parametrize(
    "name, op",
    [("pad", OPType.PAD), ("head", OPType.HEAD), ("tail", OPType.TAIL)],
)
def test_str2op_expr1int1(name, op):
    assert str2op_expr1int1(name) == op


@pytest.mark.parametrize(
    "func, name",
    [(str2op_expr2, "pad"), (str2op_expr1, "add"), (str2op_expr1int1, "asUInt")],
)
def test_str2op_rejects_unknown(func, name):
    with pytest.raises(ValueError):
        func(name)


@pytest.mark.parametrize("x", [0, 1])
def test_small_values_pass_through(x):
    assert upper_power2(x) == x
    assert upper_log2(x) == x


@pytest.mark.parametrize("x", range(2, 300))
def test_upper_power2_invariant(x):
    p = upper_power2(x)
    assert p & (p - 1) == 0
    assert x <= p < 2 * x


@pytest.mark.parametrize("x", range(2, 300))
def test_upper_log2_invariant(x):
    n = upper_log2(x)
    assert 2 ** n >= x
    assert 2 ** (n - 1) < x
    assert 1 << n == upper_power2(x)


def test_shift_bits_zero_is_empty():
    assert shift_bits(0, ShiftDir.LEFT) == ""
    assert shift_bits("0", ShiftDir.RIGHT) == ""
    assert shift_bits("0x0", ShiftDir.LEFT) == ""


def test_shift_bits_directions():
    assert shift_bits(3, ShiftDir.LEFT) == " << 3"
    assert shift_bits(3, ShiftDir.RIGHT) == " >> 3"
    assert shift_bits("n", ShiftDir.RIGHT) == " >> n"