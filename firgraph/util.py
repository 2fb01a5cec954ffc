"""Helpers for FIRRTL constants, operator names and emitted text."""

from enum import Enum

from .kinds import OPType

__all__ = [
    "ShiftDir",
    "fir_str_base",
    "to_hex_string",
    "str2op_expr2",
    "str2op_expr1",
    "str2op_expr1int1",
    "upper_power2",
    "upper_log2",
    "shift_bits",
]


class ShiftDir(Enum):
    LEFT = "left"
    RIGHT = "right"


_BASE_PREFIXES = {"b": 2, "o": 8, "d": 10, "h": 16}


def fir_str_base(s):
    """Split a FIRRTL literal into ``(base, digits)``.

    Literals may carry a sign and a ``0b``/``0o``/``0d``/``0h`` prefix.
    """
    if len(s) <= 1:
        return 10, s
    sign = ""
    idx = 0
    if s[0] == "-":
        sign = "-"
        idx = 1
    if s[idx:idx + 1] != "0":
        return 10, s
    idx += 1
    prefix = s[idx:idx + 1]
    if prefix not in _BASE_PREFIXES:
        return 10, sign + s[idx - 1:]
    return _BASE_PREFIXES[prefix], sign + s[idx + 1:]


def to_hex_string(x):
    """Lower-case hexadecimal digits of a non-negative integer."""
    if x < 0:
        raise ValueError(f"negative value {x}")
    return format(x, "x")


_EXPR2 = {
    "add": OPType.ADD, "sub": OPType.SUB, "mul": OPType.MUL, "div": OPType.DIV,
    "rem": OPType.REM, "lt": OPType.LT, "leq": OPType.LEQ, "gt": OPType.GT,
    "geq": OPType.GEQ, "eq": OPType.EQ, "neq": OPType.NEQ, "dshl": OPType.DSHL,
    "dshr": OPType.DSHR, "and": OPType.AND, "or": OPType.OR, "xor": OPType.XOR,
    "cat": OPType.CAT,
}

_EXPR1 = {
    "asUInt": OPType.ASUINT, "asSInt": OPType.ASSINT, "asClock": OPType.ASCLOCK,
    "asAsyncReset": OPType.ASASYNCRESET, "cvt": OPType.CVT, "neg": OPType.NEG,
    "not": OPType.NOT, "andr": OPType.ANDR, "orr": OPType.ORR, "xorr": OPType.XORR,
}

_EXPR1INT1 = {
    "pad": OPType.PAD, "shl": OPType.SHL, "shr": OPType.SHR,
    "head": OPType.HEAD, "tail": OPType.TAIL,
}


def _lookup(table, name, kind):
    try:
        return table[name]
    except KeyError:
        raise ValueError(f"invalid {kind} op {name}") from None


def str2op_expr2(name):
    """Operation for a two-operand primitive name."""
    return _lookup(_EXPR2, name, "2expr")


def str2op_expr1(name):
    """Operation for a one-operand primitive name."""
    return _lookup(_EXPR1, name, "1expr")


def str2op_expr1int1(name):
    """Operation for a primitive taking one operand and one integer."""
    return _lookup(_EXPR1INT1, name, "1expr1int")


def upper_power2(x):
    """Smallest power of two not below ``x``; values up to 1 are returned as is."""
    if x <= 1:
        return x
    return 1 << (x - 1).bit_length()


def upper_log2(x):
    """Number of bits needed to index ``x`` entries; values up to 1 are returned as is."""
    if x <= 1:
        return x
    return (x - 1).bit_length()


def shift_bits(bits, direction):
    """Text of a shift by ``bits``, or an empty string for a zero shift."""
    if isinstance(bits, str):
        if bits in ("0", "0x0"):
            return ""
    elif bits == 0:
        return ""
    operator = " << " if direction == ShiftDir.LEFT else " >> "
    return f"{operator}{bits}"