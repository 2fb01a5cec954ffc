"""Enumerations shared by the circuit graph and its expression trees."""

from enum import Enum, IntEnum, auto

__all__ = [
    "OPType",
    "NodeType",
    "NodeStatus",
    "IndexType",
    "AsReset",
    "ResetType",
    "SuperType",
    "SuperInfo",
    "ReaderMember",
    "WriterMember",
    "ReadWriterMember",
    "op_name",
    "node_type_name",
    "node_status_name",
    "UNNAMED",
]

UNNAMED = "(null)"


class OPType(IntEnum):
    """Operation carried by an expression node."""

    EMPTY = 0
    MUX = auto()
    # two operands
    ADD = auto()
    SUB = auto()
    MUL = auto()
    DIV = auto()
    REM = auto()
    LT = auto()
    LEQ = auto()
    GT = auto()
    GEQ = auto()
    EQ = auto()
    NEQ = auto()
    DSHL = auto()
    DSHR = auto()
    AND = auto()
    OR = auto()
    XOR = auto()
    CAT = auto()
    # one operand
    ASUINT = auto()
    ASSINT = auto()
    ASCLOCK = auto()
    ASASYNCRESET = auto()
    CVT = auto()
    NEG = auto()
    NOT = auto()
    ANDR = auto()
    ORR = auto()
    XORR = auto()
    # one operand, one integer
    PAD = auto()
    SHL = auto()
    SHR = auto()
    HEAD = auto()
    TAIL = auto()
    # one operand, two integers
    BITS = auto()
    BITS_NOSHIFT = auto()
    # indexing
    INDEX_INT = auto()
    INDEX = auto()
    # conditional assignment
    WHEN = auto()
    STMT = auto()
    # special
    PRINTF = auto()
    ASSERT = auto()
    EXIT = auto()
    # constant leaf
    INT = auto()
    # arrays
    GROUP = auto()
    # memory
    READ_MEM = auto()
    WRITE_MEM = auto()
    INFER_MEM = auto()
    # invalid / reset
    INVALID = auto()
    RESET = auto()
    # width processing
    SEXT = auto()
    # external modules
    EXT_FUNC = auto()
    # aggregated when statements
    STMT_SEQ = auto()
    STMT_WHEN = auto()
    STMT_NODE = auto()


class NodeType(IntEnum):
    """Role of a node in the circuit graph."""

    INVALID = 0
    REG_SRC = auto()
    REG_DST = auto()
    SPECIAL = auto()
    INP = auto()
    OUT = auto()
    MEMORY = auto()
    READER = auto()
    WRITER = auto()
    READWRITER = auto()
    INFER = auto()
    MEM_MEMBER = auto()
    OTHERS = auto()
    REG_RESET = auto()
    EXT_IN = auto()
    EXT_OUT = auto()
    EXT = auto()


class NodeStatus(IntEnum):
    """Lifecycle state of a node during optimisation."""

    VALID = 0
    DEAD = auto()
    CONSTANT = auto()
    MERGED = auto()
    REPLICATION = auto()
    SPLITTED = auto()
    EMPTY_REG = auto()


class IndexType(IntEnum):
    INT = 0
    NODE = auto()


class AsReset(IntEnum):
    """How a node is used as a reset signal."""

    EMPTY = 0
    ASYNC_RESET = auto()
    UINT_RESET = auto()
    ALL_RESET = auto()


class ResetType(IntEnum):
    """Kind of reset a register or expression carries."""

    UNCERTAIN = 0
    UINT_RESET = auto()
    ASYNC_RESET = auto()
    ZERO_RESET = auto()


class SuperType(IntEnum):
    VALID = 0
    EXTMOD = auto()
    ASYNC_RESET = auto()
    UINT_RESET = auto()
    UPDATE_REG = auto()


class SuperInfo(IntEnum):
    IF = 0
    ELSE = auto()
    DEDENT = auto()
    STR = auto()
    ASSIGN_BEG = auto()
    ASSIGN_END = auto()


class ReaderMember(IntEnum):
    ADDR = 0
    EN = auto()
    CLK = auto()
    DATA = auto()
    MEMBER_NUM = auto()


class WriterMember(IntEnum):
    ADDR = 0
    EN = auto()
    CLK = auto()
    DATA = auto()
    MASK = auto()
    MEMBER_NUM = auto()


class ReadWriterMember(IntEnum):
    ADDR = 0
    EN = auto()
    CLK = auto()
    RDATA = auto()
    WDATA = auto()
    WMASK = auto()
    WMODE = auto()
    MEMBER_NUM = auto()


_OP_NAMES = {
    OPType.INVALID: "invalid", OPType.MUX: "mux", OPType.ADD: "add", OPType.SUB: "sub",
    OPType.MUL: "mul", OPType.DIV: "div", OPType.REM: "rem", OPType.LT: "lt",
    OPType.LEQ: "leq", OPType.GT: "gt", OPType.GEQ: "geq", OPType.EQ: "eq",
    OPType.NEQ: "neq", OPType.DSHL: "dshl", OPType.DSHR: "dshr", OPType.AND: "and",
    OPType.OR: "or", OPType.XOR: "xor", OPType.CAT: "cat", OPType.ASUINT: "asuint",
    OPType.ASSINT: "assint", OPType.ASCLOCK: "asclock",
    OPType.ASASYNCRESET: "asasyncreset", OPType.CVT: "cvt", OPType.NEG: "neg",
    OPType.NOT: "not", OPType.ANDR: "andr", OPType.ORR: "orr", OPType.XORR: "xorr",
    OPType.PAD: "pad", OPType.SHL: "shl", OPType.SHR: "shr", OPType.HEAD: "head",
    OPType.TAIL: "tail", OPType.BITS: "bits", OPType.INDEX_INT: "index_int",
    OPType.INDEX: "index", OPType.WHEN: "when", OPType.PRINTF: "printf",
    OPType.ASSERT: "assert", OPType.INT: "int", OPType.READ_MEM: "readMem",
    OPType.WRITE_MEM: "writeMem", OPType.INFER_MEM: "inferMem",
    OPType.RESET: "reset", OPType.STMT: "stmts", OPType.SEXT: "sext",
    OPType.BITS_NOSHIFT: "bits_noshift", OPType.GROUP: "group", OPType.EXIT: "exit",
    OPType.EXT_FUNC: "ext_func", OPType.STMT_SEQ: "stmt_seq",
    OPType.STMT_WHEN: "stmt_when", OPType.STMT_NODE: "stmt_node",
}

_NODE_TYPE_NAMES = {
    NodeType.INVALID: "invalid", NodeType.REG_SRC: "reg_src", NodeType.REG_DST: "reg_dst",
    NodeType.SPECIAL: "special", NodeType.INP: "inp", NodeType.OUT: "out",
    NodeType.MEMORY: "memory", NodeType.READER: "reader", NodeType.WRITER: "writer",
    NodeType.READWRITER: "readwriter", NodeType.MEM_MEMBER: "mem_member",
    NodeType.OTHERS: "others", NodeType.REG_RESET: "reg_reset", NodeType.EXT: "ext",
    NodeType.EXT_IN: "ext_in", NodeType.EXT_OUT: "ext_out",
}

_NODE_STATUS_NAMES = {
    NodeStatus.VALID: "valid", NodeStatus.DEAD: "dead", NodeStatus.CONSTANT: "constant",
    NodeStatus.MERGED: "merged", NodeStatus.REPLICATION: "replication",
    NodeStatus.SPLITTED: "splitted",
}


def op_name(op):
    """Display name of an operation; ``UNNAMED`` for operations without one."""
    return _OP_NAMES.get(OPType(op), UNNAMED)


def node_type_name(node_type):
    """Display name of a node type; ``UNNAMED`` for types without one."""
    return _NODE_TYPE_NAMES.get(NodeType(node_type), UNNAMED)


def node_status_name(status):
    """Display name of a node status; ``UNNAMED`` for states without one."""
    return _NODE_STATUS_NAMES.get(NodeStatus(status), UNNAMED)