import pytest

from firgraph.kinds import (
    UNNAMED,
    NodeStatus,
    NodeType,
    OPType,
    ReaderMember,
    ReadWriterMember,
    WriterMember,
    node_status_name,
    node_type_name,
    op_name,
)


def test_op_name_covers_dense_numbering():
    for value in range(len(OPType)):
        assert isinstance(op_name(value), str)
    assert op_name(0) == UNNAMED
    assert op_name(1) == "mux"
    assert op_name(2) == "add"
    with pytest.raises(ValueError):
        op_name(len(OPType))


@pytest.mark.parametrize(
    "op, name",
    [
        (OPType.MUX, "mux"),
        (OPType.READ_MEM, "readMem"),
        (OPType.STMT, "stmts"),
        (OPType.BITS_NOSHIFT, "bits_noshift"),
        (OPType.STMT_NODE, "stmt_node"),
    ],
)
def test_op_name_known(op, name):
    assert op_name(op) == name


def test_op_name_accepts_plain_int():
    assert op_name(int(OPType.CAT)) == "cat"


def test_op_name_missing_entry():
    assert op_name(OPType.EMPTY) == UNNAMED


def test_op_names_are_unique():
    names = [op_name(op) for op in OPType if op_name(op) != UNNAMED]
    assert len(names) == len(set(names))


def test_op_name_rejects_unknown_value():
    with pytest.raises(ValueError):
        op_name(10_000)


def test_node_type_names():
    assert node_type_name(NodeType.REG_SRC) == "reg_src"
    assert node_type_name(NodeType.EXT_OUT) == "ext_out"
    assert node_type_name(NodeType.INFER) == UNNAMED


def test_node_type_name_accepts_plain_int():
    assert node_type_name(0) == "invalid"
    assert node_type_name(1) == "reg_src"
    assert node_type_name(2) == "reg_dst"


def test_node_status_names():
    assert node_status_name(NodeStatus.VALID) == "valid"
    assert node_status_name(NodeStatus.SPLITTED) == "splitted"
    assert node_status_name(NodeStatus.EMPTY_REG) == UNNAMED


@pytest.mark.parametrize("enum", [ReaderMember, WriterMember, ReadWriterMember])
def test_member_num_counts_members(enum):
    assert enum.MEMBER_NUM == len(enum) - 1
    assert enum.ADDR == 0