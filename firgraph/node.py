"""Nodes of the circuit graph and the super nodes that group them."""

import math
from dataclasses import dataclass
from itertools import count

from .kinds import (
    AsReset,
    NodeStatus,
    NodeType,
    ReaderMember,
    ResetType,
    SuperInfo,
    SuperType,
    WriterMember,
    node_status_name,
    node_type_name,
)

__all__ = [
    "TypeInfo",
    "AggrParentNode",
    "Node",
    "InstInfo",
    "SuperNode",
]


class TypeInfo:
    """Type of a declaration: scalar width and sign, or aggregate members."""

    def __init__(self, width=-1, sign=False):
        self.width = width
        self.sign = sign
        self.clock = False
        self.reset = ResetType.UNCERTAIN
        self.dimension = []
        # When not empty, the scalar information above is meaningless.
        self.aggr_member = []
        # The later the parent, the outer it is.
        self.aggr_parent = []

    def add(self, node, is_flip):
        self.aggr_member.append((node, is_flip))

    def is_aggr(self):
        return len(self.aggr_parent) != 0


class AggrParentNode:
    """Aggregate value used for connecting bundles member by member.

    ``member`` holds the leaf members with their flip flags, ``parent`` the
    nested aggregate members in increasing partial order.
    """

    def __init__(self, name):
        self.name = name
        self.member = []
        self.parent = []

    def __len__(self):
        return len(self.member)

    def add_member(self, member, is_flip):
        self.member.append((member, is_flip))

    def add_parent(self, parent):
        self.parent.append(parent)


class Node:
    """A signal, register half, memory or memory accessor in the circuit graph."""

    _ids = count()

    def __init__(self, node_type=NodeType.OTHERS, name=""):
        self.name = name
        self.extra_info = ""
        self.id = next(Node._ids)
        self.type = NodeType(node_type)
        self.width = -1
        self.sign = False
        self.used_bit = -1
        self.status = NodeStatus.VALID
        self.dimension = []
        self.order = -1
        self.order_in_super = -1
        self.ops = 0
        self.lineno = -1
        # adjacent nodes
        self.next = set()
        self.prev = set()
        # dependent but not adjacent nodes
        self.dep_prev = set()
        self.dep_next = set()
        self.assign_tree = []
        self.val_tree = None
        self.mem_tree = None
        self.reset_cond = None
        self.reset_val = None
        self.invalid_idx = set()
        self.super_node = None
        # memory
        self.rlatency = 0
        self.wlatency = 0
        self.depth = 0
        self.member = []
        self.parent = None
        # registers
        self.reg_next = None
        self.reset_tree = None
        self.reg_split = True
        self.compute_info = None
        # splitted arrays
        self.array_member = []
        self.array_idx = -1
        self.array_parent = None
        # registers and memories
        self.clock = None
        self.is_clock = False
        self.reset = ResetType.UNCERTAIN
        self.as_reset = AsReset.EMPTY
        self.is_array_member = False
        self.in_aggr = False
        self.when_depth = 0
        self.fully_updated = True
        self.node_is_root = False
        self.next_active_id = set()
        self.next_need_activate = set()
        self.insts = []
        self.reset_insts = []
        self.init_insts = []

    def __repr__(self):
        return f"Node({self.name!r}, {self.type.name})"

    def set_type(self, width, sign):
        self.width = width
        self.sign = sign

    def bind_reg(self, reg):
        """Link the two halves of a register to each other."""
        self.reg_next = reg
        reg.reg_next = self

    def _require_register(self):
        if self.type not in (NodeType.REG_SRC, NodeType.REG_DST):
            raise ValueError(f"The node {self.name} is not register")

    def get_dst(self):
        self._require_register()
        return self.reg_next if self.type == NodeType.REG_SRC else self

    def get_src(self):
        self._require_register()
        return self.reg_next if self.type == NodeType.REG_DST else self

    def get_reset_src(self):
        if self.type != NodeType.REG_RESET:
            raise ValueError(f"The node {self.name} is not register")
        return self.reg_next

    def get_bind_reg(self):
        self._require_register()
        return self.reg_next

    def set_memory(self, depth, rlatency, wlatency):
        self.depth = depth
        self.rlatency = rlatency
        self.wlatency = wlatency

    def add_member(self, member):
        self.member.append(member)
        if member is not None:
            member.set_parent(self)

    def _check_member_idx(self, idx):
        if not 0 <= idx < len(self.member):
            raise IndexError(f"idx {idx} is out of bound [0, {len(self.member)})")
        return idx

    def set_member(self, idx, node):
        self.member[self._check_member_idx(idx)] = node
        node.set_parent(self)

    def get_member(self, idx):
        return self.member[self._check_member_idx(idx)]

    def set_writer(self):
        if self.type == NodeType.READWRITER:
            return
        if self.type not in (NodeType.WRITER, NodeType.INFER):
            raise ValueError(f"invalid type {int(self.type)}")
        self.type = NodeType.WRITER

    def set_reader(self):
        if self.type not in (NodeType.READER, NodeType.INFER):
            raise ValueError(f"invalid type {int(self.type)}")
        self.type = NodeType.READER

    def get_port_clock(self):
        if self.type == NodeType.READER:
            return self.get_member(ReaderMember.CLK)
        if self.type == NodeType.WRITER:
            return self.get_member(WriterMember.CLK)
        raise ValueError(f"invalid type {int(self.type)} in node {self.name}")

    def set_parent(self, parent):
        if self.parent is not None:
            raise ValueError(f"parent in {self.name} is already set")
        self.parent = parent

    def is_array(self):
        return len(self.dimension) != 0

    def array_splitted(self):
        return len(self.array_member) != 0

    def get_array_member(self, idx):
        if not 0 <= idx < len(self.array_member):
            raise IndexError(
                f"idx {idx} out of bound [0, {len(self.array_member)}) in {self.name}"
            )
        return self.array_member[idx]

    def update_used_bit(self, bits):
        self.used_bit = min(self.width, max(bits, self.used_bit))

    def set_async_reset(self):
        if self.as_reset in (AsReset.UINT_RESET, AsReset.ALL_RESET):
            self.as_reset = AsReset.ALL_RESET
        else:
            self.as_reset = AsReset.ASYNC_RESET

    def set_uint_reset(self):
        if self.as_reset in (AsReset.ASYNC_RESET, AsReset.ALL_RESET):
            self.as_reset = AsReset.ALL_RESET
        else:
            self.as_reset = AsReset.UINT_RESET

    def is_async_reset(self):
        return self.as_reset in (AsReset.ASYNC_RESET, AsReset.ALL_RESET)

    def is_uint_reset(self):
        return self.as_reset in (AsReset.UINT_RESET, AsReset.ALL_RESET)

    def is_reset(self):
        return self.as_reset != AsReset.EMPTY

    def is_ext(self):
        return self.type in (NodeType.EXT, NodeType.EXT_IN, NodeType.EXT_OUT)

    def is_fake_array(self):
        return self.dimension == [1]

    def array_entry_num(self):
        return math.prod(self.dimension)

    def display(self):
        """Print the node header followed by its assignment and reset trees."""
        dims = "".join(f" {dim}" for dim in self.dimension)
        print(
            f"node {self.name}[width {self.width} sign {int(self.sign)} "
            f"status={node_status_name(self.status)} type={node_type_name(self.type)} "
            f"lineno={self.lineno}][{dims} ]"
        )
        for i, tree in enumerate(self.assign_tree):
            print(f"[assign] {i}")
            tree.display()
        if self.reset_tree is not None:
            print("[resetTree]:")
            self.reset_tree.display()


@dataclass
class InstInfo:
    """One emitted instruction or a control marker inside a super node."""

    info_type: SuperInfo = SuperInfo.STR
    inst: str = ""
    node: Node = None


class SuperNode:
    """An ordered group of nodes evaluated together."""

    _ids = count(1)

    def __init__(self, member=None):
        self.name = ""
        # adjacent super nodes
        self.prev = set()
        self.next = set()
        # dependent but not adjacent super nodes
        self.dep_prev = set()
        self.dep_next = set()
        self.member = [] if member is None else [member]
        self.insts = []
        self.stmt_tree = None
        self.id = next(SuperNode._ids)
        self.order = 0
        self.cpp_id = -1
        self.super_type = SuperType.VALID
        self.reset_node = None
        self.local_tmp_num = 0

    def __repr__(self):
        return f"SuperNode({self.id})"

    def add_member(self, member):
        if member in self.member:
            raise ValueError(f"member {member.name} is already in superNode {self.id}")
        self.member.append(member)
        member.super_node = self

    def connect_prev(self, prev):
        self.add_prev(prev)
        prev.add_next(self)

    def connect_next(self, nxt):
        self.add_next(nxt)
        nxt.add_prev(self)

    def find_index(self, node):
        for idx, member in enumerate(self.member):
            if member is node:
                return idx
        raise ValueError(f"node {node.name} is not in superNode {self.id}")

    def clear_relation(self):
        self.prev.clear()
        self.next.clear()
        self.dep_prev.clear()
        self.dep_next.clear()

    def add_prev(self, node):
        self.prev.add(node)
        self.dep_prev.add(node)

    def add_prev_all(self, nodes):
        nodes = list(nodes)
        self.prev.update(nodes)
        self.dep_prev.update(nodes)

    def erase_prev(self, node):
        self.prev.discard(node)
        self.dep_prev.discard(node)

    def add_dep_prev(self, node):
        self.dep_prev.add(node)

    def erase_dep_prev(self, node):
        self.dep_prev.discard(node)

    def add_next(self, node):
        self.next.add(node)
        self.dep_next.add(node)

    def add_next_all(self, nodes):
        nodes = list(nodes)
        self.next.update(nodes)
        self.dep_next.update(nodes)

    def erase_next(self, node):
        self.next.discard(node)
        self.dep_next.discard(node)

    def add_dep_next(self, node):
        self.dep_next.add(node)

    def erase_dep_next(self, node):
        self.dep_next.discard(node)

    def display(self):
        print(f"----super {self.id}(type={int(self.super_type)})----:")
        for node in self.member:
            node.display()
        print("[stmtTree]")
        if self.stmt_tree is not None:
            self.stmt_tree.display()