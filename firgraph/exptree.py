"""Expression trees describing how nodes of the circuit graph are computed."""

from itertools import count

from .kinds import NodeType, OPType, ResetType, node_type_name, op_name

__all__ = [
    "ENode",
    "ExpTree",
    "ASTExpTree",
    "NodeList",
    "ArrayMemberList",
    "alloc_int_enode",
]


class ENode:
    """One vertex of an expression tree.

    A leaf points to a graph node through ``node_ptr``; inner vertices carry
    an operation in ``op_type``. Children may be ``None`` (empty when branches).
    """

    _ids = count()

    def __init__(self, op_type=OPType.EMPTY, node=None):
        self.node_ptr = node
        self.child = []
        self.op_type = OPType(op_type)
        self.width = -1
        self.sign = False
        self.is_clock = False
        self.reset = ResetType.UNCERTAIN
        self.used_bit = -1
        self.memory_node = None
        self.id = next(ENode._ids)
        self.values = []
        self.str_val = ""
        self.compute_info = None

    def _check_idx(self, idx):
        if not 0 <= idx < len(self.child):
            raise IndexError(f"idx {idx} is out of bound [0, {len(self.child)})")
        return idx

    @property
    def child_num(self):
        return len(self.child)

    def add_child(self, node):
        self.child.append(node)

    def set_child(self, idx, node):
        self.child[self._check_idx(idx)] = node

    def get_child(self, idx):
        return self.child[self._check_idx(idx)]

    def add_val(self, val):
        self.values.append(val)

    def set_width(self, width, sign):
        self.width = width
        self.sign = sign

    def dup(self):
        """Copy of this subtree; leaves keep pointing at the same graph nodes."""
        copy = ENode(self.op_type, self.node_ptr)
        copy.width = self.width
        copy.sign = self.sign
        copy.is_clock = self.is_clock
        copy.reset = self.reset
        copy.used_bit = self.used_bit
        copy.memory_node = self.memory_node
        copy.values = list(self.values)
        copy.str_val = self.str_val
        copy.child = [c.dup() if c is not None else None for c in self.child]
        return copy

    def _describe(self, indent):
        node = self.node_ptr
        if node is not None:
            name = node.name
        elif self.op_type in (OPType.READ_MEM, OPType.WRITE_MEM) and self.memory_node is not None:
            name = self.memory_node.name
        else:
            name = ""
        type_name = node_type_name(node.type if node is not None else NodeType.INVALID)
        lineno = node.lineno if node is not None else -1
        line = (
            f"{indent}({int(self.op_type)} {op_name(self.op_type)} #{self.id}) {name} "
            f"{self.str_val} [width={self.width}, sign={int(self.sign)}, "
            f"type={type_name}, lineno={lineno}]"
        )
        return line + "".join(f" {val}" for val in self.values)

    def _lines(self, depth):
        stack = [(self, depth)]
        while stack:
            top, level = stack.pop()
            indent = " " * (level * 2)
            if top is None:
                yield f"{indent}(EMPTY)"
                continue
            yield top._describe(indent)
            stack.extend((c, level + 1) for c in reversed(top.child))

    def display(self, depth=1):
        """Print the subtree in preorder, one vertex per line."""
        for line in self._lines(depth):
            print(line)


class ExpTree:
    """Expression of a node: ``root`` computes the value written to ``lvalue``.

    ``lvalue`` may be an ``ENode``, a graph node (wrapped in a leaf) or ``None``.
    """

    def __init__(self, root=None, lvalue=None):
        self.root = root if root is not None else ENode()
        if lvalue is not None and not isinstance(lvalue, ENode):
            lvalue = ENode(node=lvalue)
        self.lvalue = lvalue

    def is_invalid(self):
        if self.root is None:
            raise ValueError("empty root")
        return self.root.op_type == OPType.INVALID

    def display(self, depth=1):
        if self.lvalue is not None:
            self.lvalue.display(depth)
        if self.root is not None:
            self.root.display(depth)


class ASTExpTree:
    """Expression built while reading the AST; may hold one tree per aggregate member."""

    def __init__(self, is_aggr, num=0):
        self._exp_root = None
        self._aggr_forest = []
        self._any_parent = None
        if is_aggr:
            self._aggr_forest = [[ENode(), False] for _ in range(num)]
        else:
            self._exp_root = ENode()

    def _valid_check(self):
        if (self._exp_root is None) == (self._any_parent is None):
            raise ValueError(
                f"invalid expression tree: root {self._exp_root!r}, "
                f"{len(self._aggr_forest)} aggregate members"
            )

    def _require_normal(self):
        if self._exp_root is None or self._any_parent is not None:
            raise ValueError("expression tree is not a normal tree")

    def _check_aggr_idx(self, idx):
        if not 0 <= idx < len(self._aggr_forest):
            raise IndexError(f"idx {idx} is out of bound")
        return idx

    def set_op(self, op):
        self._valid_check()
        if self._exp_root is not None:
            self._exp_root.op_type = OPType(op)
        else:
            for root, _ in self._aggr_forest:
                root.op_type = OPType(op)

    def add_val(self, value):
        self._require_normal()
        self._exp_root.add_val(value)

    def set_type(self, width, sign):
        self._require_normal()
        self._exp_root.width = width
        self._exp_root.sign = sign

    def is_aggr(self):
        self._valid_check()
        return self._any_parent is not None

    def aggr_num(self):
        return len(self._aggr_forest)

    def set_any_parent(self, parent):
        self._any_parent = parent

    @property
    def parent(self):
        return self._any_parent

    def add_child_tree(self, *args):
        """Add each given tree as a child, member by member for aggregates."""
        self._valid_check()
        for child_tree in args:
            if self.is_aggr():
                for i, (root, _) in enumerate(self._aggr_forest):
                    root.add_child(child_tree.get_aggr(i))
            else:
                self._exp_root.add_child(child_tree.exp_root())

    def add_child_same_tree(self, child):
        if child.is_aggr():
            raise ValueError("require normal")
        if self.is_aggr():
            for root, _ in self._aggr_forest:
                root.add_child(child.exp_root().dup())
        else:
            self._exp_root.add_child(child.exp_root())

    def add_child(self, child):
        if self.is_aggr():
            for root, _ in self._aggr_forest:
                root.add_child(child.dup())
        else:
            self._exp_root.add_child(child)

    def update_root(self, root):
        self._require_normal()
        root.add_child(self._exp_root)
        self._exp_root = root

    def set_root(self, root):
        self._require_normal()
        self._exp_root = root

    def exp_root(self):
        self._require_normal()
        return self._exp_root

    def get_aggr(self, idx):
        return self._aggr_forest[self._check_aggr_idx(idx)][0]

    def get_flip(self, idx):
        return self._aggr_forest[self._check_aggr_idx(idx)][1]

    def set_flip(self, idx, val):
        self._aggr_forest[self._check_aggr_idx(idx)][1] = val

    def dup_empty(self):
        """New tree of the same shape with fresh roots and the same parent."""
        copy = ASTExpTree(self.is_aggr(), self.aggr_num())
        copy._any_parent = self._any_parent
        return copy

    def is_invalid(self):
        return not self.is_aggr() and self._exp_root.op_type == OPType.INVALID


class NodeList:
    def __init__(self, nodes=None):
        self.nodes = list(nodes) if nodes is not None else []

    def merge(self, other):
        if other is None:
            return
        self.nodes.extend(other.nodes)


class ArrayMemberList:
    def __init__(self):
        self.member = []
        self.idx = []

    def add_member(self, node, idx):
        self.member.append(node)
        self.idx.append(idx)


def alloc_int_enode(width, val):
    """Constant leaf of the given width holding the literal ``val``."""
    enode = ENode(OPType.INT)
    enode.width = width
    enode.str_val = str(val)
    return enode