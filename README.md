# firgraph

Data model for the circuit graph of a FIRRTL design: the kinds of
operations and nodes, expression trees, graph nodes grouped into super
nodes, and the ordering of nodes once super nodes are sorted. It has no
dependencies beyond the standard library.

## Modules

- `firgraph.kinds` – enumerations `OPType`, `NodeType`, `NodeStatus`,
  `IndexType`, `AsReset`, `ResetType`, `SuperType`, `SuperInfo`,
  `ReaderMember`, `WriterMember`, `ReadWriterMember`, and the display
  names `op_name`, `node_type_name`, `node_status_name` (which return
  `UNNAMED` for values without a name).
- `firgraph.util` – `fir_str_base` splits a FIRRTL literal into base and
  digits; `to_hex_string`, `upper_power2`, `upper_log2`; `shift_bits`
  with `ShiftDir` gives the text of a shift; `str2op_expr2`,
  `str2op_expr1` and `str2op_expr1int1` map primitive names to `OPType`
  and raise `ValueError` for unknown names.
- `firgraph.exptree` – `ENode` (tree vertex with `add_child`,
  `set_child`, `get_child`, `dup`, `display`), `ExpTree` (root plus
  lvalue), `ASTExpTree` (a normal tree or one tree per aggregate member),
  `NodeList`, `ArrayMemberList` and `alloc_int_enode`.
- `firgraph.node` – `Node` (signals, register halves, memories and their
  ports, with reset flags and array helpers), `SuperNode` (ordered member
  list with `prev`/`next` and dependency edges), `TypeInfo`,
  `AggrParentNode` and `InstInfo`.
- `firgraph.ordering` – `order_all_nodes` numbers sorted super nodes and
  their members; `is_next` and `later_node` compare node positions.

## Installing

    pip install .

For running the tests:

    pip install .[test]
    pytest

## Example

    from firgraph.util import fir_str_base, upper_log2
    from firgraph.node import Node, SuperNode
    from firgraph.ordering import order_all_nodes, is_next

    fir_str_base("0h1F")   # (16, "1F")
    upper_log2(5)          # 3

    x, y = Node(name="x"), Node(name="y")
    a, b = SuperNode(), SuperNode()
    a.add_member(x)
    b.add_member(y)
    a.connect_next(b)      # a.next == {b}, b.prev == {a}
    order_all_nodes([a, b])
    is_next(x, y)          # True

## What it does not do

The package models the graph; it does not transform or evaluate it.
There is no topological sort or super-node merging, no evaluation of
operations on constant values, no statistics over a graph, no FIRRTL
parser and no code generation. There is no command-line program.