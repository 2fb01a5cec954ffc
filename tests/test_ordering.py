from firgraph.node import Node, SuperNode
from firgraph.ordering import is_next, later_node, order_all_nodes


def _graph():
    first = SuperNode()
    a, b = Node(name="a"), Node(name="b")
    first.add_member(a)
    first.add_member(b)
    second = SuperNode()
    c = Node(name="c")
    second.add_member(c)
    order_all_nodes([first, second])
    return first, second, a, b, c


def test_order_all_nodes_assigns_positions():
    first, second, a, b, c = _graph()
    assert (first.order, second.order) == (0, 1)
    assert [a.order_in_super, b.order_in_super, c.order_in_super] == [0, 1, 0]
    assert a.order == 1
    assert a.order < b.order < c.order


def test_order_all_nodes_empty():
    order_all_nodes([])
    sup = SuperNode()
    order_all_nodes([sup])
    assert sup.order == 0


def test_is_next_within_and_across_supers():
    _, _, a, b, c = _graph()
    assert is_next(a, b)
    assert not is_next(b, a)
    assert is_next(a, c)
    assert is_next(b, c)
    assert not is_next(c, a)
    assert not is_next(a, a)


def test_later_node():
    _, _, a, b, c = _graph()
    assert later_node(None, a) is a
    assert later_node(a, None) is a
    assert later_node(None, None) is None
    assert later_node(a, b) is b
    assert later_node(c, a) is c
    assert later_node(b, c) is c


def test_later_node_fold_gives_last():
    _, _, a, b, c = _graph()
    latest = None
    for node in (b, c, a):
        latest = later_node(latest, node)
    assert latest is c