"""Relative ordering of nodes after super nodes have been sorted."""

__all__ = ["is_next", "later_node", "order_all_nodes"]


def is_next(node, check_node):
    """Whether ``check_node`` is evaluated after ``node``."""
    later_super = check_node.super_node.order > node.super_node.order
    later_in_super = (
        check_node.super_node is node.super_node
        and check_node.order_in_super > node.order_in_super
    )
    return later_super or later_in_super


def later_node(node1, node2):
    """The later of two nodes; ``None`` stands for no node."""
    if node1 is None:
        return node2
    if node2 is None:
        return node1
    return node2 if is_next(node1, node2) else node1


def order_all_nodes(sorted_super):
    """Number super nodes by position and their members globally from 1."""
    order = 1
    for super_idx, super_node in enumerate(sorted_super):
        super_node.order = super_idx
        for member_idx, member in enumerate(super_node.member):
            member.order_in_super = member_idx
            member.order = order
            order += 1