"""Tree traversal orders."""

import logging
from collections import deque
from typing import Iterator, List, Optional, Tuple

from taxatree.models.taxonomic import TaxonNode, TraversalOrder

logger = logging.getLogger(__name__)

def pre_order(root: Optional[TaxonNode]) -> Iterator[TaxonNode]:
    """Yield a node, then each child subtree left to right."""
    if root is None:
        return
    yield root
    for child in root.children:
        yield from pre_order(child)

def post_order(root: Optional[TaxonNode]) -> Iterator[TaxonNode]:
    """Yield each child subtree left to right, then the node."""
    if root is None:
        return
    for child in root.children:
        yield from post_order(child)
    yield root

def level_order(root: Optional[TaxonNode]) -> Iterator[TaxonNode]:
    """Yield nodes breadth first, left to right within a level."""
    if root is None:
        return
    queue = deque([root])
    while queue:
        node = queue.popleft()
        yield node
        queue.extend(node.children)

def walk_with_parents(
    root: Optional[TaxonNode],
    parent: Optional[TaxonNode] = None
) -> Iterator[Tuple[TaxonNode, Optional[TaxonNode], int]]:
    """
    Pre-order walk that carries parent context and depth.

    Args:
        root: Subtree to walk
        parent: Parent of root, None for the tree root

    Yields:
        (node, parent, depth) tuples
    """
    if root is None:
        return
    stack = [(root, parent, 0)]
    while stack:
        node, node_parent, depth = stack.pop()
        yield node, node_parent, depth
        # Reversed so the leftmost child is popped first
        for child in reversed(node.children):
            stack.append((child, node, depth + 1))

_ORDERS = {
    TraversalOrder.PRE_ORDER: pre_order,
    TraversalOrder.POST_ORDER: post_order,
    TraversalOrder.LEVEL_ORDER: level_order,
}

def traverse(root: Optional[TaxonNode], order) -> List[TaxonNode]:
    """
    Collect the nodes of a tree in the requested order.

    Args:
        root: Tree root, may be None
        order: TraversalOrder or one of 'pre', 'post', 'level'

    Returns:
        List of nodes; empty for an empty tree
    """
    order = TraversalOrder.parse(order)
    nodes = list(_ORDERS[order](root))
    logger.debug(f"{order.name} traversal visited {len(nodes)} nodes")
    return nodes
