"""
Adapter for exporting a QuadTree hierarchy as a NetworkX graph.

This enables graph tooling (traversal, layout, drawing) on the node
structure of a tree without touching the tree itself.
"""

import networkx as nx
from typing import Dict, Tuple
from ..core.tree import QuadTree
from ..core.types import CONCRETE_QUADRANTS


def to_networkx_graph(tree: QuadTree) -> Tuple[nx.DiGraph, Dict[int, QuadTree]]:
    """
    Convert a QuadTree to a directed NetworkX graph.

    The resulting graph has node attributes:
    - 'bounds': (min_x, max_x, min_y, max_y)
    - 'depth': remaining subdivision depth
    - 'level': distance from ``tree``
    - 'n_items': number of directly held items
    - 'is_leaf': bool

    And edge attributes (parent -> child):
    - 'quadrant': str quadrant name

    Parameters
    ----------
    tree : QuadTree
        Root of the hierarchy to convert

    Returns
    -------
    G : nx.DiGraph
        Graph with one node per tree node, rooted at node 0
    node_map : dict
        Mapping from graph node IDs to QuadTree nodes
    """
    G = nx.DiGraph()
    node_map: Dict[int, QuadTree] = {}

    stack = [(tree, None, None, 0)]
    while stack:
        node, parent_id, quadrant, level = stack.pop()

        nx_id = len(node_map)
        node_map[nx_id] = node

        G.add_node(
            nx_id,
            bounds=node.bounds.get_bounds(),
            depth=node.depth,
            level=level,
            n_items=len(node.items),
            is_leaf=node.is_leaf,
        )

        if parent_id is not None:
            G.add_edge(parent_id, nx_id, quadrant=quadrant.value)

        if node.children is not None:
            for q in reversed(CONCRETE_QUADRANTS):
                stack.append((node.children[q], nx_id, q, level + 1))

    return G, node_map
