"""
Range query example: Build → Fill → Query → Inspect → Plot

Fills a tree with clustered random points and walks through the main
queries.
"""

import numpy as np
from quadtree_lib import (
    Rect2D,
    create_tree,
    get_preset,
    insert_points,
    summarize_tree,
    to_networkx_graph,
    validate_and_warn,
)
from quadtree_lib.visualization.tree_plots import plot_quadtree


def main():
    """Run the example."""
    print("=" * 60)
    print("POINT QUADTREE RANGE QUERIES")
    print("=" * 60)

    print("\n[1/5] Creating tree...")
    params = validate_and_warn(get_preset("deep_sparse"), expected_points=2000)
    bounds = Rect2D.from_xywh(0, 0, 100, 100)
    tree = create_tree(bounds, params)
    print(f"   Bounds: {bounds.get_bounds()}, params: {params.to_dict()}")

    print("\n[2/5] Inserting clustered points...")
    rng = np.random.default_rng(42)
    cluster = rng.normal(loc=(30, 70), scale=4.0, size=(1500, 2))
    background = bounds.sample_points(500, seed=7)
    result = insert_points(tree, np.vstack([cluster, background]), on_outside="skip")
    print(f"   {result.message}")

    print("\n[3/5] Range query...")
    window = Rect2D.from_xywh(25, 65, 10, 10)
    hits = tree.retrieve_within_rect(window)
    print(f"   {len(hits)} points in {window.get_bounds()}")

    print("\n[4/5] Smallest enclosing subtree...")
    node = tree.smallest_subtree_to_contain_all(hits[:10])
    if node is not None:
        print(f"   {node!r} at level {node.level}")

    print("\n[5/5] Tree statistics...")
    for key, value in summarize_tree(tree).items():
        print(f"   {key}: {value}")
    G, _ = to_networkx_graph(tree)
    print(f"   Graph: {G.number_of_nodes()} nodes, {G.number_of_edges()} edges")

    plot_quadtree(tree, query_rect=window, title="Clustered points")


if __name__ == "__main__":
    main()
