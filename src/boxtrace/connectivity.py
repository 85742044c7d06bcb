"""
Box connectivity using networkx.

A connector links two boxes when each of its ends sits on the ring of cells
just outside a box. The resulting multigraph has one node per box, keyed by
the box's index in ``ParseResult.boxes``, and one edge per linking
connector, so two boxes joined twice get two parallel edges.
"""

from typing import List, Optional

import networkx as nx

from .edges import border, sorted_edges
from .models import Edge, Point
from .parser import ParseResult


def _attached_box(result: ParseResult, p: Point) -> Optional[int]:
    for idx, box in enumerate(result.boxes):
        if any(probe == p for probe, _ in border(box)):
            return idx
    return None


def build_graph(result: ParseResult) -> nx.MultiGraph:
    """
    Build the box connectivity graph.

    Node attributes:
        box: The TBox.
    Edge attributes:
        path: The connector polyline.
    """
    graph = nx.MultiGraph()
    for idx, box in enumerate(result.boxes):
        graph.add_node(idx, box=box)

    for edge in sorted_edges(result.edges):
        start = _attached_box(result, edge[0])
        end = _attached_box(result, edge[-1])
        if start is None or end is None:
            continue
        graph.add_edge(start, end, path=edge)
    return graph


def dangling_edges(result: ParseResult) -> List[Edge]:
    """List connectors with at least one end not attached to any box."""
    return [
        edge
        for edge in sorted_edges(result.edges)
        if _attached_box(result, edge[0]) is None
        or _attached_box(result, edge[-1]) is None
    ]


def connected_groups(result: ParseResult) -> List[List[int]]:
    """Group box indices into connected components, ordered by smallest index."""
    graph = build_graph(result)
    groups = [sorted(component) for component in nx.connected_components(graph)]
    return sorted(groups, key=lambda group: group[0])
