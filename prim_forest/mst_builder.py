import math
import heapq
import logging
import itertools

from abc import ABC
from typing import Hashable, List, Set

from prim_forest.graph import Edge, Graph
from prim_forest.spanning_forest import SpanningForest

logger = logging.getLogger(__name__)


class InvalidWeightError(ValueError):
    """An edge reached by Prim's algorithm has no usable numeric label."""

    def __init__(self, edge: Edge, reason: str):
        super().__init__(f"Edge {edge.start!r} -> {edge.end!r} has an invalid weight {edge.label!r}: {reason}.")
        self.edge = edge


def edge_weight(edge: Edge) -> float:
    label = edge.label
    if label is None:
        raise InvalidWeightError(edge, "the edge is unlabelled")
    if isinstance(label, (str, bytes, bool)):
        raise InvalidWeightError(edge, f"{type(label).__name__} is not a number")

    try:
        weight = float(label)
    except (TypeError, ValueError) as error:
        raise InvalidWeightError(edge, str(error)) from error

    if math.isnan(weight):
        raise InvalidWeightError(edge, "NaN cannot be ordered")
    return weight


def minimum_spanning_forest(graph: Graph) -> List[Edge]:
    """Compute a minimum spanning forest with Prim's algorithm.

    One tree is grown from every node not yet reached, so disconnected graphs
    yield one tree per component. The frontier is a binary heap with lazy
    deletion: entries leading to visited nodes are discarded when popped.

    Raises:
        InvalidWeightError: an edge on the frontier has a missing, non-numeric
            or NaN label.
    """
    visited = set()
    forest_edges = list()

    for start_node in graph.nodes():
        if start_node in visited:
            continue

        tree_size = len(forest_edges)
        frontier = list()
        # Ties are broken by push order, so edges themselves are never compared.
        counter = itertools.count()
        _visit_node(graph, start_node, visited, frontier, counter)

        while frontier:
            _, _, edge = heapq.heappop(frontier)
            if edge.end in visited:
                continue

            forest_edges.append(edge)
            _visit_node(graph, edge.end, visited, frontier, counter)

        logger.debug("Grew a tree from %r with %d edges.", start_node, len(forest_edges) - tree_size)

    return forest_edges


def _visit_node(graph: Graph, node: Hashable, visited: Set[Hashable], frontier: list, counter) -> None:
    visited.add(node)
    for neighbour in graph.neighbours(node):
        if neighbour not in visited:
            edge = Edge(node, neighbour, graph.label(node, neighbour))
            heapq.heappush(frontier, (edge_weight(edge), next(counter), edge))


class MstBuilder(ABC):
    @staticmethod
    def build(graph: Graph) -> SpanningForest:
        forest = SpanningForest(graph.nodes())
        for edge in minimum_spanning_forest(graph):
            forest.add_edge(edge)

        logger.debug("Built %r from %r.", forest, graph)
        return forest
