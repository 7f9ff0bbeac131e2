import numpy as np

from typing import Dict, Hashable, List

from prim_forest.dsu import DSU
from prim_forest.graph import Edge


class SpanningForest(object):
    """Edges of a spanning forest grouped into trees.

    Every node belongs to exactly one tree; a node without edges is a tree of
    its own. Trees are identified by their root, which is only stable until
    the next ``add_edge`` call.
    """

    __dsu: DSU
    __edges: List[Edge]

    def __init__(self, nodes=()):
        self.__dsu = DSU(nodes)
        self.__edges = list()

    @property
    def is_spanning_tree(self) -> bool:
        return self.__dsu.is_singleton()

    @property
    def size(self) -> int:
        return len(self.__dsu)

    @property
    def edges(self) -> List[Edge]:
        return self.__edges.copy()

    @property
    def weights(self) -> np.ndarray:
        return np.fromiter(map(lambda edge: float(edge.label), self.__edges), dtype=np.float64,
                           count=len(self.__edges))

    @property
    def total_weight(self) -> float:
        return float(np.sum(self.weights))

    def add_node(self, node: Hashable) -> bool:
        return self.__dsu.add(node)

    def add_edge(self, edge: Edge) -> None:
        first_node, second_node = edge.nodes
        self.__dsu.add(first_node)
        self.__dsu.add(second_node)
        if not self.__dsu.unite(first_node, second_node):
            raise ValueError(f"Edge {edge!r} would close a cycle in the forest.")
        self.__edges.append(edge)

    def find_root(self, node: Hashable) -> Hashable:
        return self.__dsu.find(node)

    def get_roots(self) -> list:
        return self.__dsu.roots()

    def get_tree_size(self, root: Hashable) -> int:
        return self.__dsu.size_of(root)

    def get_tree_nodes(self, root: Hashable) -> list:
        return [node for node in self.__dsu if self.__dsu.find(node) == root]

    def get_tree_edges(self, root: Hashable) -> List[Edge]:
        return [edge for edge in self.__edges if self.__dsu.find(edge.start) == root]

    def get_all_edges(self) -> Dict[tuple, float]:
        return {edge.nodes: weight for edge, weight in zip(self.__edges, self.weights)}

    def __len__(self):
        return len(self.__edges)

    def __iter__(self):
        return iter(self.__edges)

    def __repr__(self):
        return f"SpanningForest(trees={self.size}, edges={len(self.__edges)})"
