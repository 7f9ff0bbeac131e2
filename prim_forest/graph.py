from typing import Any, Dict, Hashable, Iterator, List, Optional


class Edge(object):
    """Read-only view of one adjacency entry, built on demand by ``Graph``."""

    __slots__ = ("__start", "__end", "__label")

    def __init__(self, start: Hashable, end: Hashable, label: Any = None):
        self.__start = start
        self.__end = end
        self.__label = label

    @property
    def start(self) -> Hashable:
        return self.__start

    @property
    def end(self) -> Hashable:
        return self.__end

    @property
    def label(self) -> Any:
        return self.__label

    @property
    def nodes(self) -> tuple:
        return self.__start, self.__end

    def __repr__(self):
        return f"Edge({self.__start!r}, {self.__end!r}, {self.__label!r})"


class Graph(object):
    """Adjacency-map graph, directed or undirected, labelled or unlabelled.

    Mutators never raise for ordinary misuse: they return ``False`` when the
    graph is left untouched. Lookups on missing nodes return empty results.
    """

    __directed: bool
    __labelled: bool
    __adjacency: Dict[Hashable, Dict[Hashable, Any]]
    __order: Dict[Hashable, int]
    __next_order: int
    __num_edges: int

    def __init__(self, directed: bool = False, labelled: bool = False):
        self.__directed = directed
        self.__labelled = labelled
        self.__adjacency = dict()
        self.__order = dict()
        self.__next_order = 0
        self.__num_edges = 0

    def is_directed(self) -> bool:
        return self.__directed

    def is_labelled(self) -> bool:
        return self.__labelled

    def add_node(self, node: Hashable) -> bool:
        if node in self.__adjacency:
            return False

        self.__adjacency[node] = dict()
        self.__order[node] = self.__next_order
        self.__next_order += 1
        return True

    def add_edge(self, start: Hashable, end: Hashable, label: Any = None) -> bool:
        if start not in self.__adjacency or end not in self.__adjacency:
            return False
        if not self.__labelled:
            label = None

        outgoing = self.__adjacency[start]
        if end in outgoing:
            return False

        outgoing[end] = label
        if not self.__directed:
            self.__adjacency[end][start] = label
        self.__num_edges += 1
        return True

    def contains_node(self, node: Hashable) -> bool:
        return node in self.__adjacency

    def contains_edge(self, start: Hashable, end: Hashable) -> bool:
        return start in self.__adjacency and end in self.__adjacency[start]

    def remove_node(self, node: Hashable) -> bool:
        if node not in self.__adjacency:
            return False

        self.__num_edges -= len(self.__adjacency.pop(node))
        del self.__order[node]

        # Back-references were already counted above. Directed graphs keep
        # edges pointing at the removed node.
        if not self.__directed:
            for outgoing in self.__adjacency.values():
                outgoing.pop(node, None)
        return True

    def remove_edge(self, start: Hashable, end: Hashable) -> bool:
        if not self.contains_edge(start, end):
            return False

        del self.__adjacency[start][end]
        if not self.__directed:
            self.__adjacency[end].pop(start, None)
        self.__num_edges -= 1
        return True

    def num_nodes(self) -> int:
        return len(self.__adjacency)

    def num_edges(self) -> int:
        return self.__num_edges

    def nodes(self) -> Iterator[Hashable]:
        return iter(self.__adjacency.keys())

    def edges(self) -> Iterator[Edge]:
        """Yield every edge once.

        Undirected edges are stored in both directions, so only the copy whose
        start node was inserted first is yielded.
        """
        for start, outgoing in self.__adjacency.items():
            for end, label in outgoing.items():
                if self.__directed or self.__precedes(start, end):
                    yield Edge(start, end, label)

    def neighbours(self, node: Hashable) -> List[Hashable]:
        return list(self.__adjacency.get(node, {}).keys())

    def label(self, start: Hashable, end: Hashable) -> Optional[Any]:
        return self.__adjacency.get(start, {}).get(end)

    def __precedes(self, first: Hashable, second: Hashable) -> bool:
        return self.__order[first] <= self.__order[second]

    def __len__(self):
        return self.num_nodes()

    def __contains__(self, node):
        return self.contains_node(node)

    def __iter__(self):
        return self.nodes()

    def __repr__(self):
        return (f"Graph(directed={self.__directed}, labelled={self.__labelled}, "
                f"nodes={self.num_nodes()}, edges={self.num_edges()})")
