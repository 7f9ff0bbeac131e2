from typing import Dict, Hashable, List


class DSU(object):
    """Disjoint-set union with path compression and union by size."""

    __parents: Dict[Hashable, Hashable]
    __sizes: Dict[Hashable, int]
    __sets_count: int

    def __init__(self, items=()):
        self.__parents = dict()
        self.__sizes = dict()
        self.__sets_count = 0
        for item in items:
            self.add(item)

    def add(self, item: Hashable) -> bool:
        if item in self.__parents:
            return False

        self.__parents[item] = item
        self.__sizes[item] = 1
        self.__sets_count += 1
        return True

    def find(self, item: Hashable) -> Hashable:
        root = item
        while self.__parents[root] != root:
            root = self.__parents[root]

        while self.__parents[item] != root:
            self.__parents[item], item = root, self.__parents[item]

        return root

    def unite(self, first: Hashable, second: Hashable) -> bool:
        first_root = self.find(first)
        second_root = self.find(second)
        if first_root == second_root:
            return False

        if self.__sizes[first_root] < self.__sizes[second_root]:
            first_root, second_root = second_root, first_root
        self.__parents[second_root] = first_root
        self.__sizes[first_root] += self.__sizes.pop(second_root)
        self.__sets_count -= 1
        return True

    def size_of(self, item: Hashable) -> int:
        return self.__sizes[self.find(item)]

    def is_singleton(self) -> bool:
        return self.__sets_count == 1

    def roots(self) -> List[Hashable]:
        return list(self.__sizes.keys())

    def __len__(self):
        return self.__sets_count

    def __contains__(self, item):
        return item in self.__parents

    def __iter__(self):
        return iter(self.__parents)
