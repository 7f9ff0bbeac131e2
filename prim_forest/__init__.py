from prim_forest.graph import Edge, Graph
from prim_forest.dsu import DSU
from prim_forest.spanning_forest import SpanningForest
from prim_forest.mst_builder import InvalidWeightError, MstBuilder, minimum_spanning_forest
