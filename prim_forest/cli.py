import csv
import sys
import logging
import argparse

from typing import List, Optional

from prim_forest.graph import Graph
from prim_forest.mst_builder import MstBuilder

logger = logging.getLogger(__name__)


def parse_flag(value: str) -> bool:
    return value.strip().lower() == "true"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="prim-forest",
        description="Compute the minimum spanning forest of a weighted graph read from a CSV file.",
    )
    parser.add_argument("directed", type=parse_flag, help="'true' for a directed graph")
    parser.add_argument("labelled", type=parse_flag, help="'true' to keep edge weights as labels")
    parser.add_argument("csv_path", help="file with one 'from,to,weight' row per edge")
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug messages")
    return parser


def read_graph(path: str, directed: bool, labelled: bool) -> Graph:
    """Load ``from,to,weight`` rows into a new graph.

    Rows with fewer than three fields are skipped. A weight that is not a
    number raises ``ValueError``.
    """
    graph = Graph(directed=directed, labelled=labelled)

    with open(path, newline="", encoding="utf-8") as csv_file:
        for line_number, row in enumerate(csv.reader(csv_file), start=1):
            if len(row) < 3:
                logger.warning("Skipping line %d of %s: expected 3 fields, got %d.", line_number, path, len(row))
                continue

            start, end = row[0].strip(), row[1].strip()
            try:
                weight = float(row[2].strip())
            except ValueError as error:
                raise ValueError(f"Line {line_number} of {path}: cannot parse weight {row[2]!r}.") from error

            graph.add_node(start)
            graph.add_node(end)
            graph.add_edge(start, end, weight)

    return graph


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        graph = read_graph(args.csv_path, args.directed, args.labelled)
        forest = MstBuilder.build(graph)
    except OSError as error:
        logger.error("Cannot read %s: %s", args.csv_path, error)
        return 1
    except (ValueError, csv.Error) as error:
        logger.error("%s", error)
        return 1

    print(f"Number of nodes: {graph.num_nodes()}")
    print(f"Number of edges: {len(forest)}")
    print(f"Total weight: {forest.total_weight:.2f} km")
    return 0


if __name__ == "__main__":
    sys.exit(main())
