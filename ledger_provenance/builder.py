"""
Builds the dependency graph from a validated transaction set.
"""

import logging
from typing import Any, Sequence
from .graph import TransactionGraph

logger = logging.getLogger(__name__)


def build_graph(transactions: Sequence[Any]) -> TransactionGraph:
    """
    Turn transactions into vertices joined by depends-on edges.

    Vertices keep the order of `transactions`. Each vertex gets one edge per
    input whose address some transaction in the set produces, in input
    order. Inputs nobody produces get no edge; they are reported later by
    the upstream query that reaches them.

    Args:
        transactions: Transactions that already passed validate_unique_addresses

    Returns:
        The populated graph
    """
    graph = TransactionGraph()

    # First pass: vertices and the output address index
    for tx in transactions:
        graph.add_vertex(tx)

    # Second pass: resolve each input against the index
    edges = 0
    unresolved = 0
    for vertex in graph:
        for address in vertex.input_addresses:
            producer = graph.producer_of(address)
            if producer is None:
                unresolved += 1
                continue
            vertex.add_dependency(producer)
            edges += 1

    logger.debug(
        "Built graph with %d vertices, %d edges, %d unresolved inputs",
        len(graph), edges, unresolved
    )
    return graph
