"""
Implementation of the AncestryResolver class for Ledger Provenance.

The resolver answers two read-only questions about a built graph: which
transactions produced the inputs of a transaction, and which transactions
are needed, transitively, to account for all of them. All traversal
bookkeeping is kept in a table local to each query, so the graph itself is
never written and queries do not interfere with each other.
"""

import logging
from enum import Enum
from typing import Any, Dict, List
from .exceptions import CycleDetectedError, MissingTransactionError
from .graph import TransactionGraph, Vertex

logger = logging.getLogger(__name__)


class Marker(Enum):
    """Traversal state of a vertex during one upstream query."""

    UNVISITED = "unvisited"
    ON_ACTIVE_PATH = "on-active-path"
    FINISHED = "finished"


class _Visit:
    """Per-query bookkeeping for one discovered vertex."""

    __slots__ = ("marker", "unresolved")

    def __init__(self, vertex: Vertex):
        self.marker = Marker.ON_ACTIVE_PATH
        # Counts declared inputs, not resolved dependencies
        self.unresolved = len(vertex.input_addresses)


class _Frame:
    """Work stack entry: a vertex and the next dependency index to walk."""

    __slots__ = ("vertex", "next_index")

    def __init__(self, vertex: Vertex):
        self.vertex = vertex
        # Dependencies are walked last to first, see upstream_closure
        self.next_index = len(vertex.dependencies) - 1


class AncestryResolver:
    """
    Depth-first ancestry queries over a TransactionGraph.

    Attributes:
        graph (TransactionGraph): The graph to query
        allow_reconvergence (bool): Whether two paths may share an ancestor
    """

    def __init__(self, graph: TransactionGraph, allow_reconvergence: bool = True):
        """
        Initialize resolver.

        Args:
            graph: Fully built graph
            allow_reconvergence: When False, reaching a transaction twice in
                one query is reported as a cycle even if no loop exists
        """
        self.graph = graph
        self.allow_reconvergence = allow_reconvergence

    def immediate_dependencies(self, transaction: Any) -> List[Any]:
        """
        Get the producers of a transaction's inputs.

        Args:
            transaction: Transaction in the graph

        Returns:
            List of producing transactions, in the order the inputs were declared

        Raises:
            UnknownTransactionError: If the transaction is not in the graph
        """
        vertex = self.graph.vertex_for(transaction)
        return [dep.transaction for dep in vertex.dependencies]

    def upstream_closure(self, transaction: Any) -> List[Any]:
        """
        Get a transaction together with every transaction it depends on.

        The result lists each dependency before anything that depends on
        it and ends with `transaction`. It is the post-order of a depth-first
        walk that takes each vertex's dependencies last to first; for a
        tree-shaped ancestry this is exactly the reverse of the order in
        which a first-to-last walk discovers the transactions.

        Args:
            transaction: Transaction in the graph

        Returns:
            List of transactions, dependencies first

        Raises:
            UnknownTransactionError: If the transaction is not in the graph
            CycleDetectedError: If the ancestry loops back on itself
            MissingTransactionError: If an ancestor spends an address no
                transaction in the graph produces
        """
        root = self.graph.vertex_for(transaction)
        visits: Dict[Vertex, _Visit] = {root: _Visit(root)}
        stack: List[_Frame] = [_Frame(root)]
        order: List[Any] = []

        while stack:
            frame = stack[-1]
            vertex = frame.vertex

            if frame.next_index < 0:
                stack.pop()
                visits[vertex].marker = Marker.FINISHED
                order.append(vertex.transaction)
                continue

            dep = vertex.dependencies[frame.next_index]
            frame.next_index -= 1
            visits[vertex].unresolved -= 1

            marker = self._marker(visits, dep)
            if marker is Marker.UNVISITED:
                visits[dep] = _Visit(dep)
                stack.append(_Frame(dep))
            elif marker is Marker.ON_ACTIVE_PATH or not self.allow_reconvergence:
                logger.warning(
                    "Cycle detected while resolving %r: %r reached again from %r",
                    transaction, dep.transaction, vertex.transaction
                )
                raise CycleDetectedError(dep.transaction)

        missing: List[str] = []
        for vertex, visit in visits.items():
            if visit.unresolved > 0:
                missing.extend(vertex.unresolved_inputs())
        if missing:
            logger.warning(
                "Upstream of %r spends unknown addresses %s", transaction, missing
            )
            raise MissingTransactionError(missing)

        logger.debug("Resolved %d upstream transactions for %r", len(order), transaction)
        return order

    @staticmethod
    def _marker(visits: Dict[Vertex, _Visit], vertex: Vertex) -> Marker:
        visit = visits.get(vertex)
        return visit.marker if visit is not None else Marker.UNVISITED
