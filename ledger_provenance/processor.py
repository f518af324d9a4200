"""
Implementation of the TransactionProcessor class for Ledger Provenance.

This class traces where the addresses spent by a transaction came from,
within a fixed set of transactions supplied at construction.
"""

import logging
from typing import Any, List, Sequence
from .builder import build_graph
from .resolver import AncestryResolver
from .validator import validate_unique_addresses

logger = logging.getLogger(__name__)


class TransactionProcessor:
    """
    Provenance engine over a closed transaction set.

    Attributes:
        graph (TransactionGraph): Dependency graph, fixed after construction
        resolver (AncestryResolver): Query engine bound to the graph
    """

    def __init__(self, transactions: Sequence[Any], allow_reconvergence: bool = True):
        """
        Validate the transactions and build their dependency graph.

        Args:
            transactions: Transactions exposing input_addresses() and output_addresses()
            allow_reconvergence: When False, a transaction reached through two
                different paths is reported as a cycle

        Raises:
            DuplicateOutputError: If an output address is produced more than once
            OutputReusedError: If an input address is spent more than once
        """
        transactions = list(transactions)
        validate_unique_addresses(transactions)
        self.graph = build_graph(transactions)
        self.resolver = AncestryResolver(self.graph, allow_reconvergence=allow_reconvergence)
        logger.debug("TransactionProcessor ready with %d transactions", len(self.graph))

    @property
    def transactions(self) -> List[Any]:
        """Transactions in the order they were supplied."""
        return self.graph.transactions

    def immediate_dependencies(self, transaction: Any) -> List[Any]:
        """
        Get the transactions whose outputs a transaction spends.

        Args:
            transaction: One of the transactions supplied at construction

        Returns:
            List of transactions, in the order the inputs were declared

        Raises:
            UnknownTransactionError: If the transaction was not supplied
        """
        return self.resolver.immediate_dependencies(transaction)

    def dependencies_at(self, index: int) -> List[Any]:
        """
        Get the immediate dependencies of the transaction at a position.

        Args:
            index: Position in the supplied transaction list

        Returns:
            List of transactions, in the order the inputs were declared

        Raises:
            IndexError: If index is out of range
        """
        return [dep.transaction for dep in self.graph.vertex_at(index).dependencies]

    def upstream_closure(self, transaction: Any) -> List[Any]:
        """
        Trace a transaction back to the origin of everything it spends.

        Args:
            transaction: One of the transactions supplied at construction

        Returns:
            List of transactions, each after those it depends on, ending
            with `transaction`

        Raises:
            UnknownTransactionError: If the transaction was not supplied
            CycleDetectedError: If the ancestry loops back on itself
            MissingTransactionError: If an ancestor spends an unknown address
        """
        return self.resolver.upstream_closure(transaction)

    def __len__(self) -> int:
        return len(self.graph)
