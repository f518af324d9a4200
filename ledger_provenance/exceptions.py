"""Custom exceptions for ledger-provenance."""

from typing import Any, Iterable, List


class ProvenanceError(Exception):
    """Base exception for provenance operations."""


class GraphConstructionError(ProvenanceError):
    """Raised when a transaction set cannot be turned into a graph."""

    def __init__(self, message: str, addresses: Iterable[str] = ()):
        self.addresses: List[str] = sorted(addresses)
        super().__init__(message)


class DuplicateOutputError(GraphConstructionError):
    """Raised when more than one transaction produces the same address."""

    def __init__(self, addresses: Iterable[str]):
        addresses = sorted(addresses)
        super().__init__(
            f"Output address produced more than once: {', '.join(addresses)}",
            addresses
        )


class OutputReusedError(GraphConstructionError):
    """Raised when more than one transaction spends the same address."""

    def __init__(self, addresses: Iterable[str]):
        addresses = sorted(addresses)
        super().__init__(
            f"Output address spent more than once: {', '.join(addresses)}",
            addresses
        )


class GraphQueryError(ProvenanceError):
    """Raised when an upstream query finds a structural defect."""


class CycleDetectedError(GraphQueryError):
    """Raised when the dependencies of a transaction loop back on themselves."""

    def __init__(self, transaction: Any):
        self.transaction = transaction
        super().__init__(f"Dependency cycle detected at {transaction!r}")


class MissingTransactionError(GraphQueryError):
    """Raised when an upstream transaction spends an address nobody produced."""

    def __init__(self, addresses: Iterable[str]):
        self.addresses: List[str] = sorted(addresses)
        super().__init__(
            f"No transaction produces address(es): {', '.join(self.addresses)}"
        )


class UnknownTransactionError(ProvenanceError, LookupError):
    """Raised when a query names a transaction that is not in the graph."""

    def __init__(self, transaction: Any):
        self.transaction = transaction
        super().__init__(f"Transaction {transaction!r} is not part of this graph")
