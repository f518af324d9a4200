"""
Implementation of the TransactionGraph class for Ledger Provenance.

The graph holds one vertex per transaction and the "depends-on" edges
between them. It is populated once by the builder and never changes
afterwards; queries keep their traversal bookkeeping elsewhere.
"""

from typing import Any, Dict, FrozenSet, Iterator, List, Optional
from .exceptions import UnknownTransactionError


class Vertex:
    """
    A transaction's position in the dependency graph.

    Attributes:
        transaction: The source transaction (not owned)
        input_addresses (List[str]): Addresses spent, in declaration order
        output_addresses (FrozenSet[str]): Addresses produced
        dependencies (List[Vertex]): Producers of the inputs, in input order
    """

    __slots__ = ("transaction", "input_addresses", "output_addresses", "dependencies")

    def __init__(self, transaction: Any):
        self.transaction = transaction
        self.input_addresses: List[str] = list(transaction.input_addresses())
        self.output_addresses: FrozenSet[str] = frozenset(transaction.output_addresses())
        self.dependencies: List["Vertex"] = []

    def add_dependency(self, producer: "Vertex") -> None:
        """Record that one of this vertex's inputs is produced by `producer`."""
        self.dependencies.append(producer)

    def unresolved_inputs(self) -> List[str]:
        """
        Get the inputs that no dependency produces.

        Returns:
            List of addresses in declaration order
        """
        produced = set()
        for dep in self.dependencies:
            produced |= dep.output_addresses
        return [addr for addr in self.input_addresses if addr not in produced]

    def __repr__(self) -> str:
        return f"Vertex({self.transaction!r})"


class TransactionGraph:
    """
    Ordered collection of vertices with identity and address indices.

    Attributes:
        _vertices (List[Vertex]): Vertices in transaction order
        _by_identity (Dict[int, Vertex]): Maps id() of a transaction to its vertex
        _by_output (Dict[str, Vertex]): Maps output addresses to the producing vertex
    """

    def __init__(self):
        """Initialize an empty graph."""
        self._vertices: List[Vertex] = []
        self._by_identity: Dict[int, Vertex] = {}
        self._by_output: Dict[str, Vertex] = {}

    def add_vertex(self, transaction: Any) -> Vertex:
        """
        Create a vertex for a transaction and index its outputs.

        Args:
            transaction: Transaction to add

        Returns:
            The new vertex

        Raises:
            ValueError: If the transaction or one of its outputs is already indexed
        """
        if id(transaction) in self._by_identity:
            raise ValueError(f"Transaction {transaction!r} already in graph")

        vertex = Vertex(transaction)
        for address in vertex.output_addresses:
            if address in self._by_output:
                raise ValueError(f"Output address {address} already indexed")

        self._vertices.append(vertex)
        self._by_identity[id(transaction)] = vertex
        for address in vertex.output_addresses:
            self._by_output[address] = vertex
        return vertex

    def producer_of(self, address: str) -> Optional[Vertex]:
        """
        Look up the vertex that produces an address.

        Args:
            address: Output address to look up

        Returns:
            Producing vertex if found, None otherwise
        """
        return self._by_output.get(address)

    def vertex_for(self, transaction: Any) -> Vertex:
        """
        Get the vertex of a transaction.

        Raises:
            UnknownTransactionError: If the transaction was never added
        """
        vertex = self._by_identity.get(id(transaction))
        if vertex is None or vertex.transaction is not transaction:
            raise UnknownTransactionError(transaction)
        return vertex

    def vertex_at(self, index: int) -> Vertex:
        """Get the vertex at a position in transaction order."""
        return self._vertices[index]

    @property
    def transactions(self) -> List[Any]:
        return [v.transaction for v in self._vertices]

    def __contains__(self, transaction: Any) -> bool:
        vertex = self._by_identity.get(id(transaction))
        return vertex is not None and vertex.transaction is transaction

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self._vertices)

    def __len__(self) -> int:
        return len(self._vertices)
