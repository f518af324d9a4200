"""
Ledger Provenance - Provenance Module

This module implements the dependency graph engine for Ledger Provenance,
resolving which transactions produced the addresses a transaction spends,
directly and transitively.
"""

from .exceptions import (
    ProvenanceError,
    GraphConstructionError,
    GraphQueryError,
    DuplicateOutputError,
    OutputReusedError,
    CycleDetectedError,
    MissingTransactionError,
    UnknownTransactionError,
)
from .graph import Vertex, TransactionGraph
from .processor import TransactionProcessor

__all__ = [
    'ProvenanceError',
    'GraphConstructionError',
    'GraphQueryError',
    'DuplicateOutputError',
    'OutputReusedError',
    'CycleDetectedError',
    'MissingTransactionError',
    'UnknownTransactionError',
    'Vertex',
    'TransactionGraph',
    'TransactionProcessor',
]
