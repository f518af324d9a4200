"""
Ledger Provenance - Transaction Module

This module implements the transaction records consumed by the provenance
engine: transactions that spend output addresses and create new ones.
"""

from .transaction import LedgerTransaction, TransactionInput, TransactionOutput

__all__ = ['LedgerTransaction', 'TransactionInput', 'TransactionOutput']
