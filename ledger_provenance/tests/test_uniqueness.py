"""
Tests for the address uniqueness checks.
"""

import pytest
from ledger_provenance.exceptions import (
    DuplicateOutputError,
    GraphConstructionError,
    OutputReusedError
)
from ledger_provenance.validator import validate_unique_addresses
from ledger_transaction.transaction import TransactionInput, TransactionOutput
from conftest import make_tx

def test_valid_set_passes(transactions):
    """Test that a well-formed set raises nothing."""
    validate_unique_addresses(transactions)

def test_empty_set_passes():
    """Test that an empty set is trivially unique."""
    validate_unique_addresses([])

def test_duplicate_output(ledger, transactions):
    """Test an output produced twice by the same transaction."""
    ledger["tx2"].add_output(TransactionOutput("tx2Out2"))

    with pytest.raises(DuplicateOutputError) as exc_info:
        validate_unique_addresses(transactions)
    assert exc_info.value.addresses == ["tx2Out2"]
    assert isinstance(exc_info.value, GraphConstructionError)

def test_duplicate_output_across_transactions():
    """Test an output produced by two different transactions."""
    txs = [
        make_tx("a", outputs=["shared", "aOut"]),
        make_tx("b", outputs=["shared"]),
    ]
    with pytest.raises(DuplicateOutputError) as exc_info:
        validate_unique_addresses(txs)
    assert "shared" in str(exc_info.value)

def test_reused_output(ledger, transactions):
    """Test an address spent by two transactions."""
    ledger["tx5"].add_input(TransactionInput("tx3Out"))

    with pytest.raises(OutputReusedError) as exc_info:
        validate_unique_addresses(transactions)
    assert exc_info.value.addresses == ["tx3Out"]

def test_reused_unproduced_address():
    """Test that double spends are caught even for unknown addresses."""
    txs = [
        make_tx("a", inputs=["ghost"], outputs=["aOut"]),
        make_tx("b", inputs=["ghost"], outputs=["bOut"]),
    ]
    with pytest.raises(OutputReusedError):
        validate_unique_addresses(txs)

def test_duplicate_output_checked_first(ledger, transactions):
    """Test that duplicate outputs win when both defects are present."""
    ledger["tx2"].add_output(TransactionOutput("tx2Out2"))
    ledger["tx5"].add_input(TransactionInput("tx3Out"))

    with pytest.raises(DuplicateOutputError):
        validate_unique_addresses(transactions)

def test_all_offending_addresses_reported():
    """Test that every duplicate is listed, sorted."""
    txs = [
        make_tx("a", outputs=["z", "y"]),
        make_tx("b", outputs=["y", "z", "x"]),
    ]
    with pytest.raises(DuplicateOutputError) as exc_info:
        validate_unique_addresses(txs)
    assert exc_info.value.addresses == ["y", "z"]
