"""
Shared fixtures for the provenance tests.
"""

import pytest
from ledger_transaction.transaction import (
    LedgerTransaction,
    TransactionInput,
    TransactionOutput
)


def make_tx(tx_id, inputs=(), outputs=()):
    """Create a transaction from plain address lists."""
    return LedgerTransaction(
        tx_id,
        inputs=[TransactionInput(addr) for addr in inputs],
        outputs=[TransactionOutput(addr) for addr in outputs]
    )


@pytest.fixture
def ledger():
    """
    Five transactions forming two chains that meet in tx5:

        tx1 -> tx2 \\
                    tx5
        tx3 -> tx4 /
    """
    return {
        "tx1": make_tx("tx1", outputs=["tx1Out"]),
        "tx2": make_tx("tx2", inputs=["tx1Out"], outputs=["tx2Out1", "tx2Out2"]),
        "tx3": make_tx("tx3", outputs=["tx3Out"]),
        "tx4": make_tx("tx4", inputs=["tx3Out"], outputs=["tx4Out1", "tx4Out2"]),
        "tx5": make_tx("tx5", inputs=["tx2Out1", "tx4Out1"], outputs=["tx5Out"]),
    }


@pytest.fixture
def transactions(ledger):
    """The ledger fixture as an ordered list."""
    return [ledger[name] for name in ("tx1", "tx2", "tx3", "tx4", "tx5")]


@pytest.fixture
def diamond():
    """
    Two transactions spending different outputs of one ancestor, both
    spent by a common descendant.
    """
    return {
        "root": make_tx("root", outputs=["rootOut1", "rootOut2"]),
        "left": make_tx("left", inputs=["rootOut1"], outputs=["leftOut"]),
        "right": make_tx("right", inputs=["rootOut2"], outputs=["rightOut"]),
        "join": make_tx("join", inputs=["leftOut", "rightOut"], outputs=["joinOut"]),
    }
