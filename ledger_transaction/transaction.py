"""
Implementation of the LedgerTransaction class for Ledger Provenance.

This class represents a transaction that spends output addresses produced
by other transactions and creates new output addresses of its own.
"""

from typing import List, Dict, Any, Optional


def _check_address(address: Any) -> str:
    if not isinstance(address, str) or not address:
        raise ValueError(f"Address must be a non-empty string, got {address!r}")
    return address


class TransactionInput:
    """
    Represents an input to a transaction (an output address being spent).

    Attributes:
        address (str): Output address consumed by this input
    """

    def __init__(self, address: str):
        self.address = _check_address(address)

    def to_dict(self) -> Dict[str, str]:
        """Convert to dictionary for serialization."""
        return {"address": self.address}

    def __repr__(self) -> str:
        return f"TransactionInput({self.address!r})"


class TransactionOutput:
    """
    Represents an output created by a transaction.

    Attributes:
        address (str): Address later transactions can spend
    """

    def __init__(self, address: str):
        self.address = _check_address(address)

    def to_dict(self) -> Dict[str, str]:
        """Convert to dictionary for serialization."""
        return {"address": self.address}

    def __repr__(self) -> str:
        return f"TransactionOutput({self.address!r})"


class LedgerTransaction:
    """
    Represents a transaction in a closed ledger.

    A transaction consumes output addresses as inputs and creates new
    output addresses. Two transactions are equal only if they are the
    same object, so two records sharing an id are still distinct.

    Attributes:
        tx_id (str): Transaction identifier
        inputs (List[TransactionInput]): Addresses being spent, in order
        outputs (List[TransactionOutput]): Addresses being created, in order
    """

    def __init__(
        self,
        tx_id: str,
        inputs: Optional[List[TransactionInput]] = None,
        outputs: Optional[List[TransactionOutput]] = None
    ):
        """
        Initialize a new transaction.

        Args:
            tx_id: Transaction identifier
            inputs: Optional initial inputs
            outputs: Optional initial outputs

        Raises:
            ValueError: If tx_id is empty
        """
        if not isinstance(tx_id, str) or not tx_id:
            raise ValueError("Transaction id must be a non-empty string")

        self.tx_id = tx_id
        self.inputs: List[TransactionInput] = list(inputs or [])
        self.outputs: List[TransactionOutput] = list(outputs or [])

    def add_input(self, tx_input: TransactionInput) -> None:
        """Append an input after the existing ones."""
        self.inputs.append(tx_input)

    def add_output(self, tx_output: TransactionOutput) -> None:
        """Append an output after the existing ones."""
        self.outputs.append(tx_output)

    def input_addresses(self) -> List[str]:
        """
        Get the addresses spent by this transaction.

        Returns:
            List of addresses in declaration order
        """
        return [inp.address for inp in self.inputs]

    def output_addresses(self) -> List[str]:
        """
        Get the addresses created by this transaction.

        Returns:
            List of addresses in declaration order
        """
        return [out.address for out in self.outputs]

    def to_dict(self) -> Dict[str, Any]:
        """Convert transaction to dictionary for serialization."""
        return {
            "tx_id": self.tx_id,
            "inputs": [inp.to_dict() for inp in self.inputs],
            "outputs": [out.to_dict() for out in self.outputs]
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'LedgerTransaction':
        """
        Create transaction from dictionary representation.

        Args:
            data: Dictionary with transaction data

        Returns:
            New LedgerTransaction instance

        Raises:
            ValueError: If data is invalid
        """
        try:
            inputs = [TransactionInput(inp["address"]) for inp in data.get("inputs", [])]
            outputs = [TransactionOutput(out["address"]) for out in data.get("outputs", [])]
            return cls(tx_id=data["tx_id"], inputs=inputs, outputs=outputs)

        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(f"Error deserializing transaction: {str(e)}")

    def __repr__(self) -> str:
        return f"LedgerTransaction({self.tx_id!r})"
