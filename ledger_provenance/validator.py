"""
Uniqueness checks run on a transaction set before any graph is built.
"""

import logging
from collections import Counter
from typing import Any, Sequence
from .exceptions import DuplicateOutputError, OutputReusedError

logger = logging.getLogger(__name__)


def validate_unique_addresses(transactions: Sequence[Any]) -> None:
    """
    Check that every address is produced at most once and spent at most once.

    Args:
        transactions: Transactions exposing input_addresses() and output_addresses()

    Raises:
        DuplicateOutputError: If an output address is produced more than once
        OutputReusedError: If an input address is spent more than once
    """
    outputs: Counter = Counter()
    inputs: Counter = Counter()
    for tx in transactions:
        outputs.update(tx.output_addresses())
        inputs.update(tx.input_addresses())

    # Duplicate outputs take precedence over reused inputs
    duplicated = [addr for addr, count in outputs.items() if count > 1]
    if duplicated:
        logger.warning("Rejecting transaction set: duplicate outputs %s", duplicated)
        raise DuplicateOutputError(duplicated)

    reused = [addr for addr, count in inputs.items() if count > 1]
    if reused:
        logger.warning("Rejecting transaction set: reused outputs %s", reused)
        raise OutputReusedError(reused)

    logger.debug(
        "Validated %d transactions (%d outputs, %d inputs)",
        len(transactions), len(outputs), len(inputs)
    )
