"""Spend Points command line entry point

Reads a transaction CSV, withdraws the requested points oldest-first and
prints the remaining balance per payer.
"""

import argparse
import logging
import sys
from typing import Dict, List, Optional

from config import ApplicationConfig
from points_ledger.adapter.services.csv_transaction_reader import CsvTransactionReader
from points_ledger.app.services.transaction_reader import TransactionReader, TransactionSourceError
from points_ledger.app.use_cases.points import SpendPoints, SpendPointsCommandDTO

logger = logging.getLogger(__name__)

FILE_NOT_FOUND_MESSAGE = "File does not exist"


def format_balances(balances: Dict[str, int]) -> str:
    """Render balances as {NAME: value, NAME: value} in mapping order"""
    return "{" + ", ".join(f"{payer}: {points}" for payer, points in balances.items()) + "}"


def run(
    amount: int,
    source: str,
    reader: Optional[TransactionReader] = None,
    use_case: Optional[SpendPoints] = None,
) -> int:
    """
    Spend points from a transaction source and print the outcome

    Returns:
        Process exit status (0 on success)
    """
    reader = reader or CsvTransactionReader(delimiter=ApplicationConfig.CSV_DELIMITER)
    use_case = use_case or SpendPoints(withdrawal_payer=ApplicationConfig.WITHDRAWAL_PAYER)

    try:
        records = reader.read(source)
    except FileNotFoundError:
        logger.error(f"Transaction file not found: {source}")
        print(FILE_NOT_FOUND_MESSAGE)
        return 1
    except TransactionSourceError as e:
        logger.error(f"Malformed transaction file {source}: {e}")
        print(f"Invalid transaction file: {e}")
        return 1

    logger.info(f"Loaded {len(records)} transactions from {source}")

    result = use_case.execute(SpendPointsCommandDTO(amount=amount, transactions=records))
    if result.is_err():
        print(result.error.message)
        return 1

    print(format_balances(result.value.balances))
    return 0


def _positive_int(value: str) -> int:
    try:
        amount = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid points amount: {value!r}")
    if amount <= 0:
        raise argparse.ArgumentTypeError(f"points amount must be > 0, got {amount}")
    return amount


def main(argv: Optional[List[str]] = None) -> int:
    """
    Entry point

    Usage:
        python -m points_ledger.cli.spend_points 5000 transactions.csv
        python -m points_ledger.cli.spend_points 5000 transactions.csv --verbose
    """
    parser = argparse.ArgumentParser(description="Spend points oldest-first and print payer balances")
    parser.add_argument("amount", type=_positive_int, help="Points to spend")
    parser.add_argument("file", help="CSV file with payer,points,timestamp rows (header first)")
    parser.add_argument(
        "--verbose", action="store_true", help="Log deduction details"
    )
    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else getattr(
        logging, str(ApplicationConfig.LOG_LEVEL).upper(), logging.INFO
    )
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    return run(args.amount, args.file)


if __name__ == "__main__":
    sys.exit(main())
