"""Transaction Reader Interface

Defines the contract for loading transaction records from an external source.
"""

from abc import ABC, abstractmethod
from typing import List
from points_ledger.app.use_cases.points.dtos import TransactionRecordDTO


class TransactionSourceError(Exception):
    """A transaction source could not be turned into records"""


class TransactionReader(ABC):
    """
    Service interface for reading transaction records

    Records are returned in source order; that order decides which spend is
    applied first.
    """

    @abstractmethod
    def read(self, source: str) -> List[TransactionRecordDTO]:
        """
        Read all transaction records from a source

        Args:
            source: Location of the records (e.g. a file path)

        Returns:
            Records in source order

        Raises:
            FileNotFoundError: source does not exist
            TransactionSourceError: a record could not be parsed
        """
        pass
