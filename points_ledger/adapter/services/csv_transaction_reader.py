"""pandas implementation of TransactionReader

Reads payer,points,timestamp rows from a delimited text file whose first line
is a header.
"""

import os
from datetime import datetime
from typing import List
import pandas as pd
from pandas.errors import EmptyDataError
from points_ledger.app.services.transaction_reader import TransactionReader, TransactionSourceError
from points_ledger.app.use_cases.points.dtos import TransactionRecordDTO

COLUMNS = ["payer", "points", "timestamp"]
RELATIVE_KEYWORDS = ("now", "today")


class CsvTransactionReader(TransactionReader):
    """
    CSV implementation of TransactionReader

    Features:
    - Header line is skipped, columns are taken by position
    - Surrounding double quotes are stripped from every field
    - ISO-8601 timestamps; an offset is dropped and wall-clock time kept
    """

    def __init__(self, delimiter: str = ","):
        self.delimiter = delimiter

    def read(self, source: str) -> List[TransactionRecordDTO]:
        if not os.path.isfile(source):
            raise FileNotFoundError(source)

        try:
            df = pd.read_csv(
                source,
                sep=self.delimiter,
                header=0,
                index_col=False,
                dtype=str,
                keep_default_na=False,
                skipinitialspace=True,
            )
        except EmptyDataError:
            return []
        except ValueError as e:
            raise TransactionSourceError(f"{source}: {e}") from e

        if df.shape[1] < len(COLUMNS):
            raise TransactionSourceError(
                f"{source}: expected {len(COLUMNS)} columns, found {df.shape[1]}"
            )
        df = df.iloc[:, : len(COLUMNS)]
        df.columns = COLUMNS

        records = []
        # line 1 is the header
        for line_no, row in enumerate(df.itertuples(index=False), start=2):
            records.append(self._to_record(row, line_no))
        return records

    def _to_record(self, row, line_no: int) -> TransactionRecordDTO:
        payer = _unquote(row.payer)
        try:
            points = int(_unquote(row.points))
            timestamp = parse_timestamp(row.timestamp)
        except ValueError as e:
            raise TransactionSourceError(f"line {line_no}: {e}") from e

        if not payer:
            raise TransactionSourceError(f"line {line_no}: missing payer")

        return TransactionRecordDTO(payer=payer, points=points, timestamp=timestamp)


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 date-time into a naive wall-clock datetime"""
    text = _unquote(value)
    # date and time separated by T; relative keywords like "now" are not dates
    if "T" not in text or text.lower() in RELATIVE_KEYWORDS:
        raise ValueError(f"invalid ISO-8601 date-time {value!r}")
    ts = pd.to_datetime(text, format="ISO8601")
    if pd.isna(ts):
        raise ValueError(f"invalid timestamp {value!r}")
    if ts.tzinfo is not None:
        ts = ts.tz_localize(None)
    return ts.to_pydatetime()


def _unquote(value) -> str:
    return str(value).strip().strip('"').strip()
