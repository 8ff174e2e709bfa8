from .csv_transaction_reader import CsvTransactionReader

__all__ = ["CsvTransactionReader"]
