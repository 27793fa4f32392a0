from .config import Config, load_config
from .exceptions import (
    AmountFormatError,
    ConfigurationError,
    DateFormatError,
    EmptyContentError,
    FieldCountError,
    HeaderError,
    IngestError,
    ReadError,
    TxnSummaryError,
)
from .models import Transaction, TransactionSummary
from .parser import TransactionCSVParser
from .summary import process_csv

__all__ = [
    "TransactionCSVParser",
    "process_csv",
    "load_config",
    "Config",
    "Transaction",
    "TransactionSummary",
    "TxnSummaryError",
    "ConfigurationError",
    "IngestError",
    "HeaderError",
    "FieldCountError",
    "DateFormatError",
    "AmountFormatError",
    "EmptyContentError",
    "ReadError",
]
