import csv
import re
from datetime import datetime, date
from os import PathLike
from pathlib import Path
from typing import List

from .exceptions import (
    AmountFormatError,
    DateFormatError,
    EmptyContentError,
    FieldCountError,
    HeaderError,
    ReadError,
)
from .logging_setup import get_logger
from .models import Transaction

logger = get_logger(__name__)

# ---------------------------------------------------------------------------
# Row layout: date,amount,content
# date:    YYYY/MM/DD, zero-padded
# amount:  base-10 signed 64-bit integer, no separators
# content: free text, surrounding whitespace dropped
# ---------------------------------------------------------------------------
EXPECTED_HEADER = ["date", "amount", "content"]

_RE_DATE   = re.compile(r"\d{4}/\d{2}/\d{2}", re.ASCII)
_RE_AMOUNT = re.compile(r"[+-]?\d+", re.ASCII)
_AMOUNT_MIN, _AMOUNT_MAX = -(2 ** 63), 2 ** 63 - 1


def _validate_header(header: list[str], line_num: int = 1) -> None:
    if [h.lower() for h in header] != EXPECTED_HEADER:
        raise HeaderError(
            f"invalid header: expected {EXPECTED_HEADER}, got {header}",
            line=line_num,
            value=",".join(header),
        )


def _parse_date(raw: str, line_num: int) -> date:
    if not _RE_DATE.fullmatch(raw):
        raise DateFormatError(f"invalid date format: {raw!r}", line=line_num, value=raw)
    try:
        return datetime.strptime(raw, "%Y/%m/%d").date()
    except ValueError as e:
        raise DateFormatError(f"invalid date format: {raw!r}", line=line_num, value=raw) from e


def _parse_amount(raw: str, line_num: int) -> int:
    if not _RE_AMOUNT.fullmatch(raw):
        raise AmountFormatError(f"invalid amount: {raw!r}", line=line_num, value=raw)
    amount = int(raw)
    if not _AMOUNT_MIN <= amount <= _AMOUNT_MAX:
        raise AmountFormatError(f"amount out of range: {raw!r}", line=line_num, value=raw)
    return amount


def _parse_transaction(record: list[str], line_num: int) -> Transaction:
    if len(record) != len(EXPECTED_HEADER):
        raise FieldCountError(
            f"invalid number of fields: expected {len(EXPECTED_HEADER)}, got {len(record)}",
            line=line_num,
            value=",".join(record),
        )

    content = record[2].strip()
    parsed_date = _parse_date(record[0], line_num)
    amount = _parse_amount(record[1], line_num)
    if not content:
        raise EmptyContentError("empty content", line=line_num, value=record[2])

    return Transaction(date=parsed_date, amount=amount, content=content)


class _LineSource:
    """Feed ``csv.reader`` one decoded physical line at a time.

    Keeps the raw text of the record being read so quoting can be checked
    after the reader has split it.
    """

    def __init__(self, f):
        self._f = f
        self.line_num = 0
        self.pending: List[str] = []

    def __iter__(self):
        return self

    def __next__(self) -> str:
        raw = next(self._f)
        self.line_num += 1
        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ReadError(f"invalid UTF-8: {e}", line=self.line_num) from e
        self.pending.append(text)
        return text

    def take_record_text(self) -> str:
        text = "".join(self.pending)
        self.pending.clear()
        return text


def _has_bare_quote(text: str) -> bool:
    """True if a '"' appears inside a field that does not start with one."""
    in_quotes = False
    field_start = True
    i = 0
    while i < len(text):
        c = text[i]
        if in_quotes:
            if c == '"':
                if text[i + 1:i + 2] == '"':
                    i += 1
                else:
                    in_quotes = False
        elif c == '"':
            if not field_start:
                return True
            in_quotes = True
        field_start = not in_quotes and c in ",\r\n"
        i += 1
    return False


class TransactionCSVParser:
    def parse(self, csv_path: str | PathLike[str]) -> List[Transaction]:
        path = Path(csv_path)
        transactions: List[Transaction] = []
        header_seen = False

        try:
            f = path.open("rb")
        except OSError as e:
            raise ReadError(f"error opening file {str(path)!r}: {e}") from e

        with f:
            source = _LineSource(f)
            reader = csv.reader(source, strict=True)
            try:
                for record in reader:
                    record_text = source.take_record_text()
                    # The csv module yields [] for blank lines
                    if not record:
                        continue
                    if '"' in record_text and _has_bare_quote(record_text):
                        raise ReadError('bare " in non-quoted field', line=source.line_num)
                    if not header_seen:
                        _validate_header(record, source.line_num)
                        header_seen = True
                        continue
                    transactions.append(_parse_transaction(record, source.line_num))
            except (csv.Error, OSError) as e:
                raise ReadError(f"error reading file: {e}", line=source.line_num) from e

        if not header_seen:
            logger.debug("%s is empty; no header row", path)
        logger.debug("read %d transactions from %s", len(transactions), path)
        return transactions
