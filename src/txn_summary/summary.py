from typing import Iterable, List, Tuple

from .config import Config
from .logging_setup import get_logger
from .models import Transaction, TransactionSummary
from .parser import TransactionCSVParser

logger = get_logger(__name__)


def filter_by_period(transactions: Iterable[Transaction], period: str) -> List[Transaction]:
    """Keep transactions dated in the ``YYYYMM`` month, in input order."""
    year, month = int(period[:4]), int(period[4:6])
    return [t for t in transactions if t.date.year == year and t.date.month == month]


def sort_transactions(transactions: Iterable[Transaction]) -> List[Transaction]:
    # sorted() is stable with reverse=True, so same-day rows keep file order
    return sorted(transactions, key=lambda t: t.date, reverse=True)


def calculate_totals(transactions: Iterable[Transaction]) -> Tuple[int, int]:
    """Return ``(total_income, total_expenditure)``.

    Zero amounts are counted as expenditure.
    """
    income = 0
    expenditure = 0
    for t in transactions:
        if t.amount > 0:
            income += t.amount
        else:
            expenditure += t.amount
    return income, expenditure


def format_period(period: str) -> str:
    return f"{period[:4]}/{period[4:]}"


def summarize(transactions: Iterable[Transaction], period: str) -> TransactionSummary:
    ordered = sort_transactions(transactions)
    income, expenditure = calculate_totals(ordered)
    return TransactionSummary(
        period=format_period(period),
        total_income=income,
        total_expenditure=expenditure,
        transactions=tuple(ordered),
    )


def process_csv(config: Config) -> TransactionSummary:
    transactions = TransactionCSVParser().parse(config.file_path)
    filtered = filter_by_period(transactions, config.period)
    logger.debug(
        "%d of %d transactions fall in period %s",
        len(filtered), len(transactions), config.period,
    )
    return summarize(filtered, config.period)
