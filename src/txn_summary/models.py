from dataclasses import dataclass, field
from datetime import date
from typing import Tuple


@dataclass(frozen=True)
class Transaction:
    date: date
    amount: int  # Positive = income, zero or negative = expenditure
    content: str


@dataclass(frozen=True)
class TransactionSummary:
    period: str  # YYYY/MM
    total_income: int
    total_expenditure: int
    transactions: Tuple[Transaction, ...] = field(default_factory=tuple)
