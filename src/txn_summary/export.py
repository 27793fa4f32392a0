import json
from datetime import datetime
from typing import Any, Dict

import pandas as pd

from .models import Transaction, TransactionSummary

_DATE_FORMAT = "%Y/%m/%d"


def to_dict(summary: TransactionSummary) -> Dict[str, Any]:
    return {
        "period":            summary.period,
        "total_income":      summary.total_income,
        "total_expenditure": summary.total_expenditure,
        "transactions": [
            {
                "date":    t.date.strftime(_DATE_FORMAT),
                "amount":  t.amount,
                "content": t.content,
            }
            for t in summary.transactions
        ],
    }


def from_dict(data: Dict[str, Any]) -> TransactionSummary:
    return TransactionSummary(
        period=data["period"],
        total_income=int(data["total_income"]),
        total_expenditure=int(data["total_expenditure"]),
        transactions=tuple(
            Transaction(
                date=datetime.strptime(t["date"], _DATE_FORMAT).date(),
                amount=int(t["amount"]),
                content=t["content"],
            )
            for t in data["transactions"]
        ),
    )


def to_json(summary: TransactionSummary, indent: int = 2) -> str:
    return json.dumps(to_dict(summary), indent=indent, ensure_ascii=False)


def from_json(text: str) -> TransactionSummary:
    return from_dict(json.loads(text))


def to_df(summary: TransactionSummary) -> pd.DataFrame:
    rows = [
        {
            "date":    t.date,
            "amount":  t.amount,
            "content": t.content,
        }
        for t in summary.transactions
    ]
    df = pd.DataFrame(rows, columns=["date", "amount", "content"])
    df["date"] = pd.to_datetime(df["date"])
    return df
