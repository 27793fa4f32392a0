"""Command-line entry point for ``txn_summary``.

Usage::

    txn-summary 202201 transactions.csv

Validates the two arguments, runs the CSV pipeline and prints the period
summary as pretty-printed JSON on stdout. Errors go to stderr with exit
status 1.
"""

from __future__ import annotations

import typer

from .config import load_config
from .exceptions import ConfigurationError, TxnSummaryError
from .export import to_df, to_json
from .logging_setup import configure_logging, get_logger
from .summary import process_csv

logger = get_logger(__name__)

app = typer.Typer(
    add_completion=False,
    help="Summarize one month of transactions from a date,amount,content CSV.",
)


@app.command()
def main(
    period: str = typer.Argument(..., help="Month to summarize, as YYYYMM."),
    csv_path: str = typer.Argument(..., help="CSV file with a date,amount,content header."),
    table: bool = typer.Option(
        False, "--table", help="Print the transactions as a table instead of JSON."
    ),
    log_level: str | None = typer.Option(
        None, "--log-level", help="Logging level (falls back to TXN_SUMMARY_LOG_LEVEL)."
    ),
) -> None:
    configure_logging(log_level)

    try:
        config = load_config(period, csv_path)
    except ConfigurationError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from e

    try:
        summary = process_csv(config)
    except TxnSummaryError as e:
        typer.echo(f"Error processing CSV: {e}", err=True)
        raise typer.Exit(1) from e

    logger.info(
        "summarized %d transactions for %s", len(summary.transactions), summary.period
    )

    if table:
        typer.echo(f"Period: {summary.period}")
        typer.echo(f"Total Income: {summary.total_income}")
        typer.echo(f"Total Expenditure: {summary.total_expenditure}")
        df = to_df(summary)
        if not df.empty:
            df["date"] = df["date"].dt.strftime("%Y/%m/%d")
            typer.echo(df.to_string(index=False))
        return

    typer.echo(to_json(summary))


if __name__ == "__main__":  # pragma: no cover
    app()
