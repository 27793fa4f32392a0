from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def _clear_log_level_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("TXN_SUMMARY_LOG_LEVEL", raising=False)


@pytest.fixture
def write_csv(tmp_path: Path):
    """Write ``text`` to a CSV file under ``tmp_path`` and return its path."""

    def _write(text: str, name: str = "transactions.csv") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
