import json

import pytest
from typer.testing import CliRunner

from txn_summary.cli import app

runner = CliRunner()

HEADER = "date,amount,content\n"


@pytest.fixture
def csv_file(write_csv):
    return write_csv(
        HEADER
        + "2022/01/01,1000,income\n"
        + "2022/01/02,-500,eating out\n"
        + "2022/02/01,-1000,rent\n"
    )


class TestSuccess:
    def test_prints_json_summary(self, csv_file):
        result = runner.invoke(app, ["202201", str(csv_file)])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data == {
            "period": "2022/01",
            "total_income": 1000,
            "total_expenditure": -500,
            "transactions": [
                {"date": "2022/01/02", "amount": -500, "content": "eating out"},
                {"date": "2022/01/01", "amount": 1000, "content": "income"},
            ],
        }

    def test_empty_period(self, csv_file):
        result = runner.invoke(app, ["202203", str(csv_file)])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["transactions"] == []
        assert data["total_income"] == 0
        assert data["total_expenditure"] == 0

    def test_table_output(self, csv_file):
        result = runner.invoke(app, ["202201", str(csv_file), "--table"])
        assert result.exit_code == 0
        assert "Period: 2022/01" in result.stdout
        assert "Total Income: 1000" in result.stdout
        assert "Total Expenditure: -500" in result.stdout
        assert "eating out" in result.stdout
        assert "2022/01/02" in result.stdout


class TestFailure:
    def test_invalid_period(self, csv_file):
        result = runner.invoke(app, ["202213", str(csv_file)])
        assert result.exit_code == 1
        assert "invalid period format" in result.output

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, ["202201", str(tmp_path / "missing.csv")])
        assert result.exit_code == 1
        assert "file does not exist" in result.output

    def test_header_error(self, write_csv):
        path = write_csv("date|amount|content\n2022/01/01|1000|income\n")
        result = runner.invoke(app, ["202201", str(path)])
        assert result.exit_code == 1
        assert "Error processing CSV" in result.output
        assert "invalid header" in result.output

    def test_empty_content(self, write_csv):
        path = write_csv(HEADER + "2022/01/01,1000,\n")
        result = runner.invoke(app, ["202201", str(path)])
        assert result.exit_code == 1
        assert "line 2: empty content" in result.output

    def test_missing_argument(self):
        result = runner.invoke(app, ["202201"])
        assert result.exit_code != 0
