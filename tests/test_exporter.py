from unittest.mock import MagicMock
import pandas as pd
from tracker.core.exceptions import TransportError
from tracker.core.models import Transaction
from tracker.services.exporter import ExporterService


def make_exporter(transactions):
    client = MagicMock()
    client.list_transactions.return_value = transactions
    return ExporterService(client)


TRANSACTIONS = [
    Transaction(id=1, description="Rent", amount="900", date="2024-05-01"),
    Transaction(id=2, description="Coffee", amount="4.50", date="2024-06-01"),
    Transaction(id=3, description="Typo", amount="abc", date="2024-06-02"),
]


def test_export_transactions_to_csv(tmp_path):
    path = tmp_path / "transactions.csv"

    assert make_exporter(TRANSACTIONS).export_transactions(str(path))

    df = pd.read_csv(path, dtype=str)
    assert list(df.columns) == ["id", "description", "amount", "date"]
    # Stored amounts are exported as they are, unparseable ones included
    assert df["amount"].tolist() == ["900", "4.50", "abc"]


def test_export_monthly_totals_to_xlsx(tmp_path):
    path = tmp_path / "totals.xlsx"

    assert make_exporter(TRANSACTIONS).export_monthly_totals(str(path))

    df = pd.read_excel(path)
    assert df["label"].tolist() == ["May 2024", "June 2024"]
    assert df["amount"].tolist() == [900.0, 4.5]


def test_export_returns_false_when_api_fails(tmp_path):
    client = MagicMock()
    client.list_transactions.side_effect = TransportError("down")

    assert not ExporterService(client).export_transactions(str(tmp_path / "out.csv"))
    assert not (tmp_path / "out.csv").exists()
