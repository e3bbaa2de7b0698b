from datetime import date, datetime
import pytest
from tracker.core.models import Transaction, normalize_date


def test_normalize_date_accepts_form_values():
    assert normalize_date("2024-06-01") == "2024-06-01"
    assert normalize_date(" 2024-06-01 ") == "2024-06-01"
    assert normalize_date("01/06/2024") == "2024-06-01"
    assert normalize_date("2024-06-01T23:30:00") == "2024-06-01"
    assert normalize_date(date(2024, 6, 1)) == "2024-06-01"
    assert normalize_date(datetime(2024, 6, 1, 12, 0)) == "2024-06-01"


def test_normalize_date_rejects_garbage():
    with pytest.raises(ValueError):
        normalize_date("next tuesday")
    with pytest.raises(ValueError):
        normalize_date("2024-02-30")


def test_draft_has_no_id_and_payload_omits_it():
    draft = Transaction.draft("Coffee", "4.50", "01/06/2024")

    assert draft.id is None
    assert draft.to_payload() == {"description": "Coffee", "amount": "4.50", "date": "2024-06-01"}


def test_from_dict_keeps_amount_as_text():
    tx = Transaction.from_dict({"id": 7, "description": "Coffee", "amount": 4.5, "date": "2024-06-01"})

    assert tx == Transaction(id=7, description="Coffee", amount="4.5", date="2024-06-01")


def test_display_text():
    tx = Transaction(id=1, description="Coffee", amount="4.50", date="2024-06-01")
    assert tx.display_text() == "Coffee - R$: 4.50 - Date: Jun 1, 2024"

    odd = Transaction(id=2, description="Rent", amount="900", date="someday")
    assert odd.display_text() == "Rent - R$: 900 - Date: someday"
