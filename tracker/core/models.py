from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union
from datetime import date, datetime

# Formats accepted from the date field of the form, tried in order
DATE_INPUT_FORMATS = ("%Y-%m-%d", "%d/%m/%Y", "%Y/%m/%d")


def normalize_date(value: Union[str, date, datetime]) -> str:
    """
    Returns the ISO calendar date (YYYY-MM-DD) for a form or API value.
    Raises ValueError when the value can't be read as a date.
    """
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()

    raw = str(value).strip()
    for fmt in DATE_INPUT_FORMATS:
        try:
            return datetime.strptime(raw, fmt).date().isoformat()
        except ValueError:
            continue

    # Full ISO timestamps, e.g. "2024-06-01T10:00:00"
    try:
        return datetime.fromisoformat(raw).date().isoformat()
    except ValueError:
        raise ValueError(f"Fecha inválida: {value!r}") from None


@dataclass
class Transaction:
    description: str
    amount: str  # Decimal text, as sent and received by the API
    date: str  # YYYY-MM-DD
    id: Optional[Union[int, str]] = None

    @classmethod
    def draft(cls, description: str, amount: Any, date: Union[str, date, datetime]) -> "Transaction":
        """Builds a creation request. The server assigns the id."""
        return cls(
            description=str(description).strip(),
            amount=str(amount).strip(),
            date=normalize_date(date),
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Transaction":
        amount = data.get("amount")
        return cls(
            id=data.get("id"),
            description=data.get("description") or "",
            amount="" if amount is None else str(amount),
            date=str(data.get("date") or ""),
        )

    def to_payload(self) -> Dict[str, str]:
        return {
            "description": self.description,
            "amount": self.amount,
            "date": self.date,
        }

    def display_text(self) -> str:
        try:
            tx_date = date.fromisoformat(self.date[:10])
            formatted_date = f"{tx_date:%b} {tx_date.day}, {tx_date.year}"
        except ValueError:
            formatted_date = self.date
        return f"{self.description} - R$: {self.amount} - Date: {formatted_date}"


@dataclass
class ChartData:
    """Monthly totals in chart order: months[i], labels[i] and amounts[i] describe the same month."""
    months: List[str] = field(default_factory=list)
    labels: List[str] = field(default_factory=list)
    amounts: List[float] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.months
