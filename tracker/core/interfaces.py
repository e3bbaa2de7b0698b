from abc import ABC, abstractmethod
from typing import List, Sequence
from tracker.core.models import Transaction

class ChartWidget(ABC):
    labels: List[str]
    amounts: List[float]

    @abstractmethod
    def update(self, labels: Sequence[str], amounts: Sequence[float]) -> None:
        """
        Replaces the chart labels and data in place and redraws it.
        """
        pass

class Notifier(ABC):
    @abstractmethod
    def success(self, text: str) -> None:
        pass

    @abstractmethod
    def info(self, text: str) -> None:
        pass

class TransactionView(ABC):
    """The transaction list and the form that feeds it."""

    @abstractmethod
    def add_transaction(self, transaction: Transaction) -> None:
        pass

    @abstractmethod
    def remove_transaction(self, transaction: Transaction) -> None:
        pass

    @abstractmethod
    def reset_form(self) -> None:
        pass
