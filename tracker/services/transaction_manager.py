import logging
from typing import Callable, Optional

from tracker.core.exceptions import TransportError
from tracker.core.interfaces import ChartWidget, Notifier, TransactionView
from tracker.core.models import ChartData, Transaction
from tracker.services.aggregation import ChartFactory, aggregate, render_chart
from tracker.services.transaction_client import TransactionClient

logger = logging.getLogger(__name__)


def _run_inline(func: Callable, *args) -> None:
    func(*args)


class TransactionManager:
    """
    Handles the user actions: load, add, delete and chart refresh.

    Network errors stop here. They are logged and the view is left as it
    was before the action. Calls into the view, the notifier and the chart
    go through `dispatch`, which lets the GUI run them on its main loop.
    """

    def __init__(
        self,
        client: TransactionClient,
        view: TransactionView,
        notifier: Notifier,
        chart_factory: ChartFactory,
        dispatch: Optional[Callable] = None,
    ):
        self.client = client
        self.view = view
        self.notifier = notifier
        self.chart_factory = chart_factory
        self.dispatch = dispatch or _run_inline
        self.chart: Optional[ChartWidget] = None

    def load_transactions(self) -> bool:
        try:
            transactions = self.client.list_transactions()
        except TransportError as e:
            logger.error(f"Error loading transactions: {e}")
            return False

        logger.info(f"{len(transactions)} transacciones cargadas")
        for tx in transactions:
            self.dispatch(self.view.add_transaction, tx)
        self.refresh_chart()
        return True

    def add_transaction(self, draft: Transaction) -> Optional[Transaction]:
        try:
            transaction = self.client.create_transaction(draft)
        except TransportError as e:
            logger.error(f"Error adding transaction: {e}")
            return None

        self.dispatch(self.notifier.success, f"Transaction {transaction.description} saved with success")
        self.dispatch(self.view.add_transaction, transaction)
        self.refresh_chart()
        self.dispatch(self.view.reset_form)
        return transaction

    def delete_transaction(self, transaction: Transaction) -> bool:
        try:
            self.client.delete_transaction(transaction.id)
        except TransportError as e:
            logger.error(f"Error deleting transaction: {e}")
            return False

        self.dispatch(self.notifier.info, f"Transaction {transaction.description} deleted with success")
        self.dispatch(self.view.remove_transaction, transaction)
        self.refresh_chart()
        return True

    def refresh_chart(self) -> Optional[ChartData]:
        """Fetches the full list again and redraws the monthly chart."""
        try:
            transactions = self.client.list_transactions()
        except TransportError as e:
            logger.error(f"Error updating chart: {e}")
            return None

        data = aggregate(transactions)
        self.dispatch(self._render, data)
        return data

    def _render(self, data: ChartData) -> None:
        self.chart = render_chart(self.chart, data, self.chart_factory)
