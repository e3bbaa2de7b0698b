import pandas as pd
import logging
from pathlib import Path
from tracker.core.exceptions import TransportError
from tracker.services.aggregation import aggregate
from tracker.services.transaction_client import TransactionClient

logger = logging.getLogger(__name__)

class ExporterService:
    def __init__(self, client: TransactionClient):
        self.client = client

    def export_transactions(self, file_path: str) -> bool:
        """
        Exports every transaction stored on the server.
        The format follows the file extension: .xlsx or CSV otherwise.
        """
        try:
            transactions = self.client.list_transactions()
            rows = [
                {
                    "id": tx.id,
                    "description": tx.description,
                    "amount": tx.amount,
                    "date": tx.date,
                }
                for tx in transactions
            ]
            df = pd.DataFrame(rows, columns=["id", "description", "amount", "date"])
            self._write(df, file_path)
            logger.info(f"{len(rows)} transacciones exportadas a {file_path}")
            return True
        except (TransportError, OSError, ValueError) as e:
            logger.error(f"Error exporting transactions: {e}", exc_info=True)
            return False

    def export_monthly_totals(self, file_path: str) -> bool:
        try:
            data = aggregate(self.client.list_transactions())
            df = pd.DataFrame({
                "month": data.months,
                "label": data.labels,
                "amount": data.amounts,
            })
            self._write(df, file_path)
            logger.info(f"Totales mensuales exportados a {file_path}")
            return True
        except (TransportError, OSError, ValueError) as e:
            logger.error(f"Error exporting monthly totals: {e}", exc_info=True)
            return False

    def _write(self, df: pd.DataFrame, file_path: str) -> None:
        if Path(file_path).suffix.lower() == ".xlsx":
            df.to_excel(file_path, index=False)
        else:
            df.to_csv(file_path, index=False)
