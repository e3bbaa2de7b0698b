from typing import Any, Dict, List, Optional, Union
import os
import tempfile
from pathlib import Path
import requests
import logging
from urllib3.util.retry import Retry
from requests.adapters import HTTPAdapter
from tracker.core.exceptions import TransportError
from tracker.core.models import Transaction

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "http://localhost:8080"

class TransactionClient:
    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        max_retries: Optional[int] = None,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = (base_url or os.environ.get("TRACKER_API_URL") or DEFAULT_API_URL).rstrip("/")

        if timeout is None and os.environ.get("TRACKER_API_TIMEOUT"):
            timeout = float(os.environ["TRACKER_API_TIMEOUT"])
        self.timeout = timeout

        if max_retries is None:
            max_retries = int(os.environ.get("TRACKER_MAX_RETRIES") or 0)
        self.max_retries = max_retries

        self.json_headers = {
            "Accept": "application/json",
        }
        self.download_headers = {
            "Accept": "*/*",
        }

        self.session = session or self._create_session()

    def _create_session(self) -> requests.Session:
        session = requests.Session()
        if self.max_retries > 0:
            retry = Retry(
                total=self.max_retries,
                backoff_factor=1,
                status_forcelist=[429, 500, 502, 503, 504],
                allowed_methods=["GET", "DELETE"],
            )
            adapter = HTTPAdapter(max_retries=retry)
            session.mount("https://", adapter)
            session.mount("http://", adapter)
        return session

    def _request(self, method: str, path: str, headers: Dict[str, str], **kwargs) -> requests.Response:
        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(method, url, headers=headers, timeout=self.timeout, **kwargs)
            response.raise_for_status()
            return response
        except requests.RequestException as e:
            status = e.response.status_code if e.response is not None else None
            logger.error(f"{method} {url} failed: {e}")
            raise TransportError(f"{method} {path} failed: {e}", status_code=status) from e

    def _request_json(self, method: str, path: str, **kwargs) -> Any:
        response = self._request(method, path, self.json_headers, **kwargs)
        try:
            return response.json()
        except ValueError as e:
            # requests' JSONDecodeError is a ValueError too
            logger.error(f"{method} {path} returned an invalid JSON body: {e}")
            raise TransportError(f"{method} {path} returned an invalid JSON body", status_code=response.status_code) from e

    def list_transactions(self) -> List[Transaction]:
        data = self._request_json("GET", "/transaction")
        if not isinstance(data, list):
            raise TransportError(f"GET /transaction returned {type(data).__name__}, expected a list")
        for item in data:
            if not isinstance(item, dict):
                raise TransportError(f"GET /transaction returned a {type(item).__name__} item, expected an object")
        return [Transaction.from_dict(item) for item in data]

    def create_transaction(self, draft: Transaction) -> Transaction:
        """
        Sends a new transaction (without id).
        Returns the record stored by the server, id included.
        """
        data = self._request_json("POST", "/transaction", json=draft.to_payload())
        if not isinstance(data, dict):
            raise TransportError(f"POST /transaction returned {type(data).__name__}, expected an object")
        transaction = Transaction.from_dict(data)
        logger.info(f"Transaction created: {transaction}")
        return transaction

    def delete_transaction(self, transaction_id: Union[int, str]) -> Dict:
        confirmation = self._request_json("DELETE", f"/transaction/{transaction_id}")
        logger.info(f"Transaction deleted: {transaction_id}")
        return confirmation

    def excel_url(self) -> str:
        return f"{self.base_url}/transaction/excel"

    def download_excel(self, file_path: str, chunk_size: int = 8192) -> str:
        """
        Saves the spreadsheet generated by the server to file_path.
        The body goes to a temporary file in the same folder first; file_path
        is only written once the whole download has arrived.
        """
        response = self._request("GET", "/transaction/excel", self.download_headers, stream=True)
        tmp = tempfile.NamedTemporaryFile(dir=Path(file_path).parent, suffix=".part", delete=False)
        completed = False
        try:
            with tmp:
                for chunk in response.iter_content(chunk_size=chunk_size):
                    if chunk:
                        tmp.write(chunk)
            os.replace(tmp.name, file_path)
            completed = True
        except requests.RequestException as e:
            logger.error(f"Download of {self.excel_url()} interrupted: {e}")
            raise TransportError(f"GET /transaction/excel failed: {e}") from e
        finally:
            response.close()
            if not completed and os.path.exists(tmp.name):
                os.unlink(tmp.name)
        logger.info(f"Excel saved to {file_path}")
        return file_path
