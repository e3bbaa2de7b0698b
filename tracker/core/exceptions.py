class TransportError(Exception):
    """A request to the transaction API failed: network error, non-success status or unreadable body."""

    def __init__(self, message: str, status_code=None):
        super().__init__(message)
        self.status_code = status_code
