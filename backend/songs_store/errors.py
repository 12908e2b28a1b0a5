class StoreError(Exception):
    """Base class for failures talking to the JSON document store."""


class RemoteStorageError(StoreError):
    """The remote store answered with a non-success status."""

    def __init__(self, operation: str, status: int, body: str = ""):
        self.operation = operation
        self.status = status
        self.body = body
        super().__init__(f"jsonstorage {operation} failed: {status} - {body}")


class IdParseError(StoreError):
    """A create response carried neither an ``id`` nor a ``uri``."""

    def __init__(self, message: str = "jsonstorage: could not parse created document id"):
        super().__init__(message)
