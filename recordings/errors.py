"""
Error taxonomy shared by the data access layer and the request handlers.

Every error names the operation that failed and keeps the underlying cause.
`message` is the short text shown to clients; driver details stay in the logs.
"""


class AlbumError(Exception):
    status = 500
    message = "internal error"

    def __init__(self, operation, cause=None):
        super().__init__(operation, cause)
        self.operation = operation
        self.cause = cause

    def __str__(self):
        if self.cause is None:
            return self.operation
        return f"{self.operation}: {self.cause}"

    def json(self):
        return {"message": self.message}


class QueryError(AlbumError):
    """The statement could not be executed or its rows could not be fetched."""


class RowScanError(AlbumError):
    """A row's columns could not be decoded into an album."""


class NotFound(AlbumError):
    status = 404
    message = "album not found"


class InsertError(AlbumError):
    """The insert failed or the generated id could not be retrieved."""


class InputParseError(AlbumError):
    status = 400
    message = "bad request"

    def __init__(self, operation, cause=None, message=None):
        super().__init__(operation, cause)
        if message is not None:
            self.message = message
