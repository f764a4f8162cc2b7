"""Adapter layer errors."""


class AdapterError(Exception):
    """Base adapter error."""

    pass


class PostApiError(AdapterError):
    """The remote Post Store could not be reached or refused the request.

    The message is meant for the reader (it ends up in a notification), so
    it carries the server's own error text when there is one.
    """

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)
