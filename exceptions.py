"""
exceptions.py
-------------
Errors raised to callers of the repositories.
Each carries the HTTP status the (external) route layer should answer with.
"""


class ClientError(Exception):
    """Base class for errors the caller can act on."""

    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class NotFoundError(ClientError):
    """The targeted record does not exist."""

    def __init__(self, message: str):
        super().__init__(message, status_code=404)


class InvariantError(ClientError):
    """A write that should have touched a row touched none."""

    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message, status_code=status_code)


class ConflictError(InvariantError):
    """A like/unlike write did not take effect."""

    def __init__(self, message: str):
        super().__init__(message, status_code=409)
