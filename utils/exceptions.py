"""Errors raised by services and turned into JSON responses by ``response_wrapper``."""


class APIError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(APIError):
    status_code = 400


class UniquenessError(APIError):
    status_code = 400


class NotFoundError(APIError):
    status_code = 404


class StoreError(APIError):
    """The record store failed for reasons unrelated to the request content."""
    status_code = 500
