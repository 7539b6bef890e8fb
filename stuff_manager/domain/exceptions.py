from typing import Optional


class DomainError(Exception):
    pass


class ValidationError(DomainError):
    pass


class RepositoryError(DomainError):
    pass


class StuffFetchErrorCodes:
    NETWORK_ERROR: str = "NETWORK_ERROR"
    HTTP_ERROR: str = "HTTP_ERROR"
    INVALID_RESPONSE: str = "INVALID_RESPONSE"


class StuffFetchError(DomainError):
    """Raised by the client when a page of stuff could not be fetched."""

    def __init__(self, code: str, message: str, cause: Optional[Exception] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"
