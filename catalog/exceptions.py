"""
Application Exceptions

Errors raised by the service layer. Routers never catch them; the
handlers registered in catalog.main turn them into HTTP responses.
"""


class CatalogError(Exception):
    """
    Base class for application errors.

    Attributes:
        code: Status code reported to the client
        message: Human readable description
    """

    code: int = 500

    def __init__(self, message: str, code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code


class CustomRuntimeError(CatalogError):
    """Deliberate failure raised by the error-demonstration operation."""

    code = 500
