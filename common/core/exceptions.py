from typing import Optional

from fastapi import Request
from fastapi.responses import JSONResponse


class AppException(Exception):
    """Base application exception."""

    pass


class BillingAPIError(AppException):
    """Error surfaced to the caller as ``{message, code}`` with an HTTP status."""

    def __init__(
        self,
        status_code: int,
        message: Optional[str] = None,
        code: Optional[str] = None,
    ):
        self.status_code = status_code
        self.message = message or "Unknown error"
        self.code = code or "unknown_error"
        super().__init__(self.message)

    def to_body(self) -> dict:
        return {"message": self.message, "code": self.code}


class ConfigurationError(BillingAPIError):
    """No usable billing secret key is available."""

    pass


async def billing_api_error_handler(
    request: Request, exc: BillingAPIError
) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())
