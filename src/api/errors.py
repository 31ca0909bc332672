"""
API error handling.

Failed onboarding steps are raised as AccountRequestFailed and rendered
as a 400 response with a human-readable message and the error kind.
"""

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse

from src.api.models import ErrorResponse
from src.domain.results import ServiceResult


class AccountRequestFailed(HTTPException):
    """A service operation returned a failed result."""

    def __init__(self, result: ServiceResult) -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=result.message)
        self.result = result


def raise_for_failure(result: ServiceResult) -> None:
    """Raise AccountRequestFailed unless the result succeeded."""
    if not result.success:
        raise AccountRequestFailed(result)


async def account_request_failed_handler(request: Request, exc: AccountRequestFailed) -> JSONResponse:
    error = exc.result.error.value if exc.result.error is not None else None
    body = ErrorResponse(message=exc.result.message, error=error)
    return JSONResponse(status_code=exc.status_code, content=body.model_dump(by_alias=True))


def install_exception_handlers(app: FastAPI) -> None:
    """Register the onboarding error handlers on an application."""
    app.add_exception_handler(AccountRequestFailed, account_request_failed_handler)
