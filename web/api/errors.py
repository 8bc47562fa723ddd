"""API error shaping - maps core errors to status codes and bodies."""

from pydantic import BaseModel

from app.errors import InvalidRequest, InvalidWeight, LedgerError, StoreError

STATUS_CODES: dict[type[LedgerError], int] = {
    InvalidRequest: 400,
    InvalidWeight: 422,
    StoreError: 500,
}


class ErrorResponse(BaseModel):
    """Error body returned to API callers."""

    status: int
    error: str


def error_response(exc: LedgerError) -> ErrorResponse:
    """Build the error body for a core error."""
    for cls in type(exc).__mro__:
        if cls in STATUS_CODES:
            return ErrorResponse(status=STATUS_CODES[cls], error=exc.message)
    return ErrorResponse(status=500, error=exc.message)
