from typing import Any, Dict, Mapping, Optional

from fastapi.responses import JSONResponse

from api.shared.dtos import ErrorResponse
from api.shared.exceptions import GraphifyException


def error_response(
    status_code: int,
    message: str,
    error_code: str,
    details: Optional[Dict[str, Any]] = None,
    headers: Optional[Mapping[str, str]] = None,
) -> JSONResponse:
    """Render the ``{success: false, error, errorCode, details}`` envelope."""
    body = ErrorResponse(error=message, error_code=error_code, details=details or None)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json", by_alias=True, exclude_none=True),
        headers=dict(headers) if headers else None,
    )


def exception_response(exc: GraphifyException) -> JSONResponse:
    return error_response(exc.status_code, exc.message, exc.error_code, exc.details)
