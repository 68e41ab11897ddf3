"""Shared DTOs for the Graphify Backend API."""
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class BaseDTO(BaseModel):
    """Base DTO: snake_case attributes, camelCase on the wire."""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )


class RequestDTO(BaseModel):
    """Base for request bodies: fields are read by camelCase name only."""

    model_config = ConfigDict(alias_generator=to_camel)


class SuccessResponse(BaseDTO):
    """Envelope shared by every successful API response."""

    success: bool = Field(default=True, description="Always true on success")


class ErrorResponse(BaseDTO):
    """Error envelope returned by the application exception handlers."""

    success: bool = Field(default=False)
    error: str = Field(description="Error message")
    error_code: str = Field(description="Error code")
    details: Optional[Dict[str, Any]] = Field(
        default=None, description="Additional error details"
    )


class FieldError(BaseDTO):
    """A single failing field in a rejected payload."""

    field: str = Field(description="Wire name of the failing field")
    message: str = Field(description="Why the field was rejected")


class HealthCheckResponse(BaseDTO):
    """Health check response DTO."""

    status: str = Field(description="Service status")
    message: str = Field(description="Human readable status")
    timestamp: datetime = Field(description="Server time of the check")


class ReadinessResponse(BaseDTO):
    status: str = Field(description="Readiness status")
    dependencies: Dict[str, str] = Field(default_factory=dict)


def field_errors_from_pydantic(errors: List[Dict[str, Any]]) -> List[Dict[str, str]]:
    """Flatten pydantic error dicts into ``{field, message}`` entries."""
    flattened = []
    for err in errors:
        loc = [str(part) for part in err.get("loc", ()) if part != "body"]
        flattened.append(
            FieldError(
                field=".".join(loc) or "body", message=str(err.get("msg", "invalid"))
            ).model_dump()
        )
    return flattened
