"""Common schemas shared across API endpoints."""

from typing import Annotated

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

EMAIL_MAX_LENGTH = 100
FULL_NAME_MAX_LENGTH = 100
TITLE_MAX_LENGTH = 200


def _check_email(value: str) -> str:
    """Validate the address format and return it exactly as submitted."""
    if len(value) > EMAIL_MAX_LENGTH:
        msg = f"Email cannot exceed {EMAIL_MAX_LENGTH} characters"
        raise ValueError(msg)
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as e:
        msg = f"value is not a valid email address: {e}"
        raise ValueError(msg) from e
    return value


EmailAddress = Annotated[
    str,
    Field(json_schema_extra={"format": "email"}),
    AfterValidator(_check_email),
]
FullName = Annotated[str, Field(min_length=1, max_length=FULL_NAME_MAX_LENGTH)]
Age = Annotated[int, Field(ge=1, le=120)]


class CamelModel(BaseModel):
    """Base model exchanging camelCase JSON while accepting snake_case too."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class ErrorResponse(BaseModel):
    """Standard error response schema."""

    message: str = Field(..., description="Error message")
    code: str | None = Field(None, description="Error code for programmatic handling")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "message": "User with this email already exists.",
                "code": "EMAIL_ALREADY_EXISTS",
            },
        },
    )


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str = Field(..., description="Health status")
    version: str = Field(..., description="API version")
