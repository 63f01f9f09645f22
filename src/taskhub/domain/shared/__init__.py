from taskhub.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    ErrorCode,
    ValidationError,
)
from taskhub.domain.shared.time import ensure_tz_aware, to_utc, utc_now

__all__ = [
    "ConflictError",
    "DomainException",
    "ErrorCode",
    "ValidationError",
    "ensure_tz_aware",
    "to_utc",
    "utc_now",
]
