"""User domain exceptions."""

from taskhub.domain.shared.exceptions import ConflictError, ErrorCode


class EmailAlreadyExistsError(ConflictError):
    """Email already registered."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(
            "User with this email already exists.",
            code=ErrorCode.EMAIL_ALREADY_EXISTS,
            details={"email": email},
        )
