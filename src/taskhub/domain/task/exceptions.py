"""Task domain exceptions."""

from uuid import UUID

from taskhub.domain.shared.exceptions import ErrorCode, ValidationError


class TaskOwnerNotFoundError(ValidationError):
    """The user a task should belong to does not exist."""

    def __init__(self, user_id: UUID) -> None:
        self.user_id = user_id
        super().__init__(
            f"User {user_id} does not exist.",
            code=ErrorCode.TASK_OWNER_NOT_FOUND,
            details={"user_id": str(user_id)},
        )
