"""User domain exceptions."""

from rede.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class InvalidUserIdError(ValidationError):
    """Identifier is not a well-formed user key."""

    def __init__(self, raw_id: str) -> None:
        self.raw_id = raw_id
        super().__init__(
            "Invalid user id",
            code=ErrorCode.INVALID_IDENTIFIER,
            details={"id": raw_id},
        )


class UserNotFoundError(EntityNotFoundError):
    """User not found."""

    def __init__(self, lookup: str) -> None:
        self.lookup = lookup
        super().__init__(
            "User not found",
            code=ErrorCode.USER_NOT_FOUND,
            details={"lookup": lookup},
        )


class UserAlreadyExistsError(ConflictError):
    """Email, discord or in-game name is already taken."""

    def __init__(self, fields: list[str] | None = None) -> None:
        self.fields = fields or []
        super().__init__(
            "User already registered",
            code=ErrorCode.USER_ALREADY_EXISTS,
            details={"fields": self.fields},
        )
