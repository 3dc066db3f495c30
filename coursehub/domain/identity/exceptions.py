"""Identity module domain exceptions."""

from coursehub.domain.common.exceptions import EntityNotFoundError


class UserNotFoundError(EntityNotFoundError):
    """Raised when a user cannot be found."""

    def __init__(self, user_id: int) -> None:
        super().__init__("User", user_id)


class InstructorNotFoundError(EntityNotFoundError):
    """Raised when an id does not belong to an instructor."""

    def __init__(self, user_id: int) -> None:
        super().__init__("Instructor", user_id)
