"""Certification module domain exceptions."""

from coursehub.domain.common.exceptions import BusinessRuleViolationError, EntityNotFoundError


class CertificateNotFoundError(EntityNotFoundError):
    """Raised when no certificate exists for a (user, course) pair."""

    def __init__(self, user_id: int, course_id: int) -> None:
        super().__init__("Certificate", f"({user_id}, {course_id})")
        self.user_id = user_id
        self.course_id = course_id


class NotEnrolledError(BusinessRuleViolationError):
    """Raised when a user acts on a course they are not enrolled in."""

    def __init__(self, user_id: int, course_id: int) -> None:
        super().__init__("not_enrolled", f"User {user_id} is not enrolled in course {course_id}")


class InsufficientProgressError(BusinessRuleViolationError):
    """Raised when progress is below the certificate threshold."""

    def __init__(self, progress: int, threshold: int) -> None:
        super().__init__(
            "insufficient_progress",
            f"Insufficient progress: {progress}% (minimum {threshold}%)",
        )
        self.progress = progress
        self.threshold = threshold


class CertificateAlreadyIssuedError(BusinessRuleViolationError):
    """Raised when the pair already holds a certificate."""

    def __init__(self, user_id: int, course_id: int) -> None:
        super().__init__(
            "already_issued",
            f"Certificate already issued for user {user_id} and course {course_id}",
        )
