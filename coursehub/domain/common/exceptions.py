"""
Domain layer exceptions.

These exceptions represent domain-level errors that occur when
business rules are violated or domain invariants are broken.
They carry no transport details; the API layer maps them to responses.

Taxonomy:
- EntityNotFoundError: a referenced user, course or certificate is absent
- InvalidOperationError: a precondition was violated
    - ValidationError: a field value is missing or out of range
    - BusinessRuleViolationError: the current state forbids the operation
- InvariantViolationError: stored data breaks a model invariant
"""


class DomainError(Exception):
    """
    Base exception for all domain errors.

    All domain exceptions inherit from this class
    so they can be caught and handled uniformly.
    """

    code = "domain_error"

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class EntityNotFoundError(DomainError):
    """
    Raised when an entity cannot be found.

    Example: Looking up a course by an id that is not in the document.
    """

    code = "not_found"

    def __init__(self, entity_type: str, entity_id: object) -> None:
        message = f"{entity_type} with id {entity_id} not found"
        super().__init__(message, {"entity_type": entity_type, "entity_id": entity_id})
        self.entity_type = entity_type
        self.entity_id = entity_id


class InvalidOperationError(DomainError):
    """Raised when a request violates a precondition of the operation."""

    code = "invalid_operation"


class ValidationError(InvalidOperationError):
    """
    Raised when domain validation fails.

    Example: A rating of 6, an empty course title.
    """

    code = "validation_error"

    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: object = None,
        *,
        code: str | None = None,
    ) -> None:
        details: dict[str, object] = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = value
        super().__init__(message, details)
        self.field = field
        self.value = value
        if code:
            self.code = code


class BusinessRuleViolationError(InvalidOperationError):
    """
    Raised when a business rule is violated.

    The rule name doubles as the error code reported to clients.

    Example: Issuing a certificate to a user that is not enrolled.
    """

    def __init__(self, rule: str, message: str | None = None) -> None:
        msg = message or f"Business rule violated: {rule}"
        super().__init__(msg, {"rule": rule})
        self.rule = rule
        self.code = rule


class InvariantViolationError(DomainError):
    """
    Raised when stored data breaks an invariant of the model.

    Example: A course whose instructor_id points at a student.
    """

    code = "data_integrity_error"

    def __init__(self, aggregate: str, invariant: str) -> None:
        message = f"Invariant violation in {aggregate}: {invariant}"
        super().__init__(message, {"aggregate": aggregate, "invariant": invariant})
        self.aggregate = aggregate
        self.invariant = invariant
