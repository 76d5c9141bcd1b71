"""
Base domain exceptions.
"""


class AugureException(Exception):
    """Base exception for all Augure domain errors."""

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class EntityNotFoundError(AugureException):
    """Raised when entity is not found in repository."""

    def __init__(self, entity_type: str, entity_id: str | None = None):
        if entity_id is None:
            message = f"{entity_type} not found"
        else:
            message = f"{entity_type} with ID {entity_id} not found"
        super().__init__(message, code="ENTITY_NOT_FOUND")


class DuplicateEntityError(AugureException):
    """Raised when attempting to create duplicate entity."""

    def __init__(self, entity_type: str, identifier: str):
        message = f"{entity_type} with {identifier} already exists"
        super().__init__(message, code="DUPLICATE_ENTITY")


class ConflictError(AugureException):
    """Raised when a request conflicts with existing state."""

    def __init__(self, message: str):
        super().__init__(message, code="CONFLICT")


class ValidationError(AugureException):
    """
    Raised when input validation fails.

    With a field, the message is prefixed with the field name. Without
    one, the reason is used verbatim as the message.
    """

    def __init__(self, field: str | None, reason: str):
        self.field = field
        if field:
            message = f"Validation failed for {field}: {reason}"
        else:
            message = reason
        super().__init__(message, code="VALIDATION_ERROR")


class ForbiddenError(AugureException):
    """Raised when an authenticated user may not access a resource."""

    def __init__(self, message: str = "Access denied"):
        super().__init__(message, code="FORBIDDEN")
