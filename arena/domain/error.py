"""Domain layer errors.

Every rejected registry operation surfaces exactly one of these, each with a
stable ``code`` that the interface layer exposes to callers.
"""


class DomainError(Exception):
    """Base domain error."""

    code = "domain_error"


class InvalidInputError(DomainError):
    """Raised when a field fails validation (empty text, rating out of range)."""

    code = "invalid_input"


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    code = "not_found"

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class InactiveResourceError(DomainError):
    """Raised when acting on a resource that has been deactivated."""

    code = "inactive_resource"

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} {identifier} is not active")


class ForbiddenError(DomainError):
    """Raised when a caller is not permitted to perform an action."""

    code = "forbidden"

    def __init__(self, message: str, user_id: str | None = None):
        self.user_id = user_id
        super().__init__(message)


class ConflictError(DomainError):
    """Raised when an operation collides with existing state (duplicate vote)."""

    code = "conflict"
