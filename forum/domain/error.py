"""Domain layer errors."""

import pydantic


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error.

    Carries the name of the offending field so callers can show
    targeted feedback instead of a generic failure.
    """

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")

    @classmethod
    def from_pydantic(cls, error: pydantic.ValidationError) -> "ValidationError":
        """Build from the first error pydantic reported."""
        first = error.errors()[0]
        field = ".".join(str(part) for part in first["loc"]) or "__root__"
        return cls(field, first["msg"])


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class DuplicateVoteError(BusinessRuleViolationError):
    """Raised when a user already holds a vote in the requested direction."""

    def __init__(self, votable_type: str, votable_id: str, direction: str):
        super().__init__(
            f"Already voted {direction} on this {votable_type}: {votable_id}"
        )


class AuthRequiredError(DomainError):
    """Raised when a mutation is attempted without an authenticated user."""

    def __init__(self, action: str):
        self.action = action
        super().__init__(f"Authentication required to {action}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class DataIntegrityError(DomainError):
    """Stored data references something that cannot be resolved."""

    pass


class AuthorNotFoundError(DataIntegrityError):
    """Raised when content references an author the identity provider cannot resolve."""

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(f"Author not found: {user_id}")
