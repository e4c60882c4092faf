"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class InvalidPaginationError(ValidationError):
    """Raised when page/limit parameters are malformed."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ParentNotFoundError(NotFoundError):
    """Raised when a reply points at a comment that does not exist."""

    def __init__(self, identifier: str):
        super().__init__("Parent comment", identifier)


class AlreadyLikedError(DomainError):
    """Raised when a user likes something they already like."""

    def __init__(self, resource: str, identifier: str, user_id: str):
        self.resource = resource
        self.identifier = identifier
        self.user_id = user_id
        super().__init__(f"User {user_id} already liked {resource} {identifier}")


class NotLikedError(DomainError):
    """Raised when a user unlikes something they never liked."""

    def __init__(self, resource: str, identifier: str, user_id: str):
        self.resource = resource
        self.identifier = identifier
        self.user_id = user_id
        super().__init__(f"User {user_id} has not liked {resource} {identifier}")


class DeletionFailedError(DomainError):
    """Raised when a comment vanished while its subtree was being deleted."""

    def __init__(self, comment_id: str):
        self.comment_id = comment_id
        super().__init__(f"Comment deletion failed: {comment_id}")


class StoreError(DomainError):
    """Raised when the underlying entity store call fails."""

    pass
