"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error.

    Raised before any state is mutated.
    """

    pass


class MaxNestingLevelError(ValidationError):
    """Raised when a reply would exceed the maximum nesting level."""

    def __init__(self, max_level: int):
        self.max_level = max_level
        super().__init__(f"Maximum comment nesting level of {max_level} reached")


class ParentNotApprovedError(ValidationError):
    """Raised when replying to a comment that has not been approved."""

    def __init__(self, parent_id: str):
        self.parent_id = parent_id
        super().__init__("Cannot reply to unapproved comment")


class InvalidModerationError(ValidationError):
    """Raised when a moderation action is not recognised."""

    def __init__(self, action: str):
        super().__init__(f"Invalid moderation action: {action}")


class AuthenticationError(DomainError):
    """Raised when a request carries no valid credential."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to mutate content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str | None):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        actor = f"User {user_id}" if user_id else "Anonymous user"
        super().__init__(f"{actor} is not authorized to modify {resource} {resource_id}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class CommentNotFoundError(NotFoundError):
    """Raised when a comment does not exist."""

    def __init__(self, identifier: str):
        super().__init__("Comment", identifier)


class PostNotFoundError(NotFoundError):
    """Raised when a post does not exist or has been deleted."""

    def __init__(self, identifier: str):
        super().__init__("Post", identifier)


class UserNotFoundError(NotFoundError):
    """Raised when a user does not exist."""

    def __init__(self, identifier: str):
        super().__init__("User", identifier)


class ParentNotFoundError(NotFoundError):
    """Raised when a reply's parent is missing or deleted."""

    def __init__(self, identifier: str):
        super().__init__("Parent comment", identifier)


class CommentDeletedError(DomainError):
    """Raised when attempting to modify a soft-deleted comment."""

    def __init__(self, comment_id: str):
        self.comment_id = comment_id
        super().__init__(f"Comment {comment_id} has been deleted")


class ConflictError(DomainError):
    """Raised when an operation conflicts with the current state."""

    pass


class AlreadyModeratedError(ConflictError):
    """Raised when moderating a comment that has left the pending state."""

    def __init__(self, comment_id: str, status: str):
        self.comment_id = comment_id
        self.status = status
        super().__init__(f"Comment {comment_id} has already been moderated ({status})")


class AlreadyFollowingError(ConflictError):
    """Raised when following a user that is already followed."""

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(f"Already following user {user_id}")


class SelfFollowError(ValidationError):
    """Raised when a user tries to follow or unfollow themselves."""

    def __init__(self) -> None:
        super().__init__("Users cannot follow themselves")


class NotFollowingError(ValidationError):
    """Raised when unfollowing a user that is not followed."""

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(f"Not following user {user_id}")


class ThreadIntegrityError(DomainError):
    """Raised when stored thread data is inconsistent (e.g. a parent cycle)."""

    pass
