"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class NotAuthorizedError(DomainError):
    """Raised when a user attempts an action their role does not allow."""

    def __init__(self, action: str, resource: str, user_id: str | None):
        self.action = action
        self.resource = resource
        self.user_id = user_id
        super().__init__(
            f"User {user_id or 'anonymous'} is not authorized to {action} {resource}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ArticleNotFoundError(NotFoundError):
    """Raised when the target article does not exist."""

    def __init__(self, identifier: str):
        super().__init__("Article", identifier)


class CommentNotFoundError(NotFoundError):
    """Raised when a comment does not exist."""

    def __init__(self, identifier: str):
        super().__init__("Comment", identifier)


class ParentCommentNotFoundError(NotFoundError):
    """Raised when a reply names a parent comment that does not exist."""

    def __init__(self, identifier: str):
        super().__init__("Parent comment", identifier)


class InvalidParentArticleError(BusinessRuleViolationError):
    """Raised when a reply's parent belongs to a different article."""

    def __init__(self, parent_id: str, article_id: str):
        self.parent_id = parent_id
        self.article_id = article_id
        super().__init__(
            f"Parent comment {parent_id} does not belong to article {article_id}"
        )


class MaxDepthExceededError(BusinessRuleViolationError):
    """Raised when a reply would be nested deeper than allowed."""

    def __init__(self, max_depth: int):
        self.max_depth = max_depth
        super().__init__(f"Maximum reply depth reached ({max_depth} levels)")
