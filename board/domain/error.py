"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Input violates a domain constraint (size, extension, tree shape)."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class DuplicateUsernameError(DomainError):
    """Raised when registering a username that is already taken."""

    def __init__(self, username: str):
        self.username = username
        super().__init__(f"Username already exists: {username}")


class InvalidCredentialsError(DomainError):
    """Raised when a username/password pair does not match.

    The message is identical for unknown usernames and wrong passwords.
    """

    def __init__(self) -> None:
        super().__init__("Invalid username or password")


class NotAuthorizedError(DomainError):
    """Raised when an actor attempts to modify content they don't own."""

    def __init__(self, resource: str, resource_id: str, actor_name: str):
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(
            f"{actor_name} is not authorized to modify {resource} {resource_id}"
        )
