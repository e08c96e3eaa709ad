"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class BadRequestError(Exception):
    """Raised when a request is malformed or misses required input."""


class MissingFieldsError(BadRequestError):
    """Raised when required fields of a client record are absent or blank."""

    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__(f"Missing required fields: {', '.join(missing)}")


class IdentifierCollisionError(Exception):
    """Raised when a freshly generated client id already exists.

    Retryable: the caller may simply submit the request again.
    """

    def __init__(self, client_id: str):
        self.client_id = client_id
        super().__init__("Client ID collision - please try again")


class UnauthorizedError(Exception):
    """Raised when a client id / access token pair does not match a client."""

    def __init__(self, message: str = "Invalid client ID or access token"):
        super().__init__(message)


class UnauthenticatedError(Exception):
    """Raised when an admin session token is missing or cannot be verified."""

    def __init__(self, message: str = "Not authenticated"):
        super().__init__(message)


class SessionInvalidatedError(Exception):
    """Raised when a valid session token is no longer the admin's current one."""

    def __init__(self, message: str = "Session invalidated"):
        super().__init__(message)


class RowWriteError(Exception):
    """Raised by storage when a single destination row cannot be written.

    The message is safe to return to callers; driver details stay in logs.
    """
