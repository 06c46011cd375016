"""Domain layer errors."""

from uuid import UUID


class DomainError(Exception):
    """Base domain error."""

    pass


class InvalidCodeError(DomainError):
    """Raised when a verification code is absent, expired or mismatched."""

    def __init__(self, email: str):
        self.email = email
        super().__init__("code is not valid")


class CommunityCreationError(DomainError):
    """Raised when the community for a new administrator cannot be created."""

    pass


class PersistenceError(DomainError):
    """Raised when the local store rejects a write or lookup."""

    pass


class RemoteRegistrationError(DomainError):
    """Raised when the identity service refuses or fails a registration.

    The identifiers of the (compensated) local row are attached so callers can
    correlate logs. They never denote a usable account.
    """

    def __init__(self, message: str, user_uuid: UUID, user_id: int | None):
        self.user_uuid = user_uuid
        self.user_id = user_id
        super().__init__(message)


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class InvalidCredentialsError(DomainError):
    """Raised when a password does not match the stored hash."""

    def __init__(self, message: str = "password is not correct"):
        super().__init__(message)


class TokenIssuanceError(DomainError):
    """Raised when a session token cannot be signed."""

    pass


class RemoteAuthError(DomainError):
    """Raised when the identity service cannot issue an access token."""

    pass


class IdentityServiceError(DomainError):
    """Raised when a call to the identity service does not succeed.

    ``err_code`` is the application-level code, or None for transport failures.
    """

    def __init__(self, message: str, err_code: int | None = None):
        self.err_code = err_code
        super().__init__(message)
