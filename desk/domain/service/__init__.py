"""Domain services."""

from .base import Service
from .community_service import CommunityService
from .identity_service import IdentityClient, IdentityClientError, IdentityService
from .jwt_service import JWTService
from .password_service import PasswordService
from .user_service import UserService
from .verification_service import MailSender, VerificationService

__all__ = [
    "CommunityService",
    "IdentityClient",
    "IdentityClientError",
    "IdentityService",
    "JWTService",
    "MailSender",
    "PasswordService",
    "Service",
    "UserService",
    "VerificationService",
]
