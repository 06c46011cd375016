"""Account registration use cases."""

from .common import RegisterResponse, UserInfo
from .provisioning import AccountProvisioning
from .register_admin import RegisterAdminRequest, RegisterAdminUseCase
from .register_staff import RegisterStaffRequest, RegisterStaffUseCase

__all__ = [
    "AccountProvisioning",
    "RegisterAdminRequest",
    "RegisterAdminUseCase",
    "RegisterResponse",
    "RegisterStaffRequest",
    "RegisterStaffUseCase",
    "UserInfo",
]
