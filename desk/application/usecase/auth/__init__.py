"""Authentication use cases."""

from .login import LoginWithAccountUseCase

__all__ = ["LoginWithAccountUseCase"]
