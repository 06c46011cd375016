"""Email verification use cases."""

from .send_code import SendCodeUseCase

__all__ = ["SendCodeUseCase"]
