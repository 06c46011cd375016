"""Community use cases."""

from .create_community import CommunityInfo, CreateCommunityUseCase

__all__ = ["CommunityInfo", "CreateCommunityUseCase"]
