"""Strongly typed identifiers for desk domain entities.

Row ids are assigned by the store; the user UUID is generated by the
application and is the only identifier shared with the identity service.
"""

from typing import NewType
from uuid import UUID

UserUUID = NewType("UserUUID", UUID)
UserId = NewType("UserId", int)
CommunityId = NewType("CommunityId", int)
