"""Domain value objects for desk.

Shapes exchanged with the remote identity service. Field names follow the
service's JSON keys through aliases.
"""

from pydantic import ConfigDict, Field

from desk.domain.value.common import ValueObject


class RemoteValueObject(ValueObject):
    """Value object serialised with the identity service's camelCase keys."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
    )


class RemoteUser(RemoteValueObject):
    """User entry of a registration request."""

    user_id: str = Field(alias="userID")
    nickname: str
    face_url: str = Field(default="", alias="faceURL")


class IdentityResponse(RemoteValueObject):
    """Envelope of every identity service response.

    A transport-level success can still carry a non-zero ``err_code``.
    """

    err_code: int = Field(default=0, alias="errCode")
    err_msg: str = Field(default="", alias="errMsg")
    err_dlt: str = Field(default="", alias="errDlt")

    @property
    def ok(self) -> bool:
        """Whether the application-level code signals success."""
        return self.err_code == 0


class TokenData(RemoteValueObject):
    """Access token issued by the identity service."""

    token: str
    expire_time_seconds: int = Field(alias="expireTimeSeconds")


class UserTokenResponse(IdentityResponse):
    """Response to a user token request.

    ``data`` is null on refusals.
    """

    data: TokenData | None = None
