"""Request and response models shared by the registration use cases."""

from pydantic import BaseModel, Field


class UserInfo(BaseModel):
    """Profile of the account being registered."""

    email: str = Field(max_length=255)
    nickname: str = Field(max_length=255)
    avatar: str | None = None
    description: str | None = None
    password: str = Field(min_length=1)


class RegisterResponse(BaseModel):
    """Registration response."""

    uuid: str
    id: int
