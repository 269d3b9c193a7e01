"""Request and response models for the HTTP API."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from media_relay.domain.models import ImageRecord, UserAccount


class RegisterRequest(BaseModel):
    """Registration payload; presence is checked by the user service."""

    email: str | None = None
    password: str | None = None
    full_name: str | None = Field(default=None, alias="fullname")

    model_config = ConfigDict(populate_by_name=True)


class LoginRequest(BaseModel):
    email: str | None = None
    password: str | None = None


class ImageResponse(BaseModel):
    image_url: str = Field(serialization_alias="imageUrl")
    public_id: str = Field(serialization_alias="publicId")
    created_at: datetime = Field(serialization_alias="createdAt")

    @classmethod
    def from_record(cls, record: ImageRecord) -> "ImageResponse":
        return cls(
            image_url=record.image_url,
            public_id=record.storage_id,
            created_at=record.created_at,
        )


class UserResponse(BaseModel):
    """Identity fields safe to return to clients."""

    id: str
    email: str
    fullname: str

    @classmethod
    def from_account(cls, account: UserAccount) -> "UserResponse":
        return cls(id=str(account.id), email=account.email, fullname=account.full_name)
