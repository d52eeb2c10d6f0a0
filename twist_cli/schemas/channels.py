"""Channel schemas."""

from pydantic import BaseModel, ConfigDict, Field


class Channel(BaseModel):
    """Twist channel schema."""

    id: int
    name: str = ""
    description: str = ""
    workspace_id: int = 0
    public: bool = False
    archived: bool = False
    color: int = 0
    icon: int = 0
    created_ts: int = 0


class ChannelOptions(BaseModel):
    """Optional fields accepted when creating a channel.

    Only the fields that were explicitly set are sent to the service.
    """

    model_config = ConfigDict(extra="forbid")

    description: str | None = None
    color: int | None = Field(default=None, ge=0, le=11)
    icon: int | None = Field(default=None, ge=1, le=255)
    public: bool | None = None
    user_ids: list[int] | None = None


class ChannelUpdate(BaseModel):
    """Fields that can be changed on an existing channel."""

    model_config = ConfigDict(extra="forbid")

    name: str | None = None
    description: str | None = None
    color: int | None = Field(default=None, ge=0, le=11)
    icon: int | None = Field(default=None, ge=1, le=255)
    public: bool | None = None
