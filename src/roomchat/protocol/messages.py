from __future__ import annotations

from enum import Enum
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .constants import F_DATA, F_DATA_ARRAY, F_FROM, F_MESSAGE_TYPE, F_TEXT, T_MESSAGE, T_REGISTER, T_USERS


class MessageKind(str, Enum):
    USERS = T_USERS
    REGISTER = T_REGISTER
    MESSAGE = T_MESSAGE

    @classmethod
    def from_tag(cls, tag: str) -> MessageKind:
        """Case-insensitive lookup; raises ValueError for unknown tags."""
        return cls(tag.lower())


class Envelope(BaseModel):
    """
    Wire-level unit exchanged in both directions.

    - `users` carries the full roster in **payload_list**
    - `register` carries the raw username in **payload_scalar**
    - `message` carries chat text in **payload_scalar** (JSON `{from, message}` inbound)
    """

    model_config = ConfigDict(populate_by_name=True)

    kind: MessageKind = Field(alias=F_MESSAGE_TYPE)
    payload_list: Optional[list[str]] = Field(default=None, alias=F_DATA_ARRAY)
    payload_scalar: Optional[str] = Field(default=None, alias=F_DATA)

    @field_validator("kind", mode="before")
    @classmethod
    def _lower_tag(cls, v: object) -> object:
        return v.lower() if isinstance(v, str) else v


class ChatMessage(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    sender: Annotated[str, Field(alias=F_FROM, min_length=1)]
    body: Annotated[str, Field(alias=F_TEXT)]


class UserProfile(BaseModel):
    """Derived per roster entry; never transmitted."""

    model_config = ConfigDict(frozen=True)

    name: str
    avatar: str
