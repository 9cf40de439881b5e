from .codec import decode, decode_chat_payload, encode, encode_chat_payload
from .constants import T_MESSAGE, T_REGISTER, T_USERS
from .errors import (
    MalformedEnvelope,
    MalformedMessagePayload,
    ProtocolError,
    UnknownMessageKind,
    UnresolvedSender,
)
from .messages import ChatMessage, Envelope, MessageKind, UserProfile

__all__ = [
    "T_MESSAGE",
    "T_REGISTER",
    "T_USERS",
    "ChatMessage",
    "Envelope",
    "MessageKind",
    "UserProfile",
    "ProtocolError",
    "MalformedEnvelope",
    "UnknownMessageKind",
    "MalformedMessagePayload",
    "UnresolvedSender",
    "decode",
    "encode",
    "decode_chat_payload",
    "encode_chat_payload",
]
