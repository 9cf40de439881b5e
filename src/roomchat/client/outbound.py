from __future__ import annotations

from roomchat.protocol import Envelope, MessageKind


def build_register(username: str) -> Envelope:
    """First frame of every session."""
    return Envelope(kind=MessageKind.REGISTER, payload_scalar=username)


def build_chat_message(body: str) -> Envelope:
    # Raw text only: the server stamps `from` and re-wraps as {"from", "message"}.
    return Envelope(kind=MessageKind.MESSAGE, payload_scalar=body)
