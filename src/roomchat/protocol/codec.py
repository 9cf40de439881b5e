from __future__ import annotations

import json
from typing import Optional, Union

from pydantic import ValidationError

from .constants import F_MESSAGE_TYPE
from .errors import MalformedEnvelope, MalformedMessagePayload, UnknownMessageKind
from .messages import ChatMessage, Envelope, MessageKind


def encode(envelope: Envelope) -> str:
    """Serialize to `{"messageType", "dataArray", "data"}` (nulls kept)."""
    obj = envelope.model_dump(mode="json", by_alias=True)
    return json.dumps(obj, separators=(",", ":"), ensure_ascii=False)


def decode(raw: Union[str, bytes]) -> Envelope:
    """
    Parse one inbound frame.

    Only the envelope itself is checked here; the payload shape is left to the
    protocol handler.
    """
    if isinstance(raw, bytes):
        raw = raw.decode("utf-8", errors="replace")
    try:
        obj = json.loads(raw)
    except (json.JSONDecodeError, RecursionError) as e:
        # Deeply nested arrays exhaust the parser before a syntax error is seen.
        raise MalformedEnvelope(f"frame is not valid JSON: {e}") from e
    if not isinstance(obj, dict):
        raise MalformedEnvelope("frame is not a JSON object")

    tag = obj.get(F_MESSAGE_TYPE)
    if not isinstance(tag, str):
        raise MalformedEnvelope(f"frame lacks a string {F_MESSAGE_TYPE!r}")
    try:
        kind = MessageKind.from_tag(tag)
    except ValueError:
        raise UnknownMessageKind(tag) from None

    try:
        return Envelope.model_validate({**obj, F_MESSAGE_TYPE: kind})
    except ValidationError as e:
        raise MalformedEnvelope(f"bad envelope fields: {e.error_count()} error(s)") from e


def decode_chat_payload(data: Optional[str]) -> ChatMessage:
    if data is None:
        raise MalformedMessagePayload("message envelope carries no data")
    try:
        return ChatMessage.model_validate_json(data)
    except ValidationError as e:
        raise MalformedMessagePayload(f"data is not a {{from, message}} object: {data!r}") from e


def encode_chat_payload(message: ChatMessage) -> str:
    return message.model_dump_json(by_alias=True)
