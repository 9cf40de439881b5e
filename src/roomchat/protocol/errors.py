from __future__ import annotations


class ProtocolError(Exception):
    """Base for every non-fatal protocol failure."""


class MalformedEnvelope(ProtocolError):
    """Frame is not JSON, not an object, or lacks a usable `messageType`."""


class UnknownMessageKind(ProtocolError):
    def __init__(self, tag: str):
        super().__init__(f"unknown messageType {tag!r}")
        self.tag = tag


class MalformedMessagePayload(ProtocolError):
    """`message` envelope whose data is not a `{from, message}` object."""


class UnresolvedSender(ProtocolError):
    def __init__(self, sender: str):
        super().__init__(f"sender {sender!r} is not in the roster")
        self.sender = sender
