from __future__ import annotations

import logging
from dataclasses import dataclass, field

from roomchat.protocol import ChatMessage, Envelope, MessageKind, UserProfile, decode_chat_payload

from .avatar import AVATAR_URL_TEMPLATE, generate_avatar

log = logging.getLogger(__name__)


@dataclass
class ClientState:
    # Replaced wholesale on every `users` envelope; duplicates are kept.
    roster: list[UserProfile] = field(default_factory=list)
    # Append-only for the lifetime of the session.
    messages: list[ChatMessage] = field(default_factory=list)


def handle(
    envelope: Envelope,
    state: ClientState,
    *,
    avatar_template: str = AVATAR_URL_TEMPLATE,
) -> tuple[ClientState, bool]:
    """
    Apply one inbound envelope to `state` (in place).

    Returns the state and whether a re-render is warranted. Raises
    `MalformedMessagePayload` for a `message` whose data is not `{from, message}`;
    state is untouched in that case.
    """
    if envelope.kind is MessageKind.USERS:
        names = envelope.payload_list or []
        state.roster = [
            UserProfile(name=name, avatar=generate_avatar(name, avatar_template)) for name in names
        ]
        return state, True

    if envelope.kind is MessageKind.MESSAGE:
        state.messages.append(decode_chat_payload(envelope.payload_scalar))
        return state, True

    # `register` is client -> server only.
    log.debug("ignoring inbound %s envelope", envelope.kind.value)
    return state, False
