from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from roomchat.protocol import ChatMessage, UnresolvedSender, UserProfile

from .avatar import PLACEHOLDER_AVATAR
from .state import ClientState


@dataclass(frozen=True)
class MessageView:
    sender: str
    body: str
    avatar: str
    is_image: bool
    # False when the sender was not in the roster and a placeholder is shown
    resolved: bool = True


@dataclass(frozen=True)
class ViewState:
    users: list[UserProfile]
    messages: list[MessageView]


def is_gif(body: str) -> bool:
    """Exact, case-sensitive suffix test; no content sniffing."""
    return body.endswith(".gif")


def resolve_sender(message: ChatMessage, roster: Sequence[UserProfile]) -> UserProfile:
    for user in roster:
        if user.name == message.sender:
            return user
    raise UnresolvedSender(message.sender)


def project(state: ClientState, placeholder_avatar: str = PLACEHOLDER_AVATAR) -> ViewState:
    """
    Derive render-ready data from `state`.

    A sender missing from the roster degrades that one entry to a placeholder
    avatar; the rest of the view is unaffected.
    """
    views: list[MessageView] = []
    for message in state.messages:
        try:
            avatar = resolve_sender(message, state.roster).avatar
            resolved = True
        except UnresolvedSender:
            avatar = placeholder_avatar
            resolved = False
        views.append(
            MessageView(
                sender=message.sender,
                body=message.body,
                avatar=avatar,
                is_image=is_gif(message.body),
                resolved=resolved,
            )
        )
    return ViewState(users=list(state.roster), messages=views)
