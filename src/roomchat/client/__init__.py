from .avatar import PLACEHOLDER_AVATAR, generate_avatar
from .chat import Chat
from .hub import EventBus, SubscriptionHandle
from .outbound import build_chat_message, build_register
from .projection import MessageView, ViewState, is_gif, project, resolve_sender
from .state import ClientState, handle
from .transport import ChannelClosed, WebsocketService

__all__ = [
    "PLACEHOLDER_AVATAR",
    "generate_avatar",
    "Chat",
    "EventBus",
    "SubscriptionHandle",
    "build_chat_message",
    "build_register",
    "MessageView",
    "ViewState",
    "is_gif",
    "project",
    "resolve_sender",
    "ClientState",
    "handle",
    "ChannelClosed",
    "WebsocketService",
]
