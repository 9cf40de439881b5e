from __future__ import annotations

import logging
from typing import Callable, Optional

from roomchat.protocol import (
    Envelope,
    MalformedEnvelope,
    MalformedMessagePayload,
    UnknownMessageKind,
    decode,
    encode,
)

from .config import Settings, get_settings
from .hub import EventBus
from .outbound import build_chat_message, build_register
from .projection import ViewState, project
from .state import ClientState, handle
from .transport import ChannelClosed, Transport

log = logging.getLogger(__name__)


class Chat:
    """
    Chat view for one session.

    Registers `username` once at construction, then reduces every frame the hub
    delivers into `state`. `on_redraw` receives a fresh projection whenever a
    frame changed something visible.
    """

    def __init__(
        self,
        username: str,
        transport: Transport,
        hub: EventBus,
        *,
        on_redraw: Optional[Callable[[ViewState], object]] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.username = username
        self.state = ClientState()
        self.input = ""
        self._transport = transport
        self._hub = hub
        self._on_redraw = on_redraw

        if self._send(build_register(username)):
            log.debug("registered as %s", username)
        self._subscription = hub.subscribe(self.handle_frame)

    def handle_frame(self, raw: str) -> bool:
        try:
            envelope = decode(raw)
        except UnknownMessageKind as e:
            log.info("dropping frame: %s", e)
            return False
        except MalformedEnvelope as e:
            log.warning("dropping malformed frame: %s", e)
            return False

        if self.settings.debug_log_msgs:
            log.debug("[chat:%s] in kind=%s", self.username, envelope.kind.value)

        try:
            _, redraw = handle(envelope, self.state, avatar_template=self.settings.avatar_url_template)
        except MalformedMessagePayload as e:
            log.warning("dropping chat message: %s", e)
            return False

        if redraw and self._on_redraw is not None:
            self._on_redraw(self.view())
        return redraw

    def view(self) -> ViewState:
        return project(self.state, self.settings.placeholder_avatar)

    def submit(self, text: Optional[str] = None) -> bool:
        """Send `text` (default: the input field). Clears the input only if queued."""
        body = self.input if text is None else text
        if not self._send(build_chat_message(body)):
            return False
        self.input = ""
        return True

    def teardown(self) -> None:
        if self._subscription is not None:
            self._hub.unsubscribe(self._subscription)
            self._subscription = None

    def _send(self, envelope: Envelope) -> bool:
        try:
            self._transport.send(encode(envelope))
        except ChannelClosed as e:
            log.warning("error sending to channel: %s", e)
            return False
        return True
