from __future__ import annotations

import asyncio
import logging
from typing import Protocol

import websockets
from websockets.exceptions import ConnectionClosed

from .hub import EventBus

log = logging.getLogger(__name__)


class ChannelClosed(Exception):
    """Outbound frame could not be queued; it is dropped, not retried."""


class Transport(Protocol):
    def send(self, frame: str) -> None: ...


class WebsocketService:
    """
    Websocket connection feeding an `EventBus`.

    - `send` never blocks: frames go to a bounded outbox drained by `run`
    - frames sent before the socket opens are flushed once it does, in order
    - inbound text frames are published to the hub in arrival order
    - no reconnect: once the socket ends the service stays closed
    """

    def __init__(
        self,
        url: str,
        hub: EventBus,
        *,
        outbox_size: int = 64,
        debug_log_msgs: bool = False,
    ) -> None:
        self.url = url
        self.hub = hub
        self.debug_log_msgs = debug_log_msgs
        self._outbox: asyncio.Queue[str] = asyncio.Queue(maxsize=outbox_size)
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def send(self, frame: str) -> None:
        if self._closed:
            raise ChannelClosed("websocket service is closed")
        try:
            self._outbox.put_nowait(frame)
        except asyncio.QueueFull as e:
            raise ChannelClosed(f"outbox full ({self._outbox.maxsize} frames)") from e

    def close(self) -> None:
        self._closed = True

    async def drain(self, timeout: float) -> bool:
        """Wait up to `timeout` seconds for queued frames to be written; True if all were."""
        try:
            await asyncio.wait_for(self._outbox.join(), timeout)
        except asyncio.TimeoutError:
            log.warning("%d frame(s) left unsent", self._outbox.qsize())
            return False
        return True

    async def run(self) -> None:
        try:
            async with websockets.connect(self.url, max_size=2**22) as ws:
                writer = asyncio.create_task(self._pump_outbox(ws))
                try:
                    async for raw in ws:
                        if isinstance(raw, bytes):
                            raw = raw.decode("utf-8", errors="replace")
                        if self.debug_log_msgs:
                            log.debug("[ws] in %s", raw)
                        self.hub.publish(raw)
                finally:
                    writer.cancel()
                    await asyncio.gather(writer, return_exceptions=True)
        except ConnectionClosed as e:
            log.warning("connection to %s lost: %s", self.url, e)
        finally:
            self.close()

    async def _pump_outbox(self, ws) -> None:
        while True:
            frame = await self._outbox.get()
            if self.debug_log_msgs:
                log.debug("[ws] out %s", frame)
            await ws.send(frame)
            self._outbox.task_done()
