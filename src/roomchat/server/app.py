from __future__ import annotations

import logging

import uvicorn
from fastapi import FastAPI, WebSocket, WebSocketDisconnect

from roomchat.protocol import ChatMessage, Envelope, MessageKind, ProtocolError, decode, encode_chat_payload

from .config import get_settings
from .room import ROOM, broadcast, broadcast_users

log = logging.getLogger(__name__)

app = FastAPI()


@app.get("/healthz")
def healthz():
    return {"ok": True}


@app.websocket("/ws")
async def ws(ws: WebSocket):
    await ws.accept()
    ROOM.join(ws)

    try:
        while True:
            raw = await ws.receive_text()
            try:
                msg = decode(raw)
            except ProtocolError as e:
                log.warning("[ws] dropping frame from %s: %s", getattr(ws.client, "host", None), e)
                continue
            if get_settings().debug_log_msgs:
                log.debug("[ws] in kind=%s from=%s", msg.kind.value, ROOM.username(ws))

            if msg.kind is MessageKind.REGISTER:
                if not msg.payload_scalar:
                    log.warning("[ws] register without a username")
                    continue
                ROOM.register(ws, msg.payload_scalar)
                await broadcast_users(ROOM)

            elif msg.kind is MessageKind.MESSAGE:
                sender = ROOM.username(ws)
                if sender is None or msg.payload_scalar is None:
                    log.warning("[ws] dropping message from unregistered or empty sender")
                    continue
                # Stamp the sender; clients send raw text only.
                payload = encode_chat_payload(ChatMessage(sender=sender, body=msg.payload_scalar))
                if await broadcast(ROOM, Envelope(kind=MessageKind.MESSAGE, payload_scalar=payload)):
                    await broadcast_users(ROOM)

            else:
                log.info("[ws] ignoring client-sent %s envelope", msg.kind.value)

    except WebSocketDisconnect:
        pass
    except Exception:
        # e.g. a binary frame, which receive_text cannot read
        log.exception("[ws] closing connection from %s", getattr(ws.client, "host", None))
    finally:
        if ROOM.leave(ws):
            await broadcast_users(ROOM)


def main() -> None:
    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
