from __future__ import annotations

from dataclasses import dataclass, field

from fastapi import WebSocket

from roomchat.protocol import Envelope, MessageKind, encode


@dataclass
class Room:
    # Connection order; the name is None until the connection registers.
    members: dict[WebSocket, str | None] = field(default_factory=dict)

    def join(self, ws: WebSocket) -> None:
        self.members[ws] = None

    def register(self, ws: WebSocket, username: str) -> None:
        self.members[ws] = username

    def leave(self, ws: WebSocket) -> bool:
        """Drop `ws`; True if it had registered (the roster changed)."""
        return self.members.pop(ws, None) is not None

    def username(self, ws: WebSocket) -> str | None:
        return self.members.get(ws)

    def usernames(self) -> list[str]:
        return [name for name in self.members.values() if name is not None]


ROOM = Room()


async def broadcast(room: Room, envelope: Envelope) -> bool:
    """Send to every member, dropping dead sockets; True if a registered member was dropped."""
    dead: list[WebSocket] = []
    data = encode(envelope)
    for ws in list(room.members):
        try:
            await ws.send_text(data)
        except Exception:
            dead.append(ws)
    roster_changed = False
    for ws in dead:
        if room.members.pop(ws, None) is not None:
            roster_changed = True
    return roster_changed


async def broadcast_users(room: Room) -> None:
    # Repeat until a pass drops no registered member; the room only shrinks.
    while await broadcast(room, Envelope(kind=MessageKind.USERS, payload_list=room.usernames())):
        pass
