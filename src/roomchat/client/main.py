from __future__ import annotations

import argparse
import asyncio
import logging
import sys
import threading
from pathlib import Path

from .chat import Chat
from .config import Settings, get_settings
from .hub import EventBus
from .projection import ViewState
from .rendering import render_html, render_text
from .transport import WebsocketService

log = logging.getLogger(__name__)


def _stdin_lines(loop: asyncio.AbstractEventLoop, lines: asyncio.Queue[str | None]) -> None:
    for line in sys.stdin:
        loop.call_soon_threadsafe(lines.put_nowait, line.rstrip("\n"))
    loop.call_soon_threadsafe(lines.put_nowait, None)


async def run_client(username: str, settings: Settings, *, html_out: Path | None = None) -> None:
    hub = EventBus()
    service = WebsocketService(
        settings.ws_url,
        hub,
        outbox_size=settings.outbox_size,
        debug_log_msgs=settings.debug_log_msgs,
    )

    def redraw(view: ViewState) -> None:
        print(render_text(view), flush=True)
        if html_out is not None:
            html_out.write_text(render_html(view), encoding="utf-8")

    chat = Chat(username, service, hub, on_redraw=redraw, settings=settings)
    conn = asyncio.create_task(service.run())

    lines: asyncio.Queue[str | None] = asyncio.Queue()
    # Daemon thread: a blocked readline must not hold up interpreter exit.
    threading.Thread(target=_stdin_lines, args=(asyncio.get_running_loop(), lines), daemon=True).start()

    try:
        while not conn.done():
            next_line = asyncio.create_task(lines.get())
            done, _ = await asyncio.wait({next_line, conn}, return_when=asyncio.FIRST_COMPLETED)
            if next_line not in done:
                next_line.cancel()
                break
            line = next_line.result()
            if line is None:
                # stdin closed: let anything already submitted reach the socket.
                await service.drain(settings.drain_timeout_s)
                break
            chat.input = line
            chat.submit()
    finally:
        chat.teardown()
        service.close()
        conn.cancel()
        await asyncio.gather(conn, return_exceptions=True)
        if not conn.cancelled() and conn.exception() is not None:
            log.error("connection to %s failed: %s", settings.ws_url, conn.exception())


def main() -> None:
    settings = get_settings()
    ap = argparse.ArgumentParser(description="Join the chat room from a terminal.")
    ap.add_argument("--ws", default=settings.ws_url, help="WebSocket URL, e.g. ws://127.0.0.1:8080/ws")
    ap.add_argument("--username", default=settings.username, help="Name to register with")
    ap.add_argument("--html", default=None, help="Also write the rendered room to this HTML file")
    args = ap.parse_args()

    logging.basicConfig(level=settings.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    if not args.username:
        ap.error("a username is required (--username or ROOMCHAT_USERNAME)")
    settings = settings.model_copy(update={"ws_url": args.ws})

    try:
        asyncio.run(run_client(args.username, settings, html_out=Path(args.html) if args.html else None))
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
