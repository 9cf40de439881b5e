"""Terminal client run against a local websocket server."""

import asyncio
import io
import unittest
from unittest.mock import patch

import websockets

from roomchat.client.config import Settings
from roomchat.client.main import run_client
from roomchat.protocol import MessageKind, decode


class TestRunClient(unittest.IsolatedAsyncioTestCase):
    async def test_piped_input_is_sent_before_exit(self):
        received = []
        got_both = asyncio.Event()

        async def handler(ws):
            async for frame in ws:
                received.append(frame)
                if len(received) == 2:
                    got_both.set()

        async with websockets.serve(handler, "127.0.0.1", 0) as server:
            port = server.sockets[0].getsockname()[1]
            settings = Settings(_env_file=None, ws_url=f"ws://127.0.0.1:{port}/ws")
            with patch("sys.stdin", io.StringIO("hi\n")):
                await asyncio.wait_for(run_client("alice", settings), timeout=5)
            await asyncio.wait_for(got_both.wait(), timeout=5)

        envelopes = [decode(f) for f in received]
        self.assertEqual([e.kind for e in envelopes], [MessageKind.REGISTER, MessageKind.MESSAGE])
        self.assertEqual(envelopes[1].payload_scalar, "hi")


if __name__ == "__main__":
    unittest.main()
