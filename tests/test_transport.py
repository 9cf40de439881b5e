import asyncio
import unittest

import websockets

from roomchat.client import ChannelClosed, EventBus, WebsocketService


class TestSend(unittest.TestCase):
    def test_send_after_close(self):
        service = WebsocketService("ws://127.0.0.1:1/ws", EventBus())
        service.close()
        self.assertTrue(service.closed)
        with self.assertRaises(ChannelClosed):
            service.send("frame")

    def test_full_outbox(self):
        service = WebsocketService("ws://127.0.0.1:1/ws", EventBus(), outbox_size=2)
        service.send("a")
        service.send("b")
        with self.assertRaises(ChannelClosed):
            service.send("c")


class TestRun(unittest.IsolatedAsyncioTestCase):
    async def test_flushes_queued_frames_and_publishes_inbound(self):
        received = []

        async def handler(ws):
            # Echo two frames back, then hang up.
            for _ in range(2):
                frame = await ws.recv()
                received.append(frame)
                await ws.send(f"echo:{frame}")

        async with websockets.serve(handler, "127.0.0.1", 0) as server:
            port = server.sockets[0].getsockname()[1]
            hub = EventBus()
            published = []
            hub.subscribe(published.append)
            service = WebsocketService(f"ws://127.0.0.1:{port}/ws", hub)
            service.send("first")
            service.send("second")
            await asyncio.wait_for(service.run(), timeout=5)

        self.assertEqual(received, ["first", "second"])
        self.assertEqual(published, ["echo:first", "echo:second"])
        self.assertTrue(service.closed)
        with self.assertRaises(ChannelClosed):
            service.send("late")


class TestDrain(unittest.IsolatedAsyncioTestCase):
    async def test_drain_waits_for_queued_frames(self):
        async def handler(ws):
            async for _ in ws:
                pass

        async with websockets.serve(handler, "127.0.0.1", 0) as server:
            port = server.sockets[0].getsockname()[1]
            service = WebsocketService(f"ws://127.0.0.1:{port}/ws", EventBus())
            conn = asyncio.create_task(service.run())
            service.send("one")
            service.send("two")
            self.assertTrue(await service.drain(5))
            conn.cancel()
            await asyncio.gather(conn, return_exceptions=True)

    async def test_drain_times_out_without_connection(self):
        service = WebsocketService("ws://127.0.0.1:1/ws", EventBus())
        service.send("stuck")
        with self.assertLogs("roomchat.client.transport", level="WARNING"):
            self.assertFalse(await service.drain(0.05))


if __name__ == "__main__":
    unittest.main()
