"""A small local HTTP server and request handling fed by a data stream."""

from __future__ import annotations

import asyncio
import enum
from dataclasses import dataclass

from aiohttp import web

from .stream import StreamService

INDEX_TEXT = "Hello, Local Server Online!!!"


class Request(enum.Enum):
    """Kinds of request the server handles."""

    GET = "GET"


async def _index(request: web.Request) -> web.Response:
    return web.Response(text=INDEX_TEXT)


def create_app() -> web.Application:
    """Build the application serving the index page at "/"."""
    app = web.Application()
    app.router.add_get("/", _index)
    return app


@dataclass
class WebServer:
    """Address and port the local server listens on."""

    socketaddr: str = "127.0.0.1"
    port: str = "8080"

    async def start_local_server(self) -> None:
        """Serve the application until the task is cancelled."""
        port = int(self.port)
        runner = web.AppRunner(create_app())
        await runner.setup()
        try:
            site = web.TCPSite(runner, self.socketaddr, port)
            await site.start()
            print(f"Server Connection Opened on: {self.socketaddr}:{self.port}")
            try:
                await asyncio.Event().wait()
            finally:
                print("Server Stopped")
        finally:
            await runner.cleanup()

    def handle_get_request(self, request: Request) -> None:
        """Handle a request addressed to this server."""
        if request is Request.GET:
            print("Handling GET request")
        else:
            raise ValueError(f"unsupported request: {request!r}")


async def process_request(request: Request, stream_service: StreamService) -> None:
    """Consume the stream for a GET request, reporting each record received.

    Returns once the stream is closed and drained.
    """
    if request is not Request.GET:
        raise ValueError(f"unsupported request: {request!r}")
    async for data in stream_service.stream:
        print(f"On Stream data is: {data!r}")
    return None