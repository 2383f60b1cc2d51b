"""An unbounded in-process stream of data records."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator, Iterable
from dataclasses import dataclass, field

from .data import Data
from .shard import Shard

_CLOSED = object()


class DataStream:
    """Unbounded queue of records with an async receiving side."""

    def __init__(self) -> None:
        self._queue: asyncio.Queue = asyncio.Queue()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def send_data(self, data: Data) -> None:
        """Queue a record; raises RuntimeError once the stream is closed."""
        if self._closed:
            raise RuntimeError("stream is closed")
        self._queue.put_nowait(data)

    def close(self) -> None:
        """Stop accepting records; receivers drain what is queued, then end."""
        if not self._closed:
            self._closed = True
            self._queue.put_nowait(_CLOSED)

    async def receive(self) -> Data | None:
        """Wait for the next record; None once the stream is closed and drained."""
        item = await self._queue.get()
        if item is _CLOSED:
            self._queue.put_nowait(_CLOSED)
            return None
        return item

    def __aiter__(self) -> AsyncIterator[Data]:
        return self

    async def __anext__(self) -> Data:
        item = await self.receive()
        if item is None:
            raise StopAsyncIteration
        return item


@dataclass
class StreamService:
    """Feeds shard values into a data stream."""

    stream: DataStream = field(default_factory=DataStream)

    def send_datas(self, shards: Iterable[Shard]) -> None:
        """Send the record of each shard, in order."""
        for shard in shards:
            self.stream.send_data(shard.ivalue)