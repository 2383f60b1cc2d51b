import asyncio

import pytest

from shardstream.data import Data
from shardstream.shard import Shard
from shardstream.stream import DataStream, StreamService


@pytest.mark.asyncio
async def test_i_stream():
    stream = DataStream()
    ex_data = Data(id=123, name="Car", value="Mustang")
    stream.send_data(ex_data)
    received = await asyncio.wait_for(stream.__anext__(), timeout=5)
    assert received == ex_data


@pytest.mark.asyncio
async def test_receive_after_close_drains_then_ends():
    stream = DataStream()
    stream.send_data(Data(id=1))
    stream.close()
    assert await stream.receive() == Data(id=1)
    assert await stream.receive() is None
    assert await stream.receive() is None


@pytest.mark.asyncio
async def test_close_wakes_waiting_receiver():
    stream = DataStream()
    waiter = asyncio.create_task(stream.receive())
    await asyncio.sleep(0)
    stream.close()
    assert await asyncio.wait_for(waiter, timeout=5) is None


def test_send_after_close_raises():
    stream = DataStream()
    stream.close()
    assert stream.closed
    with pytest.raises(RuntimeError):
        stream.send_data(Data())


@pytest.mark.asyncio
async def test_async_iteration_preserves_order():
    stream = DataStream()
    records = [Data(id=i, value=str(i)) for i in range(4)]
    for record in records:
        stream.send_data(record)
    stream.close()
    assert [item async for item in stream] == records


@pytest.mark.asyncio
async def test_stream_service_sends_shard_values():
    service = StreamService()
    shards = [
        Shard(key="Key:H", ivalue=Data(id=1, name="Car", value="HellCat")),
        Shard(key="Key:M", ivalue=Data(id=0, name="Car", value="Mustang")),
    ]
    service.send_datas(shards)
    service.stream.close()
    assert [item async for item in service.stream] == [s.ivalue for s in shards]