# shardstream

A small asynchronous pipeline for data records. Records are wrapped in
shards, keyed and ordered, then pushed through an in-process stream to a
consumer. A minimal local web server is included.

## Modules

- `shardstream.data`: `Data` is a record with `id`, `name` and `value`.
  `Data.clean_up_values()` strips surrounding double quotes from the name and
  the value. `get_last_data(items)` returns the last record of an iterable,
  or an empty `Data()` when the iterable is empty.
- `shardstream.shard`: `Shard` wraps a `Data` record (`ivalue`) with a `key`
  and an `id`. `Shard.new_shard()` takes the next id from a process-wide
  counter, stores it on the shard, and returns a new shard with the same key,
  that id and an empty record. `ShardService` holds a `Shard`.
  `take_first_char(data)` returns the first character of a string, or `"x"`
  for an empty one.
- `shardstream.shard_controller`: `ControlProtocol` is an enum with
  `DEFAULT`, `ALPHABETIC`, `MOST_VIEW` and `SHUFFLED`.
  `ControlProtocol.list_shards(shards)` under `ALPHABETIC` returns new shards
  keyed `Key:<first character of the value>`, with id 0, sorted by key. Equal
  keys keep their input order. The other protocols return the shards
  unchanged as a list. `list_with_algorithm(shards)` applies `ALPHABETIC`.
- `shardstream.stream`: `DataStream` is an unbounded queue of records.
  - `send_data(data)` queues a record. It raises `RuntimeError` once the
    stream is closed.
  - `receive()` waits for the next record and returns `None` once the stream
    is closed and drained.
  - `close()` stops the stream accepting records.
  - The stream can also be read with `async for`.

  `StreamService` owns a `DataStream`. `StreamService.send_datas(shards)`
  sends each shard's record in order.
- `shardstream.webserver`:
  - `create_app()` builds an aiohttp application that answers `GET /` with
    `Hello, Local Server Online!!!`.
  - `WebServer(socketaddr="127.0.0.1", port="8080")` has
    `start_local_server()`, which serves that application until the task is
    cancelled. It also has `handle_get_request(request)`, which prints a note
    for `Request.GET`.
  - `process_request(request, stream_service)` reads the service's stream for
    `Request.GET`. It prints each record received and returns `None` once the
    stream is closed and drained.
- `shardstream.audit_logger`: `AuditLogger(path="default_log.txt")` creates
  (or truncates) the file. `log_event(event)` writes one
  `<unix seconds>: <event>` line. The logger is closed with `close()` or by
  using it as a context manager.

## Example

```python
import asyncio

from shardstream.data import Data
from shardstream.shard import Shard
from shardstream.shard_controller import list_with_algorithm
from shardstream.stream import StreamService
from shardstream.webserver import Request, process_request

shards = [
    Shard(ivalue=Data(id=0, name="Car", value="Mustang")),
    Shard(ivalue=Data(id=1, name="Car", value="HellCat")),
]
ordered = list_with_algorithm(shards)
print([shard.key for shard in ordered])  # ['Key:H', 'Key:M']


async def main():
    service = StreamService()
    service.send_datas(ordered)
    service.stream.close()
    await process_request(Request.GET, service)


asyncio.run(main())
```

## What it does not do

- The package does not read from any database. Records are built by the
  caller.
- There is no command-line program.
- The web server serves only its greeting page. It does not publish stream
  records over HTTP.
- There are no error types of the package's own. Failures surface as
  standard Python exceptions.

## Testing

The test suite uses pytest and pytest-asyncio, available through the `test`
extra:

```
pip install -e .[test]
pytest
```