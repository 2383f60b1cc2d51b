"""Shards: keyed wrappers around data records."""

from __future__ import annotations

import itertools
import threading
from dataclasses import dataclass, field

from .data import Data

_id_counter = itertools.count()
_id_lock = threading.Lock()


def take_first_char(data: str) -> str:
    """Return the first character of the text, or 'x' when it is empty."""
    return data[0] if data else "x"


@dataclass
class Shard:
    """A data record placed under a key."""

    key: str = ""
    id: int = 0
    ivalue: Data = field(default_factory=Data)

    def new_shard(self) -> Shard:
        """Take the next process-wide id and return an empty shard with this key."""
        with _id_lock:
            self.id = next(_id_counter)
        return Shard(key=self.key, id=self.id, ivalue=Data())


@dataclass
class ShardService:
    """Holds the shard the service works on."""

    shard: Shard = field(default_factory=Shard)