"""Ordering strategies for lists of shards."""

from __future__ import annotations

import enum
from collections.abc import Iterable

from .shard import Shard, take_first_char


class ControlProtocol(enum.Enum):
    """How a list of shards is keyed and ordered."""

    DEFAULT = "default"
    ALPHABETIC = "alphabetic"
    MOST_VIEW = "most_view"
    SHUFFLED = "shuffled"

    def list_shards(self, shards: Iterable[Shard]) -> list[Shard]:
        """Key and order the shards by this protocol.

        Alphabetic keys each shard by the first character of its value and
        sorts by key, keeping the input order among equal keys. The other
        protocols return the shards unchanged.
        """
        if self is ControlProtocol.ALPHABETIC:
            keyed = [
                Shard(
                    key=f"Key:{take_first_char(shard.ivalue.value)}",
                    id=0,
                    ivalue=shard.ivalue,
                )
                for shard in shards
            ]
            keyed.sort(key=lambda shard: shard.key)
            return keyed
        return list(shards)


def list_with_algorithm(shards: Iterable[Shard]) -> list[Shard]:
    """Order shards with the alphabetic protocol."""
    return ControlProtocol.ALPHABETIC.list_shards(shards)