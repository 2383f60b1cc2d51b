"""The record type carried through the database, shard and stream layers."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass
class Data:
    """A named value with a numeric identifier."""

    id: int = 0
    name: str = ""
    value: str = ""

    def clean_up_values(self) -> None:
        """Strip surrounding double quotes from name and value."""
        self.name = self.name.strip('"')
        self.value = self.value.strip('"')


def get_last_data(items: Iterable[Data]) -> Data:
    """Return the last item, or an empty record when there is none."""
    last = Data()
    for item in items:
        last = item
    return last