"""Millisecond timestamps used in votes."""

from __future__ import annotations

import time
from dataclasses import dataclass

from feeless.wire import expect_len


@dataclass(frozen=True)
class Timestamp:
    """Milliseconds since the Unix epoch, sent as 8 little-endian bytes."""

    LEN = 8

    value: int

    @classmethod
    def now(cls) -> "Timestamp":
        return cls(time.time_ns() // 1_000_000)

    def to_bytes(self) -> bytes:
        return self.value.to_bytes(self.LEN, "little")

    @classmethod
    def from_bytes(cls, data: bytes) -> "Timestamp":
        expect_len(len(data), cls.LEN, "IncrementalTimestamp")
        return cls(int.from_bytes(bytes(data), "little"))