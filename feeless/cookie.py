"""Random handshake cookies."""

from __future__ import annotations

import secrets
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from feeless.wire import Wire

if TYPE_CHECKING:
    from feeless.header import Header


@dataclass(frozen=True)
class Cookie(Wire):
    """32 random bytes that a peer must sign during a handshake."""

    LEN = 32

    data: bytes

    def __post_init__(self) -> None:
        if len(self.data) != self.LEN:
            raise ValueError(
                f"Deserializing cookie: got {len(self.data)} bytes, "
                f"expected {self.LEN}"
            )
        object.__setattr__(self, "data", bytes(self.data))

    @classmethod
    def random(cls) -> "Cookie":
        return cls(secrets.token_bytes(cls.LEN))

    @classmethod
    def from_hex(cls, text: str) -> "Cookie":
        try:
            raw = bytes.fromhex(text)
        except ValueError as err:
            raise ValueError(f"Invalid cookie hex: {err}") from None
        return cls(raw)

    def __str__(self) -> str:
        return self.data.hex().upper()

    def serialize(self) -> bytes:
        return self.data

    @classmethod
    def deserialize(cls, data: bytes, header: Optional["Header"] = None) -> "Cookie":
        return cls(bytes(data))

    @classmethod
    def wire_len(cls, header: Optional["Header"] = None) -> int:
        return cls.LEN