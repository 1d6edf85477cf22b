"""Message header of the peer protocol and the enumerations it carries."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional

from feeless.wire import Wire, expect_len


class HeaderError(ValueError):
    """A header or one of its fields is invalid."""


class Network(IntEnum):
    """The network a node is on, encoded as a single byte."""

    TEST = 0x41
    BETA = 0x42
    LIVE = 0x43


class Version(IntEnum):
    """Protocol versions."""

    V18 = 18


class MessageType(IntEnum):
    """Type of the payload that follows a header."""

    KEEPALIVE = 2
    PUBLISH = 3
    CONFIRM_REQ = 4
    CONFIRM_ACK = 5
    BULK_PULL = 6
    BULK_PUSH = 7
    FRONTIER_REQ = 8
    # A handshake shares a cookie, answered with a public key and a signed cookie.
    HANDSHAKE = 10
    BULK_PULL_ACCOUNT = 11
    TELEMETRY_REQ = 12
    TELEMETRY_ACK = 13


class BlockType(IntEnum):
    """Block type carried in the header extensions."""

    INVALID = 0
    NOT_A_BLOCK = 1
    SEND = 2
    RECEIVE = 3
    OPEN = 4
    CHANGE = 5
    STATE = 6


_QUERY_BIT = 0
_RESPONSE_BIT = 1
_BLOCK_TYPE_SHIFT = 8
_ITEM_COUNT_SHIFT = 12
_NIBBLE = 0x0F


@dataclass
class Extensions:
    """Two bytes of flag and count bits at the end of a header."""

    LEN = 2

    value: int = 0

    @classmethod
    def from_bytes(cls, data: bytes) -> "Extensions":
        expect_len(len(data), cls.LEN, "Extensions")
        return cls(int.from_bytes(bytes(data), "little"))

    def to_bytes(self) -> bytes:
        return self.value.to_bytes(self.LEN, "little")

    def query(self) -> "Extensions":
        """Set the query flag and return self."""
        self.value |= 1 << _QUERY_BIT
        return self

    def response(self) -> "Extensions":
        """Set the response flag and return self."""
        self.value |= 1 << _RESPONSE_BIT
        return self

    def is_query(self) -> bool:
        return bool(self.value >> _QUERY_BIT & 1)

    def is_response(self) -> bool:
        return bool(self.value >> _RESPONSE_BIT & 1)

    def item_count(self) -> int:
        return self.value >> _ITEM_COUNT_SHIFT & _NIBBLE

    def block_type(self) -> BlockType:
        raw = self.value >> _BLOCK_TYPE_SHIFT & _NIBBLE
        try:
            return BlockType(raw)
        except ValueError:
            raise HeaderError(f"Unknown block type: {raw}") from None

    def __repr__(self) -> str:
        flags = []
        if self.is_query():
            flags.append("Query")
        if self.is_response():
            flags.append("Response")
        return f"[{', '.join(flags)}]"


MAGIC_NUMBER = 0x52


@dataclass
class Header(Wire):
    """The eight byte header that precedes every message."""

    LEN = 8

    network: Network
    message_type: MessageType
    ext: Extensions = field(default_factory=Extensions)
    version_max: Version = Version.V18
    version_using: Version = Version.V18
    version_min: Version = Version.V18

    def validate(self, network: Network) -> None:
        """Raise HeaderError if the header is for another network."""
        if self.network != network:
            raise HeaderError(
                f"network mismatch: They're on {self.network.name}. "
                f"We're on {network.name}"
            )

    def to_short_string(self) -> str:
        return f"{self.message_type.name} {self.ext!r}"

    def reset(self, message_type: MessageType, ext: Extensions) -> "Header":
        self.message_type = message_type
        self.ext = ext
        return self

    def serialize(self) -> bytes:
        return bytes(
            [
                MAGIC_NUMBER,
                self.network,
                self.version_max,
                self.version_using,
                self.version_min,
                self.message_type,
            ]
        ) + self.ext.to_bytes()

    @classmethod
    def deserialize(cls, data: bytes, header: Optional["Header"] = None) -> "Header":
        expect_len(len(data), cls.LEN, "Header")
        if data[0] != MAGIC_NUMBER:
            raise HeaderError(
                f"Deserializing header: Invalid magic number: {data[0]}"
            )
        try:
            network = Network(data[1])
        except ValueError:
            raise HeaderError(
                f"Deserializing header: Unknown network: {data[1]}"
            ) from None
        try:
            message_type = MessageType(data[5])
        except ValueError:
            raise HeaderError(f"Unknown message type: {data[5]}") from None
        ext = Extensions.from_bytes(data[6:8])
        return cls(network, message_type, ext)

    @classmethod
    def wire_len(cls, header: Optional["Header"] = None) -> int:
        return cls.LEN