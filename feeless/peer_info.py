"""IPv6 socket addresses as exchanged in keepalive messages."""

from __future__ import annotations

import ipaddress
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from feeless.wire import Wire, expect_len

if TYPE_CHECKING:
    from feeless.header import Header


@dataclass(frozen=True)
class PeerInfo(Wire):
    """An IPv6 address followed by a little-endian port."""

    LEN = 18
    ADDR_LEN = 16

    address: ipaddress.IPv6Address
    port: int

    def __post_init__(self) -> None:
        if not 0 <= self.port <= 0xFFFF:
            raise ValueError(f"Port out of range: {self.port}")

    @classmethod
    def from_str(cls, text: str) -> "PeerInfo":
        """Parse a socket address such as ``[::1]:7075``."""
        if not text.startswith("["):
            raise ValueError(f"Invalid IPv6 socket address: {text!r}")
        host, sep, port = text[1:].rpartition("]:")
        if not sep or not port.isdigit():
            raise ValueError(f"Invalid IPv6 socket address: {text!r}")
        try:
            address = ipaddress.IPv6Address(host)
        except ipaddress.AddressValueError as err:
            raise ValueError(f"Invalid IPv6 socket address: {err}") from None
        return cls(address, int(port))

    def __str__(self) -> str:
        mapped = self.address.ipv4_mapped
        host = f"::ffff:{mapped}" if mapped is not None else self.address.compressed
        return f"[{host}]:{self.port}"

    def serialize(self) -> bytes:
        return self.address.packed + self.port.to_bytes(2, "little")

    @classmethod
    def deserialize(cls, data: bytes, header: Optional["Header"] = None) -> "PeerInfo":
        expect_len(len(data), cls.wire_len(), "Peer")
        address = ipaddress.IPv6Address(bytes(data[: cls.ADDR_LEN]))
        port = int.from_bytes(bytes(data[cls.ADDR_LEN :]), "little")
        return cls(address, port)

    @classmethod
    def wire_len(cls, header: Optional["Header"] = None) -> int:
        return cls.LEN