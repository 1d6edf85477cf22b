"""Payloads of the simpler peer-to-peer messages."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from feeless.cookie import Cookie
from feeless.header import Header
from feeless.peer_info import PeerInfo
from feeless.wire import Wire, expect_len

PUBLIC_LEN = 32
SIGNATURE_LEN = 64
BLOCK_HASH_LEN = 32


def _fixed(value: bytes, size: int, what: str) -> bytes:
    raw = bytes(value)
    expect_len(len(raw), size, what)
    return raw


def _require_header(header: Optional[Header], what: str) -> Header:
    if header is None:
        raise ValueError(f"{what} needs a header")
    return header


class ByteReader:
    """Reads consecutive pieces from a byte string."""

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self._offset = 0

    @property
    def remaining(self) -> int:
        return len(self._data) - self._offset

    def slice(self, size: int) -> bytes:
        if size > self.remaining:
            raise ValueError(
                f"Not enough bytes: wanted {size}, {self.remaining} left"
            )
        start = self._offset
        self._offset += size
        return self._data[start : self._offset]

    def u8(self) -> int:
        return self.slice(1)[0]

    def u32_le(self) -> int:
        return int.from_bytes(self.slice(4), "little")

    def u32_be(self) -> int:
        return int.from_bytes(self.slice(4), "big")

    def u64_be(self) -> int:
        return int.from_bytes(self.slice(8), "big")


@dataclass(frozen=True)
class Empty(Wire):
    """A message without payload."""

    def serialize(self) -> bytes:
        return b""

    @classmethod
    def deserialize(cls, data: bytes, header: Optional[Header] = None) -> "Empty":
        return cls()

    @classmethod
    def wire_len(cls, header: Optional[Header] = None) -> int:
        return 0


@dataclass(frozen=True)
class TelemetryReq(Wire):
    """A request for telemetry; it has no payload."""

    def serialize(self) -> bytes:
        return b""

    @classmethod
    def deserialize(cls, data: bytes, header: Optional[Header] = None) -> "TelemetryReq":
        return cls()

    @classmethod
    def wire_len(cls, header: Optional[Header] = None) -> int:
        return 0


@dataclass(frozen=True)
class FrontierReq(Wire):
    """Asks a peer for account frontiers starting at an account."""

    LEN = 40

    start: bytes
    age: int
    count: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", _fixed(self.start, PUBLIC_LEN, "Public"))

    def serialize(self) -> bytes:
        return (
            self.start
            + self.age.to_bytes(4, "little")
            + self.count.to_bytes(4, "little")
        )

    @classmethod
    def deserialize(cls, data: bytes, header: Optional[Header] = None) -> "FrontierReq":
        reader = ByteReader(data)
        start = reader.slice(PUBLIC_LEN)
        age = reader.u32_le()
        count = reader.u32_le()
        return cls(start, age, count)

    @classmethod
    def wire_len(cls, header: Optional[Header] = None) -> int:
        return cls.LEN


@dataclass(frozen=True)
class FrontierResp(Wire):
    """One account and its frontier block hash, sent without a header."""

    LEN = PUBLIC_LEN + BLOCK_HASH_LEN

    account: bytes
    frontier_hash: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "account", _fixed(self.account, PUBLIC_LEN, "Public"))
        object.__setattr__(
            self,
            "frontier_hash",
            _fixed(self.frontier_hash, BLOCK_HASH_LEN, "FrontierHash"),
        )

    def serialize(self) -> bytes:
        return self.account + self.frontier_hash

    @classmethod
    def deserialize(cls, data: bytes, header: Optional[Header] = None) -> "FrontierResp":
        reader = ByteReader(data)
        try:
            account = reader.slice(PUBLIC_LEN)
            frontier_hash = reader.slice(BLOCK_HASH_LEN)
        except ValueError as err:
            raise ValueError(f"Deserialize frontier response: {err}") from None
        return cls(account, frontier_hash)

    @classmethod
    def wire_len(cls, header: Optional[Header] = None) -> int:
        return cls.LEN


@dataclass(frozen=True)
class HandshakeQuery(Wire):
    """The cookie a peer is asked to sign."""

    LEN = Cookie.LEN

    cookie: Cookie

    def serialize(self) -> bytes:
        return self.cookie.serialize()

    @classmethod
    def deserialize(cls, data: bytes, header: Optional[Header] = None) -> "HandshakeQuery":
        return cls(Cookie.deserialize(data, header))

    @classmethod
    def wire_len(cls, header: Optional[Header] = None) -> int:
        return cls.LEN


@dataclass(frozen=True)
class HandshakeResponse(Wire):
    """A node's public key and its signature of our cookie."""

    LEN = PUBLIC_LEN + SIGNATURE_LEN

    public: bytes
    signature: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "public", _fixed(self.public, PUBLIC_LEN, "Public"))
        object.__setattr__(
            self, "signature", _fixed(self.signature, SIGNATURE_LEN, "Signature")
        )

    def serialize(self) -> bytes:
        return self.public + self.signature

    @classmethod
    def deserialize(
        cls, data: bytes, header: Optional[Header] = None
    ) -> "HandshakeResponse":
        raw = bytes(data)
        return cls(raw[:PUBLIC_LEN], raw[PUBLIC_LEN:])

    @classmethod
    def wire_len(cls, header: Optional[Header] = None) -> int:
        return cls.LEN


@dataclass(frozen=True)
class Handshake(Wire):
    """A handshake holding a query, a response, or both, as flagged in the header."""

    query: Optional[HandshakeQuery] = None
    response: Optional[HandshakeResponse] = None

    def serialize(self) -> bytes:
        parts = [part.serialize() for part in (self.query, self.response) if part]
        return b"".join(parts)

    @classmethod
    def deserialize(cls, data: bytes, header: Optional[Header] = None) -> "Handshake":
        header = _require_header(header, "Handshake")
        reader = ByteReader(data)
        query = response = None
        if header.ext.is_query():
            query = HandshakeQuery.deserialize(
                reader.slice(HandshakeQuery.LEN), header
            )
        if header.ext.is_response():
            response = HandshakeResponse.deserialize(
                reader.slice(HandshakeResponse.LEN), header
            )
        return cls(query, response)

    @classmethod
    def wire_len(cls, header: Optional[Header] = None) -> int:
        header = _require_header(header, "Handshake")
        size = 0
        if header.ext.is_query():
            size += HandshakeQuery.LEN
        if header.ext.is_response():
            size += HandshakeResponse.LEN
        return size


@dataclass(frozen=True)
class Keepalive(Wire):
    """Up to eight peers a node knows about; empty slots are all zeros."""

    PEERS = 8

    peers: List[PeerInfo] = field(default_factory=list)

    def serialize(self) -> bytes:
        if len(self.peers) > self.PEERS:
            raise ValueError(
                f"Keepalive holds at most {self.PEERS} peers, got {len(self.peers)}"
            )
        filled = b"".join(peer.serialize() for peer in self.peers)
        return filled + bytes(PeerInfo.LEN * (self.PEERS - len(self.peers)))

    @classmethod
    def deserialize(cls, data: bytes, header: Optional[Header] = None) -> "Keepalive":
        reader = ByteReader(data)
        empty = bytes(PeerInfo.LEN)
        peers = []
        for _ in range(cls.PEERS):
            chunk = reader.slice(PeerInfo.LEN)
            if chunk != empty:
                peers.append(PeerInfo.deserialize(chunk, header))
        return cls(peers)

    @classmethod
    def wire_len(cls, header: Optional[Header] = None) -> int:
        return PeerInfo.LEN * cls.PEERS


@dataclass(frozen=True)
class TelemetryAck(Wire):
    """Signed statistics a node reports about itself."""

    LEN = 202

    signature: bytes
    node_id: bytes
    block_count: int = 0
    cemented_count: int = 0
    unchecked_count: int = 0
    account_count: int = 0
    bandwidth_cap: int = 0
    uptime: int = 0
    peer_count: int = 0
    protocol_version: int = 0
    genesis_block: bytes = bytes(BLOCK_HASH_LEN)
    major_version: int = 0
    minor_version: int = 0
    patch_version: int = 0
    prerelease_version: int = 0
    maker: int = 0
    timestamp: bytes = bytes(8)
    active_difficulty: bytes = bytes(8)

    def __post_init__(self) -> None:
        checks = (
            ("signature", SIGNATURE_LEN, "Telemetry ack signature"),
            ("node_id", PUBLIC_LEN, "Telemetry ack node_id"),
            ("genesis_block", BLOCK_HASH_LEN, "Telemetry ack genesis block"),
            ("timestamp", 8, "Telemetry ack timestamp"),
            ("active_difficulty", 8, "Telemetry ack active_difficulty"),
        )
        for name, size, what in checks:
            object.__setattr__(self, name, _fixed(getattr(self, name), size, what))

    def serialize(self) -> bytes:
        counters = (
            self.block_count,
            self.cemented_count,
            self.unchecked_count,
            self.account_count,
            self.bandwidth_cap,
            self.uptime,
        )
        versions = (
            self.major_version,
            self.minor_version,
            self.patch_version,
            self.prerelease_version,
            self.maker,
        )
        return b"".join(
            [
                self.signature,
                self.node_id,
                *(value.to_bytes(8, "big") for value in counters),
                self.peer_count.to_bytes(4, "big"),
                bytes([self.protocol_version]),
                self.genesis_block,
                bytes(versions),
                self.timestamp,
                self.active_difficulty,
            ]
        )

    @classmethod
    def deserialize(cls, data: bytes, header: Optional[Header] = None) -> "TelemetryAck":
        reader = ByteReader(data)
        signature = reader.slice(SIGNATURE_LEN)
        node_id = reader.slice(PUBLIC_LEN)
        block_count = reader.u64_be()
        cemented_count = reader.u64_be()
        unchecked_count = reader.u64_be()
        account_count = reader.u64_be()
        bandwidth_cap = reader.u64_be()
        uptime = reader.u64_be()
        peer_count = reader.u32_be()
        protocol_version = reader.u8()
        genesis_block = reader.slice(BLOCK_HASH_LEN)
        major_version = reader.u8()
        minor_version = reader.u8()
        patch_version = reader.u8()
        prerelease_version = reader.u8()
        maker = reader.u8()
        timestamp = reader.slice(8)
        active_difficulty = reader.slice(8)
        return cls(
            signature=signature,
            node_id=node_id,
            block_count=block_count,
            cemented_count=cemented_count,
            unchecked_count=unchecked_count,
            account_count=account_count,
            bandwidth_cap=bandwidth_cap,
            uptime=uptime,
            peer_count=peer_count,
            protocol_version=protocol_version,
            genesis_block=genesis_block,
            major_version=major_version,
            minor_version=minor_version,
            patch_version=patch_version,
            prerelease_version=prerelease_version,
            maker=maker,
            timestamp=timestamp,
            active_difficulty=active_difficulty,
        )

    @classmethod
    def wire_len(cls, header: Optional[Header] = None) -> int:
        return cls.LEN