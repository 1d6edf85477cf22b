"""Vote (confirm ack) and confirmation request messages."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from feeless.header import BlockType, Header
from feeless.messages import BLOCK_HASH_LEN, PUBLIC_LEN, SIGNATURE_LEN, ByteReader
from feeless.timestamp import Timestamp
from feeless.wire import Wire, expect_len

_VOTE_PREFIX = b"vote "


def _needs_header(header: Optional[Header], what: str) -> Header:
    if header is None:
        raise ValueError(f"{what} needs a header")
    return header


def _hash_tuple(hashes: Iterable[bytes]) -> Tuple[bytes, ...]:
    result = []
    for block_hash in hashes:
        raw = bytes(block_hash)
        expect_len(len(raw), BLOCK_HASH_LEN, "BlockHash")
        result.append(raw)
    return tuple(result)


def _require_vote_by_hash(header: Header, what: str) -> None:
    block_type = header.ext.block_type()
    if block_type != BlockType.NOT_A_BLOCK:
        raise ValueError(f"{what} carrying a {block_type.name} block is not supported")


@dataclass(frozen=True)
class ConfirmAck(Wire):
    """A representative's vote for one or more block hashes."""

    VOTE_COMMON_LEN = PUBLIC_LEN + SIGNATURE_LEN + Timestamp.LEN

    account: bytes
    signature: bytes
    timestamp: Timestamp
    hashes: Tuple[bytes, ...] = ()

    def __post_init__(self) -> None:
        account = bytes(self.account)
        expect_len(len(account), PUBLIC_LEN, "Public")
        signature = bytes(self.signature)
        expect_len(len(signature), SIGNATURE_LEN, "Signature")
        object.__setattr__(self, "account", account)
        object.__setattr__(self, "signature", signature)
        object.__setattr__(self, "hashes", _hash_tuple(self.hashes))

    def inner_hash(self) -> bytes:
        """The 32 byte digest that the representative signs."""
        payload = _VOTE_PREFIX + b"".join(self.hashes) + self.timestamp.to_bytes()
        return hashlib.blake2b(payload, digest_size=BLOCK_HASH_LEN).digest()

    def serialize(self) -> bytes:
        return (
            self.account
            + self.signature
            + self.timestamp.to_bytes()
            + b"".join(self.hashes)
        )

    @classmethod
    def deserialize(cls, data: bytes, header: Optional[Header] = None) -> "ConfirmAck":
        header = _needs_header(header, "ConfirmAck")
        _require_vote_by_hash(header, "ConfirmAck")
        reader = ByteReader(data)
        account = reader.slice(PUBLIC_LEN)
        signature = reader.slice(SIGNATURE_LEN)
        timestamp = Timestamp.from_bytes(reader.slice(Timestamp.LEN))
        hashes = tuple(
            reader.slice(BLOCK_HASH_LEN) for _ in range(header.ext.item_count())
        )
        return cls(account, signature, timestamp, hashes)

    @classmethod
    def wire_len(cls, header: Optional[Header] = None) -> int:
        header = _needs_header(header, "ConfirmAck")
        _require_vote_by_hash(header, "ConfirmAck")
        return cls.VOTE_COMMON_LEN + header.ext.item_count() * BLOCK_HASH_LEN


@dataclass(frozen=True)
class RootHashPair:
    """A block hash and the root it is requested for."""

    LEN = BLOCK_HASH_LEN * 2

    hash: bytes
    root: bytes

    def __post_init__(self) -> None:
        block_hash = bytes(self.hash)
        expect_len(len(block_hash), BLOCK_HASH_LEN, "BlockHash")
        root = bytes(self.root)
        expect_len(len(root), BLOCK_HASH_LEN, "BlockHash")
        object.__setattr__(self, "hash", block_hash)
        object.__setattr__(self, "root", root)

    @classmethod
    def from_bytes(cls, data: bytes) -> "RootHashPair":
        raw = bytes(data)
        expect_len(len(raw), cls.LEN, "Root hash pair")
        return cls(raw[:BLOCK_HASH_LEN], raw[BLOCK_HASH_LEN:])

    def to_bytes(self) -> bytes:
        return self.hash + self.root


@dataclass(frozen=True)
class ConfirmReq(Wire):
    """Requests confirmation of a list of root/hash pairs."""

    CONFIRM_REQ_BY_HASH_LEN = BLOCK_HASH_LEN * 2

    pairs: Tuple[RootHashPair, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "pairs", tuple(self.pairs))

    def serialize(self) -> bytes:
        return b"".join(pair.to_bytes() for pair in self.pairs)

    @classmethod
    def deserialize(cls, data: bytes, header: Optional[Header] = None) -> "ConfirmReq":
        header = _needs_header(header, "ConfirmReq")
        _require_vote_by_hash(header, "ConfirmReq")
        count = header.ext.item_count()
        expect_len(
            len(data), RootHashPair.LEN * count, "HandleConfirmReq root hash pairs"
        )
        reader = ByteReader(data)
        pairs = tuple(
            RootHashPair.from_bytes(reader.slice(RootHashPair.LEN))
            for _ in range(count)
        )
        return cls(pairs)

    @classmethod
    def wire_len(cls, header: Optional[Header] = None) -> int:
        header = _needs_header(header, "ConfirmReq")
        _require_vote_by_hash(header, "ConfirmReq")
        return cls.CONFIRM_REQ_BY_HASH_LEN * header.ext.item_count()