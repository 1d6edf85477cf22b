"""Storage of the block lattice and of ephemeral peer information."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, FrozenSet, Hashable, Iterable, Optional, Protocol, Set

from feeless.cookie import Cookie
from feeless.header import Network


class _BlockLike(Protocol):
    hash: bytes
    account: bytes


class State(ABC):
    """The state of the block lattice together with peers and cookies."""

    @abstractmethod
    def add_block(self, block: _BlockLike) -> None:
        """Store a block and make it the latest for its account."""

    @abstractmethod
    def get_block_by_hash(self, block_hash: bytes) -> Optional[_BlockLike]:
        """The block with this hash, or None."""

    @abstractmethod
    def get_latest_block_hash_for_account(self, account: bytes) -> Optional[bytes]:
        """Hash of the newest block of an account, or None."""

    @abstractmethod
    def account_for_block_hash(self, block_hash: bytes) -> Optional[bytes]:
        """The account a block belongs to, or None."""

    @abstractmethod
    def add_vote(self, block_hash: bytes, representative: bytes) -> None:
        """Record a representative's vote for a block."""

    @abstractmethod
    def set_cookie(self, socket_addr: Hashable, cookie: Cookie) -> None:
        """Remember the cookie sent to a peer."""

    @abstractmethod
    def cookie_for_socket_addr(self, socket_addr: Hashable) -> Optional[Cookie]:
        """The cookie sent to a peer, or None."""

    @abstractmethod
    def add_peers(self, addresses: Iterable[Hashable]) -> None:
        """Add known peer addresses."""

    @abstractmethod
    def peers(self) -> Set[Hashable]:
        """A copy of the known peer addresses."""


class MemoryState(State):
    """State held in dictionaries; lost when the process ends."""

    def __init__(self, network: Network) -> None:
        self.network = network
        self._cookies: Dict[Hashable, Cookie] = {}
        self._blocks: Dict[bytes, _BlockLike] = {}
        self._block_hash_to_account: Dict[bytes, bytes] = {}
        self._latest_block_hash: Dict[bytes, bytes] = {}
        self._votes: Dict[bytes, Set[bytes]] = {}
        self._peers: Set[Hashable] = set()

    def __repr__(self) -> str:
        return (
            f"MemoryState(network={self.network.name}, blocks={len(self._blocks)}, "
            f"peers={len(self._peers)})"
        )

    def add_block(self, block: _BlockLike) -> None:
        block_hash = bytes(block.hash)
        account = bytes(block.account)
        self._blocks[block_hash] = block
        self._block_hash_to_account[block_hash] = account
        self._latest_block_hash[account] = block_hash

    def get_block_by_hash(self, block_hash: bytes) -> Optional[_BlockLike]:
        return self._blocks.get(bytes(block_hash))

    def get_latest_block_hash_for_account(self, account: bytes) -> Optional[bytes]:
        return self._latest_block_hash.get(bytes(account))

    def account_for_block_hash(self, block_hash: bytes) -> Optional[bytes]:
        return self._block_hash_to_account.get(bytes(block_hash))

    def add_vote(self, block_hash: bytes, representative: bytes) -> None:
        self._votes.setdefault(bytes(block_hash), set()).add(bytes(representative))

    def votes_for(self, block_hash: bytes) -> FrozenSet[bytes]:
        """Representatives that voted for a block."""
        return frozenset(self._votes.get(bytes(block_hash), ()))

    def set_cookie(self, socket_addr: Hashable, cookie: Cookie) -> None:
        self._cookies[socket_addr] = cookie

    def cookie_for_socket_addr(self, socket_addr: Hashable) -> Optional[Cookie]:
        return self._cookies.get(socket_addr)

    def add_peers(self, addresses: Iterable[Hashable]) -> None:
        self._peers.update(addresses)

    def peers(self) -> Set[Hashable]:
        return set(self._peers)