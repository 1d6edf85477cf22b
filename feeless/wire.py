"""The interface shared by everything that travels over the peer-to-peer wire."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from feeless.header import Header


def expect_len(got: int, expected: int, what: str) -> None:
    """Raise ValueError unless ``got`` equals ``expected``."""
    if got != expected:
        raise ValueError(
            f"{what} has the wrong length: got {got}, expected {expected}"
        )


class Wire(ABC):
    """A value that can be encoded to and decoded from wire bytes."""

    @abstractmethod
    def serialize(self) -> bytes:
        """Encode the value for sending."""

    @classmethod
    @abstractmethod
    def deserialize(cls, data: bytes, header: Optional["Header"] = None) -> "Wire":
        """Decode a value; ``header`` is None when decoding a header itself."""

    @classmethod
    @abstractmethod
    def wire_len(cls, header: Optional["Header"] = None) -> int:
        """The number of bytes expected for this value."""