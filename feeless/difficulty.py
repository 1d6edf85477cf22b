"""Proof of work difficulty values."""

from __future__ import annotations

import binascii
from dataclasses import dataclass

from feeless.wire import expect_len


@dataclass(frozen=True, order=True)
class Difficulty:
    """A 64-bit difficulty; larger values mean more work was done."""

    LEN = 8
    HEX_LEN = LEN * 2

    value: int

    def __post_init__(self) -> None:
        if not 0 <= self.value < 1 << 64:
            raise ValueError(f"Difficulty out of range: {self.value}")

    @classmethod
    def receive(cls) -> "Difficulty":
        """Threshold for receive blocks."""
        return cls.from_hex("FFFFFE0000000000")

    @classmethod
    def normal(cls) -> "Difficulty":
        """Threshold for send and change blocks."""
        return cls.from_hex("FFFFFFF800000000")

    @classmethod
    def from_hex(cls, text: str) -> "Difficulty":
        expect_len(len(text), cls.HEX_LEN, "Difficulty")
        try:
            raw = binascii.unhexlify(text)
        except (binascii.Error, ValueError) as err:
            raise ValueError(f"Difficulty: invalid hex: {err}") from None
        return cls.from_be_bytes(raw)

    @classmethod
    def from_be_bytes(cls, data: bytes) -> "Difficulty":
        expect_len(len(data), cls.LEN, "Difficulty")
        return cls(int.from_bytes(bytes(data), "big"))

    @classmethod
    def from_le_bytes(cls, data: bytes) -> "Difficulty":
        expect_len(len(data), cls.LEN, "Difficulty")
        return cls(int.from_bytes(bytes(data), "little"))

    def to_hex(self) -> str:
        return self.value.to_bytes(self.LEN, "big").hex().upper()

    def __str__(self) -> str:
        return self.to_hex()

    def __repr__(self) -> str:
        return f"Difficulty({self.to_hex()})"