"""Proof of work: verifying and (slowly) generating it on the CPU."""

from __future__ import annotations

import binascii
import hashlib
import random
import secrets
from dataclasses import dataclass

from feeless.difficulty import Difficulty
from feeless.wire import expect_len

SUBJECT_LEN = 32


def _subject_bytes(subject: bytes) -> bytes:
    raw = bytes(subject)
    expect_len(len(raw), SUBJECT_LEN, "Work subject")
    return raw


@dataclass(frozen=True)
class Work:
    """Eight bytes of proof of work for a block hash or public key subject."""

    LEN = 8

    data: bytes

    def __post_init__(self) -> None:
        expect_len(len(self.data), self.LEN, "Work")
        object.__setattr__(self, "data", bytes(self.data))

    @classmethod
    def zero(cls) -> "Work":
        return cls(bytes(cls.LEN))

    @classmethod
    def random(cls) -> "Work":
        return cls(secrets.token_bytes(cls.LEN))

    @classmethod
    def from_hex(cls, text: str) -> "Work":
        expect_len(len(text), cls.LEN * 2, "Work")
        try:
            raw = binascii.unhexlify(text)
        except (binascii.Error, ValueError) as err:
            raise ValueError(f"Work: invalid hex: {err}") from None
        return cls(raw)

    def __str__(self) -> str:
        return self.data.hex().upper()

    def __repr__(self) -> str:
        return f"Work({self})"

    @classmethod
    def generate(cls, subject: bytes, threshold: Difficulty) -> "Work":
        """Search until a work value beats ``threshold``; blocks until found."""
        buffer = bytearray(secrets.token_bytes(cls.LEN)) + _subject_bytes(subject)
        rng = random.Random()
        while True:
            idx = rng.randrange(cls.LEN)
            buffer[idx] = (buffer[idx] + 1) & 0xFF
            difficulty = Difficulty.from_le_bytes(cls.hash(bytes(buffer)))
            if difficulty > threshold:
                break
        return cls(bytes(reversed(buffer[: cls.LEN])))

    @staticmethod
    def hash(work_and_subject: bytes) -> bytes:
        return hashlib.blake2b(bytes(work_and_subject), digest_size=Work.LEN).digest()

    def difficulty(self, subject: bytes) -> Difficulty:
        # The work is hashed in reverse byte order.
        payload = bytes(reversed(self.data)) + _subject_bytes(subject)
        return Difficulty.from_le_bytes(self.hash(payload))

    def verify(self, subject: bytes, threshold: Difficulty) -> bool:
        return self.difficulty(subject) > threshold