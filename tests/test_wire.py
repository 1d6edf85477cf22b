from typing import Optional

import pytest

from feeless.wire import Wire, expect_len


class Pair(Wire):
    def __init__(self, a: int, b: int):
        self.a = a
        self.b = b

    def serialize(self) -> bytes:
        return bytes([self.a, self.b])

    @classmethod
    def deserialize(cls, data: bytes, header: Optional[object] = None) -> "Pair":
        expect_len(len(data), cls.wire_len(header), "Pair")
        return cls(data[0], data[1])

    @classmethod
    def wire_len(cls, header: Optional[object] = None) -> int:
        return 2


def test_expect_len_accepts_matching_length():
    assert expect_len(4, 4, "Thing") is None


def test_expect_len_rejects_mismatch():
    with pytest.raises(ValueError, match="Thing"):
        expect_len(3, 4, "Thing")


def test_expect_len_message_mentions_lengths():
    with pytest.raises(ValueError) as info:
        expect_len(10, 8, "Header")
    assert "10" in str(info.value)
    assert "8" in str(info.value)


def test_subclass_round_trip():
    original = Pair(7, 9)
    data = original.serialize()
    assert expect_len(len(data), Pair.wire_len(), "Pair") is None
    back = Pair.deserialize(data)
    assert (back.a, back.b) == (7, 9)


def test_subclass_wrong_length():
    data = b"\x01"
    with pytest.raises(ValueError, match="Pair"):
        expect_len(len(data), Pair.wire_len(), "Pair")
    with pytest.raises(ValueError):
        Pair.deserialize(data)


def test_wire_is_abstract():
    with pytest.raises(TypeError):
        Wire()