import pytest

from feeless.difficulty import Difficulty


def test_conversions():
    assert Difficulty.from_hex("ffffffc000000000").value == 18446743798831644672


def test_receive_and_normal_thresholds():
    assert Difficulty.receive() == Difficulty.from_hex("FFFFFE0000000000")
    assert Difficulty.normal() == Difficulty.from_hex("FFFFFFF800000000")
    assert Difficulty.receive() < Difficulty.normal()


def test_hex_round_trip():
    d = Difficulty.from_hex("fffffff867b3146b")
    assert d.to_hex() == "FFFFFFF867B3146B"
    assert Difficulty.from_hex(d.to_hex()) == d
    assert str(d) == d.to_hex()


def test_byte_orders_are_mirrors():
    raw = bytes.fromhex("ffffffc000000000")
    assert Difficulty.from_be_bytes(raw) == Difficulty.from_le_bytes(raw[::-1])
    assert Difficulty.from_be_bytes(raw) == Difficulty.from_hex("ffffffc000000000")


def test_ordering():
    low = Difficulty(1)
    high = Difficulty.from_hex("ffffffc000000000")
    assert low < high
    assert high > low
    assert max(low, high) == high


@pytest.mark.parametrize("text", ["", "ffff", "ffffffc0000000000"])
def test_wrong_hex_length(text):
    with pytest.raises(ValueError, match="Difficulty"):
        Difficulty.from_hex(text)


def test_bad_hex_digits():
    with pytest.raises(ValueError, match="hex"):
        Difficulty.from_hex("zzzzzzzzzzzzzzzz")


@pytest.mark.parametrize("size", [0, 7, 9])
def test_wrong_byte_length(size):
    with pytest.raises(ValueError):
        Difficulty.from_be_bytes(bytes(size))
    with pytest.raises(ValueError):
        Difficulty.from_le_bytes(bytes(size))


def test_out_of_range():
    with pytest.raises(ValueError):
        Difficulty(1 << 64)
    with pytest.raises(ValueError):
        Difficulty(-1)