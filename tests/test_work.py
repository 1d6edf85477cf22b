import pytest

from feeless.difficulty import Difficulty
from feeless.work import Work

FIXTURES = [
    (
        "2387767168f9453db0eca227c79d7e7a31b78cafb58bd9cdee630881c70979b8",
        "c3f097857cc7106b",
        "fffffff867b3146b",
        True,
    ),
    (
        "2387767168f9453db0eca227c79d7e7a31b78cafb58bd9cdee630881c70979b9",
        "ec4f0960a70fdcbe",
        "fffffffde26451db",
        True,
    ),
    (
        "2387767168f9453db0eca227c79d7e7a31b78cafb58bd9cdee630881c70979ba",
        "b58e13f297179bc2",
        "fffffffb6fc1b4a6",
        True,
    ),
    (
        "2387767168f9453db0eca227c79d7e7a31b78cafb58bd9cdee630881c70979ba",
        "0000000000000000",
        "357abcab02726362",
        False,
    ),
]


@pytest.mark.parametrize("block_hash,work,expected,enough", FIXTURES)
def test_verify(block_hash, work, expected, enough):
    threshold = Difficulty.from_hex("ffffffc000000000")
    subject = bytes.fromhex(block_hash)
    w = Work.from_hex(work)
    assert w.difficulty(subject) == Difficulty.from_hex(expected)
    assert w.verify(subject, threshold) is enough


def test_generate_work():
    threshold = Difficulty.from_hex("ffff000000000000")
    subject = bytes(range(32))
    work = Work.generate(subject, threshold)
    assert work.verify(subject, threshold)
    assert work.difficulty(subject) > threshold


def test_zero_and_random():
    assert Work.zero().data == bytes(8)
    assert Work.zero() == Work.from_hex("0000000000000000")
    assert len(Work.random().data) == Work.LEN


def test_hex_round_trip():
    w = Work.from_hex("c3f097857cc7106b")
    assert str(w) == "C3F097857CC7106B"
    assert Work.from_hex(str(w)) == w


def test_hash_is_eight_bytes():
    assert len(Work.hash(b"anything")) == Work.LEN
    assert Work.hash(b"abc") == Work.hash(b"abc")


def test_bad_inputs():
    with pytest.raises(ValueError):
        Work.from_hex("abc")
    with pytest.raises(ValueError):
        Work.from_hex("zzzzzzzzzzzzzzzz")
    with pytest.raises(ValueError):
        Work(bytes(7))
    with pytest.raises(ValueError):
        Work.zero().difficulty(bytes(31))