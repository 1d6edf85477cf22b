import pytest

from feeless.cookie import Cookie
from feeless.header import Extensions, Header, MessageType, Network
from feeless.messages import (
    ByteReader,
    Empty,
    FrontierReq,
    FrontierResp,
    Handshake,
    HandshakeQuery,
    HandshakeResponse,
    Keepalive,
    TelemetryAck,
    TelemetryReq,
)
from feeless.peer_info import PeerInfo

PUBLIC = bytes(range(32))
SIGNATURE = bytes(range(64, 128))


def handshake_header(ext):
    return Header(Network.LIVE, MessageType.HANDSHAKE, ext)


def test_byte_reader():
    reader = ByteReader(b"\x01\x02\x03")
    assert reader.u8() == 1
    assert reader.slice(2) == b"\x02\x03"
    with pytest.raises(ValueError, match="Not enough bytes"):
        reader.slice(1)


def test_empty_messages():
    assert Empty().serialize() == b""
    assert Empty.wire_len() == 0
    assert Empty.deserialize(b"") == Empty()
    assert TelemetryReq().serialize() == b""
    assert TelemetryReq.wire_len() == 0
    assert TelemetryReq.deserialize(b"") == TelemetryReq()


def test_frontier_req_decode_and_round_trip():
    data = PUBLIC + (5).to_bytes(4, "little") + (9).to_bytes(4, "little")
    assert FrontierReq.wire_len() == 40
    req = FrontierReq.deserialize(data)
    assert req.start == PUBLIC
    assert req.age == 5
    assert req.count == 9
    assert req.serialize() == data


def test_frontier_req_too_short():
    with pytest.raises(ValueError):
        FrontierReq.deserialize(PUBLIC)


def test_frontier_resp_round_trip():
    block_hash = bytes(reversed(PUBLIC))
    resp = FrontierResp.deserialize(PUBLIC + block_hash)
    assert resp.account == PUBLIC
    assert resp.frontier_hash == block_hash
    assert resp.serialize() == PUBLIC + block_hash
    assert FrontierResp.wire_len() == len(PUBLIC + block_hash)
    with pytest.raises(ValueError, match="frontier response"):
        FrontierResp.deserialize(PUBLIC)


def test_handshake_query_only():
    cookie = Cookie.random()
    header = handshake_header(Extensions().query())
    assert Handshake.wire_len(header) == Cookie.LEN
    hs = Handshake.deserialize(cookie.serialize(), header)
    assert hs.query == HandshakeQuery(cookie)
    assert hs.response is None


def test_handshake_query_and_response():
    cookie = Cookie.random()
    header = handshake_header(Extensions().query().response())
    data = cookie.serialize() + PUBLIC + SIGNATURE
    assert Handshake.wire_len(header) == Cookie.LEN + HandshakeResponse.LEN
    hs = Handshake.deserialize(data, header)
    assert hs.query.cookie == cookie
    assert hs.response == HandshakeResponse(PUBLIC, SIGNATURE)
    assert hs.serialize() == data


def test_handshake_needs_header():
    with pytest.raises(ValueError, match="header"):
        Handshake.deserialize(b"")
    with pytest.raises(ValueError):
        Handshake.wire_len()


def test_handshake_response_bad_length():
    with pytest.raises(ValueError):
        HandshakeResponse.deserialize(PUBLIC + SIGNATURE[:10])


def test_keepalive_skips_empty_slots():
    first = PeerInfo.from_str("[::ffff:255.254.253.252]:7075")
    second = PeerInfo.from_str("[::1]:7075")
    data = first.serialize() + bytes(PeerInfo.LEN) + second.serialize()
    data += bytes(Keepalive.wire_len() - len(data))
    keepalive = Keepalive.deserialize(data)
    assert keepalive.peers == [first, second]


def test_keepalive_round_trip():
    peers = [PeerInfo.from_str("[::1]:7075")]
    keepalive = Keepalive(peers)
    raw = keepalive.serialize()
    assert len(raw) == Keepalive.wire_len()
    assert Keepalive.deserialize(raw) == keepalive


def test_keepalive_too_many_peers():
    peers = [PeerInfo.from_str("[::1]:7075")] * (Keepalive.PEERS + 1)
    with pytest.raises(ValueError):
        Keepalive(peers).serialize()


def test_telemetry_ack_round_trip():
    ack = TelemetryAck(
        signature=SIGNATURE,
        node_id=PUBLIC,
        block_count=100,
        cemented_count=90,
        unchecked_count=3,
        account_count=50,
        bandwidth_cap=1024,
        uptime=600,
        peer_count=12,
        protocol_version=18,
        genesis_block=bytes(reversed(PUBLIC)),
        major_version=21,
        minor_version=2,
        patch_version=1,
        prerelease_version=0,
        maker=7,
    )
    raw = ack.serialize()
    assert len(raw) == TelemetryAck.wire_len() == 202
    back = TelemetryAck.deserialize(raw)
    assert back == ack
    assert back.block_count == 100
    assert back.peer_count == 12


def test_telemetry_ack_counts_are_big_endian():
    ack = TelemetryAck(signature=SIGNATURE, node_id=PUBLIC, block_count=1)
    raw = ack.serialize()
    offset = len(SIGNATURE) + len(PUBLIC)
    assert raw[offset : offset + 8] == (1).to_bytes(8, "big")


def test_telemetry_ack_too_short():
    with pytest.raises(ValueError):
        TelemetryAck.deserialize(SIGNATURE + PUBLIC)