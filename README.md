# feeless

Building blocks for speaking the Nano peer-to-peer protocol from Python.
Pure standard library, no dependencies.

## Modules

- `feeless.header`: the 8-byte message header. `Header` (with `validate`,
  `to_short_string`, `reset`, `serialize`, `deserialize`, `wire_len`),
  `Extensions` (query and response flags, `item_count`, `block_type`), and the
  enumerations `Network`, `Version`, `MessageType` and `BlockType`. Invalid
  headers raise `HeaderError`.
- `feeless.wire`: the abstract `Wire` base class (`serialize`, `deserialize`,
  `wire_len`) and `expect_len`, which raises `ValueError` on a length mismatch.
- `feeless.cookie`: `Cookie`, 32 random bytes used in handshakes.
- `feeless.peer_info`: `PeerInfo`, an IPv6 address and port as sent in
  keepalives. It parses text such as `[::ffff:1.2.3.4]:7075`.
- `feeless.timestamp`: `Timestamp`, milliseconds since the epoch as 8
  little-endian bytes.
- `feeless.difficulty`: `Difficulty`, a 64-bit value that can be compared,
  with the `receive()` and `normal()` thresholds.
- `feeless.work`: `Work`. It computes the difficulty of a work value for a
  32-byte subject (a block hash or a public key), checks it against a
  threshold with `verify`, and searches for new work on the CPU with `generate`.
- `feeless.messages`: payloads `Empty`, `TelemetryReq`, `FrontierReq`,
  `FrontierResp`, `HandshakeQuery`, `HandshakeResponse`, `Handshake`,
  `Keepalive` and `TelemetryAck`, plus the `ByteReader` helper.
- `feeless.confirm`: `ConfirmAck` (a vote for block hashes, with
  `inner_hash`, the digest a representative signs), `ConfirmReq` and
  `RootHashPair`.
- `feeless.state`: the abstract `State` and `MemoryState`, which keeps
  blocks, the latest block per account, votes, cookies and peers in memory.
  A block is any object with `hash` and `account` byte attributes.
- `feeless.peer`: `MessageReader`. It buffers incoming `Packet`s and returns
  each `(Header, payload)` pair as soon as it is complete. It raises
  `UnhandledMessageError` for message types it has no payload class for.
  `encode_message` builds a header and a serialized payload, ready to send.
- `feeless.paths`: `Paths` gives the data directory per network
  (`{base}/{network}/...`). `wallet_path` returns the wallet location and
  creates its directory. It uses `FEELESS_DATA_DIR` when no directory is
  given.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Decode a header and check that it is for the expected network:

```python
from feeless.header import Header, Network

header = Header.deserialize(bytes([0x52, 0x43, 18, 18, 18, 2, 3, 0]), None)
header.validate(Network.LIVE)
print(header.to_short_string())  # KEEPALIVE [Query, Response]
```

Check proof of work against a threshold:

```python
from feeless.difficulty import Difficulty
from feeless.work import Work

threshold = Difficulty.from_hex("ffffffc000000000")
work = Work.from_hex("c3f097857cc7106b")
subject = bytes.fromhex(
    "2387767168f9453db0eca227c79d7e7a31b78cafb58bd9cdee630881c70979b8"
)
print(work.difficulty(subject))        # FFFFFFF867B3146B
print(work.verify(subject, threshold))  # True
```

Split a byte stream into messages:

```python
from feeless.header import Extensions, MessageType, Network
from feeless.messages import Keepalive
from feeless.peer import MessageReader, Packet, encode_message

data = encode_message(Network.LIVE, MessageType.KEEPALIVE, Extensions(), Keepalive())
reader = MessageReader(Network.LIVE)
for header, payload in reader.feed(Packet(data)):
    print(header.message_type.name, payload)
```

Find where the wallet for a network is kept. This creates the directory:

```python
from feeless.header import Network
from feeless.paths import wallet_path

print(wallet_path(Network.LIVE, None))
```

## What this package does not do

- It opens no network connections and runs no node, RPC server or command
  line program. `MessageReader` only decodes bytes that you give it.
- It does not model blocks, accounts or balances, and it does not create or
  check signatures. Keys, signatures and block hashes are plain `bytes`.
- `ConfirmAck` and `ConfirmReq` handle only the by-hash forms. A header whose
  block type is anything but `NOT_A_BLOCK` raises `ValueError`. `Publish`
  messages have no payload class.
- `MemoryState` is the only storage. Nothing is kept on disk.