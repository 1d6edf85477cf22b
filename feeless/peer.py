"""Framing of the peer byte stream into headers and message payloads."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple, Type, TypeVar

from feeless.confirm import ConfirmAck, ConfirmReq
from feeless.header import Extensions, Header, MessageType, Network
from feeless.messages import (
    FrontierReq,
    Handshake,
    Keepalive,
    TelemetryAck,
    TelemetryReq,
)
from feeless.wire import Wire

log = logging.getLogger(__name__)

W = TypeVar("W", bound=Wire)

PAYLOAD_TYPES: Dict[MessageType, Type[Wire]] = {
    MessageType.KEEPALIVE: Keepalive,
    MessageType.CONFIRM_REQ: ConfirmReq,
    MessageType.CONFIRM_ACK: ConfirmAck,
    MessageType.FRONTIER_REQ: FrontierReq,
    MessageType.HANDSHAKE: Handshake,
    MessageType.TELEMETRY_REQ: TelemetryReq,
    MessageType.TELEMETRY_ACK: TelemetryAck,
}


class UnhandledMessageError(ValueError):
    """A header announced a message type that cannot be handled."""

    def __init__(self, header: Header) -> None:
        super().__init__(f"Unhandled message: {header.to_short_string()}")
        self.header = header


@dataclass(frozen=True)
class Packet:
    """Raw data sent to or received from a peer."""

    data: bytes
    # Used when replaying captures to note direction, packet number and so on.
    annotation: Optional[str] = None


class MessageReader:
    """Buffers incoming bytes and decodes complete messages from them."""

    def __init__(self, network: Network) -> None:
        self.network = network
        self.last_annotation: Optional[str] = None
        self._buffer = bytearray()
        self._pending: Optional[Header] = None

    @property
    def buffered(self) -> int:
        """Number of received bytes not yet decoded."""
        return len(self._buffer)

    @property
    def pending_header(self) -> Optional[Header]:
        """A header whose payload has not fully arrived yet."""
        return self._pending

    def feed(self, packet: Packet) -> List[Tuple[Header, Wire]]:
        """Add a packet's data and return every message now complete."""
        if packet.annotation is not None:
            self.last_annotation = packet.annotation
        self._buffer.extend(packet.data)

        messages: List[Tuple[Header, Wire]] = []
        while True:
            if self._pending is None:
                header = self.recv(Header)
                if header is None:
                    break
                header.validate(self.network)
                self._pending = header
                continue

            header = self._pending
            payload_type = PAYLOAD_TYPES.get(header.message_type)
            if payload_type is None:
                raise UnhandledMessageError(header)
            payload = self.recv(payload_type, header)
            if payload is None:
                break
            if self.last_annotation is not None:
                log.info("%s %r", self.last_annotation, payload)
            else:
                log.debug("%r", payload)
            messages.append((header, payload))
            self._pending = None
        return messages

    def recv(self, message_class: Type[W], header: Optional[Header] = None) -> Optional[W]:
        """Decode one ``message_class`` from the buffer, or None if too few bytes."""
        size = message_class.wire_len(header)
        if len(self._buffer) < size:
            log.debug("Not enough bytes. Got %d, expected %d.", len(self._buffer), size)
            return None
        chunk = bytes(self._buffer[:size])
        del self._buffer[:size]
        log.debug("HEX: %s", chunk.hex().upper())
        return message_class.deserialize(chunk, header)


def encode_message(
    network: Network,
    message_type: MessageType,
    ext: Extensions,
    message: Optional[Wire] = None,
) -> bytes:
    """A header followed by the serialized message, ready to send."""
    data = Header(network, message_type, ext).serialize()
    if message is not None:
        data += message.serialize()
    return data