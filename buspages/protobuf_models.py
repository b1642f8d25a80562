"""Protocol Buffers models of stored messages, encoded on the wire by hand."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

_WIRE_VARINT = 0
_WIRE_FIXED64 = 1
_WIRE_LEN = 2
_WIRE_FIXED32 = 5

_MASK64 = (1 << 64) - 1
_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1


class DecodeError(ValueError):
    """Raised when a payload is not a valid encoding of the model."""


def _encode_varint(value: int) -> bytes:
    out = bytearray()
    while True:
        byte = value & 0x7F
        value >>= 7
        if value:
            out.append(byte | 0x80)
        else:
            out.append(byte)
            return bytes(out)


def _read_varint(buf: bytes, pos: int) -> tuple[int, int]:
    result = 0
    for shift in range(0, 70, 7):
        if pos >= len(buf):
            raise DecodeError("buffer underflow")
        byte = buf[pos]
        pos += 1
        if shift == 63 and byte > 1:
            raise DecodeError("invalid varint")
        result |= (byte & 0x7F) << shift
        if byte < 0x80:
            return result & _MASK64, pos
    raise DecodeError("invalid varint")


def _iter_fields(buf: bytes) -> Iterator[tuple[int, int, int | bytes]]:
    pos = 0
    end = len(buf)
    while pos < end:
        key, pos = _read_varint(buf, pos)
        if key > 0xFFFFFFFF:
            raise DecodeError(f"invalid key value: {key}")
        wire_type = key & 0x7
        number = key >> 3
        if number == 0:
            raise DecodeError("invalid tag value: 0")

        value: int | bytes
        if wire_type == _WIRE_VARINT:
            value, pos = _read_varint(buf, pos)
        elif wire_type == _WIRE_FIXED64:
            if end - pos < 8:
                raise DecodeError("buffer underflow")
            value = int.from_bytes(buf[pos:pos + 8], "little")
            pos += 8
        elif wire_type == _WIRE_LEN:
            length, pos = _read_varint(buf, pos)
            if length > end - pos:
                raise DecodeError("buffer underflow")
            value = buf[pos:pos + length]
            pos += length
        elif wire_type == _WIRE_FIXED32:
            if end - pos < 4:
                raise DecodeError("buffer underflow")
            value = int.from_bytes(buf[pos:pos + 4], "little")
            pos += 4
        else:
            raise DecodeError(f"unsupported wire type: {wire_type}")

        yield number, wire_type, value


def _expect_wire(actual: int, expected: int, name: str) -> None:
    if actual != expected:
        raise DecodeError(
            f"invalid wire type for field {name}: expected {expected}, got {actual}"
        )


def _to_int64(value: int) -> int:
    return value - (1 << 64) if value > _INT64_MAX else value


def _decode_str(raw: bytes, name: str) -> str:
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as err:
        raise DecodeError(f"invalid string value in field {name}") from err


def _key(number: int, wire_type: int) -> bytes:
    return _encode_varint((number << 3) | wire_type)


def _int64_field(number: int, value: int) -> bytes:
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f"value {value} does not fit into int64")
    if value == 0:
        return b""
    return _key(number, _WIRE_VARINT) + _encode_varint(value & _MASK64)


def _len_field(number: int, payload: bytes, *, always: bool = False) -> bytes:
    if not payload and not always:
        return b""
    return _key(number, _WIRE_LEN) + _encode_varint(len(payload)) + payload


@dataclass
class MessageMetaData:
    """A header of a message: a key and its value."""

    key: str = ""
    value: str = ""

    def serialize(self) -> bytes:
        return _len_field(1, self.key.encode("utf-8")) + _len_field(
            2, self.value.encode("utf-8")
        )

    @classmethod
    def parse(cls, payload: bytes) -> MessageMetaData:
        result = cls()
        for number, wire_type, value in _iter_fields(bytes(payload)):
            if number == 1:
                _expect_wire(wire_type, _WIRE_LEN, "key")
                result.key = _decode_str(value, "key")  # type: ignore[arg-type]
            elif number == 2:
                _expect_wire(wire_type, _WIRE_LEN, "value")
                result.value = _decode_str(value, "value")  # type: ignore[arg-type]
        return result


@dataclass
class MessageModel:
    """A stored message; `created` is a Unix time in microseconds."""

    message_id: int = 0
    created: int = 0
    data: bytes = b""
    headers: list[MessageMetaData] = field(default_factory=list)

    def serialize(self) -> bytes:
        parts = [
            _int64_field(1, self.message_id),
            _int64_field(2, self.created),
            _len_field(3, bytes(self.data)),
        ]
        parts.extend(
            _len_field(4, header.serialize(), always=True) for header in self.headers
        )
        return b"".join(parts)

    @classmethod
    def parse(cls, payload: bytes) -> MessageModel:
        result = cls()
        for number, wire_type, value in _iter_fields(bytes(payload)):
            if number == 1:
                _expect_wire(wire_type, _WIRE_VARINT, "message_id")
                result.message_id = _to_int64(value)  # type: ignore[arg-type]
            elif number == 2:
                _expect_wire(wire_type, _WIRE_VARINT, "created")
                result.created = _to_int64(value)  # type: ignore[arg-type]
            elif number == 3:
                _expect_wire(wire_type, _WIRE_LEN, "data")
                result.data = bytes(value)  # type: ignore[arg-type]
            elif number == 4:
                _expect_wire(wire_type, _WIRE_LEN, "headers")
                result.headers.append(MessageMetaData.parse(value))  # type: ignore[arg-type]
        return result


@dataclass
class MessagesModel:
    """A list of stored messages."""

    messages: list[MessageModel] = field(default_factory=list)

    def serialize(self) -> bytes:
        return b"".join(
            _len_field(1, message.serialize(), always=True) for message in self.messages
        )

    @classmethod
    def parse(cls, payload: bytes) -> MessagesModel:
        result = cls()
        for number, wire_type, value in _iter_fields(bytes(payload)):
            if number == 1:
                _expect_wire(wire_type, _WIRE_LEN, "messages")
                result.messages.append(MessageModel.parse(value))  # type: ignore[arg-type]
        return result