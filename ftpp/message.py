"""Typed messages serialised to bytes, and parsing them back from a stream."""

from __future__ import annotations

import struct
from enum import IntEnum
from typing import Any

from ftpp.data_buffer import BufferUnderflowError, DataBuffer

_TYPE_SIZE = struct.calcsize("<i")


class MessageType(IntEnum):
    """The kind of payload a message carries."""

    INT = 1
    STRING = 2
    DOUBLE = 3


class MessageTypeError(RuntimeError):
    """Raised when a value does not match the message's type."""


class Message:
    """A message whose bytes start with its type followed by its payload."""

    def __init__(self, message_type: int) -> None:
        try:
            self._type = MessageType(message_type)
        except ValueError:
            raise ValueError("Invalid message type") from None
        self._buffer = DataBuffer().write_int(int(self._type))

    @property
    def type(self) -> MessageType:
        return self._type

    @property
    def serialized(self) -> bytes:
        """The message as it is sent on the wire."""
        return bytes(self._buffer)

    def __repr__(self) -> str:
        return f"Message({self._type.name}, {self.serialized!r})"

    def _expect(self, message_type: MessageType, description: str) -> None:
        if self._type is not message_type:
            raise MessageTypeError(f"Message type mismatch: expected {description}")

    def write(self, value: Any) -> Message:
        """Append ``value``: an int, a str or a float, as the type demands."""
        if self._type is MessageType.INT:
            if not isinstance(value, int) or isinstance(value, bool):
                raise MessageTypeError("Message type mismatch: expected Int")
            self._buffer.write_int(value)
        elif self._type is MessageType.STRING:
            if not isinstance(value, str):
                raise MessageTypeError("Message type mismatch: expected String")
            self._buffer.write_string(value)
        else:
            if not isinstance(value, float):
                raise MessageTypeError("Message type mismatch: expected double | float")
            self._buffer.write_double(value)
        return self

    def write_size(self, value: int) -> Message:
        """Append a length field; only for string messages."""
        self._expect(MessageType.STRING, "String")
        self._buffer.write_size(value)
        return self

    def write_char(self, value: str) -> Message:
        """Append a single character; only for string messages."""
        self._expect(MessageType.STRING, "String")
        self._buffer.write_char(value)
        return self

    def _payload(self) -> DataBuffer:
        payload = DataBuffer(bytes(self._buffer))
        payload.read_int()
        return payload

    def read_int(self) -> int:
        self._expect(MessageType.INT, "Int")
        return self._payload().read_int()

    def read_double(self) -> float:
        self._expect(MessageType.DOUBLE, "Double")
        return self._payload().read_double()

    def read_float(self) -> float:
        self._expect(MessageType.DOUBLE, "Double")
        return self._payload().read_float()

    def read_string(self) -> str:
        self._expect(MessageType.STRING, "String")
        return self._payload().read_string()


def deserialize_messages(data: bytes) -> list[Message]:
    """Parse every message found in ``data``.

    Unknown type fields are skipped. Raises ValueError when ``data`` is too
    short for a type field or holds no message, and BufferUnderflowError when
    a payload is cut short.
    """
    if len(data) < _TYPE_SIZE:
        raise ValueError("Buffer is too small to extract the type!")
    buffer = DataBuffer(data)
    messages: list[Message] = []
    while True:
        try:
            raw_type = buffer.read_int()
        except BufferUnderflowError:
            break
        try:
            message_type = MessageType(raw_type)
        except ValueError:
            continue
        message = Message(message_type)
        if message_type is MessageType.INT:
            message.write(buffer.read_int())
        elif message_type is MessageType.STRING:
            message.write(buffer.read_string())
        else:
            message.write(buffer.read_double())
        messages.append(message)
    if not messages:
        raise ValueError("Couldn't deserialize any messages")
    return messages