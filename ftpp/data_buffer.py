"""A byte buffer for serialising values and reading them back in order."""

from __future__ import annotations

import struct
from typing import Any

# Fixed little-endian layout with standard sizes.
_BYTE_ORDER = "<"
_INT = "i"
_SIZE = "Q"
_DOUBLE = "d"
_FLOAT = "f"
_CHAR = "c"


class BufferUnderflowError(IndexError):
    """Raised when a read needs more bytes than the buffer holds."""


class DataBuffer:
    """A FIFO byte buffer: values are appended by writes and consumed by reads.

    Every ``write*`` method returns the buffer itself so calls can be chained.
    """

    def __init__(self, data: bytes | bytearray = b"") -> None:
        self._buffer = bytearray(data)

    def __bytes__(self) -> bytes:
        return bytes(self._buffer)

    def __len__(self) -> int:
        return len(self._buffer)

    def __repr__(self) -> str:
        return f"DataBuffer({bytes(self._buffer)!r})"

    def _take(self, size: int, message: str) -> bytes:
        if len(self._buffer) < size:
            raise BufferUnderflowError(message)
        chunk = bytes(self._buffer[:size])
        del self._buffer[:size]
        return chunk

    def write(self, fmt: str, *args: Any) -> DataBuffer:
        """Pack ``args`` with the struct format ``fmt`` and append them."""
        self._buffer += struct.pack(_BYTE_ORDER + fmt, *args)
        return self

    def read(self, fmt: str) -> Any:
        """Consume and unpack values described by the struct format ``fmt``.

        Returns the single value when the format holds one field, else a tuple.
        """
        if not self._buffer:
            raise BufferUnderflowError("Buffer is empty.")
        layout = struct.Struct(_BYTE_ORDER + fmt)
        chunk = self._take(layout.size, "Buffer does not contain enough data.")
        values = layout.unpack(chunk)
        return values[0] if len(values) == 1 else values

    def write_int(self, value: int) -> DataBuffer:
        return self.write(_INT, value)

    def read_int(self) -> int:
        return self.read(_INT)

    def write_size(self, value: int) -> DataBuffer:
        return self.write(_SIZE, value)

    def read_size(self) -> int:
        return self.read(_SIZE)

    def write_double(self, value: float) -> DataBuffer:
        return self.write(_DOUBLE, value)

    def read_double(self) -> float:
        return self.read(_DOUBLE)

    def write_float(self, value: float) -> DataBuffer:
        return self.write(_FLOAT, value)

    def read_float(self) -> float:
        return self.read(_FLOAT)

    def write_char(self, value: str | bytes) -> DataBuffer:
        """Append a single byte given as a one-character string or one byte."""
        raw = value.encode("latin-1") if isinstance(value, str) else bytes(value)
        if len(raw) != 1:
            raise ValueError("A char must be exactly one byte.")
        return self.write(_CHAR, raw)

    def read_char(self) -> str:
        return self.read(_CHAR).decode("latin-1")

    def write_string(self, text: str) -> DataBuffer:
        """Append the encoded length of ``text`` followed by its bytes."""
        raw = text.encode("utf-8")
        self.write_size(len(raw))
        self._buffer += raw
        return self

    def read_string(self) -> str:
        """Consume a length-prefixed string."""
        length = self.read_size()
        raw = self._take(length, "Buffer does not contain enough data for the string.")
        return raw.decode("utf-8")