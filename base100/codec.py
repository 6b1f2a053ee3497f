"""Base💯: encode bytes as emoji, one four-byte UTF-8 emoji per input byte."""

from __future__ import annotations

import io
from functools import partial

__all__ = [
    "Base100Error",
    "Encoder",
    "Decoder",
    "encode",
    "encoded_len",
    "encode_to_string",
    "decode",
    "decode_into",
    "decoded_len",
    "decode_string",
]

_FIXED_BYTE_1 = 0xF0
_FIXED_BYTE_2 = 0x9F
_ENCODED_BYTE_SIZE = 4
_BUFFER_SIZE = 1024
_ENCODER_CHUNK = _BUFFER_SIZE // _ENCODED_BYTE_SIZE

_ENCODE_TABLE = tuple(
    bytes(
        (
            _FIXED_BYTE_1,
            _FIXED_BYTE_2,
            (value + 55) // 64 + 143,
            (value + 55) % 64 + 128,
        )
    )
    for value in range(256)
)


class Base100Error(ValueError):
    """Raised when base100 data cannot be decoded."""


def encoded_len(n):
    """Return the length in bytes of the encoding of *n* input bytes."""
    return n * _ENCODED_BYTE_SIZE


def decoded_len(n):
    """Return the maximum decoded length of *n* bytes of encoded data."""
    return n // _ENCODED_BYTE_SIZE


def encode(data):
    """Return the base100 encoding of *data* as UTF-8 bytes."""
    return b"".join([_ENCODE_TABLE[value] for value in bytes(data)])


def encode_to_string(data):
    """Return the base100 encoding of *data* as a string."""
    return encode(data).decode("utf-8")


def decode(data):
    """Decode base100 *data*; trailing bytes short of a full emoji are ignored.

    Newline characters must be stripped beforehand. The emoji prefix bytes
    are not validated.
    """
    raw = bytes(data)
    end = decoded_len(len(raw)) * _ENCODED_BYTE_SIZE
    thirds = raw[2:end:_ENCODED_BYTE_SIZE]
    fourths = raw[3:end:_ENCODED_BYTE_SIZE]
    return bytes(
        ((third - 143) * 64 + fourth - 128 - 55) & 0xFF
        for third, fourth in zip(thirds, fourths)
    )


def decode_into(buffer, data):
    """Decode *data* into the writable *buffer* and return the bytes written.

    Raises Base100Error if *buffer* cannot hold the decoded result.
    """
    count = decoded_len(len(data))
    view = memoryview(buffer).cast("B")
    if len(view) < count:
        raise Base100Error("insufficient slice size")
    view[:count] = decode(data)
    return count


def decode_string(text):
    """Return the bytes represented by the base100 string *text*."""
    return decode(text.encode("utf-8"))


class Encoder:
    """Writable wrapper that base100-encodes everything written to a stream."""

    def __init__(self, stream):
        self._stream = stream
        self._error = None

    def write(self, data):
        """Encode *data* onto the stream; return how many input bytes went out."""
        if self._error is not None:
            raise self._error
        raw = bytes(data)
        consumed = 0
        for start in range(0, len(raw), _ENCODER_CHUNK):
            encoded = encode(raw[start:start + _ENCODER_CHUNK])
            try:
                written = self._stream.write(encoded)
            except OSError as exc:
                self._error = exc
                raise
            if written is None:
                written = len(encoded)
            consumed += written // _ENCODED_BYTE_SIZE
        return consumed


class Decoder(io.RawIOBase):
    """Readable wrapper that base100-decodes the data read from a stream.

    Newline characters in the stream are not stripped.
    """

    def __init__(self, stream):
        super().__init__()
        self._stream = stream
        self._pending = b""
        self._eof = False
        self._error = None

    def readable(self):
        return True

    def _fill(self):
        while len(self._pending) < _ENCODED_BYTE_SIZE and not self._eof:
            chunk = self._stream.read(_BUFFER_SIZE - len(self._pending))
            if not chunk:
                self._eof = True
            else:
                self._pending += chunk

    def readinto(self, buffer):
        """Decode into *buffer*; return the byte count, 0 at end of stream."""
        view = memoryview(buffer).cast("B")
        if not len(view):
            return 0
        if self._error is not None:
            raise self._error
        self._fill()
        units = min(len(view), len(self._pending) // _ENCODED_BYTE_SIZE)
        if units == 0:
            if self._pending:
                self._pending = b""
                self._error = Base100Error("unexpected EOF")
                raise self._error
            return 0
        consumed = units * _ENCODED_BYTE_SIZE
        view[:units] = decode(self._pending[:consumed])
        self._pending = self._pending[consumed:]
        return units

    def read(self, size=-1):
        """Read up to *size* decoded bytes, or everything if *size* is negative."""
        if size is None or size < 0:
            return b"".join(iter(partial(self.read, _BUFFER_SIZE), b""))
        buffer = bytearray(size)
        count = self.readinto(buffer)
        return bytes(buffer[:count])