"""
Unsigned varint and length-prefixed block handling.

Variable-length segment values are framed as a length prefix followed by
the payload:

Varint (unsigned LEB128):
- 7 payload bits per byte, least significant group first
- High bit set means another byte follows
- At most 9 bytes are accepted when decoding (63-bit values)

Length-prefixed block:
- varint(len(payload)) ++ payload
- A block must be consumed exactly: the bytes after the prefix must
  number exactly the decoded prefix value
"""

from __future__ import annotations

from typing import Final

from multiaddr_codec.exceptions import InconsistentLength
from multiaddr_codec.protocol.constants import CodecConstants

# Bit layout of a varint byte
_CONTINUATION_BIT: Final[int] = 0x80
_PAYLOAD_MASK: Final[int] = 0x7F


def encode_varint(value: int) -> bytes:
    """
    Encode a non-negative integer as an unsigned varint.

    Args:
        value: Integer to encode.

    Returns:
        Varint bytes (1 or more).

    Raises:
        ValueError: If value is negative.

    Example:
        >>> encode_varint(11)
        b'\\x0b'
        >>> encode_varint(300)
        b'\\xac\\x02'
    """
    if value < 0:
        raise ValueError(f"Varint value must be non-negative, got {value}")

    out = bytearray()
    while value >= _CONTINUATION_BIT:
        out.append((value & _PAYLOAD_MASK) | _CONTINUATION_BIT)
        value >>= 7
    out.append(value)
    return bytes(out)


def decode_varint(data: bytes | bytearray | memoryview, offset: int = 0) -> tuple[int, int]:
    """
    Decode an unsigned varint starting at offset.

    Args:
        data: Source buffer.
        offset: Byte offset of the first varint byte.

    Returns:
        Tuple of (value, number of bytes the varint occupied).

    Raises:
        InconsistentLength: If the varint is truncated or longer than
            the 9-byte maximum.

    Example:
        >>> decode_varint(b"\\xac\\x02")
        (300, 2)
    """
    value = 0
    shift = 0
    position = offset

    while True:
        if position >= len(data):
            raise InconsistentLength(
                "truncated varint",
                expected=position - offset + 1,
                actual=position - offset,
            )
        if position - offset >= CodecConstants.MAX_VARINT_BYTES:
            raise InconsistentLength(
                f"varint longer than {CodecConstants.MAX_VARINT_BYTES} bytes"
            )

        byte = data[position]
        value |= (byte & _PAYLOAD_MASK) << shift
        position += 1

        if not byte & _CONTINUATION_BIT:
            return value, position - offset
        shift += 7


def try_decode_varint(
    data: bytes | bytearray | memoryview,
    offset: int = 0,
) -> tuple[int, int] | None:
    """
    Try to decode a varint without raising exceptions.

    Args:
        data: Source buffer.
        offset: Byte offset of the first varint byte.

    Returns:
        (value, size) tuple, or None if invalid.
    """
    try:
        return decode_varint(data, offset)
    except InconsistentLength:
        return None


def varint_size(value: int) -> int:
    """
    Number of bytes needed to encode value as a varint.

    Example:
        >>> varint_size(127)
        1
        >>> varint_size(128)
        2
    """
    return len(encode_varint(value))


def encode_length_prefixed(payload: bytes) -> bytes:
    """
    Frame a payload with its varint byte length.

    Args:
        payload: Bytes to frame.

    Returns:
        varint(len(payload)) followed by payload.

    Example:
        >>> encode_length_prefixed(b"abc")
        b'\\x03abc'
    """
    return encode_varint(len(payload)) + payload


def decode_length_prefixed(data: bytes | bytearray | memoryview) -> bytes:
    """
    Unframe a length-prefixed block, requiring it to be consumed exactly.

    Args:
        data: Complete block (prefix and payload).

    Returns:
        The payload bytes.

    Raises:
        InconsistentLength: If the prefix is truncated, or the number of
            bytes after the prefix differs from the prefix value.

    Example:
        >>> decode_length_prefixed(b"\\x03abc")
        b'abc'
    """
    size, prefix_length = decode_varint(data)
    payload = bytes(data[prefix_length:])

    if len(payload) != size:
        raise InconsistentLength(expected=size, actual=len(payload))

    return payload
