"""
Text and integer encodings used by the segment codecs.

Segment values are rendered with a handful of text encodings:
- base16 (lowercase hex) for protocols without a dedicated codec
- base32 (RFC 4648, lowercase, unpadded) for Tor onion addresses
- base58btc (Bitcoin alphabet) for multihashes

Ports use a 2-byte big-endian unsigned integer.
"""

from __future__ import annotations

import base58
import multibase

from multiaddr_codec.protocol.constants import CodecConstants


def encode_uint16(value: int) -> bytes:
    """
    Encode an integer as 2 big-endian bytes, truncated to 16 bits.

    Values outside 0-65535 wrap, so -1 encodes as 0xFFFF and 65536 as 0x0000.

    Args:
        value: Integer to encode.

    Returns:
        2-byte big-endian representation.

    Example:
        >>> encode_uint16(4001)
        b'\\x0f\\xa1'
    """
    return (value & CodecConstants.PORT_MASK).to_bytes(CodecConstants.PORT_SIZE, "big")


def decode_uint16(data: bytes | bytearray | memoryview) -> int:
    """
    Decode exactly 2 big-endian bytes to an unsigned integer.

    Args:
        data: 2-byte buffer.

    Returns:
        Decoded value (0-65535).

    Raises:
        ValueError: If data is not exactly 2 bytes.

    Example:
        >>> decode_uint16(b'\\x0f\\xa1')
        4001
    """
    if len(data) != CodecConstants.PORT_SIZE:
        raise ValueError(f"Expected {CodecConstants.PORT_SIZE} bytes, got {len(data)}")
    return int.from_bytes(data, "big")


def hex_to_bytes(hex_string: str) -> bytes:
    """
    Convert a hex string to bytes.

    Args:
        hex_string: Hexadecimal string, either case (must be even length).

    Returns:
        Decoded bytes.

    Raises:
        ValueError: If string is not valid hex or has odd length.

    Example:
        >>> hex_to_bytes("0fa1")
        b'\\x0f\\xa1'
    """
    return bytes.fromhex(hex_string)


def bytes_to_hex(data: bytes | bytearray | memoryview) -> str:
    """
    Convert bytes to a lowercase hex string.

    Example:
        >>> bytes_to_hex(b'\\x0f\\xa1')
        '0fa1'
    """
    return bytes(data).hex()


def base32_to_bytes(text: str) -> bytes:
    """
    Decode unprefixed lowercase base32 text.

    The multibase marker is prepended before decoding, since the text
    carries none of its own.

    Raises:
        ValueError: If text contains characters outside the base32 alphabet
            (multibase.DecodingError).

    Example:
        >>> base32_to_bytes("mfrgg")
        b'abc'
    """
    return multibase.decode(CodecConstants.BASE32_PREFIX + text)


def bytes_to_base32(data: bytes | bytearray | memoryview) -> str:
    """
    Encode bytes as unprefixed lowercase base32 text.

    Example:
        >>> bytes_to_base32(b'abc')
        'mfrgg'
    """
    encoded = multibase.encode("base32", bytes(data))
    return encoded[len(CodecConstants.BASE32_PREFIX):].decode("ascii")


def base58_to_bytes(text: str) -> bytes:
    """
    Decode base58btc text.

    Raises:
        ValueError: If text contains characters outside the Bitcoin alphabet.
    """
    return base58.b58decode(text)


def bytes_to_base58(data: bytes | bytearray | memoryview) -> str:
    """Encode bytes as base58btc text."""
    return base58.b58encode(bytes(data)).decode("ascii")
