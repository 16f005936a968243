"""
Transport port codec.

Ports are encoded as 2-byte big-endian unsigned integers. No range check
is applied: values outside 0-65535 are truncated to their low 16 bits.

Protocol codes: 6 (tcp), 273 (udp), 33 (dccp), 132 (sctp)
"""

from __future__ import annotations

import re
from typing import Final

from multiaddr_codec.codecs.base import SegmentCodec
from multiaddr_codec.exceptions import InvalidPort
from multiaddr_codec.protocol.constants import PORT_CODES
from multiaddr_codec.protocol.encoding import decode_uint16, encode_uint16

# Optional sign, ASCII digits only; int() alone would also take "1_000"
_PORT_PATTERN: Final[re.Pattern[str]] = re.compile(r"\s*[+-]?[0-9]+\s*")


def parse_port(text: str, code: int | None = None) -> int:
    """
    Parse a base-10 port number.

    Args:
        text: Port text.
        code: Protocol code, for error reporting.

    Returns:
        Parsed integer (not range checked).

    Raises:
        InvalidPort: If text is not a base-10 integer.

    Example:
        >>> parse_port("4001")
        4001
    """
    if not _PORT_PATTERN.fullmatch(text):
        raise InvalidPort("port is not a base-10 integer", protocol=code, value=text)
    return int(text)


def port_to_bytes(port: int) -> bytes:
    """Encode a port as 2 big-endian bytes, truncating to 16 bits."""
    return encode_uint16(port)


def bytes_to_port(data: bytes, code: int | None = None) -> int:
    """
    Decode a 2-byte big-endian port.

    Raises:
        InvalidPort: If data is not exactly 2 bytes.
    """
    try:
        return decode_uint16(data)
    except ValueError as e:
        raise InvalidPort(str(e), protocol=code, value=bytes(data)) from e


class PortCodec(SegmentCodec):
    """
    Codec for tcp, udp, dccp and sctp segments.

    Example:
        >>> codec = PortCodec()
        >>> codec.encode(6, "4001")
        b'\\x0f\\xa1'
        >>> codec.decode(6, b"\\x0f\\xa1")
        '4001'
    """

    @property
    def codes(self) -> frozenset[int]:
        return PORT_CODES

    def encode(self, code: int, text: str) -> bytes:
        return port_to_bytes(parse_port(text, code))

    def decode(self, code: int, data: bytes) -> str:
        return str(bytes_to_port(data, code))
