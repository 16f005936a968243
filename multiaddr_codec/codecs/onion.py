"""
Tor onion address codec.

Onion segments are written as "<address>:<port>". The address is base32
text (16 characters for v2, 56 for v3) and is stored as its raw decoded
bytes, followed by the port as 2 big-endian bytes:

    onion   10 address bytes ++ 2 port bytes
    onion3  35 address bytes ++ 2 port bytes

Decoding does not look at the address length; one routine serves both
codes.

Protocol codes: 444 (onion), 445 (onion3)
"""

from __future__ import annotations

from multiaddr_codec.codecs.base import SegmentCodec
from multiaddr_codec.codecs.port import bytes_to_port, parse_port, port_to_bytes
from multiaddr_codec.exceptions import InvalidOnionAddress, InvalidPort, MalformedOnion
from multiaddr_codec.protocol.constants import (
    ONION_ADDRESS_LENGTHS,
    ONION_CODES,
    CodecConstants,
)
from multiaddr_codec.protocol.encoding import base32_to_bytes, bytes_to_base32


def split_onion(code: int, text: str) -> tuple[str, str]:
    """
    Split onion text into its address and port parts.

    Raises:
        MalformedOnion: If text does not contain exactly one separator.
    """
    parts = text.split(CodecConstants.ONION_SEPARATOR)
    if len(parts) != 2:
        raise MalformedOnion(
            "failed to parse onion addr: does not contain a port number",
            protocol=code,
            value=text,
        )
    return parts[0], parts[1]


def onion_address_to_bytes(code: int, address: str) -> bytes:
    """
    Decode the base32 address part of an onion segment.

    Raises:
        InvalidOnionAddress: If the length is wrong for code or the text
            is not valid base32.
    """
    expected = ONION_ADDRESS_LENGTHS[code]
    if len(address) != expected:
        raise InvalidOnionAddress(
            f"failed to parse onion addr: not a Tor address of {expected} characters",
            protocol=code,
            value=address,
        )

    try:
        return base32_to_bytes(address)
    except ValueError as e:
        raise InvalidOnionAddress(
            "failed to parse onion addr: invalid base32",
            protocol=code,
            value=address,
        ) from e


def parse_onion_port(code: int, text: str) -> int:
    """
    Parse the port part of an onion segment.

    Raises:
        InvalidPort: If the port is not an integer in range 1-65535.
    """
    port = parse_port(text, code)
    if not CodecConstants.MIN_ONION_PORT <= port <= CodecConstants.MAX_ONION_PORT:
        raise InvalidPort(
            f"port number is not in range({CodecConstants.MIN_ONION_PORT}, "
            f"{CodecConstants.MAX_ONION_PORT})",
            port=port,
            protocol=code,
            value=text,
        )
    return port


class OnionCodec(SegmentCodec):
    """
    Codec for onion and onion3 segments.

    Example:
        >>> codec = OnionCodec()
        >>> data = codec.encode(444, "aaaaaaaaaaaaaaaa:1234")
        >>> len(data)
        12
        >>> codec.decode(444, data)
        'aaaaaaaaaaaaaaaa:1234'
    """

    @property
    def codes(self) -> frozenset[int]:
        return ONION_CODES

    def encode(self, code: int, text: str) -> bytes:
        address, port = split_onion(code, text)
        address_bytes = onion_address_to_bytes(code, address)
        return address_bytes + port_to_bytes(parse_onion_port(code, port))

    def decode(self, code: int, data: bytes) -> str:
        """
        Render address bytes and port as "<address>:<port>".

        Raises:
            MalformedOnion: If data is too short to hold an address and port.
        """
        if len(data) <= CodecConstants.PORT_SIZE:
            raise MalformedOnion(
                f"onion value too short: {len(data)} bytes",
                protocol=code,
                value=bytes(data),
            )

        address = bytes_to_base32(data[:-CodecConstants.PORT_SIZE])
        port = bytes_to_port(data[-CodecConstants.PORT_SIZE:], code)
        return f"{address}{CodecConstants.ONION_SEPARATOR}{port}"
