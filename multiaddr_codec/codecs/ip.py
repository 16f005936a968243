"""
IP address codec.

IPv4 and IPv6 addresses are encoded as their packed network-order bytes;
the width (4 or 16 bytes) is implied by the address family and is not
signalled separately.

Protocol codes: 4 (ip4), 41 (ip6)
"""

from __future__ import annotations

import ipaddress

from multiaddr_codec.codecs.base import SegmentCodec
from multiaddr_codec.exceptions import InvalidAddress
from multiaddr_codec.protocol.constants import IP_CODES, ProtocolCode

_FAMILIES: dict[int, type[ipaddress.IPv4Address] | type[ipaddress.IPv6Address]] = {
    ProtocolCode.IP4: ipaddress.IPv4Address,
    ProtocolCode.IP6: ipaddress.IPv6Address,
}


def _parse_address(code: int, text: str) -> ipaddress.IPv4Address | ipaddress.IPv6Address:
    """Parse text as an IP literal of the family bound to code."""
    try:
        address = ipaddress.ip_address(text)
    except ValueError as e:
        raise InvalidAddress("invalid ip address", protocol=code, value=text) from e

    if not isinstance(address, _FAMILIES[code]):
        raise InvalidAddress(
            f"ip address family does not match protocol {ProtocolCode(code).name.lower()}",
            protocol=code,
            value=text,
        )
    # Zone indices have no place in the 16-byte layout
    if isinstance(address, ipaddress.IPv6Address) and address.scope_id is not None:
        raise InvalidAddress("scoped ipv6 address not allowed", protocol=code, value=text)

    return address


class IPCodec(SegmentCodec):
    """
    Codec for ip4 and ip6 segments.

    Example:
        >>> codec = IPCodec()
        >>> codec.encode(4, "127.0.0.1")
        b'\\x7f\\x00\\x00\\x01'
        >>> codec.decode(4, b"\\x7f\\x00\\x00\\x01")
        '127.0.0.1'
    """

    @property
    def codes(self) -> frozenset[int]:
        return IP_CODES

    def encode(self, code: int, text: str) -> bytes:
        """
        Pack an IP literal.

        Raises:
            InvalidAddress: If text is not a valid literal of the family
                required by code.
        """
        return _parse_address(code, text).packed

    def decode(self, code: int, data: bytes) -> str:
        """
        Render packed address bytes.

        Raises:
            InvalidAddress: If the byte length matches no address family,
                the family does not match code, or the rendered address
                fails re-validation.
        """
        try:
            address = ipaddress.ip_address(bytes(data))
        except ValueError as e:
            raise InvalidAddress(
                f"invalid ip address length {len(data)}",
                protocol=code,
                value=bytes(data),
            ) from e

        if not isinstance(address, _FAMILIES[code]):
            raise InvalidAddress(
                f"ip address family does not match protocol {ProtocolCode(code).name.lower()}",
                protocol=code,
                value=bytes(data),
            )

        text = str(address)
        _parse_address(code, text)
        return text
