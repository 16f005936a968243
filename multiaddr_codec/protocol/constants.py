"""
Multiaddr protocol codes and codec constants.

Codes follow the multicodec table used by multiaddr. Only the codes listed
in ProtocolCode have a dedicated segment codec; all others fall back to
plain hexadecimal text.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Final


class ProtocolCode(IntEnum):
    """
    Protocol codes with a dedicated segment codec.

    Grouped by codec family:
    - IP: 4, 41
    - Ports: 6, 33, 132, 273
    - Length-prefixed text: 53-56, 400, 777
    - Content identifier: 421
    - Tor onion: 444, 445
    """

    # ===== IP =====

    IP4 = 4
    """IPv4 address, 4 bytes."""

    IP6 = 41
    """IPv6 address, 16 bytes."""

    # ===== Transport ports =====

    TCP = 6
    """TCP port, 2 bytes big-endian."""

    DCCP = 33
    """DCCP port, 2 bytes big-endian."""

    SCTP = 132
    """SCTP port, 2 bytes big-endian."""

    UDP = 273
    """UDP port, 2 bytes big-endian."""

    # ===== Length-prefixed text =====

    DNS = 53
    """DNS name, any address family."""

    DNS4 = 54
    """DNS name resolving to IPv4 only."""

    DNS6 = 55
    """DNS name resolving to IPv6 only."""

    DNSADDR = 56
    """DNS name whose TXT records carry multiaddrs."""

    UNIX = 400
    """Unix domain socket path."""

    MEMORY = 777
    """In-process memory transport name."""

    # ===== Content addressing =====

    P2P = 421
    """Peer or content identifier (legacy name "ipfs")."""

    # ===== Tor =====

    ONION = 444
    """Tor v2 hidden service, 10 address bytes + 2 port bytes."""

    ONION3 = 445
    """Tor v3 hidden service, 35 address bytes + 2 port bytes."""


class CodecConstants:
    """
    Constants shared by the segment codecs.

    Contains field widths, range limits and textual markers used by the
    binary layouts.
    """

    # ===== Ports =====

    PORT_SIZE: Final[int] = 2
    """Width of an encoded port in bytes."""

    PORT_MASK: Final[int] = 0xFFFF
    """Generic ports are truncated to 16 bits."""

    MIN_ONION_PORT: Final[int] = 1
    """Lowest port accepted in an onion segment."""

    MAX_ONION_PORT: Final[int] = 65535
    """Highest port accepted in an onion segment."""

    # ===== IP =====

    IPV4_SIZE: Final[int] = 4
    """Width of an encoded IPv4 address in bytes."""

    IPV6_SIZE: Final[int] = 16
    """Width of an encoded IPv6 address in bytes."""

    # ===== Varint =====

    MAX_VARINT_BYTES: Final[int] = 9
    """Longest varint accepted when decoding (63 bits of payload)."""

    # ===== Onion =====

    ONION_ADDRESS_LENGTH: Final[int] = 16
    """Characters in a Tor v2 address."""

    ONION3_ADDRESS_LENGTH: Final[int] = 56
    """Characters in a Tor v3 address."""

    ONION_SEPARATOR: Final[str] = ":"
    """Separator between onion address and port."""

    # ===== Multibase / multihash =====

    BASE32_PREFIX: Final[str] = "b"
    """Multibase prefix for lowercase unpadded RFC 4648 base32."""

    LEGACY_MULTIHASH_PREFIXES: Final[frozenset[str]] = frozenset({"Q", "1"})
    """Leading characters of a bare base58btc multihash."""


# Sets of protocol codes grouped by codec family

IP_CODES: Final[frozenset[int]] = frozenset({
    ProtocolCode.IP4,
    ProtocolCode.IP6,
})
"""Codes encoded as fixed-width IP addresses."""

PORT_CODES: Final[frozenset[int]] = frozenset({
    ProtocolCode.TCP,
    ProtocolCode.UDP,
    ProtocolCode.DCCP,
    ProtocolCode.SCTP,
})
"""Codes encoded as 2-byte big-endian ports."""

TEXT_CODES: Final[frozenset[int]] = frozenset({
    ProtocolCode.DNS,
    ProtocolCode.DNS4,
    ProtocolCode.DNS6,
    ProtocolCode.DNSADDR,
    ProtocolCode.UNIX,
    ProtocolCode.MEMORY,
})
"""Codes encoded as varint-prefixed UTF-8 text."""

CID_CODES: Final[frozenset[int]] = frozenset({
    ProtocolCode.P2P,
})
"""Codes encoded as varint-prefixed multihash bytes."""

ONION_CODES: Final[frozenset[int]] = frozenset({
    ProtocolCode.ONION,
    ProtocolCode.ONION3,
})
"""Codes encoded as onion address bytes followed by a port."""

ONION_ADDRESS_LENGTHS: Final[dict[int, int]] = {
    ProtocolCode.ONION: CodecConstants.ONION_ADDRESS_LENGTH,
    ProtocolCode.ONION3: CodecConstants.ONION3_ADDRESS_LENGTH,
}
"""Required address length in characters, per onion code."""
