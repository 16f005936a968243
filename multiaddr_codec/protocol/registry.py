"""
Protocol registry for multiaddr protocol metadata.

The registry maps protocol codes and names (including aliases) to Protocol
entries. The segment codec resolves every identifier it receives through a
registry exactly once per conversion, then dispatches on the numeric code.

The registry allows:
- Lookup by code or by name/alias
- Registration of additional protocols at setup time
- A default instance loaded with the multiaddr protocol table
"""

from __future__ import annotations

import logging
from typing import Final

from multiaddr_codec.exceptions import UnknownProtocol
from multiaddr_codec.models.protocol import Protocol, SizeClass

logger = logging.getLogger(__name__)

_V: Final[int] = SizeClass.VARIABLE

# (code, bits, name, path, resolvable, aliases)
_PROTOCOL_TABLE: Final[tuple[tuple[int, int, str, bool, bool, tuple[str, ...]], ...]] = (
    (4, 32, "ip4", False, False, ()),
    (6, 16, "tcp", False, False, ()),
    (33, 16, "dccp", False, False, ()),
    (41, 128, "ip6", False, False, ()),
    (42, _V, "ip6zone", False, False, ()),
    (43, 8, "ipcidr", False, False, ()),
    (53, _V, "dns", False, True, ()),
    (54, _V, "dns4", False, True, ()),
    (55, _V, "dns6", False, True, ()),
    (56, _V, "dnsaddr", False, True, ()),
    (132, 16, "sctp", False, False, ()),
    (273, 16, "udp", False, False, ()),
    (275, 0, "p2p-webrtc-star", False, False, ()),
    (276, 0, "p2p-webrtc-direct", False, False, ()),
    (277, 0, "p2p-stardust", False, False, ()),
    (280, 0, "webrtc-direct", False, False, ()),
    (281, 0, "webrtc", False, False, ()),
    (290, 0, "p2p-circuit", False, False, ()),
    (301, 0, "udt", False, False, ()),
    (302, 0, "utp", False, False, ()),
    (400, _V, "unix", True, False, ()),
    (421, _V, "p2p", False, False, ("ipfs",)),
    (443, 0, "https", False, False, ()),
    (444, 96, "onion", False, False, ()),
    (445, 296, "onion3", False, False, ()),
    (446, _V, "garlic64", False, False, ()),
    (447, _V, "garlic32", False, False, ()),
    (448, 0, "tls", False, False, ()),
    (449, _V, "sni", False, False, ()),
    (454, 0, "noise", False, False, ()),
    (460, 0, "quic", False, False, ()),
    (461, 0, "quic-v1", False, False, ()),
    (465, 0, "webtransport", False, False, ()),
    (466, _V, "certhash", False, False, ()),
    (477, 0, "ws", False, False, ()),
    (478, 0, "wss", False, False, ()),
    (479, 0, "p2p-websocket-star", False, False, ()),
    (480, 0, "http", False, False, ()),
    (777, _V, "memory", False, False, ()),
)


class ProtocolRegistry:
    """
    Registry of multiaddr protocols, indexed by code and by name.

    Example:
        >>> registry = create_default_protocol_registry()
        >>> registry.get_protocol("tcp").code
        6
        >>> registry.get_protocol(421).name
        'p2p'
        >>> registry.get_protocol("ipfs").code
        421
    """

    def __init__(self) -> None:
        """Initialize empty registry."""
        self._by_code: dict[int, Protocol] = {}
        self._by_name: dict[str, Protocol] = {}

    def register(self, protocol: Protocol) -> None:
        """
        Register a protocol under its code, name and aliases.

        Args:
            protocol: Protocol entry to register.

        Note:
            Replaces any existing entry with the same code. Names previously
            bound to the replaced entry are released.
        """
        previous = self._by_code.get(protocol.code)
        if previous is not None:
            for name in previous.names:
                self._by_name.pop(name, None)

        self._by_code[protocol.code] = protocol
        for name in protocol.names:
            self._by_name[name] = protocol
        logger.debug("Registered protocol %s (code %d)", protocol.name, protocol.code)

    def get_protocol(self, identifier: int | str) -> Protocol:
        """
        Resolve a protocol code or name.

        Args:
            identifier: Numeric code or protocol name/alias.

        Returns:
            The registered Protocol.

        Raises:
            UnknownProtocol: If nothing is registered under identifier, or
                identifier is not an int or str.
        """
        # bool is an int subclass but never a protocol code
        if isinstance(identifier, bool):
            raise UnknownProtocol(identifier, f"invalid protocol identifier {identifier!r}")

        if isinstance(identifier, int):
            protocol = self._by_code.get(identifier)
            if protocol is None:
                raise UnknownProtocol(identifier, f"no protocol with code: {identifier}")
            return protocol

        if isinstance(identifier, str):
            protocol = self._by_name.get(identifier)
            if protocol is None:
                raise UnknownProtocol(identifier, f"no protocol with name: {identifier}")
            return protocol

        raise UnknownProtocol(identifier, f"invalid protocol identifier {identifier!r}")

    def has_protocol(self, identifier: int | str) -> bool:
        """Check if a code or name is registered."""
        try:
            self.get_protocol(identifier)
        except UnknownProtocol:
            return False
        return True

    def unregister(self, code: int) -> bool:
        """
        Remove a protocol and all of its names.

        Args:
            code: Code of the protocol to remove.

        Returns:
            True if a protocol was removed, False if none was registered.
        """
        protocol = self._by_code.pop(code, None)
        if protocol is None:
            return False
        for name in protocol.names:
            self._by_name.pop(name, None)
        return True

    @property
    def codes(self) -> frozenset[int]:
        """All registered codes."""
        return frozenset(self._by_code)

    @property
    def names(self) -> frozenset[str]:
        """All registered names and aliases."""
        return frozenset(self._by_name)

    def __len__(self) -> int:
        return len(self._by_code)

    def __repr__(self) -> str:
        return f"ProtocolRegistry(protocols={len(self._by_code)})"


def create_default_protocol_registry() -> ProtocolRegistry:
    """
    Create a new registry loaded with the multiaddr protocol table.

    Returns:
        ProtocolRegistry with all built-in protocols.
    """
    registry = ProtocolRegistry()
    for code, size, name, path, resolvable, aliases in _PROTOCOL_TABLE:
        registry.register(
            Protocol(
                code=code,
                size=size,
                name=name,
                path=path,
                resolvable=resolvable,
                aliases=aliases,
            )
        )
    return registry


# Default global registry instance
DEFAULT_REGISTRY: Final[ProtocolRegistry] = create_default_protocol_registry()
"""Default protocol registry with the multiaddr protocol table."""


def get_protocol(identifier: int | str) -> Protocol:
    """
    Resolve a protocol code or name in the default registry.

    Raises:
        UnknownProtocol: If the identifier is not registered.
    """
    return DEFAULT_REGISTRY.get_protocol(identifier)
