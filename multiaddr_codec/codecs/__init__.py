"""
Per-protocol-family segment codecs.

This package contains one codec per protocol family. Each codec converts
a single segment value between text and its canonical bytes.

Supported families:
- IP (4, 41): packed IPv4/IPv6 addresses
- Port (6, 33, 132, 273): 2-byte big-endian ports
- Text (53-56, 400, 777): varint-prefixed UTF-8
- Content identifier (421): varint-prefixed multihash
- Onion (444, 445): base32 address bytes plus port
- Fallback (anything else): hexadecimal

Usage:
    >>> from multiaddr_codec.codecs import register_all_codecs
    >>> from multiaddr_codec.codecs.registry import CodecRegistry
    >>> registry = CodecRegistry()
    >>> register_all_codecs(registry)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from multiaddr_codec.codecs.base import HexCodec, SegmentCodec
from multiaddr_codec.codecs.content import (
    ContentIdentifierCodec,
    LegacyMultihashText,
    ModernIdentifierText,
    parse_content_identifier,
)
from multiaddr_codec.codecs.ip import IPCodec
from multiaddr_codec.codecs.onion import OnionCodec
from multiaddr_codec.codecs.port import PortCodec
from multiaddr_codec.codecs.text import TextCodec

if TYPE_CHECKING:
    from multiaddr_codec.codecs.registry import CodecRegistry

__all__ = [
    # Interface
    "SegmentCodec",
    "HexCodec",
    # Codecs
    "IPCodec",
    "PortCodec",
    "TextCodec",
    "ContentIdentifierCodec",
    "OnionCodec",
    # Content identifier variants
    "LegacyMultihashText",
    "ModernIdentifierText",
    "parse_content_identifier",
    # Registration
    "register_all_codecs",
]


def register_all_codecs(registry: CodecRegistry) -> None:
    """
    Register all built-in codecs with a registry.

    Args:
        registry: The CodecRegistry to populate.
    """
    registry.register(IPCodec())
    registry.register(PortCodec())
    registry.register(TextCodec())
    registry.register(ContentIdentifierCodec())
    registry.register(OnionCodec())
