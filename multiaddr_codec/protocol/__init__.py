"""
Protocol layer for multiaddr segment conversion.

This module contains the low-level building blocks:
- Protocol codes and codec constants
- The protocol registry (code/name lookup)
- Unsigned varints and length-prefixed blocks
- Text encodings (hex, base32, base58) and 16-bit integers
"""

from multiaddr_codec.protocol.constants import CodecConstants, ProtocolCode
from multiaddr_codec.protocol.encoding import (
    base32_to_bytes,
    base58_to_bytes,
    bytes_to_base32,
    bytes_to_base58,
    bytes_to_hex,
    decode_uint16,
    encode_uint16,
    hex_to_bytes,
)
from multiaddr_codec.protocol.registry import (
    DEFAULT_REGISTRY,
    ProtocolRegistry,
    create_default_protocol_registry,
    get_protocol,
)
from multiaddr_codec.protocol.varint import (
    decode_length_prefixed,
    decode_varint,
    encode_length_prefixed,
    encode_varint,
    try_decode_varint,
    varint_size,
)

__all__ = [
    # Constants
    "ProtocolCode",
    "CodecConstants",
    # Registry
    "ProtocolRegistry",
    "DEFAULT_REGISTRY",
    "create_default_protocol_registry",
    "get_protocol",
    # Encoding
    "encode_uint16",
    "decode_uint16",
    "hex_to_bytes",
    "bytes_to_hex",
    "base32_to_bytes",
    "bytes_to_base32",
    "base58_to_bytes",
    "bytes_to_base58",
    # Varint
    "encode_varint",
    "decode_varint",
    "try_decode_varint",
    "varint_size",
    "encode_length_prefixed",
    "decode_length_prefixed",
]
