"""
multiaddr_codec - Python library for converting multiaddr segment values.

This library converts the value of a single multiaddr segment between its
human-readable text (an IP literal, a port, a DNS name, a content
identifier, a Tor onion address) and its canonical binary encoding,
dispatched by protocol code or name.

Example:
    >>> from multiaddr_codec import convert
    >>>
    >>> convert("ip4", "127.0.0.1")
    b'\\x7f\\x00\\x00\\x01'
    >>> convert("tcp", b"\\x0f\\xa1")
    '4001'
"""

from multiaddr_codec.codecs.registry import CodecRegistry, create_default_registry
from multiaddr_codec.convert import (
    DEFAULT_CODECS,
    ProtocolResolver,
    convert,
    convert_to_bytes,
    convert_to_string,
    decode,
    encode,
)
from multiaddr_codec.exceptions import (
    CodecError,
    InconsistentLength,
    InvalidAddress,
    InvalidContentIdentifier,
    InvalidHex,
    InvalidOnionAddress,
    InvalidPort,
    InvalidText,
    MalformedOnion,
    MultiaddrCodecError,
    UnknownProtocol,
)
from multiaddr_codec.models.protocol import Protocol, SizeClass
from multiaddr_codec.protocol.constants import ProtocolCode
from multiaddr_codec.protocol.registry import (
    DEFAULT_REGISTRY,
    ProtocolRegistry,
    create_default_protocol_registry,
    get_protocol,
)

__version__ = "0.1.0"
__all__ = [
    # Conversion
    "convert",
    "convert_to_bytes",
    "convert_to_string",
    "encode",
    "decode",
    # Registries
    "ProtocolRegistry",
    "ProtocolResolver",
    "CodecRegistry",
    "DEFAULT_REGISTRY",
    "DEFAULT_CODECS",
    "create_default_protocol_registry",
    "create_default_registry",
    "get_protocol",
    # Models
    "Protocol",
    "ProtocolCode",
    "SizeClass",
    # Exceptions
    "MultiaddrCodecError",
    "UnknownProtocol",
    "CodecError",
    "InvalidAddress",
    "InvalidPort",
    "InconsistentLength",
    "MalformedOnion",
    "InvalidOnionAddress",
    "InvalidContentIdentifier",
    "InvalidText",
    "InvalidHex",
    # Version
    "__version__",
]
