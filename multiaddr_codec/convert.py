"""
Conversion entry points for single multiaddr segment values.

Each call resolves the protocol identifier (code or name) through a
protocol resolver exactly once, then dispatches on the numeric code to the
segment codec registered for it. Codes without a dedicated codec are
converted as hexadecimal text.

Example:
    >>> from multiaddr_codec import convert_to_bytes, convert_to_string
    >>> convert_to_bytes("tcp", "4001")
    b'\\x0f\\xa1'
    >>> convert_to_string(4, b"\\x7f\\x00\\x00\\x01")
    '127.0.0.1'
    >>> convert("dns4", "example.com")
    b'\\x0bexample.com'
"""

from __future__ import annotations

import logging
import typing
from typing import Final, runtime_checkable

from multiaddr_codec.codecs.registry import CodecRegistry, create_default_registry
from multiaddr_codec.protocol.registry import DEFAULT_REGISTRY

# Module logger
logger = logging.getLogger(__name__)


@runtime_checkable
class ProtocolInfo(typing.Protocol):
    """Minimal protocol metadata needed for dispatch."""

    @property
    def code(self) -> int:
        """Numeric protocol code."""
        ...


@runtime_checkable
class ProtocolResolver(typing.Protocol):
    """
    Interface for protocol lookup.

    Implementations raise UnknownProtocol for identifiers they do not
    recognise. ProtocolRegistry satisfies this interface.
    """

    def get_protocol(self, identifier: int | str) -> ProtocolInfo:
        """Resolve a code or name to protocol metadata."""
        ...


DEFAULT_CODECS: Final[CodecRegistry] = create_default_registry()
"""Default codec registry with all built-in codecs."""


def convert_to_bytes(
    proto: int | str,
    text: str,
    *,
    protocols: ProtocolResolver | None = None,
    codecs: CodecRegistry | None = None,
) -> bytes:
    """
    Convert a textual segment value to its binary form.

    Args:
        proto: Protocol code or name.
        text: Human-readable segment value.
        protocols: Protocol resolver. Defaults to the built-in registry.
        codecs: Codec registry. Defaults to the built-in codecs.

    Returns:
        Canonical bytes for the value.

    Raises:
        UnknownProtocol: If proto cannot be resolved.
        CodecError: If text is not a valid value for the protocol.
    """
    code = _resolve_code(proto, protocols)
    codec = (codecs if codecs is not None else DEFAULT_CODECS).get_codec(code)
    logger.debug("Encoding %r for protocol %d with %s", text, code, type(codec).__name__)
    return codec.encode(code, text)


def convert_to_string(
    proto: int | str,
    data: bytes | bytearray | memoryview,
    *,
    protocols: ProtocolResolver | None = None,
    codecs: CodecRegistry | None = None,
) -> str:
    """
    Convert a binary segment value to its textual form.

    Args:
        proto: Protocol code or name.
        data: Canonical segment bytes.
        protocols: Protocol resolver. Defaults to the built-in registry.
        codecs: Codec registry. Defaults to the built-in codecs.

    Returns:
        Human-readable segment value.

    Raises:
        UnknownProtocol: If proto cannot be resolved.
        CodecError: If data is not a valid encoding for the protocol.
    """
    code = _resolve_code(proto, protocols)
    codec = (codecs if codecs is not None else DEFAULT_CODECS).get_codec(code)
    logger.debug("Decoding %d bytes for protocol %d with %s", len(data), code, type(codec).__name__)
    return codec.decode(code, bytes(data))


@typing.overload
def convert(
    proto: int | str,
    value: str,
    *,
    protocols: ProtocolResolver | None = ...,
    codecs: CodecRegistry | None = ...,
) -> bytes: ...


@typing.overload
def convert(
    proto: int | str,
    value: bytes | bytearray | memoryview,
    *,
    protocols: ProtocolResolver | None = ...,
    codecs: CodecRegistry | None = ...,
) -> str: ...


def convert(
    proto: int | str,
    value: str | bytes | bytearray | memoryview,
    *,
    protocols: ProtocolResolver | None = None,
    codecs: CodecRegistry | None = None,
) -> bytes | str:
    """
    Convert a segment value in whichever direction its type implies.

    Binary values are decoded to text; text values are encoded to bytes.

    Raises:
        TypeError: If value is neither str nor a bytes-like object.
    """
    if isinstance(value, (bytes, bytearray, memoryview)):
        return convert_to_string(proto, value, protocols=protocols, codecs=codecs)
    if isinstance(value, str):
        return convert_to_bytes(proto, value, protocols=protocols, codecs=codecs)
    raise TypeError(f"value must be str or bytes, got {type(value).__name__}")


# Short aliases
encode = convert_to_bytes
decode = convert_to_string


def _resolve_code(proto: int | str, protocols: ProtocolResolver | None) -> int:
    """Resolve proto to its numeric code; lookup errors propagate unchanged."""
    resolver = protocols if protocols is not None else DEFAULT_REGISTRY
    return resolver.get_protocol(proto).code
