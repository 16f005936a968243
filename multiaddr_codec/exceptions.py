"""
Exception hierarchy for multiaddr_codec.

All exceptions inherit from MultiaddrCodecError, providing a clean hierarchy
for error handling. The design follows these principles:

1. Registry misses (unknown protocol) are distinct from value errors
2. Value errors carry the protocol they were raised for
3. Length errors carry both the declared and the actual size
4. All exceptions provide meaningful error messages
"""

from __future__ import annotations

from typing import Final

# Longest value snippet rendered in error messages
_MAX_VALUE_DISPLAY: Final[int] = 40


class MultiaddrCodecError(Exception):
    """
    Base exception for all multiaddr_codec errors.

    All library-specific exceptions inherit from this class, allowing
    callers to catch all codec errors with a single except clause.
    """

    pass


class UnknownProtocol(MultiaddrCodecError):
    """
    Protocol lookup failure.

    Raised by the protocol registry when a code or name is not registered,
    or when the identifier is neither an int nor a str.
    """

    def __init__(self, identifier: object, message: str | None = None) -> None:
        self.identifier = identifier
        super().__init__(message or f"no protocol with identifier {identifier!r}")


class CodecError(MultiaddrCodecError):
    """
    Segment value conversion failure.

    Base class for every error raised while encoding or decoding a single
    segment value.
    """

    def __init__(
        self,
        message: str,
        *,
        protocol: str | int | None = None,
        value: str | bytes | None = None,
    ) -> None:
        super().__init__(message)
        self.protocol = protocol
        self.value = value

    def __str__(self) -> str:
        parts = [super().__str__()]
        if self.protocol is not None:
            parts.append(f"protocol={self.protocol}")
        if self.value is not None:
            display = self.value.hex() if isinstance(self.value, bytes) else self.value
            if len(display) > _MAX_VALUE_DISPLAY:
                display = display[:_MAX_VALUE_DISPLAY] + "..."
            parts.append(f"value={display!r}")
        return " ".join(parts) if len(parts) > 1 else parts[0]


class InvalidAddress(CodecError):
    """
    Invalid IP address.

    Raised when text is not an IP literal of the expected family, or when
    a binary address has a length that matches no address family.
    """

    pass


class InvalidPort(CodecError):
    """
    Invalid port number.

    Raised when a port cannot be parsed as a base-10 integer, is out of
    range where a range applies, or is not exactly 2 bytes when decoding.
    """

    def __init__(
        self,
        message: str = "invalid port",
        *,
        port: int | None = None,
        protocol: str | int | None = None,
        value: str | bytes | None = None,
    ) -> None:
        super().__init__(message, protocol=protocol, value=value)
        self.port = port


class InconsistentLength(CodecError):
    """
    Length prefix mismatch.

    Raised when the varint length prefix of a block does not match the
    number of payload bytes that follow it, or when the prefix itself is
    truncated.
    """

    def __init__(
        self,
        message: str = "inconsistent lengths",
        *,
        expected: int | None = None,
        actual: int | None = None,
        protocol: str | int | None = None,
        value: str | bytes | None = None,
    ) -> None:
        super().__init__(message, protocol=protocol, value=value)
        self.expected = expected
        self.actual = actual

    def __str__(self) -> str:
        base = super().__str__()
        if self.expected is not None and self.actual is not None:
            return f"{base} (expected {self.expected} bytes, got {self.actual})"
        return base


class MalformedOnion(CodecError):
    """
    Onion segment is not of the form ``<address>:<port>``.
    """

    pass


class InvalidOnionAddress(MalformedOnion):
    """
    Onion address part has the wrong length or is not valid base32.
    """

    pass


class InvalidContentIdentifier(CodecError):
    """
    Text is neither a base58 multihash nor a parseable CID.
    """

    pass


class InvalidText(CodecError):
    """Payload of a text segment is not valid UTF-8."""

    pass


class InvalidHex(CodecError):
    """Fallback value is not valid hexadecimal text."""

    pass
