"""
Segment codec interface and the hexadecimal fallback codec.

Each codec family (IP, port, text, content identifier, onion) implements
SegmentCodec for the protocol codes it handles. Codes with no registered
codec are served by HexCodec, which round-trips any bytes through
lowercase hexadecimal text without semantic validation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from multiaddr_codec.exceptions import InvalidHex
from multiaddr_codec.protocol.encoding import bytes_to_hex, hex_to_bytes


class SegmentCodec(ABC):
    """
    Abstract base class for segment value codecs.

    Implementations should:
    1. Define the codes property
    2. Implement encode() to turn text into the canonical bytes
    3. Implement decode() to render canonical bytes as text
    4. Raise a CodecError subclass on invalid input, never return
       partial results
    """

    @property
    @abstractmethod
    def codes(self) -> frozenset[int]:
        """
        The protocol codes this codec handles.

        Returns:
            Frozen set of protocol codes.
        """
        ...

    @abstractmethod
    def encode(self, code: int, text: str) -> bytes:
        """
        Convert a textual segment value to its binary form.

        Args:
            code: Resolved protocol code, one of self.codes.
            text: Human-readable value.

        Returns:
            Canonical bytes for the value.
        """
        ...

    @abstractmethod
    def decode(self, code: int, data: bytes) -> str:
        """
        Convert a binary segment value to its textual form.

        Args:
            code: Resolved protocol code, one of self.codes.
            data: Canonical bytes for the value.

        Returns:
            Human-readable value.
        """
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}(codes={sorted(int(c) for c in self.codes)})"


class HexCodec(SegmentCodec):
    """
    Fallback codec for protocols without a dedicated codec.

    Bytes are rendered as lowercase hex; hex text of either case is
    accepted when encoding.

    Example:
        >>> HexCodec().decode(9999, b"\\x0f\\xa1")
        '0fa1'
    """

    @property
    def codes(self) -> frozenset[int]:
        """Serves any code, so it claims none."""
        return frozenset()

    def encode(self, code: int, text: str) -> bytes:
        try:
            return hex_to_bytes(text)
        except ValueError as e:
            raise InvalidHex("invalid hex string", protocol=code, value=text) from e

    def decode(self, code: int, data: bytes) -> str:
        return bytes_to_hex(data)
