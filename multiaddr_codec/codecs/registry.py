"""
Segment codec registry.

The registry maps protocol codes to SegmentCodec instances. Codes with no
registered codec resolve to an explicit fallback entry (HexCodec by
default), so every protocol round-trips even without semantic validation.

Architecture:
    CodecRegistry
        ├── IPCodec                 (4, 41)
        ├── PortCodec               (6, 33, 132, 273)
        ├── TextCodec               (53, 54, 55, 56, 400, 777)
        ├── ContentIdentifierCodec  (421)
        ├── OnionCodec              (444, 445)
        └── fallback: HexCodec      (everything else)
"""

from __future__ import annotations

import logging

from multiaddr_codec.codecs.base import HexCodec, SegmentCodec

logger = logging.getLogger(__name__)


class CodecRegistry:
    """
    Registry of segment codecs keyed by protocol code.

    Example:
        >>> registry = create_default_registry()
        >>> registry.get_codec(6)
        PortCodec(codes=[6, 33, 132, 273])
        >>> registry.get_codec(9999)
        HexCodec(codes=[])
    """

    def __init__(self, fallback: SegmentCodec | None = None) -> None:
        """
        Initialize empty registry.

        Args:
            fallback: Codec for unregistered codes. Defaults to HexCodec.
        """
        self._codecs: dict[int, SegmentCodec] = {}
        self._fallback = fallback if fallback is not None else HexCodec()

    def register(self, codec: SegmentCodec) -> None:
        """
        Register a codec for every code it handles.

        Note:
            Replaces any existing codec for the same codes.
        """
        for code in codec.codes:
            self._codecs[code] = codec
        logger.debug("Registered %r", codec)

    def get_codec(self, code: int) -> SegmentCodec:
        """
        Get the codec for a protocol code.

        Returns:
            The registered codec, or the fallback codec.
        """
        return self._codecs.get(code, self._fallback)

    def has_codec(self, code: int) -> bool:
        """Check if a dedicated codec is registered for code."""
        return code in self._codecs

    def unregister(self, code: int) -> bool:
        """
        Remove the codec registered for a single code.

        Returns:
            True if a codec was removed, False if none was registered.
        """
        if code in self._codecs:
            del self._codecs[code]
            return True
        return False

    @property
    def fallback(self) -> SegmentCodec:
        """Codec used for unregistered codes."""
        return self._fallback

    @property
    def registered_codes(self) -> frozenset[int]:
        """All codes with a dedicated codec."""
        return frozenset(self._codecs)

    def clear(self) -> None:
        """Remove all registered codecs, keeping the fallback."""
        self._codecs.clear()

    def __repr__(self) -> str:
        return (
            f"CodecRegistry(codes={len(self._codecs)}, "
            f"fallback={type(self._fallback).__name__})"
        )


def create_default_registry() -> CodecRegistry:
    """
    Create a new registry with all built-in codecs registered.

    Returns:
        CodecRegistry with the IP, port, text, content identifier and
        onion codecs, and HexCodec as fallback.
    """
    from multiaddr_codec.codecs import register_all_codecs

    registry = CodecRegistry()
    register_all_codecs(registry)
    return registry
