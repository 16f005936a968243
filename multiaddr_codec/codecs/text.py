"""
Length-prefixed text codec.

Text values are encoded as the varint byte length of their UTF-8 form
followed by the UTF-8 bytes.

Protocol codes: 53 (dns), 54 (dns4), 55 (dns6), 56 (dnsaddr),
400 (unix), 777 (memory)
"""

from __future__ import annotations

from multiaddr_codec.codecs.base import SegmentCodec
from multiaddr_codec.exceptions import InconsistentLength, InvalidText
from multiaddr_codec.protocol.constants import TEXT_CODES
from multiaddr_codec.protocol.varint import decode_length_prefixed, encode_length_prefixed


class TextCodec(SegmentCodec):
    """
    Codec for DNS names, unix paths and memory transport names.

    Example:
        >>> TextCodec().encode(53, "example.com")
        b'\\x0bexample.com'
    """

    @property
    def codes(self) -> frozenset[int]:
        return TEXT_CODES

    def encode(self, code: int, text: str) -> bytes:
        return encode_length_prefixed(text.encode("utf-8"))

    def decode(self, code: int, data: bytes) -> str:
        """
        Unframe and decode a text value.

        Raises:
            InconsistentLength: If the prefix does not match the payload size.
            InvalidText: If the payload is not valid UTF-8.
        """
        try:
            payload = decode_length_prefixed(data)
        except InconsistentLength as e:
            e.protocol = code
            raise

        try:
            return payload.decode("utf-8")
        except UnicodeDecodeError as e:
            raise InvalidText("payload is not valid utf-8", protocol=code, value=payload) from e
