"""
Content identifier codec.

A p2p/ipfs segment carries a raw multihash framed with a varint length
prefix. Two textual forms are accepted when encoding:

- Legacy bare multihash: base58btc text starting with "Q" (sha2-256) or
  "1" (identity), decoded directly.
- Self-describing CID (e.g. "bafy..."): parsed with py-cid; only
  the embedded multihash is kept, the version and content codec are
  dropped.

Decoding always renders the multihash as legacy base58btc text.

Protocol code: 421 (p2p, alias ipfs)
"""

from __future__ import annotations

from dataclasses import dataclass

import cid
import multihash

from multiaddr_codec.codecs.base import SegmentCodec
from multiaddr_codec.exceptions import (
    InconsistentLength,
    InvalidContentIdentifier,
)
from multiaddr_codec.protocol.constants import CID_CODES, CodecConstants
from multiaddr_codec.protocol.encoding import base58_to_bytes, bytes_to_base58
from multiaddr_codec.protocol.varint import decode_length_prefixed, encode_length_prefixed


def validate_multihash(data: bytes) -> bytes:
    """
    Check that data is exactly one multihash.

    Layout: varint(hash function code) ++ varint(digest length) ++ digest.
    The hash function must be one py-multihash knows.

    Args:
        data: Candidate multihash bytes.

    Returns:
        The same bytes.

    Raises:
        InvalidContentIdentifier: If data is not a complete multihash of a
            known hash function.
    """
    try:
        multihash.decode(data)
    except (ValueError, TypeError) as e:
        raise InvalidContentIdentifier(f"invalid multihash: {e}", value=data) from e
    return data


@dataclass(frozen=True)
class LegacyMultihashText:
    """
    Bare base58btc multihash, e.g. "QmYwAP...".

    Attributes:
        text: The base58btc text.
    """

    text: str

    def to_multihash(self) -> bytes:
        try:
            data = base58_to_bytes(self.text)
        except ValueError as e:
            raise InvalidContentIdentifier("invalid base58 multihash", value=self.text) from e
        return validate_multihash(data)


@dataclass(frozen=True)
class ModernIdentifierText:
    """
    Self-describing CID text, e.g. "bafybei...".

    Attributes:
        text: The multibase-encoded CID.
    """

    text: str

    def to_multihash(self) -> bytes:
        try:
            parsed = cid.make_cid(self.text)
        except (ValueError, KeyError, TypeError) as e:
            raise InvalidContentIdentifier("invalid content identifier", value=self.text) from e
        return bytes(parsed.multihash)


ContentIdentifierText = LegacyMultihashText | ModernIdentifierText


def parse_content_identifier(text: str) -> ContentIdentifierText:
    """
    Classify content identifier text by its leading character.

    Raises:
        InvalidContentIdentifier: If text is empty.

    Example:
        >>> parse_content_identifier("QmYwAPJzv5CZsnA625s3Xf2nemtYgPpHdWEz79ojWnPbdG")
        LegacyMultihashText(text='QmYwAPJzv5CZsnA625s3Xf2nemtYgPpHdWEz79ojWnPbdG')
    """
    if not text:
        raise InvalidContentIdentifier("empty content identifier")
    if text[0] in CodecConstants.LEGACY_MULTIHASH_PREFIXES:
        return LegacyMultihashText(text)
    return ModernIdentifierText(text)


class ContentIdentifierCodec(SegmentCodec):
    """
    Codec for p2p (ipfs) segments.

    Both textual forms of the same digest encode to identical bytes;
    decoding always yields the legacy base58btc form.
    """

    @property
    def codes(self) -> frozenset[int]:
        return CID_CODES

    def encode(self, code: int, text: str) -> bytes:
        try:
            digest = parse_content_identifier(text).to_multihash()
        except InvalidContentIdentifier as e:
            e.protocol = code
            raise
        return encode_length_prefixed(digest)

    def decode(self, code: int, data: bytes) -> str:
        try:
            payload = decode_length_prefixed(data)
        except InconsistentLength as e:
            e.protocol = code
            raise
        return bytes_to_base58(payload)
