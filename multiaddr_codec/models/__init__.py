"""
Data models for multiaddr protocol metadata.

This module contains Pydantic models describing the protocols a segment
can belong to:

- Protocol metadata (code, name, size class, flags)
- Size class markers
"""

from multiaddr_codec.models.protocol import Protocol, SizeClass

__all__ = [
    "Protocol",
    "SizeClass",
]
