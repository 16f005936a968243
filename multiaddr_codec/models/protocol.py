"""
Pydantic model for multiaddr protocol metadata.

Protocol entries are immutable value objects. A protocol is identified by
its numeric code; names and aliases are lookup keys only.
"""

from __future__ import annotations

from enum import IntEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SizeClass(IntEnum):
    """Special values of Protocol.size."""

    VARIABLE = -1
    """Value is length-prefixed."""

    NONE = 0
    """Protocol carries no value."""


class Protocol(BaseModel):
    """
    Metadata for one multiaddr protocol.

    Attributes:
        code: Multicodec code used for dispatch.
        name: Canonical protocol name (e.g. "tcp").
        size: Value width in bits, -1 for variable length, 0 for no value.
        path: True if the value may contain "/" (consumes the rest of a
            textual address).
        resolvable: True for names that need DNS resolution.
        aliases: Additional names resolving to this protocol.

    Example:
        >>> tcp = Protocol(code=6, name="tcp", size=16)
        >>> tcp.is_fixed_size
        True
        >>> tcp.byte_size
        2
    """

    model_config = ConfigDict(frozen=True)

    code: int = Field(ge=0, description="Multicodec code")
    name: str = Field(min_length=1, description="Canonical protocol name")
    size: int = Field(ge=-1, description="Value width in bits")
    path: bool = False
    resolvable: bool = False
    aliases: tuple[str, ...] = ()

    @field_validator("aliases")
    @classmethod
    def _validate_aliases(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        if any(not alias for alias in v):
            raise ValueError("aliases must be non-empty strings")
        return v

    @property
    def is_variable_size(self) -> bool:
        """Check if the value is length-prefixed."""
        return self.size == SizeClass.VARIABLE

    @property
    def is_fixed_size(self) -> bool:
        """Check if the value has a fixed, non-zero width."""
        return self.size > 0

    @property
    def has_value(self) -> bool:
        """Check if the protocol carries a value at all."""
        return self.size != SizeClass.NONE

    @property
    def byte_size(self) -> int | None:
        """
        Fixed value width in bytes.

        Returns:
            Width in bytes, or None for variable-size protocols.
        """
        if self.is_variable_size:
            return None
        return self.size // 8

    @property
    def names(self) -> tuple[str, ...]:
        """Canonical name followed by all aliases."""
        return (self.name, *self.aliases)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Protocol({self.name}, code={self.code})"
