"""Tests for data models."""

import pytest
from pydantic import ValidationError

from multiaddr_codec.models.protocol import Protocol, SizeClass


class TestProtocol:
    """Tests for Protocol model."""

    def test_fixed_size(self):
        """Test fixed-size protocol properties."""
        tcp = Protocol(code=6, name="tcp", size=16)
        assert tcp.is_fixed_size is True
        assert tcp.is_variable_size is False
        assert tcp.has_value is True
        assert tcp.byte_size == 2

    def test_variable_size(self):
        """Test variable-size protocol properties."""
        dns = Protocol(code=53, name="dns", size=SizeClass.VARIABLE)
        assert dns.is_variable_size is True
        assert dns.is_fixed_size is False
        assert dns.byte_size is None

    def test_no_value(self):
        """Test protocols without a value."""
        ws = Protocol(code=477, name="ws", size=0)
        assert ws.has_value is False
        assert ws.byte_size == 0

    def test_defaults(self):
        """Test flag defaults."""
        proto = Protocol(code=4, name="ip4", size=32)
        assert proto.path is False
        assert proto.resolvable is False
        assert proto.aliases == ()

    def test_names(self):
        """Test canonical name comes before aliases."""
        p2p = Protocol(code=421, name="p2p", size=-1, aliases=("ipfs",))
        assert p2p.names == ("p2p", "ipfs")

    def test_negative_code_rejected(self):
        """Test codes must be non-negative."""
        with pytest.raises(ValidationError):
            Protocol(code=-1, name="bad", size=0)

    def test_size_below_variable_rejected(self):
        """Test size must be >= -1."""
        with pytest.raises(ValidationError):
            Protocol(code=1, name="bad", size=-2)

    def test_empty_name_rejected(self):
        """Test name must be non-empty."""
        with pytest.raises(ValidationError):
            Protocol(code=1, name="", size=0)

    def test_empty_alias_rejected(self):
        """Test aliases must be non-empty."""
        with pytest.raises(ValidationError):
            Protocol(code=1, name="one", size=0, aliases=("",))

    def test_immutable(self):
        """Test that protocols are immutable."""
        proto = Protocol(code=6, name="tcp", size=16)
        with pytest.raises(ValidationError):
            proto.code = 7

    def test_equality(self):
        """Test value equality."""
        assert Protocol(code=6, name="tcp", size=16) == Protocol(code=6, name="tcp", size=16)
        assert Protocol(code=6, name="tcp", size=16) != Protocol(code=273, name="udp", size=16)

    def test_str_and_repr(self):
        """Test string representations."""
        proto = Protocol(code=6, name="tcp", size=16)
        assert str(proto) == "tcp"
        assert repr(proto) == "Protocol(tcp, code=6)"
