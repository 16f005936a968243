"""Tests for the IP address codec."""

import pytest

from multiaddr_codec.codecs.ip import IPCodec
from multiaddr_codec.exceptions import InvalidAddress
from multiaddr_codec.protocol.constants import ProtocolCode

IP4 = ProtocolCode.IP4
IP6 = ProtocolCode.IP6


class TestIPCodec:
    """Tests for IPCodec class."""

    @pytest.fixture
    def codec(self):
        """Create an IPCodec instance."""
        return IPCodec()

    def test_codes(self, codec):
        """Test handled codes."""
        assert codec.codes == frozenset({4, 41})

    def test_encode_ipv4(self, codec):
        """Test IPv4 packs to 4 network-order bytes."""
        assert codec.encode(IP4, "127.0.0.1") == bytes([127, 0, 0, 1])

    def test_encode_ipv6_loopback(self, codec):
        """Test IPv6 packs to 16 bytes."""
        data = codec.encode(IP6, "::1")
        assert len(data) == 16
        assert data == bytes(15) + b"\x01"

    def test_encode_ipv6_full(self, codec):
        """Test a fully written IPv6 address."""
        data = codec.encode(IP6, "2001:db8::ff00:42:8329")
        assert data.hex() == "20010db8000000000000ff0000428329"

    def test_decode_ipv4(self, codec):
        """Test 4 bytes render as dotted quad."""
        assert codec.decode(IP4, bytes([192, 168, 0, 1])) == "192.168.0.1"

    def test_decode_ipv6(self, codec):
        """Test 16 bytes render in compressed form."""
        assert codec.decode(IP6, bytes(15) + b"\x01") == "::1"

    @pytest.mark.parametrize("text", ["", "256.0.0.1", "1.2.3", "localhost", "1.2.3.4.5"])
    def test_encode_invalid_ipv4(self, codec, text):
        """Test invalid literals raise InvalidAddress."""
        with pytest.raises(InvalidAddress):
            codec.encode(IP4, text)

    def test_encode_invalid_ipv6(self, codec):
        """Test invalid IPv6 literal."""
        with pytest.raises(InvalidAddress):
            codec.encode(IP6, "1::2::3")

    def test_encode_family_mismatch(self, codec):
        """Test the address family must match the code."""
        with pytest.raises(InvalidAddress):
            codec.encode(IP4, "::1")
        with pytest.raises(InvalidAddress):
            codec.encode(IP6, "127.0.0.1")

    def test_encode_scoped_ipv6(self, codec):
        """Test zone indices are rejected."""
        with pytest.raises(InvalidAddress):
            codec.encode(IP6, "fe80::1%eth0")

    @pytest.mark.parametrize("length", [0, 3, 5, 15, 17])
    def test_decode_bad_length(self, codec, length):
        """Test lengths other than 4 or 16 raise InvalidAddress."""
        with pytest.raises(InvalidAddress):
            codec.decode(IP4, bytes(length))

    def test_decode_family_mismatch(self, codec):
        """Test byte width must match the code."""
        with pytest.raises(InvalidAddress):
            codec.decode(IP4, bytes(16))
        with pytest.raises(InvalidAddress):
            codec.decode(IP6, bytes(4))

    @pytest.mark.parametrize(
        "code,text",
        [
            (IP4, "0.0.0.0"),
            (IP4, "10.20.30.40"),
            (IP6, "::"),
            (IP6, "fe80::1"),
            (IP6, "2001:db8::1"),
        ],
    )
    def test_roundtrip(self, codec, code, text):
        """Test text survives encode then decode."""
        assert codec.decode(code, codec.encode(code, text)) == text
