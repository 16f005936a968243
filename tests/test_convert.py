"""Tests for the conversion entry points."""

from dataclasses import dataclass

import pytest

from multiaddr_codec import (
    CodecRegistry,
    ProtocolRegistry,
    ProtocolResolver,
    convert,
    convert_to_bytes,
    convert_to_string,
    decode,
    encode,
)
from multiaddr_codec.codecs import TextCodec
from multiaddr_codec.exceptions import (
    InconsistentLength,
    InvalidAddress,
    InvalidPort,
    UnknownProtocol,
)
from multiaddr_codec.models.protocol import Protocol
from multiaddr_codec.protocol.registry import create_default_protocol_registry


@dataclass(frozen=True)
class _Info:
    code: int


class _CountingResolver:
    """Resolver that records every lookup it serves."""

    def __init__(self, mapping):
        self.mapping = mapping
        self.calls = []

    def get_protocol(self, identifier):
        self.calls.append(identifier)
        try:
            return _Info(self.mapping[identifier])
        except KeyError:
            raise UnknownProtocol(identifier) from None


class TestConvertToBytes:
    """Tests for convert_to_bytes function."""

    @pytest.mark.parametrize(
        "proto,text,expected",
        [
            ("ip4", "127.0.0.1", b"\x7f\x00\x00\x01"),
            ("ip6", "::1", bytes(15) + b"\x01"),
            ("tcp", "4001", b"\x0f\xa1"),
            ("udp", "0", b"\x00\x00"),
            ("dns4", "example.com", b"\x0bexample.com"),
            ("unix", "/tmp/sock", b"\x09/tmp/sock"),
            ("onion", "aaaaaaaaaaaaaaaa:80", bytes(10) + b"\x00\x50"),
            ("certhash", "deadbeef", b"\xde\xad\xbe\xef"),
        ],
    )
    def test_by_name(self, proto, text, expected):
        """Test dispatch by protocol name."""
        assert convert_to_bytes(proto, text) == expected

    def test_name_and_code_agree(self):
        """Test a name and its code dispatch identically."""
        assert convert_to_bytes("tcp", "80") == convert_to_bytes(6, "80")

    def test_alias(self):
        """Test ipfs is an alias of p2p."""
        text = "QmYwAPJzv5CZsnA625s3Xf2nemtYgPpHdWEz79ojWnPbdG"
        assert convert_to_bytes("ipfs", text) == convert_to_bytes("p2p", text)

    def test_unknown_name(self):
        """Test unknown names raise UnknownProtocol."""
        with pytest.raises(UnknownProtocol) as exc_info:
            convert_to_bytes("nope", "x")
        assert exc_info.value.identifier == "nope"

    def test_unknown_code(self):
        """Test unregistered codes raise UnknownProtocol."""
        with pytest.raises(UnknownProtocol):
            convert_to_bytes(9999, "00")

    def test_value_errors_propagate(self):
        """Test codec errors reach the caller unchanged."""
        with pytest.raises(InvalidAddress):
            convert_to_bytes("ip4", "::1")
        with pytest.raises(InvalidPort):
            convert_to_bytes("tcp", "http")


class TestConvertToString:
    """Tests for convert_to_string function."""

    @pytest.mark.parametrize(
        "proto,data,expected",
        [
            (4, b"\x7f\x00\x00\x01", "127.0.0.1"),
            ("tcp", b"\x0f\xa1", "4001"),
            ("dns", b"\x0bexample.com", "example.com"),
            ("certhash", b"\xde\xad\xbe\xef", "deadbeef"),
        ],
    )
    def test_decode(self, proto, data, expected):
        """Test dispatch by code or name."""
        assert convert_to_string(proto, data) == expected

    def test_bytes_like_inputs(self):
        """Test bytearray and memoryview are accepted."""
        assert convert_to_string("tcp", bytearray(b"\x00\x50")) == "80"
        assert convert_to_string("tcp", memoryview(b"\x00\x50")) == "80"

    def test_inconsistent_length(self):
        """Test length prefix mismatch carries the protocol code."""
        with pytest.raises(InconsistentLength) as exc_info:
            convert_to_string("dns", b"\x05abc")
        assert exc_info.value.protocol == 53

    def test_roundtrip(self):
        """Test text survives a full round trip."""
        for proto, text in [("ip6", "2001:db8::1"), ("sctp", "5000"), ("memory", "42")]:
            assert convert_to_string(proto, convert_to_bytes(proto, text)) == text


class TestConvert:
    """Tests for the direction-inferring convert function."""

    def test_str_encodes(self):
        """Test text input is encoded."""
        assert convert("tcp", "80") == b"\x00\x50"

    def test_bytes_decodes(self):
        """Test binary input is decoded."""
        assert convert("tcp", b"\x00\x50") == "80"

    @pytest.mark.parametrize("value", [80, None, ["80"]])
    def test_other_types(self, value):
        """Test unsupported value types raise TypeError."""
        with pytest.raises(TypeError):
            convert("tcp", value)

    def test_aliases(self):
        """Test encode and decode are the directional functions."""
        assert encode is convert_to_bytes
        assert decode is convert_to_string


class TestInjectedRegistries:
    """Tests for caller-supplied protocol and codec registries."""

    def test_custom_protocol_uses_fallback(self):
        """Test a newly registered protocol round-trips as hex."""
        protocols = create_default_protocol_registry()
        protocols.register(Protocol(code=9999, name="custom", size=-1))

        data = convert_to_bytes("custom", "c0ffee", protocols=protocols)
        assert data == b"\xc0\xff\xee"
        assert convert_to_string(9999, data, protocols=protocols) == "c0ffee"

    def test_custom_codec(self):
        """Test a caller codec registry overrides dispatch."""
        codecs = CodecRegistry(fallback=TextCodec())
        assert convert_to_bytes("certhash", "ab", codecs=codecs) == b"\x02ab"

    def test_resolver_called_once(self):
        """Test each conversion resolves the identifier exactly once."""
        resolver = _CountingResolver({"tcp": 6})
        convert_to_bytes("tcp", "80", protocols=resolver)
        convert_to_string("tcp", b"\x00\x50", protocols=resolver)
        assert resolver.calls == ["tcp", "tcp"]

    def test_resolver_errors_propagate(self):
        """Test resolver errors are not wrapped."""
        with pytest.raises(UnknownProtocol):
            convert_to_bytes("udp", "80", protocols=_CountingResolver({}))

    def test_registry_satisfies_resolver(self):
        """Test ProtocolRegistry implements the resolver interface."""
        assert isinstance(ProtocolRegistry(), ProtocolResolver)

    def test_empty_protocol_registry(self):
        """Test an empty registry knows nothing."""
        with pytest.raises(UnknownProtocol):
            convert_to_bytes("tcp", "80", protocols=ProtocolRegistry())


class TestLogging:
    """Tests for conversion logging."""

    def test_debug_log(self, caplog):
        """Test conversions are logged at debug level."""
        with caplog.at_level("DEBUG", logger="multiaddr_codec.convert"):
            convert_to_bytes("tcp", "80")
        assert "PortCodec" in caplog.text
