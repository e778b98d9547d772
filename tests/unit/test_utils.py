"""tests/unit/test_utils.py"""

import pytest

from base_url.utils.encoding import (
    encode_path_segment,
    form_urlencode,
    iter_form_pairs,
    serialize_pair,
)
from base_url.utils.validators import (
    is_special_scheme,
    known_default_port,
    validate_port,
    validate_scheme,
)


@pytest.mark.parametrize(
    "scheme, expected",
    [
        ("http", True),
        ("svn+ssh", True),
        ("a1.b-c", True),
        ("HTTPS", True),
        ("1http", False),
        ("+http", False),
        ("ht tp", False),
        ("http:", False),
        ("", False),
    ],
)
def test_validate_scheme(scheme, expected):
    """Test scheme syntax validation."""
    assert validate_scheme(scheme) is expected


@pytest.mark.parametrize(
    "scheme, expected",
    [("http", True), ("FILE", True), ("gopher", False), ("ssh", False)],
)
def test_is_special_scheme(scheme, expected):
    """Test special-scheme membership."""
    assert is_special_scheme(scheme) is expected


def test_known_default_port():
    """Test default port lookup."""
    assert known_default_port("HTTPS") == 443
    assert known_default_port("gopher") == 70
    assert known_default_port("file") is None


@pytest.mark.parametrize("port", [0, 80, 65535])
def test_validate_port(port):
    """Test that u16 ports pass through."""
    assert validate_port(port) == port


@pytest.mark.parametrize("port", [-1, 65536, "80", None, False])
def test_validate_port_rejects(port):
    """Test that non-u16 ports are rejected."""
    with pytest.raises(ValueError):
        validate_port(port)


def test_encode_path_segment():
    """Test percent-encoding of a path segment."""
    assert encode_path_segment("foo/bar#fragment=no") == "foo%2Fbar%23fragment=no"
    assert encode_path_segment("50%?") == "50%25%3F"
    assert encode_path_segment("a b<>`{}\"") == "a%20b%3C%3E%60%7B%7D%22"
    assert encode_path_segment("!$&'()*+,;=:@") == "!$&'()*+,;=:@"


def test_encode_path_segment_backslash():
    """Test that '\\' is only encoded for special schemes."""
    assert encode_path_segment("a\\b") == "a%5Cb"
    assert encode_path_segment("a\\b", special=False) == "a\\b"


def test_form_urlencode():
    """Test form-urlencoded escaping."""
    assert form_urlencode("a b") == "a+b"
    assert form_urlencode("*-._~") == "*-._%7E"
    assert form_urlencode("é&=") == "%C3%A9%26%3D"


def test_serialize_pair():
    """Test pair serialization."""
    assert serialize_pair("sort", "newest") == "sort=newest"
    assert serialize_pair("", "") == "="


def test_iter_form_pairs():
    """Test lazy form-urlencoded decoding."""
    pairs = iter_form_pairs("a=1&&b&c=x+y%21&=v&d==")
    assert next(pairs) == ("a", "1")
    assert list(pairs) == [("b", ""), ("c", "x y!"), ("", "v"), ("d", "=")]
