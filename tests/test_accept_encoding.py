import pytest

from reqkit.accept_encoding import DISABLED, AcceptEncoding


def test_empty():
    assert AcceptEncoding().empty() is True
    assert AcceptEncoding(["gzip"]).empty() is False


def test_to_string_sorted_and_deduplicated():
    enc = AcceptEncoding(["gzip", "deflate", "gzip"])
    assert enc.to_string() == "deflate, gzip"


def test_single_to_string():
    assert AcceptEncoding(["br"]).to_string() == "br"


def test_not_disabled():
    assert AcceptEncoding(["gzip"]).disabled() is False


def test_disabled_alone():
    assert AcceptEncoding([DISABLED]).disabled() is True


def test_disabled_with_others_raises():
    enc = AcceptEncoding([DISABLED, "gzip"])
    with pytest.raises(ValueError, match="disabled"):
        enc.disabled()