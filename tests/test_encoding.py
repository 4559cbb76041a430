import pytest

from reqkit.encoding import url_decode, url_encode


def test_unicode_encoder():
    assert url_encode("一二三") == "%E4%B8%80%E4%BA%8C%E4%B8%89"


def test_ascii_encoder():
    assert url_encode("Hello World!") == "Hello%20World%21"


def test_unicode_decoder():
    assert url_decode("%E4%B8%80%E4%BA%8C%E4%B8%89") == "一二三"


def test_ascii_decoder():
    assert url_decode("Hello%20World%21") == "Hello World!"


def test_unreserved_characters_unchanged():
    unreserved = "AZaz09-._~"
    assert url_encode(unreserved) == unreserved


def test_slash_is_encoded():
    assert "/" not in url_encode("a/b")


def test_bytes_input_matches_text():
    assert url_encode("一二三".encode("utf-8")) == url_encode("一二三")


def test_plus_not_decoded_as_space():
    assert url_decode("a+b") == "a+b"


@pytest.mark.parametrize(
    "text",
    ["", "Hello World!", "一二三", "key2§$%&/", "a=b&c=d", "100% sure"],
)
def test_round_trip(text):
    assert url_decode(url_encode(text)) == text


@pytest.mark.parametrize("text", ["Hello World!", "key2§$%&/", "一二三"])
def test_encoded_output_is_ascii(text):
    encoded = url_encode(text)
    assert encoded.isascii()
    assert " " not in encoded