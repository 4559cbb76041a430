from datetime import datetime, timedelta, timezone

import pytest

from reqkit.cookies import Cookie, Cookies
from reqkit.encoding import url_decode


def test_cookie_defaults():
    cookie = Cookie("status", "on")
    assert cookie.domain == ""
    assert cookie.path == "/"
    assert cookie.include_subdomains is False
    assert cookie.https_only is False
    assert cookie.expires == datetime.fromtimestamp(0, tz=timezone.utc)


def test_default_expires_string_is_epoch():
    assert Cookie("a", "b").expires_string() == "Thu, 01 Jan 1970 00:00:00 GMT"


def test_expires_string_ends_with_gmt_and_round_trips():
    moment = datetime.fromtimestamp(1656908640, tz=timezone.utc)
    text = Cookie("status", "on", expires=moment).expires_string()
    assert text.endswith(" GMT")
    parsed = datetime.strptime(text, "%a, %d %b %Y %H:%M:%S GMT").replace(tzinfo=timezone.utc)
    assert parsed == moment


def test_expires_string_converts_other_zones_to_utc():
    utc = datetime(2022, 7, 4, 4, 24, tzinfo=timezone.utc)
    shifted = utc.astimezone(timezone(timedelta(hours=5)))
    assert Cookie(expires=shifted).expires_string() == Cookie(expires=utc).expires_string()


def test_get_encoded_without_encoding():
    cookies = Cookies([Cookie("status", "on"), Cookie("name", "debug")], encode=False)
    assert cookies.get_encoded() == "status=on; name=debug; "


def test_get_encoded_encodes_name_and_value():
    cookies = Cookies(Cookie("a b", "x/y"))
    encoded = cookies.get_encoded()
    name, rest = encoded.split("=", 1)
    assert url_decode(name) == "a b"
    assert rest.endswith("; ")
    assert url_decode(rest[:-2]) == "x/y"
    assert " " not in encoded[:-1]


def test_quoted_value_is_kept_verbatim():
    cookies = Cookies(Cookie("v", '"a b"'))
    assert cookies.get_encoded() == 'v="a b"; '


def test_empty_cookies_render_empty():
    cookies = Cookies()
    assert len(cookies) == 0
    assert cookies.get_encoded() == ""


def test_append_pop_index_iterate():
    cookies = Cookies()
    first, second = Cookie("one", "1"), Cookie("two", "2")
    cookies.append(first)
    cookies.append(second)
    assert len(cookies) == 2
    assert cookies[1] is second
    assert [c.name for c in cookies] == ["one", "two"]
    assert cookies.pop() is second
    assert list(cookies) == [first]


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        Cookies().pop()