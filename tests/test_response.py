import pytest

from reqkit.cookies import Cookie, Cookies
from reqkit.errors import Error, ErrorCode
from reqkit.response import CertInfo, Response
from reqkit.structures import CaseInsensitiveDict


def test_certinfo_list_operations():
    info = CertInfo(["Subject:a"])
    info.append("Issuer:b")
    assert len(info) == 2
    assert info[1] == "Issuer:b"
    info[0] = "Subject:c"
    assert list(info) == ["Subject:c", "Issuer:b"]
    assert info.pop() == "Issuer:b"
    assert info == CertInfo(["Subject:c"])


def test_certinfo_pop_empty_raises():
    with pytest.raises(IndexError):
        CertInfo().pop()


def test_response_defaults():
    r = Response()
    assert r.status_code == 0
    assert r.text == ""
    assert r.url == ""
    assert r.redirect_count == 0
    assert not r.error
    assert r.error.code == ErrorCode.OK
    assert len(r.header) == 0
    assert len(r.cookies) == 0
    assert r.cert_infos == []


def test_response_defaults_are_not_shared():
    a, b = Response(), Response()
    a.header["X"] = "1"
    a.cookies.append(Cookie("n", "v"))
    assert len(b.header) == 0
    assert len(b.cookies) == 0


def test_response_header_is_case_insensitive():
    r = Response(header=CaseInsensitiveDict({"Content-Type": "text/html"}))
    assert r.header["content-type"] == "text/html"


def test_response_error_truthiness():
    r = Response(error=Error(ErrorCode.OPERATION_TIMEDOUT, "timed out"))
    assert r.error
    assert r.error.message == "timed out"


def test_response_holds_given_cookies():
    cookies = Cookies([Cookie("status", "on")])
    r = Response(status_code=200, cookies=cookies)
    assert r.status_code == 200
    assert r.cookies[0].name == "status"