"""Transfer error codes and the error value attached to every response."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class ErrorCode(IntEnum):
    """Error codes for HTTP transfers.

    Only codes that are relevant to HTTP are included.
    """

    OK = 0
    UNSUPPORTED_PROTOCOL = 1
    FAILED_INIT = 2
    URL_MALFORMAT = 3
    NOT_BUILT_IN = 4
    COULDNT_RESOLVE_PROXY = 5
    COULDNT_RESOLVE_HOST = 6
    COULDNT_CONNECT = 7
    WEIRD_SERVER_REPLY = 8
    REMOTE_ACCESS_DENIED = 9
    HTTP2 = 10
    PARTIAL_FILE = 11
    QUOTE_ERROR = 12
    HTTP_RETURNED_ERROR = 13
    WRITE_ERROR = 14
    UPLOAD_FAILED = 15
    READ_ERROR = 16
    OUT_OF_MEMORY = 17
    OPERATION_TIMEDOUT = 18
    RANGE_ERROR = 19
    HTTP_POST_ERROR = 20
    SSL_CONNECT_ERROR = 21
    BAD_DOWNLOAD_RESUME = 22
    FILE_COULDNT_READ_FILE = 23
    FUNCTION_NOT_FOUND = 24
    ABORTED_BY_CALLBACK = 25
    BAD_FUNCTION_ARGUMENT = 26
    INTERFACE_FAILED = 27
    TOO_MANY_REDIRECTS = 28
    UNKNOWN_OPTION = 29
    SETOPT_OPTION_SYNTAX = 30
    GOT_NOTHING = 31
    SSL_ENGINE_NOTFOUND = 32
    SSL_ENGINE_SETFAILED = 33
    SEND_ERROR = 34
    RECV_ERROR = 35
    SSL_CERTPROBLEM = 36
    SSL_CIPHER = 37
    PEER_FAILED_VERIFICATION = 38
    BAD_CONTENT_ENCODING = 39
    FILESIZE_EXCEEDED = 40
    USE_SSL_FAILED = 41
    SEND_FAIL_REWIND = 42
    SSL_ENGINE_INITFAILED = 43
    LOGIN_DENIED = 44
    SSL_CACERT_BADFILE = 45
    SSL_SHUTDOWN_FAILED = 46
    AGAIN = 47
    SSL_CRL_BADFILE = 48
    SSL_ISSUER_ERROR = 49
    CHUNK_FAILED = 50
    NO_CONNECTION_AVAILABLE = 51
    SSL_PINNEDPUBKEYNOTMATCH = 52
    SSL_INVALIDCERTSTATUS = 53
    HTTP2_STREAM = 54
    RECURSIVE_API_CALL = 55
    AUTH_ERROR = 56
    HTTP3 = 57
    QUIC_CONNECT_ERROR = 58
    PROXY = 59
    SSL_CLIENTCERT = 60
    UNRECOVERABLE_POLL = 61
    TOO_LARGE = 62
    # An error the transfer layer reported that has no counterpart here.
    UNKNOWN_ERROR = 1000


# Numeric transfer-layer result codes and what they mean here.
_CURL_ERROR_MAP: dict[int, ErrorCode] = {
    0: ErrorCode.OK,
    1: ErrorCode.UNSUPPORTED_PROTOCOL,
    2: ErrorCode.FAILED_INIT,
    3: ErrorCode.URL_MALFORMAT,
    4: ErrorCode.NOT_BUILT_IN,
    5: ErrorCode.COULDNT_RESOLVE_PROXY,
    6: ErrorCode.COULDNT_RESOLVE_HOST,
    7: ErrorCode.COULDNT_CONNECT,
    8: ErrorCode.WEIRD_SERVER_REPLY,
    9: ErrorCode.REMOTE_ACCESS_DENIED,
    16: ErrorCode.HTTP2,
    18: ErrorCode.PARTIAL_FILE,
    21: ErrorCode.QUOTE_ERROR,
    22: ErrorCode.HTTP_RETURNED_ERROR,
    23: ErrorCode.WRITE_ERROR,
    25: ErrorCode.UPLOAD_FAILED,
    26: ErrorCode.READ_ERROR,
    27: ErrorCode.OUT_OF_MEMORY,
    28: ErrorCode.OPERATION_TIMEDOUT,
    33: ErrorCode.RANGE_ERROR,
    34: ErrorCode.HTTP_POST_ERROR,
    35: ErrorCode.SSL_CONNECT_ERROR,
    36: ErrorCode.BAD_DOWNLOAD_RESUME,
    37: ErrorCode.FILE_COULDNT_READ_FILE,
    41: ErrorCode.FUNCTION_NOT_FOUND,
    42: ErrorCode.ABORTED_BY_CALLBACK,
    43: ErrorCode.BAD_FUNCTION_ARGUMENT,
    45: ErrorCode.INTERFACE_FAILED,
    47: ErrorCode.TOO_MANY_REDIRECTS,
    48: ErrorCode.UNKNOWN_OPTION,
    49: ErrorCode.SETOPT_OPTION_SYNTAX,
    52: ErrorCode.GOT_NOTHING,
    53: ErrorCode.SSL_ENGINE_NOTFOUND,
    54: ErrorCode.SSL_ENGINE_SETFAILED,
    55: ErrorCode.SEND_ERROR,
    56: ErrorCode.RECV_ERROR,
    58: ErrorCode.SSL_CERTPROBLEM,
    59: ErrorCode.SSL_CIPHER,
    60: ErrorCode.PEER_FAILED_VERIFICATION,
    61: ErrorCode.BAD_CONTENT_ENCODING,
    63: ErrorCode.FILESIZE_EXCEEDED,
    64: ErrorCode.USE_SSL_FAILED,
    65: ErrorCode.SEND_FAIL_REWIND,
    66: ErrorCode.SSL_ENGINE_INITFAILED,
    67: ErrorCode.LOGIN_DENIED,
    77: ErrorCode.SSL_CACERT_BADFILE,
    80: ErrorCode.SSL_SHUTDOWN_FAILED,
    81: ErrorCode.AGAIN,
    82: ErrorCode.SSL_CRL_BADFILE,
    83: ErrorCode.SSL_ISSUER_ERROR,
    88: ErrorCode.CHUNK_FAILED,
    89: ErrorCode.NO_CONNECTION_AVAILABLE,
    90: ErrorCode.SSL_PINNEDPUBKEYNOTMATCH,
    91: ErrorCode.SSL_INVALIDCERTSTATUS,
    92: ErrorCode.HTTP2_STREAM,
    93: ErrorCode.RECURSIVE_API_CALL,
    94: ErrorCode.AUTH_ERROR,
    95: ErrorCode.HTTP3,
    96: ErrorCode.QUIC_CONNECT_ERROR,
    97: ErrorCode.PROXY,
    98: ErrorCode.SSL_CLIENTCERT,
    99: ErrorCode.UNRECOVERABLE_POLL,
    100: ErrorCode.TOO_LARGE,
}


def error_code_for_curl(curl_code: int) -> ErrorCode:
    """Map a numeric transfer result code to an ErrorCode.

    Codes with no counterpart map to ErrorCode.UNKNOWN_ERROR.
    """
    return _CURL_ERROR_MAP.get(curl_code, ErrorCode.UNKNOWN_ERROR)


@dataclass
class Error:
    """The outcome of a transfer: a code and a human readable message.

    An Error is truthy exactly when it describes a failure.
    """

    code: ErrorCode = ErrorCode.OK
    message: str = ""

    @classmethod
    def from_curl(cls, curl_code: int, message: str) -> Error:
        """Build an Error from a numeric transfer result code."""
        return cls(error_code_for_curl(curl_code), message)

    def __bool__(self) -> bool:
        return self.code != ErrorCode.OK