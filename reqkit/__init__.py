"""Building blocks for HTTP clients: error codes, URL encoding, containers, cookies, credentials, responses and async results."""

__version__ = "1.11.1"

__all__ = [
    "accept_encoding",
    "asyncwrap",
    "auth",
    "containers",
    "cookies",
    "encoding",
    "errors",
    "response",
    "structures",
]