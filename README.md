# reqkit

Small, dependency-free building blocks for HTTP client code. Every module
uses only the standard library.

## What is in it

- `reqkit.errors`: the `ErrorCode` enum and the `Error` dataclass (`code`,
  `message`). `error_code_for_curl(n)` and `Error.from_curl(n, message)` turn
  a numeric transfer result code into an `ErrorCode`; unknown numbers become
  `ErrorCode.UNKNOWN_ERROR`. An `Error` is truthy exactly when its code is not
  `ErrorCode.OK`.
- `reqkit.encoding`: `url_encode` percent-encodes every byte except letters,
  digits and `-._~` (text is encoded as UTF-8 first); `url_decode` reverses it
  and leaves `+` alone.
- `reqkit.structures`: `CaseInsensitiveDict`, a mutable mapping whose keys
  compare without regard to ASCII case. A key keeps the spelling it was first
  stored with, and keys are iterated in case-insensitive sorted order.
  `case_insensitive_less(a, b)` is the ordering it uses.
- `reqkit.containers`: `Parameters` (of `Parameter` items) for query strings
  and `Payload` (of `Pair` items) for form bodies. Items may be given as
  objects or `(key, value)` tuples, at construction or through `add`.
  `get_content()` joins them with `&`. With `encode=True` (the default),
  parameter keys and values and pair values are percent-encoded; pair keys are
  never encoded. A parameter with an empty value renders as its bare key.
- `reqkit.auth`: `Authentication` (exposes `auth_string` as
  `username:password` and `auth_mode`), `EncodedAuthentication` (stores a
  percent-encoded `username` and `password`) and `ProxyAuthentication`, a
  per-protocol collection with `has`, `get_username` and `get_password`; the
  getters raise `KeyError` for an unknown protocol.
- `reqkit.cookies`: the `Cookie` dataclass (name, value, domain,
  include_subdomains, path, https_only, expires) with `expires_string()`, and
  `Cookies`, an ordered collection whose `get_encoded()` renders
  `name=value; ` entries for a `Cookie` header. Values wrapped in double quotes
  are sent exactly as they are.
- `reqkit.accept_encoding`: `AcceptEncoding`, a set of accepted encodings.
  `to_string()` joins them sorted with `, `. `disabled()` is True when the only
  entry is `disabled` and raises `ValueError` if `disabled` is mixed with
  others.
- `reqkit.response`: the `Response` dataclass (status code, text,
  case-insensitive headers, URL, elapsed time, cookies, error, raw header,
  status line, reason, byte counts, redirect count, certificate info) and
  `CertInfo`, a list-like holder of certificate lines.
- `reqkit.asyncwrap`: `AsyncWrapper` around a `concurrent.futures.Future`,
  whose result can be taken once with `get()`; `valid`, `wait`,
  `wait_for(timeout)` (returns whether the result is ready), `cancel` and
  `is_cancelled`. A wrapper built with a `threading.Event` is cancellable;
  `cancel()` returns a `CancellationResult`. `CancellationCallback` is a
  progress callback that returns False once the event is set. `startup`,
  `submit` and `cleanup` manage a shared thread pool; `submit` starts the pool
  if needed and returns a non-cancellable `AsyncWrapper`.

## What it does not do

reqkit does not open connections or send requests. There is no session, no
transport and no command-line tool: it supplies the values a client works
with (encoded query strings and bodies, cookie and `Accept-Encoding` header
values, error codes, responses and async results), and the sending is left to
the code that uses it.

## Examples

```python
from reqkit.encoding import url_encode, url_decode

url_encode("Hello World!")      # 'Hello%20World%21'
url_decode("%E4%B8%80")         # '一'
```

```python
from reqkit.containers import Payload, Pair

payload = Payload([Pair("key1", "hello"), Pair("key2", "world")])
payload.get_content()           # 'key1=hello&key2=world'
```

```python
from reqkit.structures import CaseInsensitiveDict

headers = CaseInsensitiveDict()
headers["Content-Type"] = "application/json"
headers["content-type"]         # 'application/json'
```

```python
from reqkit.errors import Error, ErrorCode

bool(Error())                                  # False
bool(Error(ErrorCode.UNSUPPORTED_PROTOCOL))    # True
```

```python
from reqkit.asyncwrap import startup, submit, cleanup

startup(4)
result = submit(sum, [1, 2, 3])
result.get()                    # 6
cleanup()
```

## Installation and tests

```
pip install -e ".[test]"
pytest
```