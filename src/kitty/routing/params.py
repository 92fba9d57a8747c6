"""Path parameter decoding and lookup.

Captured segments are percent-decoded the way URL query strings are
(``+`` becomes a space). A segment that cannot be decoded is bound as
its raw text; the outcome is reported as ``DecodeFallback`` rather than
raised, so a bad escape never fails the request.
"""

import re
from dataclasses import dataclass
from urllib.parse import unquote_to_bytes

from kitty.http.request import Request

# A "%" not followed by two hex digits
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


@dataclass(frozen=True, slots=True)
class Decoded:
    """A segment that decoded cleanly."""

    value: str


@dataclass(frozen=True, slots=True)
class DecodeFallback:
    """A segment that failed to decode; ``value`` is the raw text."""

    value: str
    reason: str


DecodeResult = Decoded | DecodeFallback


def decode_segment(raw: str) -> DecodeResult:
    """Percent-decode a captured path segment.

    *raw* is wire text: the latin-1 reading of the request bytes, so
    unescaped non-ASCII bytes are recovered before UTF-8 decoding.

    Examples::

        "hello"        -> Decoded("hello")
        "%2Fa%2Fb"     -> Decoded("/a/b")
        "a+b"          -> Decoded("a b")
        "caf\\xc3\\xa9"  -> Decoded("café")
        "100%"         -> DecodeFallback("100%", ...)
        "%ff"          -> DecodeFallback("%ff", ...)  # not UTF-8
    """
    if raw.isascii() and "%" not in raw and "+" not in raw:
        return Decoded(raw)
    bad = _BAD_ESCAPE.search(raw)
    if bad is not None:
        return DecodeFallback(raw, f"invalid escape at offset {bad.start()}")
    text = raw.replace("+", " ")
    try:
        wire = text.encode("latin-1")
    except UnicodeEncodeError:
        # Characters above U+00FF never come off the wire; already decoded
        wire = text.encode("utf-8")
    try:
        value = unquote_to_bytes(wire).decode("utf-8")
    except UnicodeDecodeError as exc:
        return DecodeFallback(raw, f"invalid UTF-8: {exc.reason}")
    return Decoded(value)


def var(request: Request, key: str) -> tuple[str, bool]:
    """Return the route variable *key* for a dispatched request.

    ``found`` is False when the request carries no bindings at all or
    when *key* is not among them; ``value`` is then ``""``.

    Usage::

        async def get_val(request):
            key, found = var(request, "key")
    """
    params = request.path_params
    if params is None or key not in params:
        return "", False
    return params[key], True
