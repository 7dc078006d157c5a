import base64
import binascii
import re

from uule_converter.errors import InvalidBase64

_URLSAFE_ALPHABET = re.compile(r"[A-Za-z0-9_-]*={0,2}")


def urlsafe_encode64(data: bytes) -> str:
    """URL-safe base64 encoding without '=' padding."""
    return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")


def urlsafe_decode64(s: str) -> bytes:
    """URL-safe base64 decoding, padding is optional."""
    # b64decode silently drops foreign characters unless validated
    if not _URLSAFE_ALPHABET.fullmatch(s):
        raise InvalidBase64(f"Invalid URL-safe base64 string: {s!r}")

    # padding, when present, must complete the last quantum exactly
    if s.endswith("=") and len(s) % 4 != 0:
        raise InvalidBase64(f"Invalid URL-safe base64 padding: {s!r}")

    s = s.rstrip("=")
    if len(s) % 4 == 1:
        raise InvalidBase64(f"Invalid URL-safe base64 length {len(s)}: {s!r}")

    padding = 4 - (len(s) % 4)
    padded = s + "=" * padding if padding != 4 else s

    try:
        data = base64.b64decode(padded.encode("ascii"), altchars=b"-_", validate=True)
    except binascii.Error as e:
        raise InvalidBase64(f"Invalid URL-safe base64 string: {s!r} ({e})") from e

    # unused trailing bits must be zero
    if urlsafe_encode64(data) != s:
        raise InvalidBase64(f"Non-canonical URL-safe base64 string: {s!r}")

    return data
