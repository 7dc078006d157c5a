from typing import Optional


class DecodeError(ValueError):
    """Base class for everything that can go wrong while decoding a UULE token."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class InvalidBase64(DecodeError):
    """Token payload is not URL-safe base64."""


class InvalidPrefix(InvalidBase64):
    """Token does not start with the expected 'w+' / 'a+' marker."""


class MalformedField(DecodeError):
    """A field value can not be parsed or overruns the buffer."""


class MissingField(DecodeError):
    """A required field is absent from the token."""


class UnknownField(DecodeError):
    """Token carries a field outside the schema."""


class StructureError(DecodeError):
    """Fields are out of order, duplicated or the latlng block is broken."""
