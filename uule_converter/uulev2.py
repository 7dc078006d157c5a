import re
import time
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from uule_converter.base64url import urlsafe_decode64, urlsafe_encode64
from uule_converter.consts import (DEFAULT_PROVENANCE, LOGGED_IN_USER_SPECIFIED, UNSPECIFIED_RADIUS,
                                   USER_SPECIFIED_FOR_REQUEST, UULEV2_PREFIX)
from uule_converter.errors import InvalidPrefix, MalformedField, MissingField, StructureError, UnknownField
from uule_converter.latlong import latlong_from_e7, latlong_to_e7

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

LATLNG_OPEN = "latlng{"
LATLNG_CLOSE = "}"

FIELDS = ("role", "producer", "provenance", "timestamp", "latitude_e7", "longitude_e7", "radius")
LAYOUT = ("role", "producer", "provenance", "timestamp",
          LATLNG_OPEN, "latitude_e7", "longitude_e7", LATLNG_CLOSE,
          "radius")

_INTEGER = re.compile(r"[+-]?[0-9]+")


def generate_timestamp() -> int:
    """Current time in microseconds since epoch."""
    return int(time.time() * 1_000_000)


class Uulev2Data(BaseModel):
    """Data carried by a UULEv2 token.

Probably the only interesting fields are lat, long and possibly radius.

role - 1 means USER_SPECIFIED_FOR_REQUEST
producer - 12 means LOGGED_IN_USER_SPECIFIED
provenance - unknown, 0 works
timestamp - microseconds since epoch, defaults to now
lat, long - degrees, 7 decimal digits survive the e7 wire encoding
radius - -1 means unspecified / exact location
    """
    model_config = ConfigDict(frozen=True)

    role: int = Field(default=USER_SPECIFIED_FOR_REQUEST)
    producer: int = Field(default=LOGGED_IN_USER_SPECIFIED)
    provenance: int = Field(default=DEFAULT_PROVENANCE)
    timestamp: int = Field(default_factory=generate_timestamp, ge=INT64_MIN, le=INT64_MAX)
    lat: float = Field(default=0.0, ge=-90, le=90, allow_inf_nan=False)
    long: float = Field(default=0.0, ge=-180, le=180, allow_inf_nan=False)
    radius: int = Field(default=UNSPECIFIED_RADIUS)

    @property
    def latitude_e7(self) -> int:
        return latlong_to_e7(self.lat)

    @property
    def longitude_e7(self) -> int:
        return latlong_to_e7(self.long)

    def _replace(self, **changes) -> "Uulev2Data":
        return type(self)(**{**self.model_dump(), **changes})

    def with_lat(self, lat: float) -> "Uulev2Data":
        return self._replace(lat=lat)

    def with_long(self, long: float) -> "Uulev2Data":
        return self._replace(long=long)

    def with_radius(self, radius: int) -> "Uulev2Data":
        return self._replace(radius=radius)

    def to_text(self) -> str:
        """Intermediate text form, before base64 is applied."""
        return f"""role:{self.role}
producer:{self.producer}
provenance:{self.provenance}
timestamp:{self.timestamp}
{LATLNG_OPEN}
latitude_e7:{self.latitude_e7}
longitude_e7:{self.longitude_e7}
{LATLNG_CLOSE}
radius:{self.radius}"""

    def __str__(self) -> str:
        return self.to_text()

    def encode(self) -> str:
        return UULEV2_PREFIX + urlsafe_encode64(self.to_text().encode("utf-8"))

    @classmethod
    def decode(cls, token: str) -> "Uulev2Data":
        if not token.startswith(UULEV2_PREFIX):
            raise InvalidPrefix(
                f"Invalid prefix. UULEv2 strings must start with '{UULEV2_PREFIX}'. Received: {token}")

        data = urlsafe_decode64(token[len(UULEV2_PREFIX):])
        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise MalformedField(f"UULEv2 payload is not valid UTF-8: {e}") from e

        return cls.from_text(text)

    @classmethod
    def from_text(cls, text: str) -> "Uulev2Data":
        """Parse the intermediate text form produced by to_text."""
        entries = _split_entries(text)

        keys = [key for key, value in entries if value is not None]
        for key in FIELDS:
            if keys.count(key) > 1:
                raise StructureError(f"Field {key} appears {keys.count(key)} times", field=key)
        for key in FIELDS:
            if key not in keys:
                raise MissingField(f"Missing field {key}", field=key)

        layout = tuple(key for key, _ in entries)
        if layout != LAYOUT:
            raise StructureError(
                f"Unexpected layout: {' '.join(layout)} - expected: {' '.join(LAYOUT)}")

        values = {key: _parse_int(key, value) for key, value in entries if value is not None}

        try:
            return cls(
                role=values["role"],
                producer=values["producer"],
                provenance=values["provenance"],
                timestamp=values["timestamp"],
                lat=latlong_from_e7(values["latitude_e7"]),
                long=latlong_from_e7(values["longitude_e7"]),
                radius=values["radius"],
            )
        except (ValidationError, OverflowError) as e:
            raise MalformedField(f"Invalid UULEv2 value: {e}") from e


def _split_entries(text: str) -> List[Tuple[str, Optional[str]]]:
    """Split the text block into (key, value) pairs, block markers get a None value."""
    entries = []
    for line in text.split("\n"):
        line = line.strip()
        if not line:
            continue

        if line in (LATLNG_OPEN, LATLNG_CLOSE):
            entries.append((line, None))
            continue

        key, sep, value = line.partition(":")
        if not sep:
            raise MalformedField(f"Expected key:value line, got: {line}")

        key = key.strip()
        if key not in FIELDS:
            raise UnknownField(f"Unknown field {key}", field=key)

        entries.append((key, value.strip()))

    return entries


def _parse_int(key: str, value: str) -> int:
    if not _INTEGER.fullmatch(value):
        raise MalformedField(f"Invalid integer value for {key}: {value!r}", field=key)
    try:
        return int(value)
    except ValueError as e:
        # int() refuses very long digit strings
        raise MalformedField(f"Invalid integer value for {key}: {e}", field=key) from e
