from pydantic import BaseModel, ConfigDict, Field, field_validator

from uule_converter.base64url import urlsafe_decode64, urlsafe_encode64
from uule_converter.consts import UULEV1_PREFIX, UULEV1_PRODUCER, UULEV1_ROLE
from uule_converter.errors import InvalidPrefix, MalformedField

# protobuf style tags: field_number << 3 | wire_type
ROLE_TAG = 0x08
PRODUCER_TAG = 0x10
CANONICAL_NAME_TAG = 0x22

HEADER_SIZE = 6
MAX_NAME_BYTES = 0xFF


class Uulev1Data(BaseModel):
    """Data carried by a UULEv1 token.

The meaning of role and producer is not documented anywhere, the defaults
(2 and 32) come from tokens observed in real search traffic.
canonical_name is a Google Ads geotarget canonical name, e.g.
"Queens County,New York,United States".
    """
    model_config = ConfigDict(frozen=True)

    role: int = Field(default=UULEV1_ROLE, ge=0, le=0xFF)
    producer: int = Field(default=UULEV1_PRODUCER, ge=0, le=0xFF)
    canonical_name: str

    @field_validator("canonical_name")
    @classmethod
    def check_name_length(cls, value: str) -> str:
        size = len(value.encode("utf-8"))
        if size > MAX_NAME_BYTES:
            raise ValueError(
                f"canonical_name is {size} bytes long, UULEv1 allows at most {MAX_NAME_BYTES}")
        return value

    @classmethod
    def new(cls, place: str) -> "Uulev1Data":
        return cls(canonical_name=place)

    def encode(self) -> str:
        name_bytes = self.canonical_name.encode("utf-8")
        data = bytes([ROLE_TAG, self.role, PRODUCER_TAG, self.producer,
                      CANONICAL_NAME_TAG, len(name_bytes)]) + name_bytes

        return UULEV1_PREFIX + urlsafe_encode64(data)

    @classmethod
    def decode(cls, token: str) -> "Uulev1Data":
        if not token.startswith(UULEV1_PREFIX):
            raise InvalidPrefix(
                f"Invalid prefix. UULEv1 strings must start with '{UULEV1_PREFIX}'. Received: {token}")

        data = urlsafe_decode64(token[len(UULEV1_PREFIX):])

        if len(data) < HEADER_SIZE:
            raise MalformedField(
                f"UULEv1 payload is truncated: {len(data)} bytes, expected at least {HEADER_SIZE}")

        for offset, tag, field in ((0, ROLE_TAG, "role"),
                                   (2, PRODUCER_TAG, "producer"),
                                   (4, CANONICAL_NAME_TAG, "canonical_name")):
            if data[offset] != tag:
                raise MalformedField(
                    f"Unexpected tag 0x{data[offset]:02x} at offset {offset}, expected 0x{tag:02x} ({field})",
                    field=field)

        name_len = data[5]
        name_bytes = data[HEADER_SIZE:]
        if len(name_bytes) != name_len:
            raise MalformedField(
                f"canonical_name length is {name_len} but {len(name_bytes)} bytes follow",
                field="canonical_name")

        try:
            canonical_name = name_bytes.decode("utf-8")
        except UnicodeDecodeError as e:
            raise MalformedField(
                f"canonical_name is not valid UTF-8: {e}", field="canonical_name") from e

        return cls(role=data[1], producer=data[3], canonical_name=canonical_name)
