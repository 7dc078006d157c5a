# Started as a port of https://github.com/serpapi/uule_converter/blob/master/lib/serpapi-uule-converter.rb
import logging
from typing import Optional, Union

from uule_converter.consts import UULEV1_PREFIX, UULEV2_PREFIX
from uule_converter.errors import DecodeError, InvalidPrefix
from uule_converter.settings import UuleSettings
from uule_converter.uulev1 import Uulev1Data
from uule_converter.uulev2 import Uulev2Data

UuleData = Union[Uulev1Data, Uulev2Data]


class UuleConverter:
    """Builds the `uule` search parameter from coordinates or a place name."""

    @staticmethod
    def encode(
        latitude: float,
        longitude: float,
        radius: Optional[int] = None,
        role: Optional[int] = None,
        producer: Optional[int] = None,
        provenance: Optional[int] = None,
        timestamp: Optional[int] = None,
        settings: Optional[UuleSettings] = None
    ) -> str:
        """Encode location data into a UULEv2 string."""
        if settings is None:
            settings = UuleSettings.from_env()

        values = {
            "lat": latitude,
            "long": longitude,
            "radius": settings.radius if radius is None else radius,
            "role": settings.role if role is None else role,
            "producer": settings.producer if producer is None else producer,
            "provenance": settings.provenance if provenance is None else provenance,
        }
        if timestamp is not None:
            values["timestamp"] = timestamp

        return Uulev2Data(**values).encode()

    @staticmethod
    def encode_place(canonical_name: str) -> str:
        """Encode a canonical place name (e.g. "Dallas,Texas,United States") into a UULEv1 string."""
        return Uulev1Data.new(canonical_name).encode()

    @staticmethod
    def decode(uule_encoded: str) -> UuleData:
        """Decode a UULE string, the version is picked by its prefix."""
        if uule_encoded.startswith(UULEV1_PREFIX):
            return Uulev1Data.decode(uule_encoded)
        if uule_encoded.startswith(UULEV2_PREFIX):
            return Uulev2Data.decode(uule_encoded)

        raise InvalidPrefix(
            f"Invalid prefix. UULE strings must start with '{UULEV1_PREFIX}' or '{UULEV2_PREFIX}'. Received: {uule_encoded}")

    @staticmethod
    def try_decode(uule_encoded: str) -> Optional[UuleData]:
        try:
            return UuleConverter.decode(uule_encoded)
        except DecodeError as e:
            logging.error(
                f"Error decoding UULE string (try_decode): {str(e)}")
            return None
