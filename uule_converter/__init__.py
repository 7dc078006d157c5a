from uule_converter.base64url import urlsafe_decode64, urlsafe_encode64
from uule_converter.convertor import UuleConverter
from uule_converter.errors import (DecodeError, InvalidBase64, InvalidPrefix, MalformedField, MissingField,
                                   StructureError, UnknownField)
from uule_converter.latlong import latlong_from_e7, latlong_to_e7
from uule_converter.settings import UuleSettings
from uule_converter.uulev1 import Uulev1Data
from uule_converter.uulev2 import Uulev2Data

__all__ = [
    "DecodeError",
    "InvalidBase64",
    "InvalidPrefix",
    "MalformedField",
    "MissingField",
    "StructureError",
    "UnknownField",
    "UuleConverter",
    "UuleSettings",
    "Uulev1Data",
    "Uulev2Data",
    "latlong_from_e7",
    "latlong_to_e7",
    "urlsafe_decode64",
    "urlsafe_encode64",
]
