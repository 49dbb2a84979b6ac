"""Enumeration types for address values and element formatting."""

from enum import Enum


class AddressField(str, Enum):
    """Generic address fields an element can enable through ``used_fields``."""

    GIVEN_NAME = "given_name"
    ADDITIONAL_NAME = "additional_name"
    FAMILY_NAME = "family_name"
    ORGANIZATION = "organization"
    ADDRESS_LINE1 = "address_line1"
    ADDRESS_LINE2 = "address_line2"
    POSTAL_CODE = "postal_code"
    SORTING_CODE = "sorting_code"
    DEPENDENT_LOCALITY = "dependent_locality"
    LOCALITY = "locality"
    ADMINISTRATIVE_AREA = "administrative_area"


class ItemFormat(str, Enum):
    VALUE = "value"
    LIST = "list"
    RAW = "raw"


class ItemsFormat(str, Enum):
    UL = "ul"
    OL = "ol"
    COMMA = "comma"
    HR = "hr"
