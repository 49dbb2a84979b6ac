"""Address metadata: countries, formats, languages and field labels."""

from webform_address.addressing.address_format import AddressFormat, AddressFormatRepository
from webform_address.addressing.country import CountryRepository
from webform_address.addressing.formatter import replace_placeholders
from webform_address.addressing.labels import (
    ADDRESS_SCHEMA_COLUMNS,
    css_class,
    get_generic_field_labels,
)
from webform_address.addressing.language import LanguageRepository

__all__ = [
    "ADDRESS_SCHEMA_COLUMNS",
    "AddressFormat",
    "AddressFormatRepository",
    "CountryRepository",
    "LanguageRepository",
    "css_class",
    "get_generic_field_labels",
    "replace_placeholders",
]
