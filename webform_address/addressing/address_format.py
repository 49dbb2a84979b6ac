"""Per-country address formats backed by i18naddress."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from functools import lru_cache

import i18naddress

logger = logging.getLogger(__name__)

# Format tokens used by the address metadata -> address fields, in display order.
TOKEN_FIELDS: dict[str, tuple[str, ...]] = {
    "N": ("given_name", "additional_name", "family_name"),
    "O": ("organization",),
    "A": ("address_line1", "address_line2"),
    "D": ("dependent_locality",),
    "C": ("locality",),
    "S": ("administrative_area",),
    "Z": ("postal_code",),
    "X": ("sorting_code",),
}

# i18naddress field names -> address fields.
LIBRARY_FIELDS: dict[str, tuple[str, ...]] = {
    "name": TOKEN_FIELDS["N"],
    "company_name": TOKEN_FIELDS["O"],
    "street_address": TOKEN_FIELDS["A"],
    "city_area": TOKEN_FIELDS["D"],
    "city": TOKEN_FIELDS["C"],
    "country_area": TOKEN_FIELDS["S"],
    "postal_code": TOKEN_FIELDS["Z"],
    "sorting_code": TOKEN_FIELDS["X"],
}

# A required name or street means the first line of it, not every part.
_REQUIRED_FIELDS: dict[str, tuple[str, ...]] = {
    **LIBRARY_FIELDS,
    "name": ("given_name", "family_name"),
    "street_address": ("address_line1",),
}

_TOKEN = re.compile(r"%([A-Za-z])")


@dataclass(frozen=True)
class AddressFormat:
    """Address layout of a single country.

    ``format`` uses ``%field_name`` placeholders and ``\\n`` line breaks,
    e.g. ``"%organization\\n%address_line1\\n%locality, %administrative_area %postal_code"``.
    """

    country_code: str
    format: str
    used_fields: tuple[str, ...]
    required_fields: frozenset[str]
    uppercase_fields: frozenset[str]

    @classmethod
    def from_library_format(
        cls,
        country_code: str,
        library_format: str,
        required: set[str] | frozenset[str] = frozenset(),
        upper: set[str] | frozenset[str] = frozenset(),
    ) -> AddressFormat:
        """Convert an i18naddress format string and field sets."""
        used: list[str] = []

        def expand(match: re.Match) -> str:
            token = match.group(1)
            if token == "n":
                return "\n"
            names = TOKEN_FIELDS.get(token)
            if names is None:
                return ""
            used.extend(name for name in names if name not in used)
            separator = "\n" if token == "A" else " "
            return separator.join(f"%{name}" for name in names)

        converted = _TOKEN.sub(expand, library_format)
        return cls(
            country_code=country_code,
            format=converted,
            used_fields=tuple(used),
            required_fields=_map_fields(required, _REQUIRED_FIELDS),
            uppercase_fields=_map_fields(upper, LIBRARY_FIELDS),
        )


def _map_fields(names, mapping: dict[str, tuple[str, ...]]) -> frozenset[str]:
    return frozenset(field for name in names for field in mapping.get(name, ()))


class AddressFormatRepository:
    """Look up address formats by country code."""

    def get(self, country_code: str) -> AddressFormat:
        """Get the address format of a country.

        Unknown country codes get the generic format of the address metadata.
        """
        return _load_address_format(country_code.upper())


@lru_cache(maxsize=None)
def _load_address_format(country_code: str) -> AddressFormat:
    try:
        rules = i18naddress.get_validation_rules({"country_code": country_code})
    except ValueError:
        logger.warning("No address format for country %r, using the generic format", country_code)
        rules = i18naddress.get_validation_rules({})

    # Formats are built for an undetermined locale, so the latin layout applies.
    return AddressFormat.from_library_format(
        country_code,
        rules.address_latin_format or rules.address_format,
        required=rules.required_fields,
        upper=rules.upper_fields,
    )
