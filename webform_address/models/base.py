"""Address value model."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Mapping


@dataclass
class AddressValue:
    """A submitted postal address.

    Every sub-field is optional; a sub-field the element does not use is
    stored as ``None``. An address without ``country_code`` counts as no
    value at all.
    """

    country_code: str | None = None
    langcode: str | None = None
    given_name: str | None = None
    additional_name: str | None = None
    family_name: str | None = None
    organization: str | None = None
    address_line1: str | None = None
    address_line2: str | None = None
    postal_code: str | None = None
    sorting_code: str | None = None
    dependent_locality: str | None = None
    locality: str | None = None
    administrative_area: str | None = None

    @classmethod
    def field_names(cls) -> list[str]:
        return [f.name for f in fields(cls)]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> AddressValue:
        """Build from a mapping, ignoring keys that are not address fields."""
        if not data:
            return cls()
        names = set(cls.field_names())
        return cls(**{key: value for key, value in data.items() if key in names})

    def to_dict(self) -> dict[str, str | None]:
        return asdict(self)

    def is_empty(self) -> bool:
        return not self.country_code
