"""Field labels and storage lengths for address sub-fields."""

from webform_address.models.enums import AddressField

# Column lengths of the address storage schema.
ADDRESS_SCHEMA_COLUMNS: dict[str, int] = {
    "langcode": 32,
    "country_code": 2,
    "administrative_area": 255,
    "locality": 255,
    "dependent_locality": 255,
    "postal_code": 255,
    "sorting_code": 255,
    "address_line1": 255,
    "address_line2": 255,
    "organization": 255,
    "given_name": 255,
    "additional_name": 255,
    "family_name": 255,
}

_GENERIC_FIELD_LABELS: dict[AddressField, str] = {
    AddressField.GIVEN_NAME: "First name",
    AddressField.ADDITIONAL_NAME: "Middle name",
    AddressField.FAMILY_NAME: "Last name",
    AddressField.ORGANIZATION: "Company",
    AddressField.ADDRESS_LINE1: "Street address",
    AddressField.ADDRESS_LINE2: "Street address line 2",
    AddressField.POSTAL_CODE: "Postal code",
    AddressField.SORTING_CODE: "Cedex",
    AddressField.DEPENDENT_LOCALITY: "Neighborhood",
    AddressField.LOCALITY: "City",
    AddressField.ADMINISTRATIVE_AREA: "State",
}


def get_generic_field_labels() -> dict[str, str]:
    """Labels for the generic address fields, keyed by field name."""
    return {field.value: label for field, label in _GENERIC_FIELD_LABELS.items()}


def css_class(field_name: str) -> str:
    """CSS class used for a field's span, e.g. ``address_line1`` -> ``address-line1``."""
    return field_name.replace("_", "-")
