"""Domain models for address values."""

from webform_address.models.base import AddressValue
from webform_address.models.enums import AddressField, ItemFormat, ItemsFormat

__all__ = ["AddressField", "AddressValue", "ItemFormat", "ItemsFormat"]
