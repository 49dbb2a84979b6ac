"""Test value generators."""

from webform_address.generators.address import LOCALE_MAP, AddressValueFactory

__all__ = ["LOCALE_MAP", "AddressValueFactory"]
