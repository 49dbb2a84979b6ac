"""Element plugins. Importing this package registers the bundled plugins."""

from webform_address.elements.address import AddressElement
from webform_address.elements.base import WebformCompositeBase, WebformElementBase
from webform_address.elements.manager import ElementDefinition, ElementManager, get_element_manager

__all__ = [
    "AddressElement",
    "ElementDefinition",
    "ElementManager",
    "WebformCompositeBase",
    "WebformElementBase",
    "get_element_manager",
]
