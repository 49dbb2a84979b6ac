"""Element plugin discovery and instantiation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable

from webform_address.config import WebformAddressConfig
from webform_address.exceptions import UnknownElementError

if TYPE_CHECKING:
    from webform_address.elements.base import WebformElementBase

_DEFINITIONS: dict[str, type[WebformElementBase]] = {}


@dataclass(frozen=True)
class ElementDefinition:
    """Plugin metadata of an element type."""

    id: str
    label: str
    description: str = ""
    category: str = ""
    composite: bool = False
    multiline: bool = False
    dependencies: tuple[str, ...] = ()


def webform_element(**definition: Any) -> Callable[[type], type]:
    """Class decorator registering an element plugin under ``definition["id"]``."""

    def register(cls: type) -> type:
        cls.plugin_definition = ElementDefinition(**definition)
        _DEFINITIONS[cls.plugin_definition.id] = cls
        return cls

    return register


class ElementManager:
    """Creates element plugins for element property mappings.

    Parameters
    ----------
    config : WebformAddressConfig | None
        Configuration handed to every plugin instance.
    """

    def __init__(self, config: WebformAddressConfig | None = None) -> None:
        self.config = config or WebformAddressConfig()
        self._instances: dict[str, WebformElementBase] = {}

    def get_definitions(self) -> dict[str, ElementDefinition]:
        return {plugin_id: cls.plugin_definition for plugin_id, cls in _DEFINITIONS.items()}

    def get_element_instance(self, element: dict[str, Any]) -> WebformElementBase:
        """Plugin handling ``element["type"]``.

        Raises
        ------
        UnknownElementError
            If no plugin is registered for the type.
        """
        plugin_id = element.get("type")
        if plugin_id not in _DEFINITIONS:
            raise UnknownElementError(f"No element plugin for type {plugin_id!r}")
        if plugin_id not in self._instances:
            self._instances[plugin_id] = _DEFINITIONS[plugin_id](config=self.config)
        return self._instances[plugin_id]


_manager: ElementManager | None = None


def get_element_manager() -> ElementManager:
    """Shared manager using the environment configuration."""
    global _manager
    if _manager is None:
        _manager = ElementManager(WebformAddressConfig.from_env())
    return _manager
