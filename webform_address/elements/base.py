"""Base classes for element plugins."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable

from markupsafe import Markup
from wtforms import Form

from webform_address.config import WebformAddressConfig
from webform_address.forms import CompositeElementDefinition, ElementSettingsForm, build_composite_form
from webform_address.models.enums import ItemFormat, ItemsFormat
from webform_address.render import ItemList, MarkupBuild, Renderable

if TYPE_CHECKING:
    from webform_address.elements.manager import ElementDefinition
    from webform_address.webform import FormState, Webform, WebformSubmission

logger = logging.getLogger(__name__)


class WebformElementBase:
    """An element type: default properties, input handling and formatting.

    Elements are plain property mappings (``{"key": "address", "type":
    "address", "multiple": True, ...}``); a plugin instance is shared by
    every element of its type and keeps no per-element state.
    """

    plugin_definition: ElementDefinition

    def __init__(self, config: WebformAddressConfig | None = None) -> None:
        self.config = config or WebformAddressConfig()

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    def get_default_properties(self) -> dict[str, Any]:
        return {
            "title": "",
            "description": "",
            "required": False,
            "multiple": False,
            "format": ItemFormat.VALUE.value,
            "format_items": ItemsFormat.UL.value,
        }

    def get_default_property(self, name: str) -> Any:
        return self.get_default_properties().get(name)

    def get_element_property(self, element: dict[str, Any], name: str) -> Any:
        """Element property, or its default when the element does not set it."""
        if name in element:
            return element[name]
        return self.get_default_property(name)

    def has_multiple_values(self, element: dict[str, Any]) -> bool:
        return bool(self.get_element_property(element, "multiple"))

    def is_multiline(self, element: dict[str, Any]) -> bool:
        return self.plugin_definition.multiline

    # ------------------------------------------------------------------
    # Processing
    # ------------------------------------------------------------------

    def initialize(self, element: dict[str, Any]) -> None:
        """Fill in derived properties before the element is used."""

    def prepare(self, element: dict[str, Any], submission: WebformSubmission | None = None) -> None:
        """Attach callbacks the form engine runs for this element."""

    def add_element_validate(self, element: dict[str, Any], callback: Callable) -> None:
        callbacks = element.setdefault("element_validate", [])
        if callback not in callbacks:
            callbacks.append(callback)

    def process_input(self, element: dict[str, Any], raw: Any, form_state: FormState) -> Any:
        return raw

    def validate_required(self, element: dict[str, Any], form_state: FormState) -> None:
        """Report a required element whose value is still empty."""
        if not self.get_element_property(element, "required"):
            return
        if form_state.get_value(element["key"]) in (None, "", [], {}):
            title = self.get_element_property(element, "title") or element["key"]
            form_state.set_error(element["key"], f"{title} field is required.")

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    def get_item_format(self, element: dict[str, Any]) -> str:
        return self.get_element_property(element, "format") or ItemFormat.VALUE.value

    def get_items_format(self, element: dict[str, Any]) -> str:
        return self.get_element_property(element, "format_items") or ItemsFormat.UL.value

    def get_value(
        self,
        element: dict[str, Any],
        submission: WebformSubmission,
        options: dict[str, Any] | None = None,
    ) -> Any:
        """Submitted value of an element; ``options["delta"]`` selects one item."""
        options = options or {}
        value = submission.get_element_data(element["key"])
        if "delta" in options:
            if not isinstance(value, list) or options["delta"] >= len(value):
                return None
            return value[options["delta"]]
        return value

    def format_html(
        self,
        element: dict[str, Any],
        submission: WebformSubmission,
        options: dict[str, Any] | None = None,
    ) -> Renderable | None:
        """Render tree of the element's value, all items for multi-value elements."""
        options = options or {}
        if not self.has_multiple_values(element):
            return self.format_html_item(element, submission, options)

        items = []
        for delta in range(len(self.get_value(element, submission) or [])):
            build = self.format_html_item(element, submission, {**options, "delta": delta})
            if build is not None:
                items.append(build)
        if not items:
            return None
        return ItemList(items=items, list_type=self.get_items_format(element))

    def format_text(
        self,
        element: dict[str, Any],
        submission: WebformSubmission,
        options: dict[str, Any] | None = None,
    ) -> str:
        options = options or {}
        if not self.has_multiple_values(element):
            return self.format_text_item(element, submission, options)

        items = []
        for delta in range(len(self.get_value(element, submission) or [])):
            text = self.format_text_item(element, submission, {**options, "delta": delta})
            if text:
                items.append(text)
        if self.get_items_format(element) == ItemsFormat.COMMA.value:
            return ", ".join(items)
        return ("\n\n" if self.is_multiline(element) else "\n").join(items)

    def format_html_item(
        self,
        element: dict[str, Any],
        submission: WebformSubmission,
        options: dict[str, Any] | None = None,
    ) -> Renderable | None:
        value = self.get_value(element, submission, options)
        if value in (None, ""):
            return None
        return MarkupBuild(markup=Markup.escape(value))

    def format_text_item(
        self,
        element: dict[str, Any],
        submission: WebformSubmission,
        options: dict[str, Any] | None = None,
    ) -> str:
        value = self.get_value(element, submission, options)
        return "" if value is None else str(value)

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def form(self, element: dict[str, Any]) -> Form:
        """Configuration form populated with the element's properties."""
        return ElementSettingsForm(data=self._configuration_data(element))

    def _configuration_data(self, element: dict[str, Any]) -> dict[str, Any]:
        return {**self.get_default_properties(), **element}

    def validate_configuration_form(self, form: Form, form_state: FormState) -> None:
        """Validate submitted configuration values, reporting errors on the form state."""
        form.process(data={**self.get_default_properties(), **form_state.values})
        if not form.validate():
            for name, messages in form.errors.items():
                for message in messages:
                    form_state.set_error(name, message)

    def get_configuration_properties(self, form_state: FormState) -> dict[str, Any]:
        """Element properties to persist from validated configuration values."""
        defaults = self.get_default_properties()
        return {name: form_state.values[name] for name in defaults if name in form_state.values}

    def get_test_values(
        self,
        element: dict[str, Any],
        webform: Webform | None = None,
        options: dict[str, Any] | None = None,
    ) -> list[Any]:
        return []


class WebformCompositeBase(WebformElementBase):
    """An element made of several sub-fields stored as one mapping."""

    def get_composite_elements(self) -> dict[str, CompositeElementDefinition]:
        return {}

    def initialize(self, element: dict[str, Any]) -> None:
        self.initialize_composite_elements(element)

    def initialize_composite_elements(self, element: dict[str, Any]) -> None:
        element["webform_composite_elements"] = self.get_composite_elements()

    def get_initialized_composite_elements(
        self, element: dict[str, Any]
    ) -> dict[str, CompositeElementDefinition]:
        if "webform_composite_elements" not in element:
            self.initialize_composite_elements(element)
        return element["webform_composite_elements"]

    def get_input_composite_elements(
        self, element: dict[str, Any]
    ) -> dict[str, CompositeElementDefinition]:
        """Sub-fields the element accepts input for."""
        return self.get_initialized_composite_elements(element)

    def get_composite_validators(self, element: dict[str, Any]) -> dict[str, list[Callable]]:
        return {}

    def process_input(self, element: dict[str, Any], raw: Any, form_state: FormState) -> Any:
        """Validate each item against the sub-field definitions.

        Sub-fields the element does not accept input for are stored as ``None``.
        """
        if self.has_multiple_values(element):
            if raw is None:
                return None
            items = raw if isinstance(raw, list) else [raw]
            return [
                self.process_input_item(element, item, form_state, f"{element['key']}.{delta}")
                for delta, item in enumerate(items)
            ]
        return self.process_input_item(element, raw, form_state, element["key"])

    def process_input_item(
        self,
        element: dict[str, Any],
        raw: dict[str, Any] | None,
        form_state: FormState,
        path: str,
    ) -> dict[str, Any] | None:
        if raw is None:
            return None
        if not isinstance(raw, dict):
            form_state.set_error(path, "Expected a mapping of sub-field values.")
            return None

        form_class = build_composite_form(
            self.get_input_composite_elements(element),
            self.get_composite_validators(element),
        )
        form = form_class(data={key: None if item is None else str(item) for key, item in raw.items()})
        if not form.validate():
            logger.debug("Invalid input for %s: %s", path, form.errors)
            for name, messages in form.errors.items():
                for message in messages:
                    form_state.set_error(f"{path}.{name}", message)

        value = {key: None for key in self.get_initialized_composite_elements(element)}
        value.update(form.data)
        return value

    def format_html_item(
        self,
        element: dict[str, Any],
        submission: WebformSubmission,
        options: dict[str, Any] | None = None,
    ) -> Renderable | None:
        lines = self._format_composite_lines(element, submission, options)
        if not lines:
            return None

        if self.get_item_format(element) == ItemFormat.RAW.value:
            markup = Markup("<br>\n").join(Markup("{}: {}").format(key, value) for key, value in lines)
            return MarkupBuild(markup=markup)

        items = [
            MarkupBuild(markup=Markup("<b>{}:</b> {}").format(title, value)) for title, value in lines
        ]
        return ItemList(items=items, list_type=ItemsFormat.UL.value)

    def format_text_item(
        self,
        element: dict[str, Any],
        submission: WebformSubmission,
        options: dict[str, Any] | None = None,
    ) -> str:
        lines = self._format_composite_lines(element, submission, options)
        return "\n".join(f"{label}: {value}" for label, value in lines)

    def _format_composite_lines(
        self,
        element: dict[str, Any],
        submission: WebformSubmission,
        options: dict[str, Any] | None,
    ) -> list[tuple[str, str]]:
        """(label, value) pairs of the non-empty sub-fields; raw format labels by key."""
        value = self.get_value(element, submission, options)
        if not value:
            return []
        raw = self.get_item_format(element) == ItemFormat.RAW.value
        lines = []
        for key, definition in self.get_initialized_composite_elements(element).items():
            if value.get(key):
                lines.append((key if raw else definition.title, str(value[key])))
        return lines
