"""Webform definitions, form state and the submission pipeline."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from webform_address.elements.manager import ElementManager, get_element_manager
from webform_address.exceptions import ConfigurationError, SubmissionValidationError

logger = logging.getLogger(__name__)


@dataclass
class Webform:
    """A form definition: element properties keyed by element key."""

    id: str
    title: str = ""
    elements: dict[str, dict[str, Any]] = field(default_factory=dict)

    @classmethod
    def from_yaml(cls, webform_id: str, source: str | Path, title: str = "") -> Webform:
        """Load element definitions from YAML text or a YAML file.

        Each top-level key is an element key whose mapping holds the element
        properties, at least ``type``::

            address:
              type: address
              title: Address
        """
        if isinstance(source, Path):
            with Path.open(source, encoding="utf-8") as f:
                raw = yaml.safe_load(f)
        else:
            raw = yaml.safe_load(source)

        if raw is None:
            raw = {}
        if not isinstance(raw, dict):
            raise ConfigurationError(f"Webform {webform_id!r} elements must be a mapping")
        for key, element in raw.items():
            if not isinstance(element, dict) or "type" not in element:
                raise ConfigurationError(f"Element {key!r} of webform {webform_id!r} has no type")

        return cls(id=webform_id, title=title, elements=raw)

    def get_element(self, key: str) -> dict[str, Any]:
        """Element properties with ``key`` filled in."""
        return {**self.elements[key], "key": key}


@dataclass
class WebformSubmission:
    """Submitted values keyed by element key."""

    webform: Webform
    data: dict[str, Any] = field(default_factory=dict)

    def get_element_data(self, key: str) -> Any:
        return self.data.get(key)

    def set_element_data(self, key: str, value: Any) -> None:
        self.data[key] = value


@dataclass
class FormState:
    """Values and errors of a form being processed."""

    values: dict[str, Any] = field(default_factory=dict)
    errors: dict[str, list[str]] = field(default_factory=dict)

    def get_value(self, key: str, default: Any = None) -> Any:
        return self.values.get(key, default)

    def set_value(self, key: str, value: Any) -> None:
        self.values[key] = value

    def set_value_for_element(self, element: dict[str, Any], value: Any) -> None:
        self.values[element["key"]] = value

    def set_error(self, name: str, message: str) -> None:
        self.errors.setdefault(name, []).append(message)

    def has_any_errors(self) -> bool:
        return bool(self.errors)


def submit_webform(
    webform: Webform,
    data: dict[str, Any],
    manager: ElementManager | None = None,
) -> WebformSubmission:
    """Process raw input for every element of a webform.

    Each element's plugin converts its raw input, then the element-validate
    callbacks registered by ``prepare()`` run against the form state. Required
    elements left without a value are reported last.

    Parameters
    ----------
    webform : Webform
        Form definition.
    data : dict[str, Any]
        Raw input keyed by element key.
    manager : ElementManager | None
        Element plugin manager. Defaults to the shared manager.

    Returns
    -------
    WebformSubmission
        The submission holding the validated values.

    Raises
    ------
    SubmissionValidationError
        If any element reported an error.
    """
    manager = manager or get_element_manager()
    form_state = FormState()

    elements = []
    for key in webform.elements:
        element = webform.get_element(key)
        plugin = manager.get_element_instance(element)
        plugin.initialize(element)
        plugin.prepare(element)
        form_state.set_value(key, plugin.process_input(element, data.get(key), form_state))
        elements.append((element, plugin))

    for element, plugin in elements:
        for callback in element.get("element_validate", []):
            callback(element, form_state)
        plugin.validate_required(element, form_state)

    if form_state.has_any_errors():
        logger.info("Submission to webform %r rejected: %s", webform.id, sorted(form_state.errors))
        raise SubmissionValidationError(form_state.errors)

    logger.debug("Submission to webform %r accepted", webform.id)
    return WebformSubmission(webform=webform, data=dict(form_state.values))
