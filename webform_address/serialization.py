"""Submission export utilities."""

from dataclasses import asdict, is_dataclass
from enum import Enum
from typing import Any

import yaml

from webform_address.models.base import AddressValue
from webform_address.webform import WebformSubmission


def serialize_value(value: Any) -> Any:
    """Serialize a value for YAML/JSON output."""
    if is_dataclass(value) and not isinstance(value, type):
        return serialize_value(asdict(value))
    elif isinstance(value, Enum):
        return value.value
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, (list, tuple)):
        return [serialize_value(v) for v in value]
    return value


def _complete_address(value: Any) -> Any:
    """Address value with every sub-field present, ``None`` where missing."""
    if isinstance(value, list):
        return [_complete_address(item) for item in value]
    if isinstance(value, dict):
        return AddressValue.from_dict(value).to_dict()
    return value


def submission_to_dict(submission: WebformSubmission) -> dict[str, Any]:
    """Submission data in element order.

    Address elements always list all of their sub-fields.
    """
    result = {}
    for key, element in submission.webform.elements.items():
        value = submission.get_element_data(key)
        if element.get("type") == "address":
            value = _complete_address(value)
        result[key] = serialize_value(value)
    return result


def submission_to_yaml(submission: WebformSubmission) -> str:
    return yaml.safe_dump(
        submission_to_dict(submission),
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
    )
