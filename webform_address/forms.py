"""wtforms classes for composite element input and element configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Collection, Mapping

from wtforms import BooleanField, Form, SelectField, SelectMultipleField, StringField, TextAreaField
from wtforms.validators import DataRequired, Length, ValidationError
from wtforms.widgets import CheckboxInput, ListWidget

from webform_address.models.enums import ItemFormat, ItemsFormat


@dataclass(frozen=True)
class CompositeElementDefinition:
    """A sub-field of a composite element."""

    title: str
    maxlength: int | None = None


def allowed_choice(allowed: Collection[str], message: str = "Not an allowed choice.") -> Callable:
    """Validator accepting an empty value or one of ``allowed``."""

    def _allowed_choice(form: Form, field) -> None:
        if field.data and field.data not in allowed:
            raise ValidationError(message)

    return _allowed_choice


def build_composite_form(
    composite_elements: Mapping[str, CompositeElementDefinition],
    extra_validators: Mapping[str, list[Callable]] | None = None,
) -> type[Form]:
    """Create a form class with one text field per sub-field.

    Parameters
    ----------
    composite_elements : Mapping[str, CompositeElementDefinition]
        Sub-fields to include, keyed by name.
    extra_validators : Mapping[str, list[Callable]] | None
        Validators added to specific sub-fields after the length check.

    Returns
    -------
    type[Form]
        The form class; instantiate it with ``data=`` to validate a value.
    """
    extra_validators = extra_validators or {}
    attributes = {}
    for key, definition in composite_elements.items():
        validators: list[Callable] = []
        if definition.maxlength:
            validators.append(Length(max=definition.maxlength))
        validators.extend(extra_validators.get(key, []))
        attributes[key] = StringField(definition.title, validators=validators)
    return type("CompositeForm", (Form,), attributes)


class ElementSettingsForm(Form):
    """Properties shared by every element."""

    title = StringField("Title")
    description = TextAreaField("Description")
    required = BooleanField("Required")
    multiple = BooleanField("Allow multiple values")
    format = SelectField(
        "Item format",
        choices=[
            (ItemFormat.VALUE.value, "Value"),
            (ItemFormat.LIST.value, "List"),
            (ItemFormat.RAW.value, "Raw value"),
        ],
        default=ItemFormat.VALUE.value,
    )
    format_items = SelectField(
        "Items format",
        choices=[
            (ItemsFormat.UL.value, "Unordered list"),
            (ItemsFormat.OL.value, "Ordered list"),
            (ItemsFormat.COMMA.value, "Comma"),
            (ItemsFormat.HR.value, "Horizontal rule"),
        ],
        default=ItemsFormat.UL.value,
    )


class AddressSettingsForm(ElementSettingsForm):
    """Address settings. Choices are filled in by the element."""

    available_countries = SelectMultipleField(
        "Available countries",
        description="If no countries are selected, all countries will be available.",
        render_kw={"size": 10},
    )
    used_fields = SelectMultipleField(
        "Used fields",
        description="Note: an address used for postal purposes needs all of the fields.",
        validators=[DataRequired(message="At least one field must be used.")],
        widget=ListWidget(prefix_label=False),
        option_widget=CheckboxInput(),
    )
    langcode_override = SelectField(
        "Language override",
        description="Ensures entered addresses are always formatted in the same language.",
        default="",
    )
