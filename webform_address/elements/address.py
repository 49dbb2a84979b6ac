"""The 'address' element: international postal addresses."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable

from wtforms import Form

from webform_address.addressing import (
    ADDRESS_SCHEMA_COLUMNS,
    AddressFormatRepository,
    CountryRepository,
    LanguageRepository,
    css_class,
    get_generic_field_labels,
)
from webform_address.config import WebformAddressConfig
from webform_address.elements.base import WebformCompositeBase
from webform_address.elements.manager import webform_element
from webform_address.forms import AddressSettingsForm, CompositeElementDefinition, allowed_choice
from webform_address.generators.address import AddressValueFactory
from webform_address.models.base import AddressValue
from webform_address.models.enums import ItemFormat
from webform_address.render import FormattedAddress, HtmlTag, Renderable, html_to_text, render_html

if TYPE_CHECKING:
    from webform_address.webform import FormState, Webform, WebformSubmission

logger = logging.getLogger(__name__)

COMPOSITE_TITLES: dict[str, str] = {
    "given_name": "Given name",
    "additional_name": "Additional name",
    "family_name": "Family name",
    "organization": "Organization",
    "address_line1": "Address line 1",
    "address_line2": "Address line 2",
    "postal_code": "Postal code",
    "sorting_code": "Sorting code",
    "dependent_locality": "Dependent locality",
    "locality": "Locality",
    "administrative_area": "Administrative area",
    "country_code": "Country code",
    "langcode": "Language code",
}

# Always accepted, whatever ``used_fields`` says.
BASE_FIELDS = ("country_code", "langcode")

LANGUAGE_CACHE_CONTEXT = "languages:language_interface"


@webform_element(
    id="address",
    label="Advanced address",
    description="Provides advanced element for storing, validating and displaying international postal addresses.",
    category="Composite elements",
    composite=True,
    multiline=True,
    dependencies=("address",),
)
class AddressElement(WebformCompositeBase):
    """Composite address element formatted by each country's address format.

    Parameters
    ----------
    config : WebformAddressConfig | None
        Site configuration; provides the interface language and site languages.
    country_repository : CountryRepository | None
        Country list lookup.
    address_format_repository : AddressFormatRepository | None
        Per-country address format lookup.
    language_repository : LanguageRepository | None
        Site language lookup.
    """

    def __init__(
        self,
        config: WebformAddressConfig | None = None,
        country_repository: CountryRepository | None = None,
        address_format_repository: AddressFormatRepository | None = None,
        language_repository: LanguageRepository | None = None,
    ) -> None:
        super().__init__(config)
        langcode = self.config.language.default_langcode
        self.country_repository = country_repository or CountryRepository(langcode)
        self.address_format_repository = address_format_repository or AddressFormatRepository()
        self.language_repository = language_repository or LanguageRepository(self.config.language)

    def get_default_properties(self) -> dict[str, Any]:
        return {
            **super().get_default_properties(),
            "available_countries": [],
            "used_fields": list(get_generic_field_labels()),
            "langcode_override": "",
        }

    def initialize_composite_elements(self, element: dict[str, Any]) -> None:
        element["webform_composite_elements"] = {
            key: CompositeElementDefinition(title=title, maxlength=ADDRESS_SCHEMA_COLUMNS[key])
            for key, title in COMPOSITE_TITLES.items()
        }

    def get_used_fields(self, element: dict[str, Any]) -> list[str]:
        return list(self.get_element_property(element, "used_fields") or [])

    def get_allowed_countries(self, element: dict[str, Any]) -> list[str]:
        """Available countries, or every known country when none are configured."""
        available = self.get_element_property(element, "available_countries")
        return list(available) if available else list(self.country_repository.get_list())

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def prepare(self, element: dict[str, Any], submission: WebformSubmission | None = None) -> None:
        super().prepare(element, submission)
        self.add_element_validate(element, self.validate_address)

    def get_input_composite_elements(
        self, element: dict[str, Any]
    ) -> dict[str, CompositeElementDefinition]:
        used = set(self.get_used_fields(element)) | set(BASE_FIELDS)
        return {
            key: definition
            for key, definition in self.get_initialized_composite_elements(element).items()
            if key in used
        }

    def get_composite_validators(self, element: dict[str, Any]) -> dict[str, list[Callable]]:
        return {
            "country_code": [
                allowed_choice(self.get_allowed_countries(element), "The selected country is not available.")
            ],
        }

    def process_input_item(
        self,
        element: dict[str, Any],
        raw: dict[str, Any] | None,
        form_state: FormState,
        path: str,
    ) -> dict[str, Any] | None:
        value = super().process_input_item(element, raw, form_state, path)
        if value is None:
            return None
        if value.get("country_code") and f"{path}.country_code" not in form_state.errors:
            self.validate_required_fields(element, value, form_state, path)
        langcode_override = self.get_element_property(element, "langcode_override")
        if langcode_override:
            value["langcode"] = langcode_override
        elif not value.get("langcode"):
            value["langcode"] = self.config.language.default_langcode
        return value

    def validate_required_fields(
        self,
        element: dict[str, Any],
        value: dict[str, Any],
        form_state: FormState,
        path: str,
    ) -> None:
        """Report used sub-fields the selected country requires but the value lacks."""
        address_format = self.address_format_repository.get(value["country_code"])
        for name in self.get_used_fields(element):
            if name in address_format.required_fields and not value.get(name):
                form_state.set_error(f"{path}.{name}", f"{COMPOSITE_TITLES[name]} field is required.")

    def validate_address(self, element: dict[str, Any], form_state: FormState) -> None:
        """Discard addresses without a country.

        A single value without ``country_code`` becomes ``None``; for
        multiple values every such item is dropped and the rest re-indexed,
        leaving ``None`` when no item remains.
        """
        value = form_state.get_value(element["key"])
        if self.has_multiple_values(element):
            items = [item for item in value or [] if not AddressValue.from_dict(item).is_empty()]
            if len(items) != len(value or []):
                logger.debug("Dropped %d incomplete address(es) from %s", len(value) - len(items), element["key"])
            form_state.set_value_for_element(element, items or None)
        elif AddressValue.from_dict(value).is_empty():
            form_state.set_value_for_element(element, None)

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    def format_html_item(
        self,
        element: dict[str, Any],
        submission: WebformSubmission,
        options: dict[str, Any] | None = None,
    ) -> Renderable | None:
        if self.get_item_format(element) == ItemFormat.VALUE.value:
            return self.build_address(element, submission, options)
        return super().format_html_item(element, submission, options)

    def format_text_item(
        self,
        element: dict[str, Any],
        submission: WebformSubmission,
        options: dict[str, Any] | None = None,
    ) -> str:
        if self.get_item_format(element) == ItemFormat.VALUE.value:
            build = self.build_address(element, submission, options)
            return html_to_text(render_html(build))
        return super().format_text_item(element, submission, options)

    def build_address(
        self,
        element: dict[str, Any],
        submission: WebformSubmission,
        options: dict[str, Any] | None = None,
    ) -> FormattedAddress | None:
        """Render tree laying out an address by its country's format.

        Returns
        -------
        FormattedAddress | None
            ``None`` when there is no value or the value has no country.
        """
        value = AddressValue.from_dict(self.get_value(element, submission, options))
        if value.is_empty():
            return None

        country_code = value.country_code
        address_format = self.address_format_repository.get(country_code)

        fields = {}
        for field in self.get_used_fields(element):
            text = getattr(value, field, None) or ""
            if field in address_format.uppercase_fields:
                text = text.upper()
            fields[field] = HtmlTag(
                tag="span",
                value=text,
                attributes={"class": [css_class(field)]},
                placeholder=f"%{field}",
            )

        return FormattedAddress(
            address_format=address_format,
            country_code=country_code,
            country=HtmlTag(
                tag="span",
                value=self.country_repository.get_name(country_code),
                attributes={"class": ["country"]},
                placeholder="%country",
            ),
            fields=fields,
            cache_contexts=[LANGUAGE_CACHE_CONTEXT],
        )

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def form(self, element: dict[str, Any]) -> Form:
        """Address settings form.

        The language override is only offered on multilingual sites.
        """
        form = AddressSettingsForm(data=self._configuration_data(element))
        form.available_countries.choices = list(self.country_repository.get_list().items())
        form.used_fields.choices = list(get_generic_field_labels().items())
        if self.language_repository.is_multilingual():
            form.langcode_override.choices = [("", "- No override -")] + list(
                self.language_repository.get_languages().items()
            )
        else:
            del form["langcode_override"]
        return form

    def validate_configuration_form(self, form: Form, form_state: FormState) -> None:
        """Keep only the checked used fields before validating.

        ``used_fields`` may arrive as a checkbox mapping (``{"locality":
        "locality", "sorting_code": 0}``) or as a list.
        """
        used_fields = form_state.get_value("used_fields") or []
        if isinstance(used_fields, dict):
            used_fields = [name for name, checked in used_fields.items() if checked]
        else:
            used_fields = [name for name in used_fields if name]
        form_state.set_value("used_fields", used_fields)
        super().validate_configuration_form(form, form_state)

    # ------------------------------------------------------------------
    # Test values
    # ------------------------------------------------------------------

    def get_test_values(
        self,
        element: dict[str, Any],
        webform: Webform | None = None,
        options: dict[str, Any] | None = None,
    ) -> list[dict[str, Any]]:
        """Sample values for previews and automated tests.

        With ``options["random"]``, ``options.get("count", 1)`` addresses are
        generated for the element's available countries instead.
        """
        options = options or {}
        if options.get("random"):
            seed = options.get("seed")
            factory = AddressValueFactory(
                countries=self.get_element_property(element, "available_countries") or None,
                seed=self.config.seed if seed is None else seed,
            )
            return [factory.generate().to_dict() for _ in range(options.get("count", 1))]

        return [
            {
                "given_name": "John",
                "family_name": "Smith",
                "organization": "Google Inc.",
                "address_line1": "1098 Alta Ave",
                "postal_code": "94043",
                "locality": "Mountain View",
                "administrative_area": "CA",
                "country_code": "US",
                "langcode": "en",
            },
        ]
