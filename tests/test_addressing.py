"""Tests for address formats, repositories and labels."""

import pytest

from webform_address.addressing import (
    ADDRESS_SCHEMA_COLUMNS,
    AddressFormat,
    AddressFormatRepository,
    CountryRepository,
    LanguageRepository,
    css_class,
    get_generic_field_labels,
    replace_placeholders,
)
from webform_address.config import LanguageConfig
from webform_address.models.enums import AddressField

US_FORMAT = "%N%n%O%n%A%n%C, %S %Z"


class TestAddressFormat:
    """Tests for AddressFormat.from_library_format."""

    def test_placeholders(self) -> None:
        address_format = AddressFormat.from_library_format("US", US_FORMAT)

        assert address_format.format == (
            "%given_name %additional_name %family_name\n"
            "%organization\n"
            "%address_line1\n%address_line2\n"
            "%locality, %administrative_area %postal_code"
        )

    def test_used_fields_in_display_order(self) -> None:
        address_format = AddressFormat.from_library_format("US", US_FORMAT)

        assert address_format.used_fields == (
            "given_name",
            "additional_name",
            "family_name",
            "organization",
            "address_line1",
            "address_line2",
            "locality",
            "administrative_area",
            "postal_code",
        )

    def test_required_and_uppercase_fields(self) -> None:
        address_format = AddressFormat.from_library_format(
            "US",
            US_FORMAT,
            required={"street_address", "city", "country_area", "postal_code"},
            upper={"city", "country_area"},
        )

        assert address_format.required_fields == {
            "address_line1",
            "locality",
            "administrative_area",
            "postal_code",
        }
        assert address_format.uppercase_fields == {"locality", "administrative_area"}

    def test_unknown_tokens_are_dropped(self) -> None:
        address_format = AddressFormat.from_library_format("XX", "%Q%O%n%X %D")

        assert address_format.format == "%organization\n%sorting_code %dependent_locality"
        assert address_format.used_fields == ("organization", "sorting_code", "dependent_locality")


class TestAddressFormatRepository:
    """Tests for AddressFormatRepository."""

    def test_us(self) -> None:
        address_format = AddressFormatRepository().get("US")

        assert address_format.country_code == "US"
        assert "%locality" in address_format.format
        assert "postal_code" in address_format.used_fields
        assert "locality" in address_format.uppercase_fields

    def test_lowercase_code(self) -> None:
        repository = AddressFormatRepository()

        assert repository.get("us") == repository.get("US")

    def test_unknown_country_uses_generic_format(self) -> None:
        address_format = AddressFormatRepository().get("QQ")

        assert address_format.country_code == "QQ"
        assert "%address_line1" in address_format.format
        assert "%locality" in address_format.format


class TestCountryRepository:
    """Tests for CountryRepository."""

    def test_english_names(self) -> None:
        countries = CountryRepository().get_list()

        assert countries["US"] == "United States"
        assert countries["FR"] == "France"
        assert "ZZ" not in countries
        assert all(len(code) == 2 for code in countries)

    def test_sorted_by_name(self) -> None:
        names = list(CountryRepository().get_list().values())

        assert names == sorted(names)

    def test_localized_names(self) -> None:
        countries = CountryRepository().get_list("de")

        assert countries["DE"] == "Deutschland"

    def test_unknown_locale_falls_back(self) -> None:
        countries = CountryRepository(default_langcode="en").get_list("xx")

        assert countries["US"] == "United States"

    def test_get_name(self) -> None:
        repository = CountryRepository()

        assert repository.get_name("US") == "United States"
        assert repository.get_name("QQ") == "QQ"


class TestLanguageRepository:
    """Tests for LanguageRepository."""

    def test_languages(self) -> None:
        repository = LanguageRepository(LanguageConfig(languages=["en", "fr", "und"]))

        assert repository.get_languages() == {"en": "English", "fr": "French"}
        assert repository.is_multilingual() is True

    def test_monolingual(self) -> None:
        repository = LanguageRepository()

        assert repository.get_languages() == {"en": "English"}
        assert repository.is_multilingual() is False


class TestReplacePlaceholders:
    """Tests for replace_placeholders."""

    def test_replaces(self) -> None:
        result = replace_placeholders(
            "%locality, %administrative_area %postal_code",
            {"%locality": "Mountain View", "%administrative_area": "CA", "%postal_code": "94043"},
        )

        assert result == "Mountain View, CA 94043"

    def test_longest_placeholder_first(self) -> None:
        result = replace_placeholders(
            "%address_line1\n%address_line2",
            {"%address_line1": "1098 Alta Ave", "%address_line2": "Suite 4"},
        )

        assert result == "1098 Alta Ave\nSuite 4"

    def test_removes_noise_and_empty_lines(self) -> None:
        result = replace_placeholders(
            "%given_name %additional_name %family_name\n%address_line2\n%locality, %administrative_area",
            {
                "%given_name": "John",
                "%additional_name": "",
                "%family_name": "Smith",
                "%address_line2": "",
                "%locality": "",
                "%administrative_area": "CA",
            },
        )

        assert result == "John Smith\nCA"

    def test_replacement_text_is_not_rescanned(self) -> None:
        result = replace_placeholders("%organization", {"%organization": "100%locality"})

        assert result == "100%locality"


class TestLabels:
    """Tests for field labels and schema columns."""

    def test_generic_labels_cover_address_fields(self) -> None:
        labels = get_generic_field_labels()

        assert set(labels) == {field.value for field in AddressField}
        assert labels["locality"] == "City"

    def test_schema_columns(self) -> None:
        assert set(ADDRESS_SCHEMA_COLUMNS) == set(get_generic_field_labels()) | {"country_code", "langcode"}

    @pytest.mark.parametrize(
        "field,expected",
        [("address_line1", "address-line1"), ("given_name", "given-name"), ("locality", "locality")],
    )
    def test_css_class(self, field: str, expected: str) -> None:
        assert css_class(field) == expected
