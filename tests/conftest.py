"""Pytest configuration and fixtures."""

from typing import Any

import pytest

from webform_address.config import LanguageConfig, WebformAddressConfig
from webform_address.elements import AddressElement, ElementManager
from webform_address.webform import Webform, WebformSubmission


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def config() -> WebformAddressConfig:
    """Monolingual English site."""
    return WebformAddressConfig()


@pytest.fixture
def multilingual_config() -> WebformAddressConfig:
    """Site with English and French enabled."""
    return WebformAddressConfig(language=LanguageConfig(default_langcode="en", languages=["en", "fr"]))


@pytest.fixture
def manager(config: WebformAddressConfig) -> ElementManager:
    return ElementManager(config)


@pytest.fixture
def plugin(config: WebformAddressConfig) -> AddressElement:
    return AddressElement(config=config)


@pytest.fixture
def element() -> dict[str, Any]:
    """Single-value address element with default properties."""
    return {"key": "address", "type": "address"}


@pytest.fixture
def sample_address() -> dict[str, str]:
    """The canned sample address."""
    return {
        "given_name": "John",
        "family_name": "Smith",
        "organization": "Google Inc.",
        "address_line1": "1098 Alta Ave",
        "postal_code": "94043",
        "locality": "Mountain View",
        "administrative_area": "CA",
        "country_code": "US",
        "langcode": "en",
    }


@pytest.fixture
def make_submission():
    """Build a submission holding ``value`` for ``element``."""

    def _make(element: dict[str, Any], value: Any) -> WebformSubmission:
        webform = Webform(id="test", elements={element["key"]: element})
        return WebformSubmission(webform=webform, data={element["key"]: value})

    return _make


@pytest.fixture
def address_webform_yaml() -> str:
    return """
address:
  type: address
  title: Address
address_advanced:
  type: address
  title: Address advanced
  available_countries:
    - US
    - CA
  used_fields:
    - address_line1
    - address_line2
    - locality
    - administrative_area
    - postal_code
  langcode_override: en
address_none:
  type: address
  title: Address none
"""
