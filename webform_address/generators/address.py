"""Random address values with worldwide locale support."""

from __future__ import annotations

import random
from typing import Callable

from faker import Faker

from webform_address.models.base import AddressValue

# Mapping of ISO country code -> Faker locale
LOCALE_MAP: dict[str, str] = {
    "US": "en_US",
    "CA": "en_CA",
    "GB": "en_GB",
    "AU": "en_AU",
    "DE": "de_DE",
    "FR": "fr_FR",
    "ES": "es_ES",
    "IT": "it_IT",
    "NL": "nl_NL",
    "BR": "pt_BR",
    "PT": "pt_PT",
    "MX": "es_MX",
    "JP": "ja_JP",
}


class AddressValueFactory:
    """Generate plausible address values for multiple countries.

    Each country gets a dedicated Faker instance so that names, streets and
    postal codes look local. Countries without a Faker locale fall back to
    ``en_US`` data with the requested country code.

    Parameters
    ----------
    countries : list[str] | None
        ISO 3166-1 alpha-2 codes to pick from. Defaults to every country in
        ``LOCALE_MAP``.
    seed : int | None
        Random seed for reproducibility.
    """

    def __init__(self, countries: list[str] | None = None, seed: int | None = None) -> None:
        self._countries = list(countries or LOCALE_MAP)
        self._random = random.Random(seed)
        self._seed = seed
        self._fakers: dict[str, Faker] = {}

    def _faker(self, country: str) -> Faker:
        if country not in self._fakers:
            faker_instance = Faker(LOCALE_MAP.get(country, "en_US"))
            if self._seed is not None:
                faker_instance.seed_instance(self._seed)
            self._fakers[country] = faker_instance
        return self._fakers[country]

    def generate(self, country: str | None = None) -> AddressValue:
        """Generate an address, optionally for a specific country.

        Parameters
        ----------
        country : str | None
            ISO 3166-1 alpha-2 code. If ``None``, picks one of the
            configured countries.

        Returns
        -------
        AddressValue
            Generated address.
        """
        if country is None:
            country = self._random.choice(self._countries)
        country = country.upper()
        fake = self._faker(country)
        locale = LOCALE_MAP.get(country, "en_US")

        return AddressValue(
            country_code=country,
            langcode=locale.split("_")[0],
            given_name=fake.first_name(),
            family_name=fake.last_name(),
            organization=fake.company() if self._random.random() < 0.5 else "",
            address_line1=fake.street_address(),
            address_line2="",
            postal_code=fake.postcode(),
            locality=fake.city(),
            administrative_area=_administrative_area(fake),
        )


def _administrative_area(fake: Faker) -> str:
    """First subdivision provider the locale offers, abbreviated where possible."""
    for method in ("state_abbr", "province_abbr", "estado_sigla", "administrative_unit", "state", "region"):
        if hasattr(fake, method):
            provider: Callable[[], str] = getattr(fake, method)
            return provider()
    return ""
