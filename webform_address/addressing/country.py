"""Localized country list."""

from __future__ import annotations

import logging
from functools import lru_cache

import i18naddress
from babel import Locale, UnknownLocaleError

logger = logging.getLogger(__name__)


class CountryRepository:
    """Countries with an address format, named in a given language.

    Parameters
    ----------
    default_langcode : str
        Language used when none is given or the given one is unknown.
    """

    def __init__(self, default_langcode: str = "en") -> None:
        self.default_langcode = default_langcode

    def get_list(self, langcode: str | None = None) -> dict[str, str]:
        """Country code to country name, sorted by name."""
        return dict(_country_list(langcode or self.default_langcode, self.default_langcode))

    def get_name(self, country_code: str, langcode: str | None = None) -> str:
        """Name of a single country, or the code itself when unknown."""
        return self.get_list(langcode).get(country_code, country_code)


def parse_locale(langcode: str, fallback: str = "en") -> Locale:
    """Parse a site language code, falling back when Babel has no such locale."""
    try:
        return Locale.parse(langcode.replace("-", "_"))
    except (ValueError, UnknownLocaleError):
        logger.debug("Unknown locale %r, falling back to %r", langcode, fallback)
        return Locale.parse(fallback)


@lru_cache(maxsize=None)
def _known_countries() -> dict[str, str]:
    """Country codes known to the address metadata, with its (uppercase) names."""
    data = i18naddress.load_validation_data("all")
    return {
        key: entry.get("name", key)
        for key, entry in data.items()
        if len(key) == 2 and key.isalpha() and key != "ZZ"
    }


@lru_cache(maxsize=None)
def _country_list(langcode: str, fallback: str) -> tuple[tuple[str, str], ...]:
    territories = parse_locale(langcode, fallback).territories
    names = {
        code: territories.get(code) or library_name.title()
        for code, library_name in _known_countries().items()
    }
    return tuple(sorted(names.items(), key=lambda item: item[1]))
