"""Site language list."""

from webform_address.addressing.country import parse_locale
from webform_address.config import LanguageConfig

# Pseudo-languages that can never be chosen as an override.
LOCKED_LANGCODES = ("und", "zxx")


class LanguageRepository:
    """Languages enabled on the site, named in the default language."""

    def __init__(self, config: LanguageConfig | None = None) -> None:
        self.config = config or LanguageConfig()

    def get_languages(self) -> dict[str, str]:
        names = parse_locale(self.config.default_langcode).languages
        return {
            langcode: names.get(langcode.replace("-", "_"), langcode)
            for langcode in self.config.languages
            if langcode not in LOCKED_LANGCODES
        }

    def is_multilingual(self) -> bool:
        return self.config.multilingual
