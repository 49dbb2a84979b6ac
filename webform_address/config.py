"""Configuration management for webform-address."""

from dataclasses import dataclass, field

from webform_address.exceptions import ConfigurationError


@dataclass
class LanguageConfig:
    """Site language configuration."""

    default_langcode: str = "en"
    languages: list[str] = field(default_factory=lambda: ["en"])

    @property
    def multilingual(self) -> bool:
        """Whether more than one language is enabled on the site."""
        return len(self.languages) > 1


@dataclass
class WebformAddressConfig:
    """Main configuration for webform-address."""

    language: LanguageConfig = field(default_factory=LanguageConfig)
    log_level: str = "INFO"
    log_format: str = "standard"
    seed: int | None = None

    @classmethod
    def from_env(cls) -> "WebformAddressConfig":
        """Create config from environment variables."""
        import os

        default_langcode = os.getenv("WEBFORM_LANGCODE", "en")
        languages_str = os.getenv("WEBFORM_LANGUAGES")
        if languages_str:
            languages = [code.strip() for code in languages_str.split(",") if code.strip()]
        else:
            languages = [default_langcode]
        if default_langcode not in languages:
            raise ConfigurationError(
                f"Default language {default_langcode!r} is not one of the site languages {languages}"
            )

        log_format = os.getenv("LOG_FORMAT", "standard")
        if log_format not in ("standard", "json"):
            raise ConfigurationError(f"Unknown log format {log_format!r}")

        seed_str = os.getenv("SEED")

        return cls(
            language=LanguageConfig(default_langcode=default_langcode, languages=languages),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=log_format,
            seed=int(seed_str) if seed_str else None,
        )
