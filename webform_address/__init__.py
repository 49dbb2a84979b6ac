"""International postal address element for webforms."""

__version__ = "0.1.0"
