"""Custom exception hierarchy for webform-address."""


class WebformAddressError(Exception):
    """Base exception for all webform-address errors."""


class ConfigurationError(WebformAddressError):
    """Raised when configuration is invalid or missing."""


class UnknownElementError(WebformAddressError):
    """Raised when no element plugin is registered for an element type."""


class SubmissionValidationError(WebformAddressError):
    """Raised when a submission fails element validation.

    Parameters
    ----------
    errors : dict[str, list[str]]
        Error messages keyed by element (or sub-element) path.
    """

    def __init__(self, errors: dict[str, list[str]]) -> None:
        self.errors = errors
        summary = "; ".join(f"{name}: {', '.join(messages)}" for name, messages in errors.items())
        super().__init__(f"Submission is invalid: {summary}")
