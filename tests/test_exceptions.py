"""Tests for custom exception hierarchy."""

from webform_address.exceptions import (
    ConfigurationError,
    SubmissionValidationError,
    UnknownElementError,
    WebformAddressError,
)


class TestExceptionHierarchy:
    """Test exception inheritance chain."""

    def test_webform_address_error_is_exception(self) -> None:
        assert isinstance(WebformAddressError("test"), Exception)

    def test_configuration_error_is_webform_address_error(self) -> None:
        assert isinstance(ConfigurationError("test"), WebformAddressError)

    def test_unknown_element_is_webform_address_error(self) -> None:
        assert isinstance(UnknownElementError("test"), WebformAddressError)

    def test_submission_validation_is_webform_address_error(self) -> None:
        assert isinstance(SubmissionValidationError({}), WebformAddressError)

    def test_exception_message(self) -> None:
        err = UnknownElementError("No element plugin for type 'telephone'")
        assert str(err) == "No element plugin for type 'telephone'"

    def test_submission_validation_errors(self) -> None:
        err = SubmissionValidationError(
            {"address.country_code": ["Too long.", "Not available."], "address.locality": ["Too long."]}
        )
        assert err.errors["address.locality"] == ["Too long."]
        assert str(err) == (
            "Submission is invalid: address.country_code: Too long., Not available.; "
            "address.locality: Too long."
        )
