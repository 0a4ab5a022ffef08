"""Sign-in Classification — tests for the two-outcome failure mapping."""

import pytest

from dashboard.core.classify_sign_in import classify_sign_in_failure, sign_in_message
from dashboard.core.domain_types import SignInOutcome


def test_credentials_signin_is_invalid_credentials():
    assert classify_sign_in_failure("CredentialsSignin") is SignInOutcome.INVALID_CREDENTIALS


@pytest.mark.parametrize(
    "error_type", ["CallbackRouteError", "Configuration", "AccessDenied", ""],
)
def test_every_other_type_is_provider_error(error_type):
    assert classify_sign_in_failure(error_type) is SignInOutcome.PROVIDER_ERROR


def test_messages_are_exact_literals():
    assert sign_in_message(SignInOutcome.INVALID_CREDENTIALS) == "Invalid credentials."
    assert sign_in_message(SignInOutcome.PROVIDER_ERROR) == "Something went wrong."
    assert sign_in_message(SignInOutcome.SIGNED_IN) is None
