"""Sign-in Classification — provider failure discriminator to user-facing outcome.

Invariants:
    - PURE: no IO
    - "CredentialsSignin" -> INVALID_CREDENTIALS; every other provider type -> PROVIDER_ERROR
    - Every SignInOutcome has exactly one message (SIGNED_IN has none)
"""

from dashboard.core.domain_types import AuthErrorType, SignInOutcome

SIGN_IN_MESSAGES: dict[SignInOutcome, str] = {
    SignInOutcome.INVALID_CREDENTIALS: "Invalid credentials.",
    SignInOutcome.PROVIDER_ERROR: "Something went wrong.",
}


def classify_sign_in_failure(error_type: str) -> SignInOutcome:
    """Map the provider's error `type` onto the two failure outcomes."""
    match error_type:
        case AuthErrorType.CREDENTIALS_SIGNIN.value:
            return SignInOutcome.INVALID_CREDENTIALS
        case _:
            return SignInOutcome.PROVIDER_ERROR


def sign_in_message(outcome: SignInOutcome) -> str | None:
    """User-facing message for an outcome (None when signed in)."""
    match outcome:
        case SignInOutcome.SIGNED_IN:
            return None
        case SignInOutcome.INVALID_CREDENTIALS | SignInOutcome.PROVIDER_ERROR:
            return SIGN_IN_MESSAGES[outcome]
