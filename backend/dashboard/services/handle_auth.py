"""Auth Handler — authenticate via the credentials identity provider.

Invariants:
    - Provider "CredentialsSignin" -> Failure("Invalid credentials.")
    - Any other provider failure type -> Failure("Something went wrong.")
    - Exceptions that are not AuthProviderError propagate unchanged
    - Success -> Redirect to the signed-in landing route
"""

import logging
from collections.abc import Mapping

from dashboard.core.action_result import ActionResult, Failure, Redirect
from dashboard.core.classify_sign_in import classify_sign_in_failure, sign_in_message
from dashboard.core.domain_types import FailureCode, SignInOutcome
from dashboard.core.errors import AuthProviderError
from dashboard.core.repository_protocols import IdentityProvider

logger = logging.getLogger(__name__)

CREDENTIALS_PROVIDER = "credentials"


class AuthHandlers:
    """Sign-in handler."""

    def __init__(self, provider: IdentityProvider, signed_in_route: str = "/dashboard"):
        self.provider = provider
        self.signed_in_route = signed_in_route

    async def authenticate(self, raw: Mapping[str, str | None]) -> ActionResult:
        try:
            user_id = await self.provider.sign_in(CREDENTIALS_PROVIDER, raw)
        except AuthProviderError as e:
            outcome = classify_sign_in_failure(e.type)
            logger.info(
                f"Sign-in rejected: {e.type}",
                extra={"error_code": e.code, "action": "authenticate"},
            )
            return Failure(sign_in_message(outcome), code=_failure_code(outcome))

        logger.info("Signed in", extra={"user_id": user_id, "action": "authenticate"})
        return Redirect(self.signed_in_route)


def _failure_code(outcome: SignInOutcome) -> FailureCode:
    match outcome:
        case SignInOutcome.INVALID_CREDENTIALS:
            return FailureCode.INVALID_CREDENTIALS
        case SignInOutcome.PROVIDER_ERROR | SignInOutcome.SIGNED_IN:
            return FailureCode.SIGN_IN_FAILED
