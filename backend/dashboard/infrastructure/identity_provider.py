"""Credentials Identity Provider — email/password sign-in against the users table.

Invariants:
    - Malformed credentials, unknown email and wrong password are indistinguishable:
      all raise AuthProviderError("CredentialsSignin")
    - Unknown provider id -> AuthProviderError("Configuration")
    - Store failure during lookup -> AuthProviderError("CallbackRouteError")
    - Session issuance is not done here; success just returns the user id

Design Decisions:
    - Password verified with the same hasher that created it (bcrypt checkpw)
    - Repository injected per request by api/deps.py: one DB session per sign-in
"""

import logging
from collections.abc import Mapping

from pydantic import ValidationError

from dashboard.core.domain_types import AuthErrorType, UserId
from dashboard.core.errors import AuthProviderError, DatabaseError, ErrorContext
from dashboard.core.repository_protocols import PasswordHasher, UserRepository
from dashboard.schemas.auth import SignInCredentials

logger = logging.getLogger(__name__)


class CredentialsIdentityProvider:
    """IdentityProvider supporting the "credentials" provider id."""

    provider_id = "credentials"

    def __init__(self, users: UserRepository, hasher: PasswordHasher):
        self.users = users
        self.hasher = hasher

    async def sign_in(
        self, provider_id: str, credentials: Mapping[str, str | None],
    ) -> UserId:
        context = ErrorContext(action="sign_in")
        if provider_id != self.provider_id:
            logger.error(f"Unknown sign-in provider: {provider_id}")
            raise AuthProviderError(AuthErrorType.CONFIGURATION.value, context)

        try:
            parsed = SignInCredentials.model_validate({
                "email": credentials.get("email"),
                "password": credentials.get("password"),
            })
        except ValidationError:
            raise AuthProviderError(AuthErrorType.CREDENTIALS_SIGNIN.value, context)

        try:
            user = await self.users.get_by_email(parsed.email)
        except DatabaseError as e:
            logger.error(f"User lookup failed during sign-in: {e.message}")
            raise AuthProviderError(AuthErrorType.CALLBACK_ROUTE_ERROR.value, context)

        if user is None or not await self.hasher.verify(parsed.password, user.password):
            raise AuthProviderError(AuthErrorType.CREDENTIALS_SIGNIN.value, context)
        return UserId(user.id)
