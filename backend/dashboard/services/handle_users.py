"""User Handlers — create_user, update_user, delete_user.

Invariants:
    - Validation failure returns field errors and never touches the store
    - Email uniqueness checked before every write that sets a new email; a conflict is
      reported as the same generic failure as any persistence error
    - Passwords reach the store only as bcrypt hashes
    - Every persistence failure becomes a Failure result (never raised to the caller)
    - update_user invalidates the listing after every attempt, but returns a Redirect
      ONLY on success: not-found, conflict and store errors are always reported

Design Decisions:
    - Repository, hasher and invalidator injected: handlers testable with fakes
    - Password policy from settings: ALWAYS re-hashes on every update,
      WHEN_PROVIDED keeps the stored hash when the password field is blank
    - Non-DashboardError exceptions are bugs, not store failures: they propagate
"""

import logging
from collections.abc import Mapping

from dashboard.core.action_result import ActionResult, Failure, Ok, Redirect
from dashboard.core.domain_types import FailureCode, PasswordUpdatePolicy, UserId
from dashboard.core.errors import (
    DashboardError, EmailConflictError, ErrorContext, ResourceNotFoundError,
)
from dashboard.core.repository_protocols import (
    PasswordHasher, UserRepository, ViewInvalidator,
)
from dashboard.core.validate_form import parse_form
from dashboard.schemas.user import UserForm, UserUpdateForm

logger = logging.getLogger(__name__)

USERS_ROUTE = "/dashboard/users"


class UserHandlers:
    """User mutation handlers."""

    def __init__(
        self,
        users: UserRepository,
        hasher: PasswordHasher,
        views: ViewInvalidator,
        listing_route: str = USERS_ROUTE,
        password_policy: PasswordUpdatePolicy = PasswordUpdatePolicy.ALWAYS,
    ):
        self.users = users
        self.hasher = hasher
        self.views = views
        self.listing_route = listing_route
        self.password_policy = password_policy

    async def create_user(self, raw: Mapping[str, str | None]) -> ActionResult:
        """Validate, check email, hash, insert, then redirect to the listing."""
        form, errors = parse_form(UserForm, raw)
        if form is None:
            return Failure(
                "Missing Fields. Failed to Create User.",
                errors, FailureCode.VALIDATION_ERROR,
            )

        try:
            if await self.users.count_by_email(form.email) > 0:
                raise EmailConflictError(ErrorContext(action="create_user"))
            password_hash = await self.hasher.hash(form.password)
            user_id = await self.users.insert(form.name, form.email, password_hash)
        except DashboardError as e:
            logger.error(
                f"Failed to create user: {e.message}",
                extra={"error_code": e.code, "action": "create_user"},
            )
            return Failure("Failed to create user.")

        logger.info(
            "User created", extra={"user_id": user_id, "action": "create_user"},
        )
        self.views.invalidate(self.listing_route)
        return Redirect(self.listing_route)

    async def update_user(
        self, user_id: UserId, raw: Mapping[str, str | None],
    ) -> ActionResult:
        """Full replace of name/email/password for an existing user."""
        schema = (
            UserForm if self.password_policy == PasswordUpdatePolicy.ALWAYS
            else UserUpdateForm
        )
        form, errors = parse_form(schema, raw)
        if form is None:
            return Failure(
                "Missing Fields. Failed to Update User.",
                errors, FailureCode.VALIDATION_ERROR,
            )

        try:
            return await self._apply_update(user_id, form)
        finally:
            self.views.invalidate(self.listing_route)

    async def _apply_update(
        self, user_id: UserId, form: UserForm | UserUpdateForm,
    ) -> ActionResult:
        context = ErrorContext(user_id=user_id, action="update_user")
        try:
            existing = await self.users.get(user_id)
            if existing is None:
                raise ResourceNotFoundError("User", user_id, context)
            if (
                form.email != existing.email
                and await self.users.count_by_email(form.email) > 0
            ):
                raise EmailConflictError(context)
            password_hash = (
                await self.hasher.hash(form.password)
                if form.password is not None else None
            )
            await self.users.update(user_id, form.name, form.email, password_hash)
        except ResourceNotFoundError:
            logger.warning(
                "Update of unknown user",
                extra={"user_id": user_id, "action": "update_user"},
            )
            return Failure("User not found.", code=FailureCode.RESOURCE_NOT_FOUND)
        except DashboardError as e:
            logger.error(
                f"Failed to update user: {e.message}",
                extra={"user_id": user_id, "error_code": e.code, "action": "update_user"},
            )
            return Failure("Failed to update user.")

        logger.info("User updated", extra={"user_id": user_id, "action": "update_user"})
        return Redirect(self.listing_route)

    async def delete_user(self, user_id: UserId) -> ActionResult:
        """Delete by id. Unknown ids succeed (idempotent)."""
        try:
            await self.users.delete(user_id)
        except DashboardError as e:
            logger.error(
                f"Failed to delete user: {e.message}",
                extra={"user_id": user_id, "error_code": e.code, "action": "delete_user"},
            )
            return Failure("Failed to delete user.")

        self.views.invalidate(self.listing_route)
        return Ok({"message": "Deleted User."})
