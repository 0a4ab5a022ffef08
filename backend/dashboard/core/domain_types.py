"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId, InvoiceId, CustomerId are opaque strings — never parsed by handlers
    - MinorUnits is an integer amount of cents
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", str)
InvoiceId = NewType("InvoiceId", str)
CustomerId = NewType("CustomerId", str)


# ─── Value Types ─────────────────────────────────────────────────

MinorUnits = NewType("MinorUnits", int)                 # cents
PasswordHash = NewType("PasswordHash", str)             # bcrypt "$2b$..." string


# ─── Enums ───────────────────────────────────────────────────────

class InvoiceStatus(str, Enum):
    """The only statuses accepted at the validation boundary."""
    PENDING = "pending"
    PAID = "paid"


class PasswordUpdatePolicy(str, Enum):
    """What update_user does with the password field."""
    ALWAYS = "always"                  # re-hash and rewrite on every update
    WHEN_PROVIDED = "when_provided"    # blank password keeps the stored hash


class AuthErrorType(str, Enum):
    """Failure discriminators raised by the identity provider."""
    CREDENTIALS_SIGNIN = "CredentialsSignin"
    CALLBACK_ROUTE_ERROR = "CallbackRouteError"
    CONFIGURATION = "Configuration"


class SignInOutcome(str, Enum):
    """Observable outcomes of a sign-in attempt."""
    SIGNED_IN = "signed_in"
    INVALID_CREDENTIALS = "invalid_credentials"
    PROVIDER_ERROR = "provider_error"


class FailureCode(str, Enum):
    """Codes carried by Failure results — drive the HTTP status mapping."""
    VALIDATION_ERROR = "VALIDATION_ERROR"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    ACTION_FAILED = "ACTION_FAILED"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    SIGN_IN_FAILED = "SIGN_IN_FAILED"
