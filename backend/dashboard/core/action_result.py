"""Action Results — discriminated outcome of every mutation handler.

Invariants:
    - Every handler returns exactly one of Redirect | Ok | Failure — never raises for
      validation, not-found, conflict or persistence failures
    - `kind` is the discriminator; callers dispatch with match, not isinstance chains
    - Failure.to_state() is the caller-facing {errors?, message} shape

Design Decisions:
    - Redirect is a returned value, not a non-local exit: the HTTP layer decides
      what a redirect means (303 + Location)
    - Frozen dataclasses: results are values, safe to compare in tests
"""

from dataclasses import dataclass, field
from typing import Any, Literal, Union

from dashboard.core.domain_types import FailureCode


@dataclass(frozen=True)
class Redirect:
    """Mutation succeeded; caller should navigate to `target`."""
    target: str
    kind: Literal["redirect"] = "redirect"


@dataclass(frozen=True)
class Ok:
    """Mutation succeeded; `body` is returned to the caller as-is."""
    body: dict[str, Any]
    kind: Literal["ok"] = "ok"


@dataclass(frozen=True)
class Failure:
    """Mutation did not happen (or did not complete)."""
    message: str
    errors: dict[str, list[str]] = field(default_factory=dict)
    code: FailureCode = FailureCode.ACTION_FAILED
    kind: Literal["error"] = "error"

    def to_state(self) -> dict:
        state: dict[str, Any] = {"message": self.message}
        if self.errors:
            state["errors"] = self.errors
        return state


ActionResult = Union[Redirect, Ok, Failure]
