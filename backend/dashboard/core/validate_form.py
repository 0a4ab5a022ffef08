"""Form Validation — raw form fields to a typed record or a per-field error map.

Invariants:
    - PURE: no IO, no async
    - Every input field of the schema is validated, absent ones as None
    - Fields not declared by the schema (id, date, ...) are dropped before validation
    - Error map has an entry for every violated field and none for satisfied ones

Design Decisions:
    - Returns (model, errors) instead of raising: handlers turn the error map
      straight into a Failure result for re-display
"""

from collections.abc import Mapping
from typing import TypeVar

from pydantic import BaseModel, ValidationError

M = TypeVar("M", bound=BaseModel)

FieldErrors = dict[str, list[str]]


def input_field_names(schema: type[BaseModel]) -> list[str]:
    """Names the schema reads from raw input (aliases win over attribute names)."""
    return [
        info.alias or name for name, info in schema.model_fields.items()
    ]


def flatten_field_errors(exc: ValidationError) -> FieldErrors:
    """Group pydantic errors by top-level field, preserving message order."""
    errors: FieldErrors = {}
    for err in exc.errors():
        field = str(err["loc"][0]) if err["loc"] else "form"
        errors.setdefault(field, []).append(err["msg"])
    return errors


def parse_form(
    schema: type[M], raw: Mapping[str, str | None],
) -> tuple[M | None, FieldErrors]:
    """Validate raw form values against `schema`."""
    values = {name: raw.get(name) for name in input_field_names(schema)}
    try:
        return schema.model_validate(values), {}
    except ValidationError as e:
        return None, flatten_field_errors(e)
