"""Form Validation — tests for per-field error maps and typed results.

Tests cover:
    - Valid user input yields exactly name/email/password
    - Each violated field reported, satisfied fields absent from the error map
    - One message per field (first failing rule wins)
    - Absent fields validated as None; undeclared fields (id, date) dropped
    - Invoice amount coerced from string before the positivity rule
    - Status restricted to pending/paid
"""

from decimal import Decimal

import pytest

from dashboard.core.domain_types import InvoiceStatus
from dashboard.core.validate_form import input_field_names, parse_form
from dashboard.schemas.invoice import InvoiceForm
from dashboard.schemas.user import UserForm, UserUpdateForm


# ─── UserForm ────────────────────────────────────────────────────

def test_valid_user_yields_exactly_three_fields():
    form, errors = parse_form(
        UserForm,
        {"name": "Grace Hopper", "email": "grace@navy.io", "password": "cobol60"},
    )
    assert errors == {}
    assert form.model_dump() == {
        "name": "Grace Hopper", "email": "grace@navy.io", "password": "cobol60",
    }


def test_every_violated_user_field_reported():
    form, errors = parse_form(
        UserForm, {"name": "ab", "email": "not-an-email", "password": "123"},
    )
    assert form is None
    assert errors == {
        "name": ["Name must be at least 5 characters long"],
        "email": ["Invalid email address"],
        "password": ["Password must be at least 6 characters long"],
    }


@pytest.mark.parametrize(
    "raw, bad_field",
    [
        ({"name": "ab", "email": "ada@lovelace.io", "password": "secret1"}, "name"),
        ({"name": "Ada Lovelace", "email": "ada-at-lovelace", "password": "secret1"}, "email"),
        ({"name": "Ada Lovelace", "email": "ada@lovelace.io", "password": "123"}, "password"),
    ],
)
def test_single_violation_reports_only_that_field(raw, bad_field):
    form, errors = parse_form(UserForm, raw)
    assert form is None
    assert list(errors) == [bad_field]


def test_empty_fields_report_empty_message_only():
    _, errors = parse_form(UserForm, {"name": "", "email": "", "password": ""})
    assert errors == {
        "name": ["Name cannot be empty"],
        "email": ["Email cannot be empty"],
        "password": ["Password cannot be empty"],
    }


def test_absent_fields_are_validated_as_missing():
    _, errors = parse_form(UserForm, {})
    assert set(errors) == {"name", "email", "password"}
    assert errors["email"] == ["Email cannot be empty"]


def test_undeclared_fields_are_ignored():
    form, errors = parse_form(
        UserForm,
        {
            "id": "forged-id", "name": "Grace Hopper",
            "email": "grace@navy.io", "password": "cobol60",
        },
    )
    assert errors == {}
    assert "id" not in form.model_dump()


def test_update_form_accepts_blank_password_as_none():
    form, errors = parse_form(
        UserUpdateForm, {"name": "Grace Hopper", "email": "grace@navy.io", "password": ""},
    )
    assert errors == {}
    assert form.password is None


def test_update_form_still_checks_short_password():
    _, errors = parse_form(
        UserUpdateForm, {"name": "Grace Hopper", "email": "grace@navy.io", "password": "abc"},
    )
    assert errors == {"password": ["Password must be at least 6 characters long"]}


# ─── InvoiceForm ─────────────────────────────────────────────────

def test_invoice_amount_coerced_from_string():
    form, errors = parse_form(
        InvoiceForm, {"customerId": "cust-1", "amount": "12.34", "status": "paid"},
    )
    assert errors == {}
    assert form.customer_id == "cust-1"
    assert form.amount == Decimal("12.34")
    assert form.status is InvoiceStatus.PAID


def test_invoice_input_names_use_form_alias():
    assert input_field_names(InvoiceForm) == ["customerId", "amount", "status"]


@pytest.mark.parametrize("amount", ["0", "-5", "", None, "0.001", "0.004", "-1e30"])
def test_non_positive_amount_rejected(amount):
    _, errors = parse_form(
        InvoiceForm, {"customerId": "cust-1", "amount": amount, "status": "pending"},
    )
    assert errors == {"amount": ["Please enter an amount greater than $0."]}


@pytest.mark.parametrize("amount", ["abc", "NaN", "Infinity"])
def test_non_numeric_amount_rejected(amount):
    _, errors = parse_form(
        InvoiceForm, {"customerId": "cust-1", "amount": amount, "status": "pending"},
    )
    assert errors == {"amount": ["Please enter a valid amount."]}


@pytest.mark.parametrize("amount", ["1e30", "1e20", "21474836.48"])
def test_amount_beyond_storable_cents_rejected(amount):
    _, errors = parse_form(
        InvoiceForm, {"customerId": "cust-1", "amount": amount, "status": "pending"},
    )
    assert errors == {"amount": ["Please enter a valid amount."]}


def test_largest_storable_amount_accepted():
    form, errors = parse_form(
        InvoiceForm,
        {"customerId": "cust-1", "amount": "21474836.47", "status": "pending"},
    )
    assert errors == {}
    assert form.amount == Decimal("21474836.47")


@pytest.mark.parametrize("status", ["overdue", "PAID", "", None])
def test_status_outside_enum_rejected(status):
    _, errors = parse_form(
        InvoiceForm, {"customerId": "cust-1", "amount": "10", "status": status},
    )
    assert errors == {"status": ["Please select an invoice status."]}


def test_missing_invoice_fields_all_reported():
    _, errors = parse_form(InvoiceForm, {})
    assert errors == {
        "customerId": ["Please select a customer."],
        "amount": ["Please enter an amount greater than $0."],
        "status": ["Please select an invoice status."],
    }
