"""Core Layer — domain types, errors, validation, money and result types.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Functions here are pure and deterministic
"""
