"""Admin Dashboard Package — mutation handlers for users, invoices and sign-in.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
