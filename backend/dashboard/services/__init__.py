"""Services Layer — mutation handlers and the SQL stores they are wired to.

Invariants:
    - One handler class per record kind (users, invoices) plus sign-in
    - Handlers return ActionResult values; the API layer turns them into responses
"""
