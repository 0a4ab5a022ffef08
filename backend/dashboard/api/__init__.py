"""API Layer — FastAPI routes, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Handler results translated to HTTP in one place (routes/action_responses.py)
"""
