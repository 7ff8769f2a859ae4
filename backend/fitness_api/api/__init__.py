"""API Layer: routes, middleware, error handlers and response rendering.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Handler outcomes become HTTP responses only in responses.py
"""
