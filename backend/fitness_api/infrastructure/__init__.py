"""Infrastructure Layer: store connection and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from api/ or services/
"""
