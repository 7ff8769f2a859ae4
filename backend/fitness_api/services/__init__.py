"""Services Layer: store operations for the resource families.

Invariants:
    - Store operations return Outcome values; SQLAlchemy exceptions never escape
    - No retries, no compensating actions
"""
