"""Entity identifiers: parse raw path segments into store identifiers.

Invariants:
    - Parsing never touches the store
    - A malformed identifier yields Failure(MALFORMED_ID), never NOT_FOUND
"""

from uuid import UUID

from fitness_api.core.errors import ErrorKind
from fitness_api.core.outcome import Failure, Ok, Outcome


def parse_entity_id(raw: str, resource: str) -> Outcome[UUID]:
    """Parse a UUID path segment; `resource` names the entity in the error."""
    try:
        return Ok(UUID(raw))
    except ValueError:
        return Failure(ErrorKind.MALFORMED_ID, f"Invalid {resource} ID")
