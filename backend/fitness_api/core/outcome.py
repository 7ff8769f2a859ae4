"""Outcome: explicit success/failure values returned by store operations.

Invariants:
    - A store operation returns exactly one of Ok(value) or Failure(kind, message)
    - Failure.detail holds raw store text; it is never shown to clients unless
      the boundary layer is configured to expose it
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from fitness_api.core.errors import ErrorKind, http_status_for

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Failure:
    kind: ErrorKind
    message: str
    detail: str | None = None

    @property
    def http_status(self) -> int:
        return http_status_for(self.kind)


Outcome = Union[Ok[T], Failure]


def not_found(resource: str) -> Failure:
    return Failure(ErrorKind.NOT_FOUND, f"{resource.capitalize()} not found")
