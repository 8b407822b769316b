"""Core types for CLI - immutable data structures and Result type."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TypeVar, Generic, Union, Any

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful result containing a value."""

    value: T

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False


@dataclass(frozen=True)
class Failure:
    """Failed result containing an error message.

    ``kind`` classifies the failure so display code can pick suggestions
    (e.g. ``"not_found"``, ``"credential_invalid"``).
    """

    error: str
    details: dict[str, Any] | None = None
    kind: str | None = None

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True


# Result type - either Success[T] or Failure
Result = Union[Success[T], Failure]


@dataclass(frozen=True)
class SavedOutput:
    """Where a finished generation was written."""

    output_path: Path
    title: str
    citation_count: int = 0
    metadata: dict = field(default_factory=dict)
