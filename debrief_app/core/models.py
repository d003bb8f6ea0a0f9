"""Domain data models for incidents, issues, and fetch outcomes."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Incident:
    number: int
    title: str
    status: str
    url: str


@dataclass(frozen=True, slots=True)
class IssueModel:
    key: str
    permalink: str
    summary: str | None = None
    status: str | None = None
    assignee: str | None = None


@dataclass(frozen=True, slots=True)
class FetchResult(Generic[T]):
    """Records from one source query, or an empty result plus its cause."""

    items: tuple[T, ...] = field(default_factory=tuple)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def empty(cls, cause: str) -> FetchResult[T]:
        return cls(items=(), error=cause)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)
