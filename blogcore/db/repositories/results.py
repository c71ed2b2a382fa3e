"""Outcome of a create call: the entity was persisted, or the draft was refused."""
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Created(Generic[T]):
    entity: T
    created: ClassVar[bool] = True


@dataclass(frozen=True)
class Rejected(Generic[T]):
    """The draft is returned untouched and nothing was written."""

    entity: T
    reason: str
    created: ClassVar[bool] = False


CreateResult = Union[Created, Rejected]
