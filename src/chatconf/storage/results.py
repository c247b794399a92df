"""Outcome of reading a configuration source.

Readers never raise for a missing or unreadable source. They return one of
the result types below so the details stay available for logging, and the
resolver collapses anything but :class:`Loaded` to "no configuration".
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Generic, Optional, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Loaded(Generic[T]):
    """The source was read and parsed."""

    path: Path
    value: T


@dataclass(frozen=True)
class Missing:
    """The source file does not exist."""

    path: Path


@dataclass(frozen=True)
class Corrupt:
    """The source file exists but could not be read or parsed."""

    path: Path
    details: str


LoadResult = Union[Loaded[T], Missing, Corrupt]


def value_or_none(result: LoadResult[T]) -> Optional[T]:
    """Return the loaded value, or None for a missing or corrupt source."""
    if isinstance(result, Loaded):
        return result.value
    return None
