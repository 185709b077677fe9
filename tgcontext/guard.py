"""Precondition guard shared by every context shortcut."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeVar

from tgcontext.classifier import Classification
from tgcontext.errors import PreconditionError

T = TypeVar("T")


def require(value: T | None, method: str, classification: Classification) -> T:
    """Return *value* unchanged, or raise if it is absent for this update.

    The error names the shortcut and the update's type and sub-types so the
    failure explains itself, e.g.
    ``"reply" isn't available for "inline_query::"``.
    """
    if value is None:
        raise PreconditionError(
            method,
            update_type=classification.update_type,
            sub_types=classification.sub_types,
        )
    return value


def require_any(values: Iterable[object], method: str, classification: Classification) -> None:
    """Raise unless at least one of *values* is present."""
    if all(value is None for value in values):
        raise PreconditionError(
            method,
            update_type=classification.update_type,
            sub_types=classification.sub_types,
        )
