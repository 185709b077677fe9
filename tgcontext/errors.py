"""Exceptions raised by the update context.

Both errors are local contract violations and are raised synchronously to
the immediate caller. Failures coming out of the outbound invoker are not
represented here: they propagate unchanged.
"""

from __future__ import annotations

from collections.abc import Iterable


class ContextError(Exception):
    """Base class for all update context errors."""

    def __init__(
        self,
        message: str,
        *,
        update_type: str = "",
        sub_types: Iterable[str] = (),
    ) -> None:
        self.update_type = update_type
        self.sub_types = tuple(sub_types)
        super().__init__(message)


class ClassificationError(ContextError):
    """The update matched none of the known update types."""

    def __init__(self, keys: Iterable[str]) -> None:
        self.keys = tuple(keys)
        shown = ", ".join(self.keys) or "<empty>"
        super().__init__(f"Unsupported update: no known update type among keys [{shown}]")


class PreconditionError(ContextError):
    """A shortcut needs a chat, sender, query or message the update lacks."""

    def __init__(self, method: str, *, update_type: str, sub_types: Iterable[str] = ()) -> None:
        self.method = method
        sub_types = tuple(sub_types)
        super().__init__(
            f'"{method}" isn\'t available for "{update_type}::{",".join(sub_types)}"',
            update_type=update_type,
            sub_types=sub_types,
        )
