"""Resolution chains for the "current" chat, sender and message.

Different update types carry the same concept in structurally different
places: the chat of a callback query lives on its embedded message, the
sender of an inline query on the query itself, and so on. Each chain below
is a fixed-priority probe list; the first source present in the update is
used, and the requested field is read from it.

All functions are pure functions of the raw update, so the context can call
them lazily and repeatedly.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

Update = Mapping[str, Any]
SourcePath = tuple[str, ...]

CHAT_SOURCES: tuple[SourcePath, ...] = (
    ("message",),
    ("edited_message",),
    ("callback_query", "message"),
    ("channel_post",),
    ("edited_channel_post",),
)

# Channel posts rarely carry "from" but are probed all the same.
SENDER_SOURCES: tuple[SourcePath, ...] = (
    ("message",),
    ("edited_message",),
    ("callback_query",),
    ("inline_query",),
    ("channel_post",),
    ("edited_channel_post",),
    ("shipping_query",),
    ("pre_checkout_query",),
    ("chosen_inline_result",),
)

INLINE_MESSAGE_ID_SOURCES: tuple[SourcePath, ...] = (
    ("callback_query",),
    ("chosen_inline_result",),
)


def _get(obj: Any, key: str) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(key)
    return None


def lookup(update: Update, path: SourcePath) -> Any:
    """Follow *path* through nested objects, returning None on any gap."""
    node: Any = update
    for key in path:
        node = _get(node, key)
        if node is None:
            return None
    return node


def first_present(update: Update, sources: tuple[SourcePath, ...]) -> Any:
    """Return the first source object present in *update*, or None."""
    for path in sources:
        node = lookup(update, path)
        if node is not None:
            return node
    return None


def resolve_chat(update: Update) -> Mapping[str, Any] | None:
    return _get(first_present(update, CHAT_SOURCES), "chat")


def resolve_sender(update: Update) -> Mapping[str, Any] | None:
    return _get(first_present(update, SENDER_SOURCES), "from")


def resolve_inline_message_id(update: Update) -> str | None:
    return _get(first_present(update, INLINE_MESSAGE_ID_SOURCES), "inline_message_id")


def resolve_callback_message(update: Update) -> Mapping[str, Any] | None:
    """The message a callback query's button was attached to, if any."""
    return lookup(update, ("callback_query", "message"))


def resolve_passport_data(update: Update) -> Mapping[str, Any] | None:
    return lookup(update, ("message", "passport_data"))
