"""Update and message variant taxonomy.

The Bot API delivers every update as an object with exactly one populated
top-level field naming its type. Messages additionally carry any number of
content fields (text, photo, sticker, ...) at the same time.

Order matters in both tuples: update types are probed in declaration order
(the first present key wins), and message sub-types are reported in
declaration order. New platform kinds are appended here and nowhere else.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum


class UpdateType(StrEnum):
    """Primary update kinds, in probe order."""

    CALLBACK_QUERY = "callback_query"
    CHANNEL_POST = "channel_post"
    CHOSEN_INLINE_RESULT = "chosen_inline_result"
    EDITED_CHANNEL_POST = "edited_channel_post"
    EDITED_MESSAGE = "edited_message"
    INLINE_QUERY = "inline_query"
    SHIPPING_QUERY = "shipping_query"
    PRE_CHECKOUT_QUERY = "pre_checkout_query"
    MESSAGE = "message"
    POLL = "poll"
    POLL_ANSWER = "poll_answer"


UPDATE_TYPES: tuple[str, ...] = tuple(member.value for member in UpdateType)

MESSAGE_SUB_TYPES: tuple[str, ...] = (
    "voice",
    "video_note",
    "video",
    "animation",
    "venue",
    "text",
    "supergroup_chat_created",
    "successful_payment",
    "sticker",
    "pinned_message",
    "photo",
    "new_chat_title",
    "new_chat_photo",
    "new_chat_members",
    "migrate_to_chat_id",
    "migrate_from_chat_id",
    "location",
    "left_chat_member",
    "invoice",
    "group_chat_created",
    "game",
    "dice",
    "document",
    "delete_chat_photo",
    "contact",
    "channel_chat_created",
    "audio",
    "connected_website",
    "passport_data",
    "poll",
    "forward_date",
)

# Raw message keys reported under a friendlier label.
SUB_TYPE_ALIASES: Mapping[str, str] = {
    "forward_date": "forward",
}


def sub_type_label(key: str) -> str:
    """Return the reported label for a raw message key."""
    return SUB_TYPE_ALIASES.get(key, key)
