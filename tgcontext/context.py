"""Request-scoped context for a single Bot API update.

``UpdateContext`` wraps one raw update together with the outbound invoker
(the object performing the actual API calls). It classifies the update once
at construction, exposes the relevant sub-objects through read-only
properties, and offers shortcut methods that fill in the chat, sender,
query or message identifiers the update implies before delegating.

Shortcuts resolve and guard synchronously: a missing chat, sender or query
raises ``PreconditionError`` at call time, before anything reaches the
invoker. The invoker's awaitable is returned untouched, so transport
failures surface unchanged when the caller awaits it.

Typical use inside a handler::

    ctx = UpdateContext(update, bot_api, ContextOptions(username="my_bot"))
    if "text" in ctx.sub_types:
        await ctx.reply(f"You said: {ctx.message['text']}")

One context is built per update and discarded after handling. Read
accessors are pure and may be called any number of times; ``state`` is the
only mutable slot and is not synchronized.
"""

from __future__ import annotations

from collections.abc import Awaitable, Mapping
from typing import Any

from tgcontext.classifier import Classification, classify
from tgcontext.config import ContextOptions
from tgcontext.dispatch import DISPATCH_BY_NAME, make_action, resolve_identifiers
from tgcontext.guard import require
from tgcontext.resolution import (
    resolve_callback_message,
    resolve_chat,
    resolve_inline_message_id,
    resolve_passport_data,
    resolve_sender,
)


class UpdateContext:
    """Classified update plus guarded shortcuts onto the outbound invoker.

    Most shortcut methods (``reply``, ``reply_with_photo``, ``answer_cb_query``,
    ``edit_message_text``, ...) are built by ``make_action`` from their
    ``DISPATCH_TABLE`` row; the ones with extra logic are written out by hand.
    """

    __slots__ = ("_update", "_invoker", "_options", "_classification", "_state", "bot_info")

    def __init__(
        self,
        update: Mapping[str, Any],
        invoker: Any,
        options: ContextOptions | None = None,
    ) -> None:
        self._options = options or ContextOptions()
        self._classification = classify(update, channel_mode=self._options.channel_mode)
        self._update = update
        self._invoker = invoker
        self._state: dict[str, Any] | None = None
        self.bot_info: Mapping[str, Any] | None = None

    def __repr__(self) -> str:
        return f"UpdateContext({self._classification.describe()!r})"

    # ── Classification ──

    @property
    def update(self) -> Mapping[str, Any]:
        return self._update

    @property
    def classification(self) -> Classification:
        return self._classification

    @property
    def update_type(self) -> str:
        return self._classification.update_type

    @property
    def sub_types(self) -> tuple[str, ...]:
        return self._classification.sub_types

    # ── Collaborators and options ──

    @property
    def invoker(self) -> Any:
        return self._invoker

    @property
    def telegram(self) -> Any:
        """Alias of ``invoker``."""
        return self._invoker

    @property
    def options(self) -> ContextOptions:
        return self._options

    @property
    def me(self) -> str | None:
        """The bot's configured username."""
        return self._options.username

    @property
    def webhook_reply(self) -> bool:
        return self._invoker.webhook_reply

    @webhook_reply.setter
    def webhook_reply(self, enable: bool) -> None:
        self._invoker.webhook_reply = enable

    # ── Update payloads ──

    @property
    def message(self) -> Mapping[str, Any] | None:
        return self._update.get("message")

    @property
    def edited_message(self) -> Mapping[str, Any] | None:
        return self._update.get("edited_message")

    @property
    def channel_post(self) -> Mapping[str, Any] | None:
        return self._update.get("channel_post")

    @property
    def edited_channel_post(self) -> Mapping[str, Any] | None:
        return self._update.get("edited_channel_post")

    @property
    def callback_query(self) -> Mapping[str, Any] | None:
        return self._update.get("callback_query")

    @property
    def inline_query(self) -> Mapping[str, Any] | None:
        return self._update.get("inline_query")

    @property
    def chosen_inline_result(self) -> Mapping[str, Any] | None:
        return self._update.get("chosen_inline_result")

    @property
    def shipping_query(self) -> Mapping[str, Any] | None:
        return self._update.get("shipping_query")

    @property
    def pre_checkout_query(self) -> Mapping[str, Any] | None:
        return self._update.get("pre_checkout_query")

    @property
    def poll(self) -> Mapping[str, Any] | None:
        return self._update.get("poll")

    @property
    def poll_answer(self) -> Mapping[str, Any] | None:
        return self._update.get("poll_answer")

    # ── Resolved values ──

    @property
    def chat(self) -> Mapping[str, Any] | None:
        return resolve_chat(self._update)

    @property
    def from_user(self) -> Mapping[str, Any] | None:
        """The update's sender (the Bot API ``from`` field)."""
        return resolve_sender(self._update)

    @property
    def callback_message(self) -> Mapping[str, Any] | None:
        return resolve_callback_message(self._update)

    @property
    def inline_message_id(self) -> str | None:
        return resolve_inline_message_id(self._update)

    @property
    def passport_data(self) -> Mapping[str, Any] | None:
        return resolve_passport_data(self._update)

    # ── Scoped state ──

    @property
    def state(self) -> dict[str, Any]:
        """Free-form per-update storage for middleware; created on first use."""
        if self._state is None:
            self._state = {}
        return self._state

    @state.setter
    def state(self, value: Mapping[str, Any] | None) -> None:
        self._state = dict(value or {})

    # ── Query shortcuts ──

    answer_inline_query = make_action(DISPATCH_BY_NAME["answer_inline_query"])
    answer_cb_query = make_action(DISPATCH_BY_NAME["answer_cb_query"])
    answer_game_query = make_action(DISPATCH_BY_NAME["answer_game_query"])
    answer_shipping_query = make_action(DISPATCH_BY_NAME["answer_shipping_query"])
    answer_pre_checkout_query = make_action(DISPATCH_BY_NAME["answer_pre_checkout_query"])

    # ── Edit shortcuts ──

    edit_message_text = make_action(DISPATCH_BY_NAME["edit_message_text"])
    edit_message_caption = make_action(DISPATCH_BY_NAME["edit_message_caption"])
    edit_message_media = make_action(DISPATCH_BY_NAME["edit_message_media"])
    edit_message_reply_markup = make_action(DISPATCH_BY_NAME["edit_message_reply_markup"])
    edit_message_live_location = make_action(DISPATCH_BY_NAME["edit_message_live_location"])
    stop_message_live_location = make_action(DISPATCH_BY_NAME["stop_message_live_location"])

    # ── Chat shortcuts ──

    reply = make_action(DISPATCH_BY_NAME["reply"])
    get_chat = make_action(DISPATCH_BY_NAME["get_chat"])
    export_chat_invite_link = make_action(DISPATCH_BY_NAME["export_chat_invite_link"])
    kick_chat_member = make_action(DISPATCH_BY_NAME["kick_chat_member"])
    unban_chat_member = make_action(DISPATCH_BY_NAME["unban_chat_member"])
    restrict_chat_member = make_action(DISPATCH_BY_NAME["restrict_chat_member"])
    promote_chat_member = make_action(DISPATCH_BY_NAME["promote_chat_member"])
    set_chat_administrator_custom_title = make_action(DISPATCH_BY_NAME["set_chat_administrator_custom_title"])
    set_chat_photo = make_action(DISPATCH_BY_NAME["set_chat_photo"])
    delete_chat_photo = make_action(DISPATCH_BY_NAME["delete_chat_photo"])
    set_chat_title = make_action(DISPATCH_BY_NAME["set_chat_title"])
    set_chat_description = make_action(DISPATCH_BY_NAME["set_chat_description"])
    pin_chat_message = make_action(DISPATCH_BY_NAME["pin_chat_message"])
    unpin_chat_message = make_action(DISPATCH_BY_NAME["unpin_chat_message"])
    leave_chat = make_action(DISPATCH_BY_NAME["leave_chat"])
    set_chat_permissions = make_action(DISPATCH_BY_NAME["set_chat_permissions"])
    get_chat_administrators = make_action(DISPATCH_BY_NAME["get_chat_administrators"])
    get_chat_member = make_action(DISPATCH_BY_NAME["get_chat_member"])
    get_chat_members_count = make_action(DISPATCH_BY_NAME["get_chat_members_count"])
    set_passport_data_errors = make_action(DISPATCH_BY_NAME["set_passport_data_errors"])
    reply_with_photo = make_action(DISPATCH_BY_NAME["reply_with_photo"])
    reply_with_media_group = make_action(DISPATCH_BY_NAME["reply_with_media_group"])
    reply_with_audio = make_action(DISPATCH_BY_NAME["reply_with_audio"])
    reply_with_dice = make_action(DISPATCH_BY_NAME["reply_with_dice"])
    reply_with_document = make_action(DISPATCH_BY_NAME["reply_with_document"])
    reply_with_sticker = make_action(DISPATCH_BY_NAME["reply_with_sticker"])
    reply_with_video = make_action(DISPATCH_BY_NAME["reply_with_video"])
    reply_with_animation = make_action(DISPATCH_BY_NAME["reply_with_animation"])
    reply_with_video_note = make_action(DISPATCH_BY_NAME["reply_with_video_note"])
    reply_with_invoice = make_action(DISPATCH_BY_NAME["reply_with_invoice"])
    reply_with_game = make_action(DISPATCH_BY_NAME["reply_with_game"])
    reply_with_voice = make_action(DISPATCH_BY_NAME["reply_with_voice"])
    reply_with_poll = make_action(DISPATCH_BY_NAME["reply_with_poll"])
    reply_with_quiz = make_action(DISPATCH_BY_NAME["reply_with_quiz"])
    stop_poll = make_action(DISPATCH_BY_NAME["stop_poll"])
    reply_with_chat_action = make_action(DISPATCH_BY_NAME["reply_with_chat_action"])
    reply_with_location = make_action(DISPATCH_BY_NAME["reply_with_location"])
    reply_with_venue = make_action(DISPATCH_BY_NAME["reply_with_venue"])
    reply_with_contact = make_action(DISPATCH_BY_NAME["reply_with_contact"])

    # ── Sticker shortcuts ──

    get_sticker_set = make_action(DISPATCH_BY_NAME["get_sticker_set"])
    set_chat_sticker_set = make_action(DISPATCH_BY_NAME["set_chat_sticker_set"])
    delete_chat_sticker_set = make_action(DISPATCH_BY_NAME["delete_chat_sticker_set"])
    set_sticker_position_in_set = make_action(DISPATCH_BY_NAME["set_sticker_position_in_set"])
    set_sticker_set_thumb = make_action(DISPATCH_BY_NAME["set_sticker_set_thumb"])
    delete_sticker_from_set = make_action(DISPATCH_BY_NAME["delete_sticker_from_set"])
    upload_sticker_file = make_action(DISPATCH_BY_NAME["upload_sticker_file"])
    create_new_sticker_set = make_action(DISPATCH_BY_NAME["create_new_sticker_set"])
    add_sticker_to_set = make_action(DISPATCH_BY_NAME["add_sticker_to_set"])

    # ── Bot shortcuts ──

    get_my_commands = make_action(DISPATCH_BY_NAME["get_my_commands"])
    set_my_commands = make_action(DISPATCH_BY_NAME["set_my_commands"])

    # ── Hand-written shortcuts ──

    def reply_with_markdown(self, text: str, **options: Any) -> Awaitable[Any]:
        return self.reply(text, **{"parse_mode": "Markdown", **options})

    def reply_with_markdown_v2(self, text: str, **options: Any) -> Awaitable[Any]:
        return self.reply(text, **{"parse_mode": "MarkdownV2", **options})

    def reply_with_html(self, text: str, **options: Any) -> Awaitable[Any]:
        return self.reply(text, **{"parse_mode": "HTML", **options})

    def delete_message(self, message_id: int | None = None) -> Awaitable[Any]:
        """Delete *message_id* in the current chat, or the update's own message."""
        (chat_id,) = resolve_identifiers(self, DISPATCH_BY_NAME["delete_message"])
        if message_id is not None:
            return self._invoker.delete_message(chat_id, message_id)
        message = require(self.message, "delete_message", self._classification)
        return self._invoker.delete_message(chat_id, message["message_id"])

    def forward_message(self, chat_id: int | str, **options: Any) -> Awaitable[Any]:
        """Forward the update's own message to *chat_id*."""
        from_chat_id, message_id = resolve_identifiers(self, DISPATCH_BY_NAME["forward_message"])
        return self._invoker.forward_message(chat_id, from_chat_id, message_id, **options)
