"""Dispatch table for context shortcuts.

Each row maps a shortcut method on ``UpdateContext`` to the outbound invoker
operation it delegates to, the Bot API method behind that operation, and
the scope that decides which identifiers are resolved, guarded and passed
as leading positional arguments.

Collaborators match on these names, so rows are data and must stay stable.
Rows marked ``custom`` are implemented by hand on the context; all others
are declared in its class body with ``make_action``.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Any

from tgcontext.guard import require, require_any

if TYPE_CHECKING:
    from tgcontext.context import UpdateContext


class Scope(StrEnum):
    """Which contextual identifiers a shortcut needs."""

    CHAT = "chat"
    SENDER = "sender"
    MESSAGE = "message"
    INLINE_QUERY = "inline_query"
    CALLBACK_QUERY = "callback_query"
    SHIPPING_QUERY = "shipping_query"
    PRE_CHECKOUT_QUERY = "pre_checkout_query"
    EDIT = "edit"
    NONE = "none"


_INJECTS: dict[Scope, tuple[str, ...]] = {
    Scope.CHAT: ("chat_id",),
    Scope.SENDER: ("user_id",),
    Scope.MESSAGE: ("from_chat_id", "message_id"),
    Scope.INLINE_QUERY: ("inline_query_id",),
    Scope.CALLBACK_QUERY: ("callback_query_id",),
    Scope.SHIPPING_QUERY: ("shipping_query_id",),
    Scope.PRE_CHECKOUT_QUERY: ("pre_checkout_query_id",),
    Scope.EDIT: ("chat_id", "message_id", "inline_message_id"),
    Scope.NONE: (),
}


@dataclass(frozen=True, slots=True)
class DispatchSpec:
    """One shortcut: context method -> invoker operation."""

    name: str
    operation: str
    api_method: str
    scope: Scope
    custom: bool = False

    @property
    def injects(self) -> tuple[str, ...]:
        """Names of the identifiers the context supplies for this shortcut."""
        return _INJECTS[self.scope]


def _spec(name: str, operation: str, api_method: str, scope: Scope, *, custom: bool = False) -> DispatchSpec:
    return DispatchSpec(name=name, operation=operation, api_method=api_method, scope=scope, custom=custom)


DISPATCH_TABLE: tuple[DispatchSpec, ...] = (
    # Queries
    _spec("answer_inline_query", "answer_inline_query", "answerInlineQuery", Scope.INLINE_QUERY),
    _spec("answer_cb_query", "answer_cb_query", "answerCallbackQuery", Scope.CALLBACK_QUERY),
    _spec("answer_game_query", "answer_game_query", "answerCallbackQuery", Scope.CALLBACK_QUERY),
    _spec("answer_shipping_query", "answer_shipping_query", "answerShippingQuery", Scope.SHIPPING_QUERY),
    _spec(
        "answer_pre_checkout_query",
        "answer_pre_checkout_query",
        "answerPreCheckoutQuery",
        Scope.PRE_CHECKOUT_QUERY,
    ),
    # Edits
    _spec("edit_message_text", "edit_message_text", "editMessageText", Scope.EDIT),
    _spec("edit_message_caption", "edit_message_caption", "editMessageCaption", Scope.EDIT),
    _spec("edit_message_media", "edit_message_media", "editMessageMedia", Scope.EDIT),
    _spec("edit_message_reply_markup", "edit_message_reply_markup", "editMessageReplyMarkup", Scope.EDIT),
    _spec("edit_message_live_location", "edit_message_live_location", "editMessageLiveLocation", Scope.EDIT),
    _spec("stop_message_live_location", "stop_message_live_location", "stopMessageLiveLocation", Scope.EDIT),
    # Chat
    _spec("reply", "send_message", "sendMessage", Scope.CHAT),
    _spec("get_chat", "get_chat", "getChat", Scope.CHAT),
    _spec("export_chat_invite_link", "export_chat_invite_link", "exportChatInviteLink", Scope.CHAT),
    _spec("kick_chat_member", "kick_chat_member", "kickChatMember", Scope.CHAT),
    _spec("unban_chat_member", "unban_chat_member", "unbanChatMember", Scope.CHAT),
    _spec("restrict_chat_member", "restrict_chat_member", "restrictChatMember", Scope.CHAT),
    _spec("promote_chat_member", "promote_chat_member", "promoteChatMember", Scope.CHAT),
    _spec(
        "set_chat_administrator_custom_title",
        "set_chat_administrator_custom_title",
        "setChatAdministratorCustomTitle",
        Scope.CHAT,
    ),
    _spec("set_chat_photo", "set_chat_photo", "setChatPhoto", Scope.CHAT),
    _spec("delete_chat_photo", "delete_chat_photo", "deleteChatPhoto", Scope.CHAT),
    _spec("set_chat_title", "set_chat_title", "setChatTitle", Scope.CHAT),
    _spec("set_chat_description", "set_chat_description", "setChatDescription", Scope.CHAT),
    _spec("pin_chat_message", "pin_chat_message", "pinChatMessage", Scope.CHAT),
    _spec("unpin_chat_message", "unpin_chat_message", "unpinChatMessage", Scope.CHAT),
    _spec("leave_chat", "leave_chat", "leaveChat", Scope.CHAT),
    _spec("set_chat_permissions", "set_chat_permissions", "setChatPermissions", Scope.CHAT),
    _spec("get_chat_administrators", "get_chat_administrators", "getChatAdministrators", Scope.CHAT),
    _spec("get_chat_member", "get_chat_member", "getChatMember", Scope.CHAT),
    _spec("get_chat_members_count", "get_chat_members_count", "getChatMembersCount", Scope.CHAT),
    _spec("set_passport_data_errors", "set_passport_data_errors", "setPassportDataErrors", Scope.SENDER),
    _spec("reply_with_photo", "send_photo", "sendPhoto", Scope.CHAT),
    _spec("reply_with_media_group", "send_media_group", "sendMediaGroup", Scope.CHAT),
    _spec("reply_with_audio", "send_audio", "sendAudio", Scope.CHAT),
    _spec("reply_with_dice", "send_dice", "sendDice", Scope.CHAT),
    _spec("reply_with_document", "send_document", "sendDocument", Scope.CHAT),
    _spec("reply_with_sticker", "send_sticker", "sendSticker", Scope.CHAT),
    _spec("reply_with_video", "send_video", "sendVideo", Scope.CHAT),
    _spec("reply_with_animation", "send_animation", "sendAnimation", Scope.CHAT),
    _spec("reply_with_video_note", "send_video_note", "sendVideoNote", Scope.CHAT),
    _spec("reply_with_invoice", "send_invoice", "sendInvoice", Scope.CHAT),
    _spec("reply_with_game", "send_game", "sendGame", Scope.CHAT),
    _spec("reply_with_voice", "send_voice", "sendVoice", Scope.CHAT),
    _spec("reply_with_poll", "send_poll", "sendPoll", Scope.CHAT),
    _spec("reply_with_quiz", "send_quiz", "sendPoll", Scope.CHAT),
    _spec("stop_poll", "stop_poll", "stopPoll", Scope.CHAT),
    _spec("reply_with_chat_action", "send_chat_action", "sendChatAction", Scope.CHAT),
    _spec("reply_with_location", "send_location", "sendLocation", Scope.CHAT),
    _spec("reply_with_venue", "send_venue", "sendVenue", Scope.CHAT),
    _spec("reply_with_contact", "send_contact", "sendContact", Scope.CHAT),
    # Stickers
    _spec("get_sticker_set", "get_sticker_set", "getStickerSet", Scope.NONE),
    _spec("set_chat_sticker_set", "set_chat_sticker_set", "setChatStickerSet", Scope.CHAT),
    _spec("delete_chat_sticker_set", "delete_chat_sticker_set", "deleteChatStickerSet", Scope.CHAT),
    _spec("set_sticker_position_in_set", "set_sticker_position_in_set", "setStickerPositionInSet", Scope.NONE),
    _spec("set_sticker_set_thumb", "set_sticker_set_thumb", "setStickerSetThumb", Scope.NONE),
    _spec("delete_sticker_from_set", "delete_sticker_from_set", "deleteStickerFromSet", Scope.NONE),
    _spec("upload_sticker_file", "upload_sticker_file", "uploadStickerFile", Scope.SENDER),
    _spec("create_new_sticker_set", "create_new_sticker_set", "createNewStickerSet", Scope.SENDER),
    _spec("add_sticker_to_set", "add_sticker_to_set", "addStickerToSet", Scope.SENDER),
    # Bot
    _spec("get_my_commands", "get_my_commands", "getMyCommands", Scope.NONE),
    _spec("set_my_commands", "set_my_commands", "setMyCommands", Scope.NONE),
    # Hand-written on UpdateContext
    _spec("reply_with_markdown", "send_message", "sendMessage", Scope.CHAT, custom=True),
    _spec("reply_with_markdown_v2", "send_message", "sendMessage", Scope.CHAT, custom=True),
    _spec("reply_with_html", "send_message", "sendMessage", Scope.CHAT, custom=True),
    _spec("delete_message", "delete_message", "deleteMessage", Scope.CHAT, custom=True),
    _spec("forward_message", "forward_message", "forwardMessage", Scope.MESSAGE, custom=True),
)

DISPATCH_BY_NAME: Mapping[str, DispatchSpec] = {spec.name: spec for spec in DISPATCH_TABLE}


def resolve_identifiers(ctx: UpdateContext, spec: DispatchSpec) -> tuple[Any, ...]:
    """Resolve and guard the leading identifiers for *spec*.

    Raises:
        PreconditionError: A required chat, sender, query or message is
            absent for the context's update.
    """
    scope = spec.scope
    name = spec.name
    classification = ctx.classification

    if scope is Scope.NONE:
        return ()
    if scope is Scope.CHAT:
        return (require(ctx.chat, name, classification)["id"],)
    if scope is Scope.SENDER:
        return (require(ctx.from_user, name, classification)["id"],)
    if scope is Scope.MESSAGE:
        message = require(ctx.message, name, classification)
        return (message["chat"]["id"], message["message_id"])
    if scope is Scope.EDIT:
        chat = ctx.chat
        callback_message = ctx.callback_message
        message_id = callback_message.get("message_id") if callback_message else None
        inline_message_id = ctx.inline_message_id
        require_any((message_id, inline_message_id), name, classification)
        return (chat["id"] if chat else None, message_id, inline_message_id)

    # The four query scopes share their name with the context accessor.
    query = require(getattr(ctx, scope.value), name, classification)
    return (query["id"],)


def make_action(spec: DispatchSpec) -> Callable[..., Awaitable[Any]]:
    """Build the context method for a table-driven shortcut.

    The guard runs synchronously when the method is called; the invoker's
    awaitable is returned as-is, so delegation failures surface when the
    caller awaits it.
    """

    def action(self: UpdateContext, *args: Any, **kwargs: Any) -> Awaitable[Any]:
        identifiers = resolve_identifiers(self, spec)
        return getattr(self.invoker, spec.operation)(*identifiers, *args, **kwargs)

    action.__name__ = spec.name
    action.__qualname__ = f"UpdateContext.{spec.name}"
    if spec.injects:
        action.__doc__ = f"Call ``{spec.operation}`` with {', '.join(spec.injects)} filled in from the update."
    else:
        action.__doc__ = f"Call ``{spec.operation}`` unchanged."
    return action
