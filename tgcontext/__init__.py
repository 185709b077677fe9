"""Classification and request-scoped context for Telegram Bot API updates."""

from loguru import logger

from tgcontext.classifier import Classification, classify
from tgcontext.config import ContextOptions
from tgcontext.context import UpdateContext
from tgcontext.dispatch import DISPATCH_BY_NAME, DISPATCH_TABLE, DispatchSpec, Scope
from tgcontext.errors import ClassificationError, ContextError, PreconditionError
from tgcontext.taxonomy import MESSAGE_SUB_TYPES, SUB_TYPE_ALIASES, UPDATE_TYPES, UpdateType

# Silent until the application calls logger.enable("tgcontext").
logger.disable("tgcontext")

__all__ = [
    "DISPATCH_BY_NAME",
    "DISPATCH_TABLE",
    "MESSAGE_SUB_TYPES",
    "SUB_TYPE_ALIASES",
    "UPDATE_TYPES",
    "Classification",
    "ClassificationError",
    "ContextError",
    "ContextOptions",
    "DispatchSpec",
    "PreconditionError",
    "Scope",
    "UpdateContext",
    "UpdateType",
    "classify",
]
