"""Update classification.

Maps a raw update onto one primary update type and, for messages, the
ordered list of content sub-types it carries. Runs once per update when the
context is built; the result never changes afterwards.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from loguru import logger

from tgcontext.errors import ClassificationError
from tgcontext.taxonomy import MESSAGE_SUB_TYPES, UPDATE_TYPES, UpdateType, sub_type_label


@dataclass(frozen=True, slots=True)
class Classification:
    """Primary update type plus ordered message sub-types."""

    update_type: str
    sub_types: tuple[str, ...] = ()

    def describe(self) -> str:
        return f"{self.update_type}::{','.join(self.sub_types)}"


def _has(obj: Mapping[str, Any], key: str) -> bool:
    # Bot API payloads omit absent fields; an explicit null counts as absent.
    return obj.get(key) is not None


def classify(update: Mapping[str, Any], *, channel_mode: bool = False) -> Classification:
    """Classify a raw update.

    The first entry of ``UPDATE_TYPES`` present in the update wins, so a
    malformed update carrying two type fields resolves deterministically.
    Sub-types are collected for ``message`` updates, and for ``channel_post``
    updates when *channel_mode* is enabled.

    Raises:
        ClassificationError: The update is not a mapping or carries no
            known update type.
    """
    if not isinstance(update, Mapping):
        raise ClassificationError(())

    update_type = next((key for key in UPDATE_TYPES if _has(update, key)), None)
    if update_type is None:
        raise ClassificationError(update.keys())

    sub_types: tuple[str, ...] = ()
    if update_type == UpdateType.MESSAGE or (channel_mode and update_type == UpdateType.CHANNEL_POST):
        payload = update[update_type]
        if isinstance(payload, Mapping):
            sub_types = tuple(sub_type_label(key) for key in MESSAGE_SUB_TYPES if _has(payload, key))

    result = Classification(update_type=update_type, sub_types=sub_types)
    logger.debug("Classified update {} as {}", update.get("update_id"), result.describe())
    return result
