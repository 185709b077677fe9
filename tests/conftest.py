"""Shared fixtures for the tgcontext test suite.

Updates are plain dicts shaped like Bot API JSON. The outbound invoker is an
AsyncMock, so every operation attribute is an awaitable mock that records
the arguments it was called with.
"""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock

import pytest


@pytest.fixture
def invoker() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def message_update() -> dict[str, Any]:
    return {
        "update_id": 1,
        "message": {
            "message_id": 10,
            "chat": {"id": 5, "type": "private"},
            "from": {"id": 7, "is_bot": False, "first_name": "Ada"},
            "text": "hi",
        },
    }


@pytest.fixture
def callback_update() -> dict[str, Any]:
    return {
        "update_id": 2,
        "callback_query": {
            "id": "cbq-1",
            "from": {"id": 8, "is_bot": False, "first_name": "Bob"},
            "data": "vote:up",
            "message": {
                "message_id": 42,
                "chat": {"id": -100, "type": "supergroup"},
                "text": "Vote!",
            },
        },
    }


@pytest.fixture
def inline_callback_update() -> dict[str, Any]:
    return {
        "update_id": 3,
        "callback_query": {
            "id": "cbq-2",
            "from": {"id": 8, "is_bot": False, "first_name": "Bob"},
            "inline_message_id": "inl-9",
            "data": "more",
        },
    }


@pytest.fixture
def inline_query_update() -> dict[str, Any]:
    return {
        "update_id": 4,
        "inline_query": {
            "id": "iq-1",
            "from": {"id": 9, "is_bot": False, "first_name": "Cy"},
            "query": "cats",
            "offset": "",
        },
    }


@pytest.fixture
def channel_post_update() -> dict[str, Any]:
    return {
        "update_id": 5,
        "channel_post": {
            "message_id": 3,
            "chat": {"id": -200, "type": "channel", "title": "News"},
            "text": "Breaking",
            "photo": [{"file_id": "p1", "width": 90, "height": 90}],
        },
    }
