"""Tests for the precondition guard and error types."""

from __future__ import annotations

import pytest

from tgcontext.classifier import Classification
from tgcontext.errors import ContextError, PreconditionError
from tgcontext.guard import require, require_any

_MESSAGE = Classification("message", ("text", "forward"))


class TestRequire:
    def test_returns_present_value(self):
        chat = {"id": 5}
        assert require(chat, "reply", _MESSAGE) is chat

    def test_falsy_values_are_present(self):
        assert require(0, "reply", _MESSAGE) == 0
        assert require("", "reply", _MESSAGE) == ""

    def test_none_raises_with_diagnostics(self):
        with pytest.raises(PreconditionError) as exc_info:
            require(None, "reply", _MESSAGE)
        err = exc_info.value
        assert err.method == "reply"
        assert err.update_type == "message"
        assert err.sub_types == ("text", "forward")
        assert str(err) == '"reply" isn\'t available for "message::text,forward"'

    def test_is_a_context_error(self):
        with pytest.raises(ContextError):
            require(None, "leave_chat", Classification("poll"))


class TestRequireAny:
    def test_one_present_passes(self):
        require_any((None, "inl-1"), "edit_message_text", _MESSAGE)

    def test_all_absent_raises(self):
        with pytest.raises(PreconditionError, match="edit_message_text"):
            require_any((None, None), "edit_message_text", _MESSAGE)
