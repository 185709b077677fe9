"""Tests for update classification and the variant taxonomy."""

from __future__ import annotations

import pytest

from tgcontext.classifier import Classification, classify
from tgcontext.errors import ClassificationError
from tgcontext.taxonomy import MESSAGE_SUB_TYPES, SUB_TYPE_ALIASES, UPDATE_TYPES, UpdateType, sub_type_label


class TestTaxonomy:
    def test_update_types_follow_enum_order(self):
        assert UPDATE_TYPES[0] == "callback_query"
        assert UPDATE_TYPES[-1] == "poll_answer"
        assert len(UPDATE_TYPES) == len(set(UPDATE_TYPES)) == 11

    def test_sub_types_are_unique(self):
        assert len(MESSAGE_SUB_TYPES) == len(set(MESSAGE_SUB_TYPES))
        assert MESSAGE_SUB_TYPES[-1] == "forward_date"

    def test_only_forward_date_is_renamed(self):
        assert dict(SUB_TYPE_ALIASES) == {"forward_date": "forward"}
        assert sub_type_label("forward_date") == "forward"
        assert sub_type_label("photo") == "photo"


class TestPrimaryType:
    @pytest.mark.parametrize("update_type", UPDATE_TYPES)
    def test_single_field_is_its_own_type(self, update_type):
        result = classify({"update_id": 1, update_type: {"id": "x"}})
        assert result.update_type == update_type

    def test_earlier_declared_type_wins(self):
        # callback_query is declared before message
        update = {"message": {"text": "a"}, "callback_query": {"id": "q"}}
        assert classify(update).update_type == UpdateType.CALLBACK_QUERY

    def test_null_field_is_not_a_match(self):
        update = {"callback_query": None, "poll": {"id": "p"}}
        assert classify(update).update_type == "poll"

    def test_unknown_update_raises(self):
        with pytest.raises(ClassificationError) as exc_info:
            classify({"update_id": 3, "my_chat_member": {}})
        assert exc_info.value.keys == ("update_id", "my_chat_member")
        assert "my_chat_member" in str(exc_info.value)

    def test_empty_update_raises(self):
        with pytest.raises(ClassificationError, match="<empty>"):
            classify({})

    def test_non_mapping_raises(self):
        with pytest.raises(ClassificationError):
            classify(["message"])  # type: ignore[arg-type]


class TestSubTypes:
    def test_text_message(self, message_update):
        assert classify(message_update).sub_types == ("text",)

    def test_forwarded_text_uses_declaration_order_and_rename(self):
        update = {"message": {"message_id": 1, "forward_date": 1700000000, "text": "fwd"}}
        assert classify(update).sub_types == ("text", "forward")

    def test_sub_types_keep_declaration_order(self):
        update = {"message": {"document": {}, "photo": [], "voice": {}, "caption": "c"}}
        assert classify(update).sub_types == ("voice", "photo", "document")

    def test_channel_post_without_channel_mode(self, channel_post_update):
        result = classify(channel_post_update)
        assert result.update_type == "channel_post"
        assert result.sub_types == ()

    def test_channel_post_with_channel_mode(self, channel_post_update):
        result = classify(channel_post_update, channel_mode=True)
        assert result.sub_types == ("text", "photo")

    def test_edited_message_has_no_sub_types(self):
        update = {"edited_message": {"message_id": 1, "text": "fixed"}}
        assert classify(update, channel_mode=True).sub_types == ()

    def test_non_message_types_have_no_sub_types(self, callback_update):
        assert classify(callback_update).sub_types == ()


class TestClassification:
    def test_describe(self):
        assert Classification("message", ("text", "forward")).describe() == "message::text,forward"
        assert Classification("inline_query").describe() == "inline_query::"

    def test_is_immutable(self, message_update):
        result = classify(message_update)
        with pytest.raises(AttributeError):
            result.update_type = "poll"  # type: ignore[misc]

    def test_classification_is_deterministic(self, message_update):
        assert classify(message_update) == classify(message_update)
