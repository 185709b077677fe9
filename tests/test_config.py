"""Tests for ContextOptions."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

import tgcontext
from tgcontext.config import ContextOptions


class TestContextOptions:
    def test_defaults(self):
        options = ContextOptions()
        assert options.channel_mode is False
        assert options.username is None

    def test_username_strips_at_sign(self):
        assert ContextOptions(username="@my_bot").username == "my_bot"

    def test_blank_username_becomes_none(self):
        assert ContextOptions(username="  ").username is None

    def test_frozen(self):
        options = ContextOptions()
        with pytest.raises(ValidationError):
            options.channel_mode = True  # type: ignore[misc]

    def test_unknown_keys_rejected(self):
        with pytest.raises(ValidationError):
            ContextOptions(channelMode=True)  # type: ignore[call-arg]

    def test_validated_from_a_mapping(self):
        options = ContextOptions.model_validate({"channel_mode": True, "username": "@bot"})
        assert options == ContextOptions(channel_mode=True, username="bot")

    def test_invalid_value_raises(self):
        with pytest.raises(ValidationError):
            ContextOptions(channel_mode="sometimes")  # type: ignore[arg-type]

    def test_options_are_only_passed_in(self):
        assert "ContextOptions" in tgcontext.__all__
        assert not hasattr(tgcontext, "load_options")
