"""Unit tests for web app URL helpers."""

from __future__ import annotations

import pytest

from twist.sdk.utils import get_full_twist_url, get_twist_url
from twist.sdk.utils.url_helpers import (
    get_channel_url,
    get_comment_url,
    get_conversation_url,
    get_inbox_url,
    get_message_url,
    get_messages_root_url,
    get_saved_thread_url,
    get_saved_threads_root_url,
    get_search_query_url,
    get_search_root_url,
    get_settings_url,
    get_team_members_root_url,
    get_thread_url,
    get_threads_root_url,
    get_user_profile_url,
)


class TestGetTwistUrl:
    @pytest.mark.parametrize(
        "params,expected",
        [
            ({}, "/a/1/"),
            ({"channel_id": 2}, "/a/1/ch/2/"),
            ({"channel_id": 2, "thread_id": 3}, "/a/1/ch/2/t/3/"),
            ({"channel_id": 2, "thread_id": 3, "comment_id": 4}, "/a/1/ch/2/t/3/c/4"),
            ({"channel_id": 2, "thread_id": 3, "comment_id": -1}, "/a/1/ch/2/t/3/"),
            ({"channel_id": 2, "thread_id": -5}, "/a/1/ch/2/compose/-5/"),
            ({"thread_id": 3}, "/a/1/inbox/t/3/"),
            ({"conversation_id": 6}, "/a/1/msg/6/"),
            ({"conversation_id": 6, "message_id": 7}, "/a/1/msg/6/m/7"),
            ({"user_id": 8}, "/a/1/people/u/8"),
        ],
    )
    def test_paths(self, params, expected):
        assert get_twist_url(1, **params) == expected

    def test_full_url(self):
        assert get_full_twist_url(1, channel_id=2) == "https://twist.com/a/1/ch/2/"
        assert get_full_twist_url(1, base_url="https://staging.twist.com") == (
            "https://staging.twist.com/a/1/"
        )


class TestNamedHelpers:
    def test_thread_draft(self):
        assert get_thread_url(1, 2, -3) == "/a/1/ch/2/compose/-3"
        assert get_thread_url(1, 2, 3) == "/a/1/ch/2/t/3/"

    def test_misc(self):
        assert get_comment_url(1, 2, 3, 4) == "/a/1/ch/2/t/3/c/4"
        assert get_message_url(1, 6, 7) == "/a/1/msg/6/m/7"
        assert get_inbox_url(1) == "/a/1/inbox"
        assert get_inbox_url(1, "done") == "/a/1/inbox/done"
        assert get_user_profile_url(1, 8) == "/a/1/people/u/8"
        assert get_settings_url(1) == "/a/1/settings"
        assert get_settings_url(1, "profile") == "/a/1/settings/profile"
        assert get_search_query_url(1, "hello%20world") == "/a/1/search?q=hello world"

    def test_section_roots(self):
        assert get_channel_url(1, 2) == "/a/1/ch/2/"
        assert get_conversation_url(1, 6) == "/a/1/msg/6/"
        assert get_threads_root_url(1) == "/a/1/ch"
        assert get_messages_root_url(1) == "/a/1/msg"
        assert get_saved_threads_root_url(1) == "/a/1/saved"
        assert get_saved_thread_url(1, 3) == "/a/1/saved/t/3"
        assert get_search_root_url(1) == "/a/1/search"
        assert get_team_members_root_url(1) == "/a/1/people/u"
