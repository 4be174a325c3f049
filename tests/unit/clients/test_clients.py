"""Unit tests for resource clients."""

from __future__ import annotations

from datetime import UTC, datetime
from unittest.mock import AsyncMock, MagicMock

import pytest

from twist.sdk.clients import (
    BaseClient,
    ChannelsClient,
    CommentsClient,
    ConversationMessagesClient,
    ConversationsClient,
    GroupsClient,
    InboxClient,
    ReactionsClient,
    SearchClient,
    ThreadsClient,
    UsersClient,
    WorkspaceUsersClient,
    WorkspacesClient,
)
from twist.sdk.clients.base import compact, field_of, list_of
from twist.sdk.core import HttpMethod, UserType
from twist.sdk.models import Channel, Group, User, WorkspaceUser
from twist.sdk.runtime.batch import RequestDescriptor

V3 = "https://api.twist.com/api/v3/"
V4 = "https://api.twist.com/api/v4/"


def make_runner(result=None) -> MagicMock:
    runner = MagicMock()
    runner.run = AsyncMock(return_value=result)
    return runner


class TestBaseClient:
    """Test base URI handling and dispatch."""

    def test_default_base_uri(self):
        assert BaseClient(make_runner()).get_base_uri() == V3

    def test_custom_base_url(self):
        client = BaseClient(make_runner(), "https://staging.example.com/")
        assert client.get_base_uri() == "https://staging.example.com/api/v3/"
        assert client.get_base_uri("v4") == "https://staging.example.com/api/v4/"

    def test_version_override(self):
        assert BaseClient(make_runner(), version="v4").get_base_uri() == V4

    def test_batch_returns_descriptor_without_running(self):
        runner = make_runner()
        descriptor = UsersClient(runner).get_session_user(batch=True)

        assert isinstance(descriptor, RequestDescriptor)
        assert descriptor.method is HttpMethod.GET
        assert descriptor.url == "users/get_session_user"
        assert descriptor.response_validator == User.model_validate
        runner.run.assert_not_called()

    @pytest.mark.asyncio
    async def test_immediate_runs_through_runner(self):
        runner = make_runner(result="user")
        assert await UsersClient(runner).get_session_user() == "user"

        descriptor, base_uri = runner.run.call_args.args
        assert descriptor.url == "users/get_session_user"
        assert base_uri == V3


class TestValidators:
    def test_list_of(self):
        groups = list_of(Group)(
            [{"id": 1, "name": "g", "workspaceId": 2, "userIds": [], "version": 0}]
        )
        assert isinstance(groups[0], Group)

    def test_list_of_cached(self):
        assert list_of(Group).__self__ is list_of(Group).__self__

    def test_field_of(self):
        assert field_of("data")({"data": 4, "version": 1}) == 4
        with pytest.raises(ValueError):
            field_of("data")([])

    def test_compact(self):
        moment = datetime(1970, 1, 1, 0, 0, 30, tzinfo=UTC)
        assert compact(a=1, b=None, c=False, since=moment) == {"a": 1, "c": False, "since": 30}


class TestWorkspaceUsersClient:
    """Workspace user calls go to API v4."""

    @pytest.mark.asyncio
    async def test_uses_v4(self):
        runner = make_runner()
        await WorkspaceUsersClient(runner).get_user_by_id(1, 2)
        descriptor, base_uri = runner.run.call_args.args
        assert base_uri == V4
        assert descriptor.params == {"id": 1, "user_id": 2}
        assert descriptor.response_validator == WorkspaceUser.model_validate

    def test_get_workspace_users_params(self):
        client = WorkspaceUsersClient(make_runner())
        assert client.get_workspace_users(1, batch=True).params == {"id": 1}
        assert client.get_workspace_users(1, archived=False, batch=True).params == {
            "id": 1,
            "archived": False,
        }

    def test_add_user(self):
        descriptor = WorkspaceUsersClient(make_runner()).add_user(
            1, "a@example.com", user_type=UserType.GUEST, channel_ids=[3], batch=True
        )
        assert descriptor.method is HttpMethod.POST
        assert descriptor.url == "workspace_users/add"
        assert descriptor.params == {
            "id": 1,
            "email": "a@example.com",
            "user_type": "GUEST",
            "channel_ids": [3],
        }

    def test_update_and_remove(self):
        client = WorkspaceUsersClient(make_runner())
        assert client.update_user(1, UserType.ADMIN, user_id=2, batch=True).params == {
            "id": 1,
            "user_type": "ADMIN",
            "user_id": 2,
        }
        assert client.remove_user(1, email="x@y.z", batch=True).params == {
            "id": 1,
            "email": "x@y.z",
        }
        assert client.resend_invite(1, "x@y.z", batch=True).url == "workspace_users/resend_invite"
        assert client.get_user_local_time(1, 2, batch=True).url == "workspace_users/get_local_time"


class TestEndpointTable:
    """Each method maps onto the expected verb, path and parameters."""

    @pytest.mark.parametrize(
        "client_cls,name,args,method,url,params",
        [
            (WorkspacesClient, "get_workspaces", (), "GET", "workspaces/get", None),
            (WorkspacesClient, "get_workspace", (3,), "GET", "workspaces/getone", {"id": 3}),
            (ChannelsClient, "get_channels", (5,), "GET", "channels/get", {"workspace_id": 5}),
            (ChannelsClient, "archive_channel", (4,), "POST", "channels/archive", {"id": 4}),
            (
                ChannelsClient,
                "add_users",
                (4, [1, 2]),
                "POST",
                "channels/add_users",
                {"id": 4, "user_ids": [1, 2]},
            ),
            (
                ChannelsClient,
                "remove_user",
                (4, 1),
                "POST",
                "channels/remove_user",
                {"id": 4, "user_id": 1},
            ),
            (ThreadsClient, "get_thread", (9,), "GET", "threads/getone", {"id": 9}),
            (ThreadsClient, "star_thread", (9,), "POST", "threads/star", {"id": 9}),
            (
                ThreadsClient,
                "mark_all_read",
                (5,),
                "POST",
                "threads/mark_all_read",
                {"workspace_id": 5},
            ),
            (ThreadsClient, "get_unread", (5,), "GET", "threads/get_unread", {"workspace_id": 5}),
            (GroupsClient, "get_groups", (5,), "GET", "groups/get", {"workspace_id": 5}),
            (GroupsClient, "add_user", (2, 3), "POST", "groups/add_user", {"id": 2, "user_id": 3}),
            (
                ConversationsClient,
                "get_or_create_conversation",
                (5, [1, 2]),
                "POST",
                "conversations/get_or_create",
                {"workspace_id": 5, "user_ids": [1, 2]},
            ),
            (
                ConversationsClient,
                "unarchive_conversation",
                (7,),
                "POST",
                "conversations/unarchive",
                {"id": 7},
            ),
            (
                CommentsClient,
                "mark_position",
                (1, 2),
                "POST",
                "comments/mark_position",
                {"thread_id": 1, "comment_id": 2},
            ),
            (CommentsClient, "delete_comment", (2,), "POST", "comments/remove", {"id": 2}),
            (
                ConversationMessagesClient,
                "get_message",
                (8,),
                "GET",
                "conversation_messages/getone",
                {"id": 8},
            ),
            (InboxClient, "get_count", (5,), "GET", "inbox/get_count", {"workspace_id": 5}),
            (InboxClient, "archive_thread", (9,), "POST", "inbox/archive", {"id": 9}),
            (
                SearchClient,
                "search_thread",
                ("q", 9),
                "GET",
                "search/thread",
                {"query": "q", "thread_id": 9},
            ),
        ],
    )
    def test_descriptor(self, client_cls, name, args, method, url, params):
        descriptor = getattr(client_cls(make_runner()), name)(*args, batch=True)
        assert descriptor.method is HttpMethod(method)
        assert descriptor.url == url
        assert descriptor.params == params


class TestDateParameters:
    """Datetime arguments are sent as epoch seconds under the wire names."""

    MOMENT = datetime(2024, 1, 1, tzinfo=UTC)
    EPOCH = 1704067200

    def test_comments_from(self):
        descriptor = CommentsClient(make_runner()).get_comments(
            1, from_date=self.MOMENT, limit=5, batch=True
        )
        assert descriptor.params == {"thread_id": 1, "from": self.EPOCH, "limit": 5}

    def test_messages_newer_than(self):
        descriptor = ConversationMessagesClient(make_runner()).get_messages(
            2, newer_than=self.MOMENT, cursor="c", batch=True
        )
        assert descriptor.params == {
            "conversation_id": 2,
            "newer_than_ts": self.EPOCH,
            "cursor": "c",
        }

    def test_inbox_since(self):
        descriptor = InboxClient(make_runner()).get_inbox(5, since=self.MOMENT, batch=True)
        assert descriptor.params == {"workspace_id": 5, "since_ts_or_obj_idx": self.EPOCH}

    def test_threads_older_than(self):
        descriptor = ThreadsClient(make_runner()).get_threads(
            10, older_than=self.MOMENT, batch=True
        )
        assert descriptor.params == {"channel_id": 10, "older_than_ts": self.EPOCH}


class TestChannelsClient:
    def test_create_channel_omits_unset(self):
        descriptor = ChannelsClient(make_runner()).create_channel(
            5, "eng", public=False, user_ids=[1], batch=True
        )
        assert descriptor.params == {
            "workspace_id": 5,
            "name": "eng",
            "user_ids": [1],
            "public": False,
        }
        assert descriptor.response_validator == Channel.model_validate


class TestReactionsClient:
    """A reaction needs exactly one target."""

    def test_thread_target(self):
        descriptor = ReactionsClient(make_runner()).add("👍", thread_id=1, batch=True)
        assert descriptor.url == "reactions/add"
        assert descriptor.params == {"emoji": "👍", "thread_id": 1}

    def test_message_target(self):
        descriptor = ReactionsClient(make_runner()).remove(
            "🎉", conversation_message_id=3, batch=True
        )
        assert descriptor.url == "reactions/remove"
        assert descriptor.params == {"emoji": "🎉", "conversation_message_id": 3}

    def test_no_target(self):
        with pytest.raises(ValueError, match="Exactly one"):
            ReactionsClient(make_runner()).add("👍")

    def test_two_targets(self):
        with pytest.raises(ValueError):
            ReactionsClient(make_runner()).add("👍", thread_id=1, comment_id=2, batch=True)


class TestSearchClient:
    def test_search_params(self):
        descriptor = SearchClient(make_runner()).search(
            "launch", 5, channel_ids=[1, 2], mention_self=False, batch=True
        )
        assert descriptor.url == "search"
        assert descriptor.params == {
            "query": "launch",
            "workspace_id": 5,
            "channel_ids": [1, 2],
            "mention_self": False,
        }
