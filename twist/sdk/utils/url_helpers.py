"""Helpers for building links into the Twist web app."""

from __future__ import annotations

from typing import Literal
from urllib.parse import unquote

from ..core.config import DEFAULT_WEB_BASE_URL

# Search hits on a thread title report this comment id; linking to it would
# make the web app scroll to a comment that does not exist.
TITLE_MATCH_COMMENT_ID = -1


def _is_thread_draft(thread_id: int | str) -> bool:
    return int(thread_id) < 0


def _comment_segment(comment_id: int | str | None) -> str:
    if comment_id and comment_id not in (TITLE_MATCH_COMMENT_ID, str(TITLE_MATCH_COMMENT_ID)):
        return f"c/{comment_id}"
    return ""


def get_twist_url(
    workspace_id: int,
    *,
    channel_id: int | None = None,
    conversation_id: int | None = None,
    thread_id: int | None = None,
    comment_id: int | str | None = None,
    message_id: int | str | None = None,
    user_id: int | None = None,
) -> str:
    """Build a relative app URL.

    Example:
        >>> get_twist_url(1, channel_id=42, thread_id=1337)
        '/a/1/ch/42/t/1337/'
    """
    url = f"/a/{workspace_id}/"

    if channel_id:
        url += f"ch/{channel_id}/"
        if thread_id:
            if _is_thread_draft(thread_id):
                url += f"compose/{thread_id}/"
            else:
                url += f"t/{thread_id}/" + _comment_segment(comment_id)
    elif thread_id:
        url += f"inbox/t/{thread_id}/" + _comment_segment(comment_id)
    elif conversation_id:
        url += f"msg/{conversation_id}/"
        if message_id:
            url += f"m/{message_id}"
    elif user_id:
        url += f"people/u/{user_id}"

    return url


def get_full_twist_url(
    workspace_id: int, *, base_url: str = DEFAULT_WEB_BASE_URL, **params: int | str | None
) -> str:
    """Build an absolute app URL; keyword arguments as for ``get_twist_url``."""
    return f"{base_url}{get_twist_url(workspace_id, **params)}"  # type: ignore[arg-type]


def get_thread_url(workspace_id: int, channel_id: int, thread_id: int) -> str:
    if thread_id < 0:
        return f"/a/{workspace_id}/ch/{channel_id}/compose/{thread_id}"
    return get_twist_url(workspace_id, channel_id=channel_id, thread_id=thread_id)


def get_channel_url(workspace_id: int, channel_id: int) -> str:
    return get_twist_url(workspace_id, channel_id=channel_id)


def get_conversation_url(workspace_id: int, conversation_id: int) -> str:
    return get_twist_url(workspace_id, conversation_id=conversation_id)


def get_message_url(workspace_id: int, conversation_id: int, message_id: int | str) -> str:
    return get_twist_url(workspace_id, conversation_id=conversation_id, message_id=message_id)


def get_comment_url(
    workspace_id: int, channel_id: int, thread_id: int, comment_id: int | str
) -> str:
    return get_twist_url(
        workspace_id, channel_id=channel_id, thread_id=thread_id, comment_id=comment_id
    )


def get_threads_root_url(workspace_id: int) -> str:
    return f"/a/{workspace_id}/ch"


def get_inbox_url(workspace_id: int, tab: Literal["done", "mentions"] | None = None) -> str:
    return f"/a/{workspace_id}/inbox" + (f"/{tab}" if tab else "")


def get_messages_root_url(workspace_id: int) -> str:
    return f"/a/{workspace_id}/msg"


def get_user_profile_url(workspace_id: int, user_id: int) -> str:
    return f"/a/{workspace_id}/people/u/{user_id}"


def get_saved_threads_root_url(workspace_id: int) -> str:
    return f"/a/{workspace_id}/saved"


def get_saved_thread_url(workspace_id: int, thread_id: int) -> str:
    return f"/a/{workspace_id}/saved/t/{thread_id}"


def get_search_root_url(workspace_id: int) -> str:
    return f"/a/{workspace_id}/search"


def get_search_query_url(workspace_id: int, query: str) -> str:
    return f"/a/{workspace_id}/search?q={unquote(query)}"


def get_settings_url(workspace_id: int, initial_location: str | None = None) -> str:
    if initial_location:
        return f"/a/{workspace_id}/settings/{initial_location}"
    return f"/a/{workspace_id}/settings"


def get_team_members_root_url(workspace_id: int) -> str:
    return f"/a/{workspace_id}/people/u"
