"""Resource clients, one per API endpoint group."""

from .base import BaseClient
from .channels import ChannelsClient
from .comments import CommentsClient
from .conversation_messages import ConversationMessagesClient
from .conversations import ConversationsClient
from .groups import GroupsClient
from .inbox import InboxClient
from .reactions import ReactionsClient
from .search import SearchClient
from .threads import ThreadsClient
from .users import UsersClient
from .workspace_users import WorkspaceUsersClient
from .workspaces import WorkspacesClient

__all__ = [
    "BaseClient",
    "ChannelsClient",
    "CommentsClient",
    "ConversationMessagesClient",
    "ConversationsClient",
    "GroupsClient",
    "InboxClient",
    "ReactionsClient",
    "SearchClient",
    "ThreadsClient",
    "UsersClient",
    "WorkspaceUsersClient",
    "WorkspacesClient",
]
