"""TwistApi facade bundling every resource client.

Architecture:
    TwistApi owns one HTTPClient (and through it one aiohttp session) shared
    by all resource clients and by the batch engine. Each resource client
    builds request descriptors; the facade either lets them run one by one
    through the RestRunner or folds many of them into batch envelopes via
    ``batch()``.

Design Decisions:
    - Single session: connection pooling across all clients
    - Session injection allows testing with mock sessions
    - Context manager pattern ensures proper resource cleanup

See Also:
    - BatchExecutor: Chunking and concurrent envelope execution
    - RestRunner: Single-request execution
"""

from __future__ import annotations

import logging
from typing import Any

import aiohttp

from ..clients import (
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
from ..core.config import BATCH_CHUNK_SIZE, ClientConfig
from ..core.enums import ApiVersion
from ..runtime.batch import BatchExecutor, BatchItemResult, EnvelopeCodec, RequestDescriptor
from ..runtime.rest import HTTPClient, RESTTransport, RestRunner

logger = logging.getLogger(__name__)


class TwistApi:
    """Entry point for the Twist REST API.

    Example:
        >>> async with TwistApi("token") as api:
        ...     user = await api.users.get_session_user()
        ...     results = await api.batch(
        ...         api.workspace_users.get_user_by_id(1, 2, batch=True),
        ...         api.channels.get_channel(3, batch=True),
        ...     )
        ...     channel = results[1].data
    """

    def __init__(
        self,
        auth_token: str | None = None,
        base_url: str | None = None,
        *,
        config: ClientConfig | None = None,
        session: aiohttp.ClientSession | None = None,
        request_id: str | None = None,
    ) -> None:
        """Initialize the API.

        Args:
            auth_token: Personal or OAuth access token
            base_url: Optional custom API domain
            config: Full client configuration; overrides ``auth_token`` and ``base_url``
            session: Optional aiohttp session (not closed by ``close()``)
            request_id: Optional value sent as ``X-Request-Id``
        """
        if config is None:
            if not auth_token:
                raise ValueError("auth_token or config must be provided")
            config = ClientConfig(api_token=auth_token, base_url=base_url)
        self._config = config

        self._http = HTTPClient(
            timeout=config.timeout, max_retries=config.max_retries, session=session
        )
        self._transport = RESTTransport(self._http, config.api_token, request_id=request_id)
        runner = RestRunner(self._transport)

        self.users = UsersClient(runner, config.base_url)
        self.workspaces = WorkspacesClient(runner, config.base_url)
        self.workspace_users = WorkspaceUsersClient(runner, config.base_url)
        self.channels = ChannelsClient(runner, config.base_url)
        self.threads = ThreadsClient(runner, config.base_url)
        self.groups = GroupsClient(runner, config.base_url)
        self.conversations = ConversationsClient(runner, config.base_url)
        self.comments = CommentsClient(runner, config.base_url)
        self.conversation_messages = ConversationMessagesClient(runner, config.base_url)
        self.inbox = InboxClient(runner, config.base_url)
        self.reactions = ReactionsClient(runner, config.base_url)
        self.search = SearchClient(runner, config.base_url)

        codec = EnvelopeCodec(self._transport, config.base_uri(ApiVersion.V3))
        self._executor = BatchExecutor(codec, chunk_size=BATCH_CHUNK_SIZE)

    @property
    def config(self) -> ClientConfig:
        return self._config

    async def batch(self, *descriptors: RequestDescriptor[Any]) -> list[BatchItemResult[Any]]:
        """Execute descriptors through the batch endpoint.

        Descriptors come from resource client methods called with
        ``batch=True``. Results are returned in the order given; an item whose
        envelope call failed carries ``code=500`` and no data.
        """
        return await self._executor.execute(descriptors)

    async def close(self) -> None:
        """Close the underlying HTTP session if this instance created it."""
        await self._http.close()

    async def __aenter__(self) -> TwistApi:
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()
