"""OAuth 2 helpers for third-party Twist integrations.

The flow: send the user to ``get_authorization_url``, receive ``code`` and
``state`` on the redirect URI, verify ``state``, then exchange the code with
``get_auth_token``.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Iterable
from urllib.parse import urlencode

from ..core.config import DEFAULT_OAUTH_BASE_URL
from ..core.enums import Permission
from ..core.exceptions import TwistRequestError
from ..models.auth import AuthTokenResponse
from ..runtime.rest.http_client import HTTPClient
from ..runtime.rest.transport import transform_response

logger = logging.getLogger(__name__)


def _oauth_url(path: str, base_url: str | None) -> str:
    return f"{(base_url or DEFAULT_OAUTH_BASE_URL).rstrip('/')}/oauth/{path}"


def get_auth_state_parameter() -> str:
    """Return a random value for the ``state`` parameter."""
    return str(uuid.uuid4())


def get_authorization_url(
    client_id: str,
    permissions: Iterable[Permission | str],
    state: str,
    redirect_uri: str | None = None,
    base_url: str | None = None,
) -> str:
    """Build the URL the user visits to grant access.

    Raises:
        ValueError: If no permission is requested
    """
    scopes = [Permission(p).value for p in permissions]
    if not scopes:
        raise ValueError("At least one permission scope is required")

    params = {
        "client_id": client_id,
        "response_type": "code",
        "scope": " ".join(scopes),
        "state": state,
    }
    if redirect_uri:
        params["redirect_uri"] = redirect_uri
    return f"{_oauth_url('authorize', base_url)}?{urlencode(params)}"


async def get_auth_token(
    client_id: str,
    client_secret: str,
    code: str,
    redirect_uri: str | None = None,
    base_url: str | None = None,
    *,
    http: HTTPClient | None = None,
) -> AuthTokenResponse:
    """Exchange an authorization code for an access token.

    Raises:
        TwistRequestError: The exchange failed or returned no access token
    """
    payload = {
        "client_id": client_id,
        "client_secret": client_secret,
        "code": code,
        "grant_type": "authorization_code",
    }
    if redirect_uri:
        payload["redirect_uri"] = redirect_uri

    client = http or HTTPClient()
    try:
        response = await client.request(
            "POST", _oauth_url("token", base_url), json=payload
        )
    finally:
        if http is None:
            await client.close()

    data = transform_response(response.data)
    if not isinstance(data, dict) or not data.get("accessToken"):
        raise TwistRequestError(
            "Authentication token exchange failed.",
            http_status_code=response.status,
            response_data=response.data,
        )
    return AuthTokenResponse.model_validate(data)


async def revoke_auth_token(
    client_id: str,
    client_secret: str,
    access_token: str,
    base_url: str | None = None,
    *,
    http: HTTPClient | None = None,
) -> bool:
    """Revoke an access token; returns whether the server accepted it.

    Network failures still raise ``TwistRequestError``.
    """
    payload = {"client_id": client_id, "client_secret": client_secret, "token": access_token}
    client = http or HTTPClient()
    try:
        await client.request("POST", _oauth_url("revoke", base_url), json=payload)
    except TwistRequestError as e:
        if e.http_status_code is None:
            raise
        logger.warning("oauth_revoke_rejected", extra={"status": e.http_status_code})
        return False
    finally:
        if http is None:
            await client.close()
    return True
