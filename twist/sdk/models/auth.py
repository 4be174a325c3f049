"""OAuth token data model."""

from .base import TwistModel


class AuthTokenResponse(TwistModel):
    """Result of exchanging an authorization code."""

    access_token: str
    token_type: str
    refresh_token: str | None = None
    expires_in: int | None = None
    scope: str | None = None
