"""High-level API surface."""

from .authentication import (
    get_auth_state_parameter,
    get_auth_token,
    get_authorization_url,
    revoke_auth_token,
)
from .twist_api import TwistApi

__all__ = [
    "TwistApi",
    "get_auth_state_parameter",
    "get_auth_token",
    "get_authorization_url",
    "revoke_auth_token",
]
