"""Pick the authentication strategy for a request."""
from __future__ import annotations

from ..config import ClientConfig
from .base import AuthStrategy
from .basic import BasicAuth
from .oauth import OAuth1Auth
from .query_string import QueryStringAuth


def select_auth_strategy(config: ClientConfig) -> AuthStrategy:
    """Return the strategy matching the URL scheme and ``query_string_auth``.

    Plain HTTP always signs with OAuth 1.0a. Over HTTPS the credentials travel
    either in the query string or as HTTP Basic auth.
    """
    if not config.is_https:
        return OAuth1Auth(config.consumer_key, config.consumer_secret)
    if config.query_string_auth:
        return QueryStringAuth(config.consumer_key, config.consumer_secret)
    return BasicAuth(config.consumer_key, config.consumer_secret)
