"""Authentication strategies for the WooCommerce REST API."""
from .base import AuthStrategy
from .basic import BasicAuth
from .oauth import OAuth1Auth
from .query_string import QueryStringAuth
from .selector import select_auth_strategy

__all__ = ["AuthStrategy", "BasicAuth", "OAuth1Auth", "QueryStringAuth", "select_auth_strategy"]
