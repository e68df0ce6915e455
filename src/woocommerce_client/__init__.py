"""High-level WooCommerce REST API client entrypoints."""
from .client import WooCommerceClient
from .config import CLIENT_VERSION, ClientConfig
from .exceptions import OptionsError, RequestError, WooCommerceError
from .http import HttpResponse

__version__ = CLIENT_VERSION

__all__ = [
    "WooCommerceClient",
    "ClientConfig",
    "HttpResponse",
    "WooCommerceError",
    "OptionsError",
    "RequestError",
    "__version__",
]
