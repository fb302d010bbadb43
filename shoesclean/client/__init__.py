"""
Python client for the Shoesclean service catalog API.
"""

from shoesclean.client.api_client import ApiRequestError, ApiUnavailableError, ServicesApiClient
from shoesclean.client.client_config import ClientConfig, load_client_config

__all__ = [
    "ApiRequestError",
    "ApiUnavailableError",
    "ClientConfig",
    "ServicesApiClient",
    "load_client_config",
]
