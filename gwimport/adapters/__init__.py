"""
Provider clients — the only code that talks to the cloud control plane.

    from gwimport.adapters import Boto3ProviderClient, MockProviderClient
"""

from gwimport.adapters.aws import Boto3ProviderClient
from gwimport.adapters.base import (
    DEFAULT_GATEWAY_PAGE_LIMIT,
    DEFAULT_LAYER_MAX_ITEMS,
    ProviderClient,
)
from gwimport.adapters.mock import MockProviderClient

__all__ = [
    "DEFAULT_GATEWAY_PAGE_LIMIT",
    "DEFAULT_LAYER_MAX_ITEMS",
    "Boto3ProviderClient",
    "MockProviderClient",
    "ProviderClient",
]
