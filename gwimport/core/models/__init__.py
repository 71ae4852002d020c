"""
Domain models — Pydantic types for the import resolver.

All models are re-exported here for convenient access:

    from gwimport.core.models import GatewayImportConfig, ServiceModel, PathIndex
"""

from gwimport.core.models.config import DEFAULT_ROOT_PATH, GatewayImportConfig
from gwimport.core.models.gateway import ResolvedGatewayState
from gwimport.core.models.inventory import (
    ApiResource,
    LayerIndex,
    LayerSummary,
    PathIndex,
    RestApiSummary,
)
from gwimport.core.models.service import (
    ApiGatewaySettings,
    FunctionDescriptor,
    FunctionEvent,
    HttpEvent,
    ProviderSection,
    ServiceModel,
)

__all__ = [
    "DEFAULT_ROOT_PATH",
    # service.py
    "ApiGatewaySettings",
    # inventory.py
    "ApiResource",
    "FunctionDescriptor",
    "FunctionEvent",
    # config.py
    "GatewayImportConfig",
    "HttpEvent",
    "LayerIndex",
    "LayerSummary",
    "PathIndex",
    "ProviderSection",
    # gateway.py
    "ResolvedGatewayState",
    "RestApiSummary",
    "ServiceModel",
]
