"""
Provider client base — the contract between the resolver and the cloud.

The resolution services only talk to the provider through this
interface, never to boto3 directly. Every operation returns one
bounded page; the resolver does not walk further pages itself.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from gwimport.core.models.inventory import ApiResource, LayerSummary, RestApiSummary

# Page sizes the resolver asks for
DEFAULT_GATEWAY_PAGE_LIMIT = 500
DEFAULT_LAYER_MAX_ITEMS = 50


class ProviderClient(ABC):
    """Abstract base class for inventory providers.

    Implementations raise ``TransportError`` for any failure to reach
    the provider or to read its answer.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """The provider identifier (e.g., 'aws', 'mock')."""

    @abstractmethod
    async def list_rest_apis(
        self, limit: int = DEFAULT_GATEWAY_PAGE_LIMIT
    ) -> list[RestApiSummary]:
        """List REST APIs visible to the account."""

    @abstractmethod
    async def get_resources(
        self, rest_api_id: str, limit: int = DEFAULT_GATEWAY_PAGE_LIMIT
    ) -> list[ApiResource]:
        """List the resources (paths) of one REST API."""

    @abstractmethod
    async def list_layers(
        self, max_items: int = DEFAULT_LAYER_MAX_ITEMS
    ) -> list[LayerSummary]:
        """List Lambda layers with their latest version ARN."""

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
