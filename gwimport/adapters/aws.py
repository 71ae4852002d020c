"""
AWS provider client — API Gateway and Lambda inventory through boto3.

boto3 is synchronous; each call runs in a worker thread so the
resolver can await it. Credentials, retries and timeouts are
boto3/botocore's business.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from gwimport.adapters.base import (
    DEFAULT_GATEWAY_PAGE_LIMIT,
    DEFAULT_LAYER_MAX_ITEMS,
    ProviderClient,
)
from gwimport.core.errors import TransportError
from gwimport.core.models.inventory import ApiResource, LayerSummary, RestApiSummary

logger = logging.getLogger(__name__)


class Boto3ProviderClient(ProviderClient):
    """Inventory provider backed by the AWS SDK."""

    def __init__(
        self,
        region: str | None = None,
        profile: str | None = None,
        session: boto3.session.Session | None = None,
    ):
        self._session = session or boto3.session.Session(
            profile_name=profile, region_name=region
        )
        self._clients: dict[str, Any] = {}

    @property
    def name(self) -> str:
        return "aws"

    def _client(self, service: str) -> Any:
        if service not in self._clients:
            self._clients[service] = self._session.client(service)
        return self._clients[service]

    async def _call(self, service: str, operation: str, **params: Any) -> dict[str, Any]:
        """Run one SDK operation off the event loop."""
        logger.debug("%s.%s %s", service, operation, params)
        try:
            method = getattr(self._client(service), operation)
            return await asyncio.to_thread(method, **params)
        except ClientError as e:
            code = e.response.get("Error", {}).get("Code", "Unknown")
            raise TransportError(f"{service}.{operation} failed ({code}): {e}") from e
        except BotoCoreError as e:
            raise TransportError(f"{service}.{operation} failed: {e}") from e

    async def list_rest_apis(
        self, limit: int = DEFAULT_GATEWAY_PAGE_LIMIT
    ) -> list[RestApiSummary]:
        response = await self._call("apigateway", "get_rest_apis", limit=limit)
        try:
            return [
                RestApiSummary(id=item["id"], name=item["name"])
                for item in response.get("items", [])
            ]
        except (KeyError, TypeError) as e:
            raise TransportError(f"Malformed get_rest_apis response: {e}") from e

    async def get_resources(
        self, rest_api_id: str, limit: int = DEFAULT_GATEWAY_PAGE_LIMIT
    ) -> list[ApiResource]:
        response = await self._call(
            "apigateway", "get_resources", restApiId=rest_api_id, limit=limit
        )
        try:
            return [
                ApiResource(id=item["id"], path=item["path"])
                for item in response.get("items", [])
            ]
        except (KeyError, TypeError) as e:
            raise TransportError(f"Malformed get_resources response: {e}") from e

    async def list_layers(
        self, max_items: int = DEFAULT_LAYER_MAX_ITEMS
    ) -> list[LayerSummary]:
        response = await self._call("lambda", "list_layers", MaxItems=max_items)
        try:
            return [
                LayerSummary(
                    name=layer["LayerName"],
                    latest_version_arn=layer["LatestMatchingVersion"]["LayerVersionArn"],
                )
                for layer in response.get("Layers", [])
            ]
        except (KeyError, TypeError) as e:
            raise TransportError(f"Malformed list_layers response: {e}") from e
