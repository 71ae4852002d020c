"""
Mock provider client — in-memory inventory for tests and offline runs.

Serves a fixed set of REST APIs, resources and layers. Any operation
can be configured to fail with a ``TransportError``. An inventory
can also be loaded from a YAML file:

    restApis:
      - {id: abc, name: my-api}
    resources:
      abc:
        - {id: r0, path: /}
    layers:
      - {name: shared-utils, latestVersionArn: "arn:aws:lambda:...:7"}
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from gwimport.adapters.base import (
    DEFAULT_GATEWAY_PAGE_LIMIT,
    DEFAULT_LAYER_MAX_ITEMS,
    ProviderClient,
)
from gwimport.core.errors import TransportError
from gwimport.core.models.inventory import ApiResource, LayerSummary, RestApiSummary


class MockProviderClient(ProviderClient):
    """Inventory provider backed by plain lists."""

    def __init__(
        self,
        rest_apis: list[RestApiSummary] | None = None,
        resources: dict[str, list[ApiResource]] | None = None,
        layers: list[LayerSummary] | None = None,
    ):
        self._rest_apis = list(rest_apis or [])
        self._resources = dict(resources or {})
        self._layers = list(layers or [])
        self._failures: dict[str, str] = {}
        self._call_log: list[tuple[str, dict[str, Any]]] = []

    @classmethod
    def from_file(cls, path: Path) -> MockProviderClient:
        """Build a mock from a YAML inventory file."""
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Expected a YAML mapping in {path}")

        return cls(
            rest_apis=[RestApiSummary(**item) for item in data.get("restApis", [])],
            resources={
                api_id: [ApiResource(**item) for item in items]
                for api_id, items in (data.get("resources") or {}).items()
            },
            layers=[
                LayerSummary(
                    name=item["name"],
                    latest_version_arn=item["latestVersionArn"],
                )
                for item in data.get("layers", [])
            ],
        )

    @property
    def name(self) -> str:
        return "mock"

    @property
    def call_log(self) -> list[tuple[str, dict[str, Any]]]:
        """Every (operation, params) pair this mock has received."""
        return self._call_log

    def calls(self, operation: str) -> int:
        """Number of times an operation was called."""
        return sum(1 for op, _ in self._call_log if op == operation)

    def set_failure(self, operation: str, error: str = "Mock transport failure") -> None:
        """Make an operation raise a TransportError."""
        self._failures[operation] = error

    def _record(self, operation: str, **params: Any) -> None:
        self._call_log.append((operation, params))
        if operation in self._failures:
            raise TransportError(self._failures[operation])

    async def list_rest_apis(
        self, limit: int = DEFAULT_GATEWAY_PAGE_LIMIT
    ) -> list[RestApiSummary]:
        self._record("list_rest_apis", limit=limit)
        return self._rest_apis[:limit]

    async def get_resources(
        self, rest_api_id: str, limit: int = DEFAULT_GATEWAY_PAGE_LIMIT
    ) -> list[ApiResource]:
        self._record("get_resources", rest_api_id=rest_api_id, limit=limit)
        return self._resources.get(rest_api_id, [])[:limit]

    async def list_layers(
        self, max_items: int = DEFAULT_LAYER_MAX_ITEMS
    ) -> list[LayerSummary]:
        self._record("list_layers", max_items=max_items)
        return self._layers[:max_items]

    def reset(self) -> None:
        """Clear call log and configured failures."""
        self._call_log.clear()
        self._failures.clear()
