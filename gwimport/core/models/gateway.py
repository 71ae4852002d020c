"""
Resolved gateway state — the single artifact of a committed import.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ResolvedGatewayState(BaseModel):
    """Canonical IDs of the REST API a deployment attaches to."""

    model_config = ConfigDict(populate_by_name=True)

    rest_api_id: str = Field(alias="restApiId")
    rest_api_root_resource_id: str = Field(alias="restApiRootResourceId")
    rest_api_resources: dict[str, str] = Field(
        default_factory=dict, alias="restApiResources"
    )

    def to_provider_fields(self) -> dict[str, Any]:
        """The keys written under ``provider.apiGateway``."""
        return self.model_dump(by_alias=True)
