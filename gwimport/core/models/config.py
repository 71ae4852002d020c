"""
Import configuration — the ``custom.importApiGateway`` block.

Declares which existing REST API to attach to and how much of it
to import. Only ``resources`` may be filled in after load; the
resource selection step writes the inferred paths back here.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_ROOT_PATH = "/"


class GatewayImportConfig(BaseModel):
    """What to import from the existing API Gateway."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    path: str = DEFAULT_ROOT_PATH
    resources: list[str] | None = None
    resolve_layer_arns: bool = Field(default=False, alias="resolveLayerArns")

    @field_validator("path", mode="before")
    @classmethod
    def _default_path(cls, value: object) -> object:
        # An empty or null path falls back to the API root
        return value or DEFAULT_ROOT_PATH

    @property
    def resources_declared(self) -> bool:
        """Whether resources were given explicitly (an empty list counts)."""
        return self.resources is not None
