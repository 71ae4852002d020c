"""
Service model — the slice of a Serverless service document we touch.

Loaded from serverless.yml. Only the keys the import resolver reads
or writes are typed; every other key is carried through untouched
(``extra="allow"``) so the document can be written back as-is.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

# A layer reference: a bare layer name, a versioned ARN, or a
# CloudFormation intrinsic such as {"Ref": "CommonLambdaLayer"}.
LayerReference = Any


class HttpEvent(BaseModel):
    """An ``http`` event — a route on the REST API."""

    model_config = ConfigDict(extra="allow")

    path: str | None = None
    method: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _expand_shorthand(cls, data: Any) -> Any:
        # "GET users/{id}" is shorthand for {method: GET, path: users/{id}}
        if isinstance(data, str):
            method, _, path = data.strip().partition(" ")
            return {"method": method, "path": path.strip() or None}
        return data


class FunctionEvent(BaseModel):
    """One entry of a function's ``events`` list."""

    model_config = ConfigDict(extra="allow")

    http: HttpEvent | None = None


class FunctionDescriptor(BaseModel):
    """A function declaration. Its name is the key under ``functions``."""

    model_config = ConfigDict(extra="allow")

    events: list[FunctionEvent] | None = None
    layers: list[LayerReference] | None = None

    def http_paths(self) -> list[str]:
        """Paths of every HTTP event that declares one, in order."""
        return [
            event.http.path
            for event in self.events or []
            if event.http is not None and event.http.path is not None
        ]


class ApiGatewaySettings(BaseModel):
    """``provider.apiGateway`` — where the resolved IDs are written."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    rest_api_id: str | None = Field(default=None, alias="restApiId")
    rest_api_root_resource_id: str | None = Field(
        default=None, alias="restApiRootResourceId"
    )
    rest_api_resources: dict[str, str] | None = Field(
        default=None, alias="restApiResources"
    )


class ProviderSection(BaseModel):
    """The ``provider`` block."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    layers: list[LayerReference] | None = None
    api_gateway: ApiGatewaySettings = Field(
        default_factory=ApiGatewaySettings, alias="apiGateway"
    )


class ServiceModel(BaseModel):
    """Root of the deployment model — one serverless.yml document."""

    model_config = ConfigDict(extra="allow")

    provider: ProviderSection = Field(default_factory=ProviderSection)
    functions: dict[str, FunctionDescriptor] | None = None
    custom: dict[str, Any] | None = None

    def iter_functions(self) -> Iterator[tuple[str, FunctionDescriptor]]:
        """Yield (name, function) pairs in declaration order."""
        yield from (self.functions or {}).items()

    def to_document(self) -> dict[str, Any]:
        """Serialize back to the serverless.yml shape."""
        return self.model_dump(by_alias=True, exclude_unset=True)
