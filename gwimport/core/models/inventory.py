"""
Inventory records — what the provider reports as already existing.

These are read-only snapshots, rebuilt on every run and never
persisted.
"""

from __future__ import annotations

from pydantic import BaseModel

# resource path → resource ID, e.g. {"/users/{id}": "a1b2c3"}
PathIndex = dict[str, str]

# layer name → latest versioned layer ARN
LayerIndex = dict[str, str]


class RestApiSummary(BaseModel):
    """A REST API as listed by the gateway service."""

    id: str
    name: str


class ApiResource(BaseModel):
    """One resource (path node) of a REST API."""

    id: str
    path: str


class LayerSummary(BaseModel):
    """A Lambda layer with the ARN of its newest version."""

    name: str
    latest_version_arn: str
