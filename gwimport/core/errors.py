"""
Import errors — why a run stopped short of committing.

The orchestrator catches every one of these and turns it into an
aborted report. They never reach the caller.
"""

from __future__ import annotations


class GatewayImportError(Exception):
    """Base class for import resolution failures."""

    kind = "error"


class GatewayNotFoundError(GatewayImportError):
    """No REST API carries the configured name."""

    kind = "gateway_not_found"

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unable to find REST API named '{name}'")


class RootPathNotFoundError(GatewayImportError):
    """The configured root path is not a resource of the REST API."""

    kind = "root_path_not_found"

    def __init__(self, path: str, rest_api_id: str):
        self.path = path
        self.rest_api_id = rest_api_id
        super().__init__(
            f"Unable to find root resource path ({path}) for REST API ({rest_api_id})"
        )


class MissingPathError(GatewayImportError):
    """An explicitly configured resource path does not exist."""

    kind = "missing_path"

    def __init__(self, path: str, rest_api_id: str = ""):
        self.path = path
        self.rest_api_id = rest_api_id
        super().__init__(
            f"Unable to find resource path ({path}) for REST API ({rest_api_id})"
        )


class TransportError(GatewayImportError):
    """The provider call failed or returned something unreadable."""

    kind = "transport"
