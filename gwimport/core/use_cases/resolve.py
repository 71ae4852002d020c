"""
Resolve use case — load serverless.yml, run the import, save the result.

The full vertical slice from a service document on disk to a
document whose ``provider.apiGateway`` points at the existing
REST API.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from gwimport.adapters.base import ProviderClient
from gwimport.core.config.loader import (
    ConfigError,
    find_service_file,
    load_import_config,
    load_service,
    save_service,
)
from gwimport.core.engine.orchestrator import ImportReport, import_api_gateway
from gwimport.core.models.config import GatewayImportConfig
from gwimport.core.models.service import ServiceModel

logger = logging.getLogger(__name__)


@dataclass
class ResolveResult:
    """Result of resolving one service document."""

    report: ImportReport | None = None
    service: ServiceModel | None = None
    config: GatewayImportConfig | None = None
    config_path: Path | None = None
    output_path: Path | None = None
    error: str | None = None

    @property
    def skipped(self) -> bool:
        """The document has no active import configuration."""
        return self.error is None and self.config is None

    @property
    def ok(self) -> bool:
        if self.error:
            return False
        return self.report is None or self.report.committed

    def to_dict(self) -> dict:
        result: dict = {}
        if self.error:
            result["error"] = self.error
            return result

        result["config_path"] = str(self.config_path) if self.config_path else None
        result["skipped"] = self.skipped
        if self.config:
            result["name"] = self.config.name
            result["resources"] = self.config.resources
        if self.report:
            result["report"] = self.report.to_dict()
        if self.output_path:
            result["output_path"] = str(self.output_path)
        return result


def run_resolve(
    client_factory: Callable[[], ProviderClient],
    config_path: Path | None = None,
    output_path: Path | None = None,
) -> ResolveResult:
    """Resolve the import configuration of a service document.

    Args:
        client_factory: Zero-argument callable returning the ProviderClient.
            Only called when the resolver is active.
        config_path: Optional explicit path to serverless.yml.
        output_path: Where to write the resolved document. Written only
            when the import commits.

    Returns:
        ResolveResult with the import report.
    """
    result = ResolveResult()

    try:
        if config_path is None:
            config_path = find_service_file()
        if config_path is None:
            result.error = "No serverless.yml found."
            return result

        result.config_path = config_path
        result.service = load_service(config_path)
        result.config = load_import_config(result.service)

    except ConfigError as e:
        result.error = str(e)
        return result

    if result.config is None:
        logger.info("No custom.importApiGateway.name configured, nothing to import")
        return result

    try:
        client = client_factory()
    except Exception as e:
        result.error = f"Cannot create provider client: {e}"
        return result

    result.report = asyncio.run(
        import_api_gateway(result.service, result.config, client)
    )

    if output_path and result.report.committed:
        try:
            save_service(result.service, output_path)
            result.output_path = output_path
        except OSError as e:
            result.error = f"Cannot write {output_path}: {e}"

    return result
