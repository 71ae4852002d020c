"""
Import orchestrator — the resolution run from config to committed IDs.

Flow:
    resolve layers → locate gateway → index paths → select resources → commit

Each step only runs once the previous one succeeded. Any failure
aborts the run: it is logged and recorded on the report, never
raised. The API Gateway section of the service model is written
only on commit; layer lists and inferred resources written by
earlier steps stay in place when a later step aborts.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from enum import Enum

from gwimport.adapters.base import ProviderClient
from gwimport.core.config.loader import IMPORT_CONFIG_KEY
from gwimport.core.errors import (
    GatewayNotFoundError,
    MissingPathError,
    RootPathNotFoundError,
)
from gwimport.core.models.config import GatewayImportConfig
from gwimport.core.models.gateway import ResolvedGatewayState
from gwimport.core.models.service import ApiGatewaySettings, ServiceModel
from gwimport.core.services.gateway_locator import find_rest_api_id
from gwimport.core.services.layer_resolver import LayerResolutionReport, resolve_layers
from gwimport.core.services.path_inventory import list_paths
from gwimport.core.services.resource_selection import select_resources

logger = logging.getLogger(__name__)


class ImportState(str, Enum):
    """Where an import run is, or where it ended."""

    IDLE = "idle"
    RESOLVING_LAYERS = "resolving_layers"
    LOCATING_GATEWAY = "locating_gateway"
    INDEXING_PATHS = "indexing_paths"
    SELECTING_RESOURCES = "selecting_resources"
    COMMITTED = "committed"
    ABORTED = "aborted"


@dataclass
class ImportReport:
    """Result of one import run."""

    state: ImportState = ImportState.IDLE
    failed_in: ImportState | None = None
    error_kind: str | None = None
    error: str | None = None
    resolved: ResolvedGatewayState | None = None
    layers: LayerResolutionReport | None = None

    @property
    def committed(self) -> bool:
        return self.state == ImportState.COMMITTED

    @property
    def aborted(self) -> bool:
        return self.state == ImportState.ABORTED

    def abort(self, error: Exception) -> None:
        self.failed_in = self.state
        self.state = ImportState.ABORTED
        self.error_kind = getattr(error, "kind", "unexpected")
        self.error = str(error)

    def to_dict(self) -> dict:
        result: dict = {"state": self.state.value}
        if self.aborted:
            result["failed_in"] = self.failed_in.value if self.failed_in else None
            result["error_kind"] = self.error_kind
            result["error"] = self.error
        if self.resolved:
            result["apiGateway"] = self.resolved.to_provider_fields()
        if self.layers:
            result["layers"] = self.layers.to_dict()
        return result


def record_inferred_resources(model: ServiceModel, resources: list[str]) -> None:
    """Write inferred resources back into the document's import block.

    Only touches ``custom.importApiGateway`` when the document carries
    one; a config supplied from elsewhere leaves the model alone.
    """
    custom = dict(model.custom or {})
    block = custom.get(IMPORT_CONFIG_KEY)
    if not isinstance(block, dict):
        return

    custom[IMPORT_CONFIG_KEY] = {**block, "resources": list(resources)}
    model.custom = custom


def commit(model: ServiceModel, resolved: ResolvedGatewayState) -> None:
    """Write the resolved IDs into ``provider.apiGateway``."""
    current = model.provider.api_gateway.model_dump(by_alias=True, exclude_none=True)
    current.update(resolved.to_provider_fields())

    provider = model.provider
    provider.api_gateway = ApiGatewaySettings.model_validate(current)
    model.provider = provider


async def _run(
    model: ServiceModel,
    config: GatewayImportConfig,
    client: ProviderClient,
    report: ImportReport,
) -> None:
    if config.resolve_layer_arns:
        report.state = ImportState.RESOLVING_LAYERS
        report.layers = await resolve_layers(model, client)

    report.state = ImportState.LOCATING_GATEWAY
    rest_api_id = await find_rest_api_id(client, config.name)
    if not rest_api_id:
        raise GatewayNotFoundError(config.name)

    report.state = ImportState.INDEXING_PATHS
    path_ids = await list_paths(client, rest_api_id)
    root_resource_id = path_ids.get(config.path)
    if not root_resource_id:
        raise RootPathNotFoundError(config.path, rest_api_id)

    report.state = ImportState.SELECTING_RESOURCES
    inferring = not config.resources_declared
    selected = select_resources(
        config,
        path_ids,
        functions=model.iter_functions(),
        rest_api_id=rest_api_id,
    )
    if inferring:
        record_inferred_resources(model, config.resources)

    resolved = ResolvedGatewayState(
        rest_api_id=rest_api_id,
        rest_api_root_resource_id=root_resource_id,
        rest_api_resources=dict(selected),
    )
    commit(model, resolved)
    report.resolved = resolved

    settings = model.provider.api_gateway.model_dump(mode="json", by_alias=True, exclude_none=True)
    logger.info("Imported API Gateway (%s)", json.dumps(settings, default=str))
    report.state = ImportState.COMMITTED


async def import_api_gateway(
    model: ServiceModel,
    config: GatewayImportConfig,
    client: ProviderClient,
) -> ImportReport:
    """Resolve the configured REST API and write its IDs into the model.

    Args:
        model: Service model; layer lists and ``provider.apiGateway``
            are updated in place.
        config: Import configuration; ``resources`` is filled in when
            it was not given.
        client: Inventory provider.

    Returns:
        ImportReport ending in COMMITTED or ABORTED. Never raises for
        provider or resolution failures.
    """
    report = ImportReport()

    try:
        await _run(model, config, client, report)
    except (GatewayNotFoundError, RootPathNotFoundError, MissingPathError) as e:
        report.abort(e)
        logger.error("%s", e)
    except Exception as e:
        report.abort(e)
        logger.error("\n-------- Import API Gateway Error --------\n%s", e)

    return report
