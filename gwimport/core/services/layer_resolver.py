"""
Layer ARN resolver — turn bare layer names into versioned ARNs.

Layer lists may name a layer ("shared-utils") instead of pinning a
version. Each bare name is replaced with the ARN of the newest
version the account publishes. References that are already ARNs,
or CloudFormation intrinsics, pass through untouched.

Resolution produces one ``LayerResolution`` per reference. A name
missing from the inventory has ``arn=None``; it is logged and left
out of the rewritten list, and the remaining references still
resolve.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Any

from gwimport.adapters.base import DEFAULT_LAYER_MAX_ITEMS, ProviderClient
from gwimport.core.models.inventory import LayerIndex
from gwimport.core.models.service import ServiceModel

logger = logging.getLogger(__name__)

PROVIDER_OWNER = "provider"

# arn:aws:lambda:<region>:<account>:layer:<name>:<version>
LAYER_ARN_PATTERN = re.compile(
    r"^arn:aws[a-zA-Z-]*:lambda:[a-z]{2}((-gov)|(-iso(b?)))?-[a-z]+-\d{1}"
    r":\d{12}:layer:[a-zA-Z0-9_-]+:[0-9]+$"
)


@dataclass
class LayerResolution:
    """Outcome of resolving one layer reference."""

    owner: str
    reference: Any
    arn: Any = None

    @property
    def resolved(self) -> bool:
        return self.arn is not None

    def to_dict(self) -> dict:
        return {
            "owner": self.owner,
            "reference": self.reference,
            "arn": self.arn,
            "resolved": self.resolved,
        }


@dataclass
class LayerResolutionReport:
    """All layer resolutions of a run, provider list first."""

    resolutions: list[LayerResolution] = field(default_factory=list)

    @property
    def unresolved(self) -> list[LayerResolution]:
        return [r for r in self.resolutions if not r.resolved]

    @property
    def all_resolved(self) -> bool:
        return not self.unresolved

    def to_dict(self) -> dict:
        return {
            "total": len(self.resolutions),
            "unresolved": len(self.unresolved),
            "resolutions": [r.to_dict() for r in self.resolutions],
        }


def is_layer_arn(reference: Any) -> bool:
    """Whether a reference is already a fully qualified layer version ARN."""
    return isinstance(reference, str) and LAYER_ARN_PATTERN.match(reference) is not None


async def build_layer_index(
    client: ProviderClient,
    max_items: int = DEFAULT_LAYER_MAX_ITEMS,
) -> LayerIndex:
    """Map each available layer name to its latest version ARN."""
    index: LayerIndex = {}
    for layer in await client.list_layers(max_items=max_items):
        index[layer.name] = layer.latest_version_arn

    logger.debug("Layer inventory: %d layers", len(index))
    return index


def resolve_layer_list(
    references: list[Any],
    index: LayerIndex,
    owner: str = PROVIDER_OWNER,
) -> list[LayerResolution]:
    """Resolve each reference of one layer list independently."""
    resolutions = []
    for reference in references:
        if is_layer_arn(reference) or not isinstance(reference, str):
            resolutions.append(LayerResolution(owner, reference, reference))
        else:
            resolutions.append(LayerResolution(owner, reference, index.get(reference)))
    return resolutions


def _apply(resolutions: list[LayerResolution]) -> list[Any]:
    """The rewritten layer list: resolved entries only, in order."""
    for resolution in resolutions:
        if not resolution.resolved:
            logger.warning(
                "Unable to resolve layer '%s' for %s; it is dropped from the layer list",
                resolution.reference,
                resolution.owner,
            )
    return [r.arn for r in resolutions if r.resolved]


async def resolve_layers(
    model: ServiceModel,
    client: ProviderClient,
    max_items: int = DEFAULT_LAYER_MAX_ITEMS,
) -> LayerResolutionReport:
    """Rewrite provider-level and per-function layer lists in place.

    Returns:
        Report of every resolution, including the unresolved names
        that were dropped.
    """
    index = await build_layer_index(client, max_items=max_items)
    report = LayerResolutionReport()

    if model.provider.layers is not None:
        resolutions = resolve_layer_list(model.provider.layers, index)
        model.provider.layers = _apply(resolutions)
        report.resolutions.extend(resolutions)

    for fname, func in model.iter_functions():
        if func.layers is None:
            continue
        resolutions = resolve_layer_list(func.layers, index, owner=f"function '{fname}'")
        func.layers = _apply(resolutions)
        report.resolutions.extend(resolutions)

    logger.info(
        "Resolved %d layer references (%d unresolved)",
        len(report.resolutions),
        len(report.unresolved),
    )
    return report
