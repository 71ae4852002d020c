"""
Config check use case — validate serverless.yml and report issues.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from gwimport.core.config.loader import (
    IMPORT_CONFIG_KEY,
    ConfigError,
    find_service_file,
    load_import_config,
    load_service,
)
from gwimport.core.models.config import GatewayImportConfig
from gwimport.core.models.service import ServiceModel
from gwimport.core.services.layer_resolver import is_layer_arn


@dataclass
class ConfigCheckResult:
    """Result of configuration validation."""

    valid: bool = False
    service: ServiceModel | None = None
    config: GatewayImportConfig | None = None
    config_path: Path | None = None
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "config_path": str(self.config_path) if self.config_path else None,
            "errors": self.errors,
            "warnings": self.warnings,
            "active": self.config is not None,
            "name": self.config.name if self.config else None,
            "function_count": len(self.service.functions or {}) if self.service else 0,
        }


def check_config(config_path: Path | None = None) -> ConfigCheckResult:
    """Validate the service document and its import configuration.

    Args:
        config_path: Optional explicit path to serverless.yml.

    Returns:
        ConfigCheckResult with validation status and any issues.
    """
    result = ConfigCheckResult()

    if config_path is None:
        config_path = find_service_file()

    if config_path is None:
        result.errors.append("No serverless.yml found.")
        return result

    result.config_path = config_path

    try:
        service = load_service(config_path)
        result.service = service
        config = load_import_config(service)
        result.config = config
    except ConfigError as e:
        result.errors.append(str(e))
        return result

    if config is None:
        result.warnings.append(
            f"custom.{IMPORT_CONFIG_KEY}.name is not set. The resolver is inactive."
        )
        result.valid = True
        return result

    if not config.path.startswith("/"):
        result.errors.append(f"Root path must start with '/': {config.path}")

    if config.resources is not None:
        if not config.resources:
            result.warnings.append("resources is an empty list. No resources will be imported.")
        bad = [p for p in config.resources if not p.startswith("/")]
        if bad:
            result.errors.append(f"Resource paths must start with '/': {', '.join(bad)}")
        dupes = {p for p in config.resources if config.resources.count(p) > 1}
        if dupes:
            result.warnings.append(f"Duplicate resource paths: {', '.join(sorted(dupes))}")

    # Bare layer names only resolve when resolveLayerArns is on
    if not config.resolve_layer_arns:
        bare = [
            ref
            for _, func in service.iter_functions()
            for ref in func.layers or []
            if isinstance(ref, str) and not is_layer_arn(ref)
        ]
        bare += [
            ref
            for ref in service.provider.layers or []
            if isinstance(ref, str) and not is_layer_arn(ref)
        ]
        if bare:
            result.warnings.append(
                "Layers are not versioned ARNs but resolveLayerArns is off: "
                + ", ".join(sorted(set(bare)))
            )

    result.valid = len(result.errors) == 0
    return result
