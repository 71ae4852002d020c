"""
Configuration loader — reads serverless.yml into domain models.

This is the primary entry point for loading the service document.
It reads YAML, validates against Pydantic schemas, and returns
typed domain objects. The import configuration lives under
``custom.importApiGateway``; without a ``name`` there the resolver
stays inactive.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from gwimport.core.models.config import GatewayImportConfig
from gwimport.core.models.service import ServiceModel

logger = logging.getLogger(__name__)

# Default service document filenames, in lookup order
SERVICE_CONFIG_FILES = ("serverless.yml", "serverless.yaml")

# custom.<key> holding the import configuration
IMPORT_CONFIG_KEY = "importApiGateway"


class ConfigError(Exception):
    """Raised when the service document is invalid or missing."""


def find_service_file(start_dir: Path | None = None) -> Path | None:
    """Search for serverless.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to the service document, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        for filename in SERVICE_CONFIG_FILES:
            candidate = current / filename
            if candidate.is_file():
                return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def load_service(path: Path | None = None) -> ServiceModel:
    """Load and validate a service document.

    Args:
        path: Explicit path to serverless.yml. If None, searches upward.

    Returns:
        Validated ServiceModel.

    Raises:
        ConfigError: If the file is missing or invalid.
    """
    if path is None:
        path = find_service_file()

    if path is None:
        raise ConfigError("No serverless.yml found. Specify one with --config.")

    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading service config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    try:
        return ServiceModel.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid service configuration: {e}") from e


def load_import_config(service: ServiceModel) -> GatewayImportConfig | None:
    """Extract the import configuration from ``custom.importApiGateway``.

    Returns:
        The configuration, or None when the block is absent or has
        no ``name`` (resolver inactive).

    Raises:
        ConfigError: If the block is present but malformed.
    """
    block = (service.custom or {}).get(IMPORT_CONFIG_KEY)
    if block is None:
        return None

    if not isinstance(block, dict):
        raise ConfigError(
            f"custom.{IMPORT_CONFIG_KEY} must be a mapping, got {type(block).__name__}"
        )

    if not block.get("name"):
        logger.debug("custom.%s has no name, resolver inactive", IMPORT_CONFIG_KEY)
        return None

    try:
        return GatewayImportConfig.model_validate(block)
    except ValidationError as e:
        raise ConfigError(f"Invalid custom.{IMPORT_CONFIG_KEY}: {e}") from e


def save_service(service: ServiceModel, path: Path) -> None:
    """Write the service document back as YAML."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        yaml.safe_dump(service.to_document(), sort_keys=False, allow_unicode=True),
        encoding="utf-8",
    )
    logger.debug("Wrote service config to %s", path)
