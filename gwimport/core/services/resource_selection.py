"""
Resource selection — decide which existing API resources to import.

Explicit ``resources`` are validated against the path index. When
none are given, they are inferred from the functions' HTTP events:
an existing path that is a string prefix of an event path is an
ancestor the deployment hangs new routes from, so it gets imported.

    existing "/users"  +  event "/users/{id}"  →  import "/users"

Matches are not deduplicated. Two events under "/users" yield
"/users" twice.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from gwimport.core.errors import MissingPathError
from gwimport.core.models.config import GatewayImportConfig
from gwimport.core.models.inventory import PathIndex
from gwimport.core.models.service import FunctionDescriptor

logger = logging.getLogger(__name__)


def match_existing_paths(event_path: str, path_index: PathIndex) -> list[str]:
    """Existing paths that ``event_path`` starts with, in index order."""
    return [existing for existing in path_index if event_path.startswith(existing)]


def infer_resource_paths(
    functions: Iterable[tuple[str, FunctionDescriptor]],
    path_index: PathIndex,
) -> list[str]:
    """Infer resource paths from HTTP events.

    Falls back to every indexed path when no function has an HTTP
    event or when no event path matches an existing path.
    """
    candidates: list[str] = []
    for fname, func in functions:
        for event_path in func.http_paths():
            matches = match_existing_paths(event_path, path_index)
            logger.debug("Function '%s' %s → %s", fname, event_path, matches)
            candidates.extend(matches)

    if candidates:
        return candidates

    logger.debug("No HTTP event matched an existing path, importing all paths")
    return list(path_index)


def select_resources(
    config: GatewayImportConfig,
    path_index: PathIndex,
    functions: Iterable[tuple[str, FunctionDescriptor]] = (),
    rest_api_id: str = "",
) -> list[tuple[str, str]]:
    """Resolve the configured (or inferred) resource paths to IDs.

    When ``config.resources`` is unset, the inferred list is written
    back into it. An explicitly empty list is kept as-is and selects
    nothing.

    Args:
        config: Import configuration; ``resources`` may be filled in.
        path_index: Existing path → resource ID mapping.
        functions: (name, function) pairs whose HTTP events drive inference.
        rest_api_id: Used only to name the API in errors.

    Returns:
        (path, resource ID) pairs in selection order.

    Raises:
        MissingPathError: A selected path is not in the index.
    """
    if not config.resources_declared:
        config.resources = infer_resource_paths(functions, path_index)
        logger.info("Inferred resource paths: %s", ", ".join(config.resources) or "(none)")

    selected: list[tuple[str, str]] = []
    for resource_path in config.resources or []:
        resource_id = path_index.get(resource_path)
        if not resource_id:
            raise MissingPathError(resource_path, rest_api_id)
        selected.append((resource_path, resource_id))

    return selected
