"""
Path inventory — index every resource of a REST API by its path.
"""

from __future__ import annotations

import logging

from gwimport.adapters.base import DEFAULT_GATEWAY_PAGE_LIMIT, ProviderClient
from gwimport.core.models.inventory import PathIndex

logger = logging.getLogger(__name__)


async def list_paths(
    client: ProviderClient,
    rest_api_id: str,
    limit: int = DEFAULT_GATEWAY_PAGE_LIMIT,
) -> PathIndex:
    """Build the path → resource ID mapping for one REST API.

    An API without resources gives an empty mapping.
    """
    path_ids: PathIndex = {}
    for resource in await client.get_resources(rest_api_id, limit=limit):
        path_ids[resource.path] = resource.id

    logger.debug("REST API %s has %d resource paths", rest_api_id, len(path_ids))
    return path_ids
