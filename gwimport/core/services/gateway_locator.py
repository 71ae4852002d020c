"""
Gateway locator — find a REST API's ID by its display name.
"""

from __future__ import annotations

import logging

from gwimport.adapters.base import DEFAULT_GATEWAY_PAGE_LIMIT, ProviderClient

logger = logging.getLogger(__name__)


async def find_rest_api_id(
    client: ProviderClient,
    name: str,
    limit: int = DEFAULT_GATEWAY_PAGE_LIMIT,
) -> str | None:
    """Return the ID of the first REST API named exactly ``name``.

    Names are compared case-sensitively. ``None`` means no match,
    which callers treat as a normal outcome rather than a failure.
    """
    for rest_api in await client.list_rest_apis(limit=limit):
        if rest_api.name == name:
            logger.debug("REST API '%s' is %s", name, rest_api.id)
            return rest_api.id
    return None
