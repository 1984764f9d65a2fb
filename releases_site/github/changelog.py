"""Fetches the raw upstream changelog document."""

import httpx
import structlog

from releases_site.utils.constants import FETCH_TIMEOUT

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


async def fetch_changelog(url: str, timeout: float = FETCH_TIMEOUT, transport: httpx.AsyncBaseTransport | None = None) -> str:
    """Download the changelog document and return its text.

    Raises:
        httpx.HTTPError: If the request fails or returns a non-2xx status.
    """
    logger.info("Fetching changelog", url=url)
    async with httpx.AsyncClient(timeout=timeout, follow_redirects=True, transport=transport) as client:
        response = await client.get(url)
        response.raise_for_status()
    logger.debug("Fetched changelog", url=url, length=len(response.text))
    return response.text
