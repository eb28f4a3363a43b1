from __future__ import annotations

import logging
from typing import Any, List, Optional

import httpx

from grid_browser.core.exceptions import FetchError

logger = logging.getLogger(__name__)


class DatasetFetcher:
    """
    Fetches the dataset via HTTP.

    The endpoint must answer with a JSON array of objects. Anything else
    (transport error, non-2xx status, bad JSON, wrong shape) is raised as
    FetchError. No retries.
    """

    TIMEOUT = 30.0

    def __init__(
        self,
        url: str,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.url = url
        self.timeout = timeout if timeout is not None else self.TIMEOUT
        self._transport = transport

    def fetch(self) -> List[Any]:
        logger.info("Fetching dataset", extra={"url": self.url})
        try:
            with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
                response = client.get(self.url)
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPError as e:
            raise FetchError(f"Request to {self.url} failed: {e}") from e
        except ValueError as e:
            raise FetchError(f"Response from {self.url} is not valid JSON: {e}") from e

        if not isinstance(payload, list):
            raise FetchError(
                f"Expected a JSON array from {self.url}, got {type(payload).__name__}"
            )

        logger.info("Dataset fetched", extra={"url": self.url, "n_records": len(payload)})
        return payload
