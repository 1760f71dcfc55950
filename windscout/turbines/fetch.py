"""HTTP download helper with retries, shared by the OPSD and NVE loaders."""
from __future__ import annotations

import logging
import time
from typing import Mapping, Optional

import requests

from ..config import DOWNLOAD_ATTEMPTS, DOWNLOAD_BACKOFF, HTTP_TIMEOUT

LOGGER = logging.getLogger("windscout.fetch")


def download(
    url: str,
    *,
    params: Optional[Mapping[str, str]] = None,
    attempts: int = DOWNLOAD_ATTEMPTS,
    backoff: float = DOWNLOAD_BACKOFF,
    timeout: float = HTTP_TIMEOUT,
) -> requests.Response:
    """
    GET ``url`` and return the response, retrying request and HTTP errors.

    Raises:
        ValueError: if attempts < 1
        RuntimeError: once every attempt has failed
    """
    if attempts < 1:
        raise ValueError(f"attempts must be >= 1, got {attempts}")

    for idx in range(1, attempts + 1):
        try:
            LOGGER.info("Downloading %s (attempt %s/%s)", url, idx, attempts)
            response = requests.get(url, params=params, timeout=timeout)
            response.raise_for_status()
            return response
        except requests.RequestException as exc:
            if idx == attempts:
                raise RuntimeError(f"Failed to download {url}") from exc
            LOGGER.warning("Download failed (%s); retrying in %.1fs", exc, backoff)
            time.sleep(backoff)
