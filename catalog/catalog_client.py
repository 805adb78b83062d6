from __future__ import annotations

import logging
import time
from typing import Any, Dict, List, Optional

import requests

logger = logging.getLogger(__name__)


class CatalogFetchError(ValueError):
    pass


def _request_with_backoff(url: str, params: dict, max_retries: int = 3, timeout: int = 25):
    """HTTP GET with exponential backoff for rate limits and transient errors."""
    for attempt in range(max_retries):
        try:
            resp = requests.get(url, params=params, timeout=timeout)
            if resp.status_code == 429:
                wait = 2 ** attempt + 0.5
                logger.warning("Rate limited (429), retrying in %.1fs (attempt %d/%d)", wait, attempt + 1, max_retries)
                time.sleep(wait)
                continue
            resp.raise_for_status()
            return resp
        except requests.exceptions.ConnectionError as exc:
            if attempt < max_retries - 1:
                wait = 2 ** attempt
                logger.warning("Connection error, retrying in %ds: %s", wait, exc)
                time.sleep(wait)
            else:
                raise
    # Final attempt after all retries exhausted
    resp = requests.get(url, params=params, timeout=timeout)
    resp.raise_for_status()
    return resp


def _extract_rows(payload: Any) -> List[Dict[str, Any]]:
    # Exports come either as a bare list or wrapped as {"products": [...]}.
    if isinstance(payload, dict):
        payload = payload.get("products", payload.get("items"))
    if not isinstance(payload, list):
        raise CatalogFetchError("Catalog export is not a list of products.")
    return [row for row in payload if isinstance(row, dict)]


def fetch_catalog_snapshot(
    url: str,
    in_stock_only: bool = True,
    page_size: int = 200,
    max_pages: int = 50,
    extra_params: Optional[Dict[str, Any]] = None,
) -> List[Dict[str, Any]]:
    """Pull every page of the storefront's product export as raw rows."""
    rows: List[Dict[str, Any]] = []
    for page in range(1, max_pages + 1):
        params: Dict[str, Any] = {"page": page, "limit": page_size}
        if in_stock_only:
            params["inStock"] = "true"
        if extra_params:
            params.update(extra_params)

        resp = _request_with_backoff(url, params)
        try:
            batch = _extract_rows(resp.json())
        except ValueError as exc:
            raise CatalogFetchError(f"Invalid catalog page {page}: {exc}") from exc

        rows.extend(batch)
        logger.info("Fetched page %d: %d products", page, len(batch))
        if len(batch) < page_size:
            break
    return rows
