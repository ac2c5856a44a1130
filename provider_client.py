"""HTTP transport shared by the provider adapters.

A light wrapper around a single JSON POST. There is no retry: each correction
is attempted exactly once and transport failures surface as ProviderError.
"""
from typing import Any, Dict, Optional

import requests
from loguru import logger

from errors import ProviderError


def post_json(provider: str, url: str, payload: Dict[str, Any], headers: Optional[Dict[str, str]] = None,
              timeout: Optional[float] = None) -> requests.Response:
    """POST payload as JSON and return the raw response.

    Non-success statuses are returned to the caller, which knows the
    provider-specific error shape. Connection errors and timeouts raise
    ProviderError carrying the transport message.
    """
    request_headers = {"Content-Type": "application/json"}
    if headers:
        request_headers.update(headers)

    logger.debug("POST {} (provider={})", url, provider)
    try:
        resp = requests.post(url, json=payload, headers=request_headers, timeout=timeout)
    except requests.RequestException as e:
        raise ProviderError(provider, str(e)) from e
    logger.debug("{} responded with HTTP {}", provider, resp.status_code)
    return resp


def read_json(resp: requests.Response) -> Optional[Any]:
    """Return the decoded JSON body, or None when the body is not JSON."""
    try:
        return resp.json()
    except ValueError:
        return None
