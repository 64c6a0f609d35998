"""Live model list from the OpenRouter API (free, no auth)."""

import http.client
import json
import logging
import urllib.error
import urllib.request
from typing import Any

from .. import __version__

logger = logging.getLogger(__name__)

USER_AGENT = f"llm-cost-cli/{__version__}"


class FetchError(Exception):
    """The remote model list could not be retrieved or parsed."""


def fetch_models(
    url: str,
    timeout: float = 8.0,
    user_agent: str = USER_AGENT,
) -> list[dict[str, Any]]:
    """GET the aggregator model list.

    Args:
        url: Models endpoint (e.g. https://openrouter.ai/api/v1/models)
        timeout: Seconds before the request is abandoned
        user_agent: Client identity sent with the request

    Returns:
        The raw records from the response's ``data`` list.

    Raises:
        FetchError: On network error, timeout, non-2xx status, or a
            malformed body.
    """
    req = urllib.request.Request(url, headers={"User-Agent": user_agent})
    try:
        with urllib.request.urlopen(req, timeout=timeout) as resp:
            status = resp.status
            body = resp.read()
    except urllib.error.HTTPError as e:
        raise FetchError(f"OpenRouter API returned {e.code}") from e
    except (urllib.error.URLError, http.client.HTTPException, TimeoutError, OSError) as e:
        raise FetchError(f"Failed to reach {url}: {e}") from e

    if not 200 <= status < 300:
        raise FetchError(f"OpenRouter API returned {status}")

    try:
        payload = json.loads(body.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise FetchError(f"Malformed response body: {e}") from e

    data = payload.get("data") if isinstance(payload, dict) else None
    if not isinstance(data, list):
        raise FetchError("Response body has no 'data' list")

    logger.debug(f"Fetched {len(data)} raw model records from {url}")
    return data
