"""Latency probe — time a single HTTP request to a registry."""

from __future__ import annotations

import logging
import time

import httpx

from regswitch.errors import ProbeError

logger = logging.getLogger(__name__)


def ping(url: str, timeout: float | httpx.Timeout | None = None, client: httpx.Client | None = None) -> int:
    """Return the round-trip time of one GET to ``url`` in milliseconds.

    Any HTTP status counts as a response. Transport failures (DNS, refused
    connection, timeout) and malformed URLs raise :class:`ProbeError`.
    ``timeout`` applies to this request whether or not a client is passed.
    """
    kwargs = {} if timeout is None else {"timeout": timeout}
    own_client = client is None
    if own_client:
        client = httpx.Client()

    start = time.monotonic()
    try:
        response = client.get(url, **kwargs)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        raise ProbeError(f"{url}: {e}") from e
    finally:
        if own_client:
            client.close()

    elapsed = int((time.monotonic() - start) * 1000)
    logger.debug("GET %s -> %s in %dms", url, response.status_code, elapsed)
    return elapsed
