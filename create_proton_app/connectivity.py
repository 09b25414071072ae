"""Network reachability probe.

A single outbound request decides whether the install step may run.  The
answer is a plain boolean: the probe never raises.
"""

from __future__ import annotations

import httpx

from .config import DEFAULT_PROBE_URL


async def is_online(url: str = DEFAULT_PROBE_URL, timeout: float = 5.0) -> bool:
    """Return ``True`` if *url* answers with any HTTP response.

    The status code is irrelevant (a registry answering 404 or 503 is still
    reachable); connection failures, DNS errors, proxy errors and timeouts
    all count as offline, and so does a URL httpx cannot parse.
    """
    try:
        async with httpx.AsyncClient(
            timeout=httpx.Timeout(timeout, connect=timeout),
            follow_redirects=False,
        ) as client:
            await client.head(url)
            return True
    except (httpx.HTTPError, httpx.InvalidURL):
        return False
