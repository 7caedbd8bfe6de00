"""Production HttpProbe using httpx."""

import logging

import httpx

from starter_kit.integrations.http_probe.abc import HttpProbe

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 5.0


class RealHttpProbe(HttpProbe):
    """Issue streamed GET requests and report success.

    Only the status line and headers are waited for; the response body is
    never read. Redirects are followed, so a renamed GitHub repository still
    counts as found.
    """

    def __init__(
        self,
        *,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Create RealHttpProbe.

        Args:
            timeout: Seconds allowed per request before it counts as a failure
            transport: Optional httpx transport (tests pass httpx.MockTransport)
        """
        self._timeout = timeout
        self._transport = transport

    def probe(self, url: str) -> bool:
        try:
            with httpx.Client(
                timeout=self._timeout,
                follow_redirects=True,
                transport=self._transport,
            ) as client, client.stream("GET", url) as response:
                logger.debug("Probe %s -> %d", url, response.status_code)
                return response.is_success
        except httpx.HTTPError as e:
            logger.debug("Probe %s failed: %s: %s", url, type(e).__name__, e)
            return False
