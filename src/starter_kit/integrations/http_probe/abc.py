"""Abstract base class for HTTP existence probes."""

from abc import ABC, abstractmethod


class HttpProbe(ABC):
    """Abstract interface for checking whether a URL answers successfully.

    Implementations include:
    - RealHttpProbe: httpx backed, with a bounded timeout per request
    - FakeHttpProbe: Canned status codes for testing
    """

    @abstractmethod
    def probe(self, url: str) -> bool:
        """Request url and report whether it answered with a 2xx status.

        Transport failures (timeouts, DNS errors, refused connections) must be
        reported as False, never raised.

        Args:
            url: Absolute http(s) URL

        Returns:
            True if the response was successful, False otherwise
        """
        ...
