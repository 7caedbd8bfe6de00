"""Fake HttpProbe with canned responses for testing."""

from fnmatch import fnmatchcase

from starter_kit.integrations.http_probe.abc import HttpProbe


class FakeHttpProbe(HttpProbe):
    """In-memory fake implementation of HttpProbe.

    Responses are keyed by glob patterns matched against the URL with its
    scheme stripped, so `"github.com/bobsled/*"` matches
    `https://github.com/bobsled/speed-calculator`. The first matching pattern
    wins; unmatched URLs answer `default_status`.

    Examples:
        >>> probe = FakeHttpProbe(responses={"repo.packagist.org/*": 200})
        >>> probe.probe("https://repo.packagist.org/p2/statamic/seo-pro.json")
        True
        >>> probe.probe("https://github.com/statamic/seo-pro")
        False
        >>> len(probe.probed_urls)
        2
    """

    def __init__(
        self,
        *,
        responses: dict[str, int] | None = None,
        default_status: int = 404,
    ) -> None:
        """Create FakeHttpProbe.

        Args:
            responses: Glob pattern -> HTTP status code
            default_status: Status for URLs matching no pattern
        """
        self._responses = responses or {}
        self._default_status = default_status
        self._probed_urls: list[str] = []

    @property
    def probed_urls(self) -> list[str]:
        """Every URL probed, in order."""
        return list(self._probed_urls)

    def probe(self, url: str) -> bool:
        self._probed_urls.append(url)
        status = self._status_for(url)
        return 200 <= status < 300

    def _status_for(self, url: str) -> int:
        bare = url.split("://", 1)[1] if "://" in url else url
        for pattern, status in self._responses.items():
            if fnmatchcase(bare, pattern):
                return status
        return self._default_status
