"""Proxy: a caching front for a slow ``Server``."""

from __future__ import annotations

import logging


logger = logging.getLogger(__name__)


class Server:
    def request(self, url: str) -> None:
        print(f"Fetching data from {url}")


class ProxyServer:
    """Intercepts requests and answers repeats from a per-URL cache.

    On a miss the cache is filled with a placeholder string derived from the
    URL, not with whatever the real server returns, and the real server is
    hit exactly once for that URL.
    """

    def __init__(self, server: Server | None = None) -> None:
        self.cache: dict[str, str] = {}
        self.server = server or Server()

    def request(self, url: str) -> str:
        if url not in self.cache:
            logger.debug("Cache miss for %s", url)
            self.cache[url] = f"Cached data from {url}"
            self.server.request(url)
        else:
            logger.debug("Cache hit for %s", url)
        return self.cache[url]


def demo() -> None:
    proxy = ProxyServer()
    print(proxy.request("api/data"))
    print(proxy.request("api/data"))
