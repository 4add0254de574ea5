"""Built-in checkers for common dependencies.

Supports: HTTP(S) URL, TCP connect, free disk space.
Every probe is total: failures come back as a DOWN report with an
``error`` info entry, never as an exception.
"""

from __future__ import annotations

import logging
import shutil
import socket

import httpx

from .report import Health

logger = logging.getLogger(__name__)


# ── HTTP ─────────────────────────────────────────────────────────────────────


class URLChecker:
    """UP when ``url`` answers with ``expected_status``."""

    def __init__(
        self,
        url: str,
        method: str = "GET",
        expected_status: int = 200,
        timeout_ms: int = 10_000,
    ) -> None:
        self.url = url
        self.method = method
        self.expected_status = expected_status
        self.timeout_ms = timeout_ms

    def check(self) -> Health:
        health = Health()
        try:
            with httpx.Client(timeout=self.timeout_ms / 1000, follow_redirects=True) as client:
                resp = client.request(self.method, self.url)
        except httpx.TimeoutException:
            logger.debug("URL check timed out: %s", self.url)
            return health.down().add_info("error", f"Timed out after {self.timeout_ms}ms")
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.debug("URL check failed: %s: %s", self.url, e)
            return health.down().add_info("error", f"Connection error: {e}")
        except Exception as e:
            return health.down().add_info("error", f"Error: {type(e).__name__}: {e}")

        if resp.status_code == self.expected_status:
            health.up()
        else:
            health.down()
        return health.add_info("code", resp.status_code)


# ── TCP ──────────────────────────────────────────────────────────────────────


class TCPChecker:
    """UP when a TCP connection to host:port can be opened."""

    def __init__(self, host: str, port: int, timeout_ms: int = 5_000) -> None:
        self.host = host
        self.port = port
        self.timeout_ms = timeout_ms

    def check(self) -> Health:
        address = f"{self.host}:{self.port}"
        health = Health().add_info("address", address)
        try:
            sock = socket.create_connection((self.host, self.port), timeout=self.timeout_ms / 1000)
            sock.close()
        except OSError as e:
            return health.down().add_info("error", f"TCP connect failed: {type(e).__name__}: {e}")
        except Exception as e:
            return health.down().add_info("error", f"TCP error: {type(e).__name__}: {e}")
        return health.up()


# ── Disk ─────────────────────────────────────────────────────────────────────


class DiskSpaceChecker:
    """UP while the filesystem holding ``path`` has at least ``threshold_bytes`` free."""

    def __init__(self, path: str, threshold_bytes: int) -> None:
        self.path = path
        self.threshold_bytes = threshold_bytes

    def check(self) -> Health:
        health = Health()
        try:
            usage = shutil.disk_usage(self.path)
        except OSError as e:
            return health.down().add_info("error", str(e))
        except Exception as e:
            return health.down().add_info("error", f"Disk error: {type(e).__name__}: {e}")

        if usage.free < self.threshold_bytes:
            health.down()
        else:
            health.up()

        return health.add_info("free", usage.free).add_info("threshold", self.threshold_bytes)
