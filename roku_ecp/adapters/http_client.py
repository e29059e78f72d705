"""Shared HTTP transport for the ECP query adapter.

This module provides a thin wrapper around ``requests.Session`` so every
device handle produced by one discovery call can share a connection pool and
a timeout policy.

Dependencies:
    - ``requests`` for network I/O.
    - ``roku_ecp.domain.errors.TransportError`` for typed transport failures.

Call context:
    - Constructed by ``roku_ecp.usecases.discover_devices`` as the default
      transport, or by callers who want to configure timeouts themselves.
    - Used only by ``EcpRestAdapter``; use cases interact through ports.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Optional

import requests
from requests import exceptions as req_exc

from roku_ecp.domain.errors import TransportError


@dataclass
class HttpConfig:
    """Timeout and header configuration for ECP HTTP calls.

    Attributes:
        request_timeout_s: Connect/read timeout in seconds for each GET.
        accept: ``Accept`` header sent with every request.
    """
    request_timeout_s: float = 10.0
    accept: str = "text/xml"


class HttpTransport:
    """Shared requests wrapper issuing single-attempt GET requests.

    The transport never retries: a failure is surfaced to the caller on
    first occurrence. HTTP status codes are not inspected here; callers
    decide what a response body means.
    """

    def __init__(
        self,
        cfg: Optional[HttpConfig] = None,
        *,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Create a transport.

        Args:
            cfg: Timeout and header settings; defaults to ``HttpConfig()``.
            session: Pre-built session to reuse, e.g. one with custom
                adapters mounted. A new ``requests.Session`` when omitted.

        Side Effects:
            Creates a persistent ``requests.Session`` object when none is given.
        """
        self.cfg = cfg or HttpConfig()
        self.session = session or requests.Session()
        self._log = logging.getLogger(__name__)

    def _headers(self) -> Dict[str, str]:
        return {"Accept": self.cfg.accept}

    def get(self, url: str) -> requests.Response:
        """Send one streaming GET request.

        Args:
            url: Absolute endpoint URL. Empty or scheme-less URLs fail.

        Returns:
            ``requests.Response`` with an unread body. The caller must close it.

        Raises:
            TransportError: If the request cannot be sent or no response
                arrives (connection refused, timeout, malformed URL).
        """
        context = f"GET {url}"
        self._log.debug("%s (timeout=%ss)", context, self.cfg.request_timeout_s)
        try:
            return self.session.get(
                url,
                headers=self._headers(),
                timeout=self.cfg.request_timeout_s,
                stream=True,
            )
        except (req_exc.RequestException, ValueError) as exc:
            # urllib3 LocationParseError (a ValueError) escapes requests for
            # hosts with empty or overlong labels.
            raise TransportError(
                f"Request to {url!r} failed: {exc}", context=context, cause=exc
            ) from exc

    def close(self) -> None:
        """Release pooled connections."""
        self.session.close()


__all__ = ["HttpConfig", "HttpTransport"]
