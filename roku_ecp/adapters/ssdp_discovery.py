"""SSDP discovery adapter for finding ECP devices on the local network.

This adapter implements ``DiscoveryPort`` with a single multicast M-SEARCH
sent through ``ssdpy`` and returns one ``ServiceRecord`` per response. It
does not deduplicate, filter or validate responses; that is left to callers.

Dependencies:
    - ``ssdpy.SSDPClient`` for the M-SEARCH socket handling.

Call context:
    - Invoked by ``DiscoverDevices`` / ``discover()`` use cases.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, List, Mapping, Optional

from ssdpy import SSDPClient

from roku_ecp.domain.discovery import ServiceRecord
from roku_ecp.domain.errors import DiscoveryError
from roku_ecp.domain.ports import DiscoveryPort


def _record_from_headers(headers: Mapping[str, Any]) -> ServiceRecord:
    """Build a service record from one response's header mapping.

    Header names are matched case-insensitively; missing headers become
    empty strings.
    """
    lowered = {str(key).lower(): value for key, value in headers.items()}

    def _text(key: str) -> str:
        value = lowered.get(key)
        return str(value).strip() if value is not None else ""

    return ServiceRecord(
        location=_text("location"),
        st=_text("st"),
        usn=_text("usn"),
        server=_text("server"),
    )


class SsdpDiscoveryAdapter(DiscoveryPort):
    """Search for services with ``ssdpy`` M-SEARCH requests."""

    def __init__(self, client_factory: Optional[Callable[..., Any]] = None) -> None:
        """Create discovery adapter.

        Args:
            client_factory: Callable returning an object with
                ``m_search(st=..., mx=...)``; defaults to ``ssdpy.SSDPClient``.
        """
        self._client_factory = client_factory or SSDPClient
        self._log = logging.getLogger(__name__)

    def search(
        self, service_type: str, timeout_s: int, local_iface: str = ""
    ) -> List[ServiceRecord]:
        """Send one M-SEARCH and collect responses until ``timeout_s`` elapses.

        Args:
            service_type: SSDP ``ST`` value, e.g. ``"roku:ecp"``.
            timeout_s: Listen window in seconds, also advertised as ``MX``.
            local_iface: Network interface name to bind to; empty for default.

        Returns:
            One record per response, in arrival order.

        Raises:
            DiscoveryError: If the socket cannot be opened or the search fails.
        """
        context = f"M-SEARCH {service_type}"
        kwargs: dict = {"timeout": timeout_s}
        if local_iface:
            kwargs["iface"] = local_iface.encode("utf-8")
        try:
            client = self._client_factory(**kwargs)
            responses = client.m_search(st=service_type, mx=timeout_s)
        except OSError as exc:
            raise DiscoveryError(
                f"SSDP search for {service_type!r} failed: {exc}", context=context, cause=exc
            ) from exc
        records = [_record_from_headers(headers) for headers in responses or []]
        self._log.debug("%s: %d response(s)", context, len(records))
        return records


__all__ = ["SsdpDiscoveryAdapter"]
