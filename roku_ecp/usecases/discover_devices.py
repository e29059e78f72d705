"""Discovery-focused use cases built on ``DiscoveryPort``.

``DiscoverDevices`` searches the network and turns every response into a
``Device`` handle, while ``build_handles`` performs only the pure mapping so
callers can feed records obtained elsewhere (a cached scan, a test double).
"""

# roku_ecp/usecases/discover_devices.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

from roku_ecp.adapters.ecp_rest import EcpRestAdapter
from roku_ecp.adapters.http_client import HttpTransport
from roku_ecp.adapters.ssdp_discovery import SsdpDiscoveryAdapter
from roku_ecp.domain.device import Device
from roku_ecp.domain.discovery import ECP_SERVICE_TYPE, ServiceRecord
from roku_ecp.domain.errors import DiscoveryError
from roku_ecp.domain.ports import DeviceQueryPort, DiscoveryPort

DEFAULT_TIMEOUT_S = 3

_log = logging.getLogger(__name__)


def default_queries() -> EcpRestAdapter:
    """Return a new HTTP query adapter over a fresh ``requests`` session.

    The caller owns the adapter; ``close()`` it to release the session once
    the handles bound to it are no longer needed.
    """
    return EcpRestAdapter(HttpTransport())


def build_handles(
    records: Iterable[ServiceRecord], queries: Optional[DeviceQueryPort] = None
) -> List[Device]:
    """Map discovery records to device handles, one per record, in order.

    No record is dropped and no location is validated; a bad location
    surfaces as ``TransportError`` when the handle is queried.

    Args:
        records: Discovery records; only ``location`` is used.
        queries: Query capability bound to every handle. A single
            ``default_queries()`` instance is shared when omitted. Reach it
            through ``handles[0].queries`` to ``close()`` it.

    Returns:
        List[Device]: Handles in the same order as ``records``.
    """
    bound = queries if queries is not None else default_queries()
    return [Device(url=record.location or "", queries=bound) for record in records]


@dataclass
class DiscoverDevices:
    """Use case: SSDP search followed by handle construction."""

    search_port: DiscoveryPort
    queries: Optional[DeviceQueryPort] = None
    local_iface: str = ""

    def __call__(
        self,
        service_type: str = ECP_SERVICE_TYPE,
        timeout_s: int = DEFAULT_TIMEOUT_S,
    ) -> List[Device]:
        """Search for ``service_type`` and return one handle per response.

        Args:
            service_type: SSDP search target.
            timeout_s: Listen window in seconds.

        Returns:
            List[Device]: Handles in response order, possibly empty.

        Raises:
            DiscoveryError: If the search itself fails. Not retried.

        Side Effects:
            Performs network discovery through ``DiscoveryPort.search``.
        """
        context = f"discover[{service_type}]"
        try:
            records = self.search_port.search(service_type, timeout_s, self.local_iface)
        except DiscoveryError:
            raise
        except Exception as exc:
            raise DiscoveryError(
                f"Failed to discover devices for {service_type!r}: {exc}",
                context=context,
                cause=exc,
            ) from exc
        devices = build_handles(records, self.queries)
        _log.info("%s: %d device(s) found", context, len(devices))
        return devices


def discover(
    service_type: str = ECP_SERVICE_TYPE,
    timeout_s: int = DEFAULT_TIMEOUT_S,
    *,
    search_port: Optional[DiscoveryPort] = None,
    queries: Optional[DeviceQueryPort] = None,
) -> List[Device]:
    """Discover ECP devices on the local network.

    Uses ``SsdpDiscoveryAdapter`` and a fresh ``EcpRestAdapter`` unless the
    caller injects its own ports.

    Raises:
        DiscoveryError: If the network search fails.
    """
    usecase = DiscoverDevices(
        search_port=search_port if search_port is not None else SsdpDiscoveryAdapter(),
        queries=queries,
    )
    return usecase(service_type=service_type, timeout_s=timeout_s)


__all__ = [
    "DEFAULT_TIMEOUT_S",
    "DiscoverDevices",
    "build_handles",
    "default_queries",
    "discover",
]
