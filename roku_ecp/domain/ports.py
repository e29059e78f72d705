from __future__ import annotations

from typing import List, Protocol

from .apps import ActiveAppInfo, AppInfo
from .device_info import DeviceInfo
from .discovery import ServiceRecord


# ---- Ports (Hexagonal boundaries) ----
class DiscoveryPort(Protocol):
    """Search the local network for services of one service type."""

    def search(
        self, service_type: str, timeout_s: int, local_iface: str = ""
    ) -> List[ServiceRecord]: ...


class HttpResponsePort(Protocol):
    """Minimal response surface consumed by the query adapter."""

    content: bytes

    def close(self) -> None: ...


class HttpTransportPort(Protocol):
    """Blocking GET transport, reusable and shared between devices."""

    def get(self, url: str) -> HttpResponsePort: ...
    def close(self) -> None: ...


class DeviceQueryPort(Protocol):
    """Read-only ECP queries against one device base URL."""

    def device_info(self, base_url: str) -> DeviceInfo: ...
    def active_app(self, base_url: str) -> ActiveAppInfo: ...
    def installed_apps(self, base_url: str) -> List[AppInfo]: ...
