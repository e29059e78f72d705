"""Addressable handle for one discovered device."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from .apps import ActiveAppInfo, AppInfo
from .device_info import DeviceInfo
from .ports import DeviceQueryPort


@dataclass(frozen=True)
class Device:
    """A device base URL bound to the query capability used to reach it.

    ``url`` is taken verbatim from discovery and may be empty or malformed;
    such handles still exist but every query on them raises
    ``TransportError``. ``queries`` is shared between handles and is not
    owned by any one of them.
    """

    url: str
    queries: DeviceQueryPort

    def get_device_information(self) -> DeviceInfo:
        """Fetch ``/query/device-info``."""
        return self.queries.device_info(self.url)

    def get_active_app(self) -> ActiveAppInfo:
        """Fetch ``/query/active-app``."""
        return self.queries.active_app(self.url)

    def get_installed_apps(self) -> List[AppInfo]:
        """Fetch ``/query/apps`` in on-device order."""
        return self.queries.installed_apps(self.url)


__all__ = ["Device"]
