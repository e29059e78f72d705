"""Use case for collecting a full query snapshot from each discovered device."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from roku_ecp.domain.apps import ActiveAppInfo, AppInfo
from roku_ecp.domain.device import Device
from roku_ecp.domain.device_info import DeviceInfo
from roku_ecp.domain.errors import EcpError

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeviceSnapshot:
    """Results of all three queries for one device."""

    url: str
    info: DeviceInfo
    active_app: ActiveAppInfo
    installed_apps: List[AppInfo]


@dataclass
class SnapshotResult:
    """Per-device snapshots and query failures, keyed by device URL."""

    snapshots: Dict[str, DeviceSnapshot] = field(default_factory=dict)
    failures: Dict[str, EcpError] = field(default_factory=dict)


@dataclass
class CollectDeviceSnapshots:
    """Use-case callable querying each device in turn.

    A failure on one device is recorded and does not stop the others.
    Devices are queried sequentially, in the order given.
    """

    def __call__(self, devices: Iterable[Device]) -> SnapshotResult:
        result = SnapshotResult()
        for device in devices:
            try:
                snapshot = DeviceSnapshot(
                    url=device.url,
                    info=device.get_device_information(),
                    active_app=device.get_active_app(),
                    installed_apps=device.get_installed_apps(),
                )
            except EcpError as exc:
                _log.warning("Query failed for %r (%s): %s", device.url, type(exc).__name__, exc)
                result.failures[device.url] = exc
                continue
            result.snapshots[device.url] = snapshot
        return result


__all__ = ["CollectDeviceSnapshots", "DeviceSnapshot", "SnapshotResult"]
