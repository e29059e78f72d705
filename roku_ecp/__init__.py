"""
roku-ecp - discover Roku-style media players and query them over ECP.

This package finds devices advertising the ``roku:ecp`` SSDP service type
and exposes three read-only queries per device: device metadata, the active
application and the installed application list.

Key modules:
- domain: typed values (DeviceInfo, AppInfo, ActiveAppInfo), ports, errors
- adapters.ssdp_discovery: SSDP M-SEARCH via ssdpy
- adapters.ecp_rest: HTTP query adapter over requests
- adapters.ecp_xml: XML wire codec
- usecases.discover_devices: discover() / build_handles()
- utils.logging: configure_logging() for host programs

Example usage:
    from roku_ecp import discover

    for device in discover(timeout_s=3):
        info = device.get_device_information()
        print(f"{info.user_device_name}: {device.get_active_app().app.name}")
"""

__version__ = "0.1.0"

from .adapters.ecp_rest import EcpRestAdapter
from .adapters.http_client import HttpConfig, HttpTransport
from .domain import (
    ECP_SERVICE_TYPE,
    ActiveAppInfo,
    AppInfo,
    DecodeError,
    Device,
    DeviceInfo,
    DiscoveryError,
    EcpError,
    ServiceRecord,
    TransportError,
)
from .usecases.discover_devices import DiscoverDevices, build_handles, discover
from .utils.logging import configure_root as configure_logging

__all__ = [
    "discover",
    "build_handles",
    "configure_logging",
    "DiscoverDevices",
    "Device",
    "DeviceInfo",
    "AppInfo",
    "ActiveAppInfo",
    "ServiceRecord",
    "ECP_SERVICE_TYPE",
    "EcpRestAdapter",
    "HttpConfig",
    "HttpTransport",
    "EcpError",
    "TransportError",
    "DecodeError",
    "DiscoveryError",
]
