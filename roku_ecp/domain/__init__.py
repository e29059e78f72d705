"""Domain package exports for value objects, ports and errors."""

from .apps import ActiveAppInfo, AppInfo
from .device import Device
from .device_info import DeviceInfo
from .discovery import ECP_SERVICE_TYPE, ServiceRecord
from .errors import DecodeError, DiscoveryError, EcpError, TransportError

__all__ = [
    "ActiveAppInfo",
    "AppInfo",
    "DecodeError",
    "Device",
    "DeviceInfo",
    "DiscoveryError",
    "ECP_SERVICE_TYPE",
    "EcpError",
    "ServiceRecord",
    "TransportError",
]
