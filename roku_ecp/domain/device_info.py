"""Typed snapshot of the ``/query/device-info`` document.

The field list mirrors the device's wire format one to one; each field
carries the XML element name it is read from in its dataclass metadata.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Dict, Tuple


def _el(element: str, default: Any) -> Any:
    return field(default=default, metadata={"element": element})


@dataclass(frozen=True)
class DeviceInfo:
    """Identity, network, locale, power and feature-flag properties of a device."""

    udn: str = _el("udn", "")
    serial_number: str = _el("serial-number", "")
    device_id: str = _el("device-id", "")
    advertising_id: str = _el("advertising-id", "")
    vendor_name: str = _el("vendor-name", "")
    model_name: str = _el("model-name", "")
    model_number: str = _el("model-number", "")
    model_region: str = _el("model-region", "")
    is_tv: bool = _el("is-tv", False)
    is_stick: bool = _el("is-stick", False)
    screen_size: int = _el("screen-size", 0)
    panel_id: int = _el("panel-id", 0)
    tuner_type: str = _el("tuner-type", "")
    supports_ethernet: bool = _el("supports-ethernet", False)
    wifi_mac_address: str = _el("wifi-mac", "")
    wifi_driver: str = _el("wifi-driver", "")
    ethernet_mac_address: str = _el("ethernet-mac", "")
    network_type: str = _el("network-type", "")
    network_name: str = _el("network-name", "")
    friendly_device_name: str = _el("friendly-device-name", "")
    friendly_model_name: str = _el("friendly-model-name", "")
    default_device_name: str = _el("default-device-name", "")
    user_device_name: str = _el("user-device-name", "")
    user_device_location: str = _el("user-device-location", "")
    build_number: str = _el("build-number", "")
    software_version: str = _el("software-version", "")
    software_build: int = _el("software-build", 0)
    secure_device: bool = _el("secure-device", False)
    language: str = _el("language", "")
    country: str = _el("country", "")
    locale: str = _el("locale", "")
    time_zone_auto: bool = _el("time-zone-auto", False)
    time_zone: str = _el("time-zone", "")
    time_zone_name: str = _el("time-zone-name", "")
    time_zone_tz: str = _el("time-zone-tz", "")
    time_zone_offset: int = _el("time-zone-offset", 0)
    clock_format: str = _el("clock-format", "")
    uptime: int = _el("uptime", 0)
    power_mode: str = _el("power-mode", "")
    supports_suspend: bool = _el("supports-suspend", False)
    supports_find_remote: bool = _el("supports-find-remote", False)
    find_remote_is_possible: bool = _el("find-remote-is-possible", False)
    supports_audio_guide: bool = _el("supports-audio-guide", False)
    supports_rva: bool = _el("supports-rva", False)
    developer_enabled: bool = _el("developer-enabled", False)
    keyed_developer_id: str = _el("keyed-developer-id", "")
    search_enabled: bool = _el("search-enabled", False)
    search_channels_enabled: bool = _el("search-channels-enabled", False)
    voice_search_enabled: bool = _el("voice-search-enabled", False)
    notifications_enabled: bool = _el("notifications-enabled", False)
    notifications_first_use: bool = _el("notifications-first-use", False)
    supports_private_listening: bool = _el("supports-private-listening", False)
    supports_private_listening_dtv: bool = _el("supports-private-listening-dtv", False)
    supports_warm_standby: bool = _el("supports-warm-standby", False)
    headphones_connected: bool = _el("headphones-connected", False)
    expert_pq_enabled: str = _el("expert-pq-enabled", "")
    supports_ecs_textedit: bool = _el("supports-ecs-textedit", False)
    supports_ecs_microphone: bool = _el("supports-ecs-microphone", False)
    supports_wake_on_wlan: bool = _el("supports-wake-on-wlan", False)
    has_play_on_roku: bool = _el("has-play-on-roku", False)
    has_mobile_screensaver: bool = _el("has-mobile-screensaver", False)
    support_url: str = _el("support-url", "")
    grandcentral_version: str = _el("grandcentral-version", "")
    trc_version: str = _el("trc-version", "")
    trc_channel_version: str = _el("trc-channel-version", "")
    has_wifi_extender: bool = _el("has-wifi-extender", False)
    has_wifi_5g_support: bool = _el("has-wifi-5G-support", False)
    can_use_wifi_extender: bool = _el("can-use-wifi-extender", False)


def device_info_elements() -> Tuple[Tuple[str, str, type], ...]:
    """Return ``(element, field_name, kind)`` for every ``DeviceInfo`` field.

    ``kind`` is one of ``str``, ``bool`` or ``int`` and is taken from the
    field's zero value.
    """
    return tuple(
        (f.metadata["element"], f.name, type(f.default)) for f in fields(DeviceInfo)
    )


def element_map() -> Dict[str, str]:
    """Return the case-sensitive element-name to field-name mapping."""
    return {element: name for element, name, _ in device_info_elements()}


__all__ = ["DeviceInfo", "device_info_elements", "element_map"]
