from __future__ import annotations

from typing import List

import pytest

from roku_ecp.domain.apps import ActiveAppInfo, AppInfo
from roku_ecp.domain.device_info import DeviceInfo


@pytest.fixture
def tcl_device_info() -> DeviceInfo:
    """Device-info snapshot of a TCL television running Roku OS 9.2."""
    return DeviceInfo(
        udn="8000000-0000-1000-8000-d81399f9e18b",
        serial_number="X00000PGAVCY",
        device_id="S036D99GAVCY",
        advertising_id="428b7ed-4988-5218-a5d0-6977857dcddd",
        vendor_name="TCL",
        model_name="50S425-CA",
        model_number="C105X",
        model_region="CA",
        is_tv=True,
        is_stick=False,
        screen_size=50,
        panel_id=17,
        tuner_type="ATSC",
        supports_ethernet=True,
        wifi_mac_address="wifi-mac",
        wifi_driver="realtek",
        ethernet_mac_address="ethernet-mac",
        network_type="wifi",
        network_name="Wireless",
        friendly_device_name="TCL Roku TV",
        friendly_model_name="TCL Roku TV",
        default_device_name="TCL•Roku TV - X00000PGAVCY",
        user_device_name='50" TCL Roku TV',
        user_device_location="Living Room",
        build_number="939.20E04502A",
        software_version="9.2.0",
        software_build=4502,
        secure_device=True,
        language="en",
        country="CA",
        locale="en_US",
        time_zone_auto=True,
        time_zone="Canada/Eastern",
        time_zone_name="Canada/Eastern",
        time_zone_tz="America/Toronto",
        time_zone_offset=-240,
        clock_format="12-hour",
        uptime=123,
        power_mode="PowerOn",
        supports_suspend=True,
        supports_find_remote=True,
        find_remote_is_possible=False,
        supports_audio_guide=False,
        supports_rva=True,
        developer_enabled=True,
        keyed_developer_id="",
        search_enabled=True,
        search_channels_enabled=True,
        voice_search_enabled=True,
        notifications_enabled=True,
        notifications_first_use=True,
        supports_private_listening=True,
        supports_private_listening_dtv=True,
        supports_warm_standby=True,
        headphones_connected=True,
        expert_pq_enabled="0.9",
        supports_ecs_textedit=True,
        supports_ecs_microphone=True,
        supports_wake_on_wlan=True,
        has_play_on_roku=True,
        has_mobile_screensaver=False,
        support_url="tclcanada.com/support",
        grandcentral_version="2.9.57",
        trc_version="3.0",
        trc_channel_version="2.9.42",
        has_wifi_extender=False,
        has_wifi_5g_support=True,
        can_use_wifi_extender=True,
    )


@pytest.fixture
def installed_apps() -> List[AppInfo]:
    """Five tuner inputs followed by four store channels, in device order."""
    return [
        AppInfo(id="tvinput.hdmi1", type="tvin", version="1.0.0", name="Cable TV"),
        AppInfo(id="tvinput.hdmi2", type="tvin", version="1.0.0", name="PlayStation"),
        AppInfo(id="tvinput.hdmi3", type="tvin", version="1.0.0", name="Apple TV"),
        AppInfo(id="tvinput.cvbs", type="tvin", version="1.0.0", name="AV"),
        AppInfo(id="tvinput.dtv", type="tvin", version="1.0.0", name="Antenna TV"),
        AppInfo(id="12", subtype="ndka", type="appl", version="5.1.81188066", name="Netflix"),
        AppInfo(
            id="50025",
            subtype="rsga",
            type="appl",
            version="2.1.20200123",
            name="Google Play Movies &amp; TV",
        ),
        AppInfo(
            id="229863",
            subtype="rsga",
            type="appl",
            version="2.0.1",
            name="CBS All Access - Canada",
        ),
        AppInfo(id="27181", subtype="rsga", type="appl", version="4.51.216", name="Sky News"),
    ]


@pytest.fixture
def prime_video() -> ActiveAppInfo:
    return ActiveAppInfo(
        app=AppInfo(
            id="13",
            subtype="ndka",
            type="appl",
            version="11.2.2020032710",
            name="Prime Video",
        )
    )
