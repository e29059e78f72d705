"""Contract-focused tests for the per-device snapshot use case."""

from __future__ import annotations

import logging

from roku_ecp.adapters.ecp_mock import EcpQueryMock
from roku_ecp.domain.device import Device
from roku_ecp.domain.errors import DecodeError, TransportError
from roku_ecp.usecases.query_devices import CollectDeviceSnapshots


def test_collect_snapshots_isolates_failures(tcl_device_info, prime_video, installed_apps, caplog) -> None:
    mock = EcpQueryMock(
        device_infos={"http://tv": tcl_device_info, "http://stick": tcl_device_info},
        active_apps={"http://tv": prime_video, "http://stick": DecodeError("unexpected root element")},
        app_lists={"http://tv": installed_apps, "http://stick": []},
    )
    devices = [
        Device(url="", queries=mock),
        Device(url="http://stick", queries=mock),
        Device(url="http://tv", queries=mock),
    ]

    with caplog.at_level(logging.WARNING, logger="roku_ecp.usecases.query_devices"):
        result = CollectDeviceSnapshots()(devices)

    assert set(result.snapshots) == {"http://tv"}
    snapshot = result.snapshots["http://tv"]
    assert snapshot.info == tcl_device_info
    assert snapshot.active_app == prime_video
    assert snapshot.installed_apps == installed_apps
    assert isinstance(result.failures[""], TransportError)
    assert isinstance(result.failures["http://stick"], DecodeError)
    assert "DecodeError" in caplog.text


def test_collect_snapshots_stops_querying_a_device_after_its_first_failure() -> None:
    mock = EcpQueryMock()

    result = CollectDeviceSnapshots()([Device(url="http://gone", queries=mock)])

    assert mock.calls == ["device_info:http://gone"]
    assert list(result.failures) == ["http://gone"]


def test_collect_snapshots_with_no_devices_is_empty() -> None:
    result = CollectDeviceSnapshots()([])

    assert result.snapshots == {}
    assert result.failures == {}
