from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Union

from roku_ecp.domain.apps import ActiveAppInfo, AppInfo
from roku_ecp.domain.device_info import DeviceInfo
from roku_ecp.domain.errors import TransportError
from roku_ecp.domain.ports import DeviceQueryPort

_Canned = Union[DeviceInfo, ActiveAppInfo, List[AppInfo], Exception]


@dataclass
class EcpQueryMock(DeviceQueryPort):
    """Offline substitute for ``EcpRestAdapter`` with canned per-URL results.

    A canned ``Exception`` is raised instead of returned. Any URL without a
    canned value behaves like an unreachable device.
    """

    device_infos: Dict[str, Union[DeviceInfo, Exception]] = field(default_factory=dict)
    active_apps: Dict[str, Union[ActiveAppInfo, Exception]] = field(default_factory=dict)
    app_lists: Dict[str, Union[List[AppInfo], Exception]] = field(default_factory=dict)
    calls: List[str] = field(default_factory=list)

    # ---------- DeviceQueryPort ----------

    def device_info(self, base_url: str) -> DeviceInfo:
        return self._answer("device_info", self.device_infos, base_url)

    def active_app(self, base_url: str) -> ActiveAppInfo:
        return self._answer("active_app", self.active_apps, base_url)

    def installed_apps(self, base_url: str) -> List[AppInfo]:
        apps = self._answer("installed_apps", self.app_lists, base_url)
        return list(apps)

    def _answer(self, method: str, table: Dict[str, _Canned], base_url: str):
        self.calls.append(f"{method}:{base_url}")
        try:
            canned = table[base_url]
        except KeyError as exc:
            raise TransportError(
                f"No device at {base_url!r}", context=f"{method}[{base_url}]", cause=exc
            ) from exc
        if isinstance(canned, Exception):
            raise canned
        return canned
