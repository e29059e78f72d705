"""Application descriptors returned by ``/query/active-app`` and ``/query/apps``."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AppInfo:
    """One installed app or tuner input known to the device.

    Attributes:
        id: Channel id (``"12"``) or input id (``"tvinput.hdmi1"``); empty for
            system states such as the home screen.
        subtype: Channel subtype, e.g. ``"ndka"`` or ``"rsga"``.
        type: ``"appl"`` for installed apps, ``"tvin"`` for tuner inputs.
        version: Version string reported by the device.
        name: Display name, entity-decoded exactly once.
    """

    id: str = ""
    subtype: str = ""
    type: str = ""
    version: str = ""
    name: str = ""


@dataclass(frozen=True)
class ActiveAppInfo:
    """Wrapper around the single currently foregrounded app."""

    app: AppInfo


__all__ = ["AppInfo", "ActiveAppInfo"]
