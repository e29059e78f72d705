"""XML codec for the ECP query documents.

Decoders turn response bodies into typed domain values and raise
``DecodeError`` for anything that is not a well-formed document with the
expected root element. Encoders produce the same wire format from typed
values, which is what a device sends and what fixtures are built from.

Documents:
    ``<device-info>``  flat list of property elements (see ``DeviceInfo``)
    ``<active-app>``   one ``<app>`` child, plus optional extras we ignore
    ``<apps>``         zero or more ``<app id=.. type=.. ...>Name</app>``
"""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from typing import Any, Dict, Iterable, List

from roku_ecp.domain.apps import ActiveAppInfo, AppInfo
from roku_ecp.domain.device_info import DeviceInfo, device_info_elements
from roku_ecp.domain.errors import DecodeError

DEVICE_INFO_ROOT = "device-info"
ACTIVE_APP_ROOT = "active-app"
APPS_ROOT = "apps"

_APP_ATTRS = ("id", "subtype", "type", "version")
_TRUE = {"1", "t", "T", "true", "TRUE", "True"}
_FALSE = {"0", "f", "F", "false", "FALSE", "False"}
_INT_RE = re.compile(r"[+-]?[0-9]+")
_INT_MIN = -(2**63)
_INT_MAX = 2**63 - 1


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------
def _parse_root(body: bytes, root_tag: str) -> ET.Element:
    try:
        root = ET.fromstring(body)
    except (ET.ParseError, LookupError, ValueError) as exc:
        # LookupError/ValueError: unusable encoding in the XML declaration.
        raise DecodeError(
            f"Malformed <{root_tag}> document: {exc}", context=root_tag, cause=exc
        ) from exc
    if root.tag != root_tag:
        raise DecodeError(
            f"Unexpected root element <{root.tag}>, expected <{root_tag}>",
            context=root_tag,
        )
    return root


def _chardata(element: ET.Element) -> str:
    """Return the element's own character data, skipping nested elements."""
    parts = [element.text or ""]
    parts.extend(child.tail or "" for child in element)
    return "".join(parts)


def _as_bool(text: str, element: str) -> bool:
    # Only truly empty text is the zero value; whitespace-only text is invalid.
    if not text:
        return False
    value = text.strip()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise DecodeError(f"<{element}>: invalid boolean {value!r}", context=element)


def _as_int(text: str, element: str) -> int:
    if not text:
        return 0
    value = text.strip()
    if not _INT_RE.fullmatch(value):
        raise DecodeError(f"<{element}>: invalid integer {value!r}", context=element)
    number = int(value)
    if not _INT_MIN <= number <= _INT_MAX:
        raise DecodeError(f"<{element}>: integer {value} out of range", context=element)
    return number


def _app_from_element(element: ET.Element) -> AppInfo:
    return AppInfo(
        id=element.get("id", ""),
        subtype=element.get("subtype", ""),
        type=element.get("type", ""),
        version=element.get("version", ""),
        name=_chardata(element),
    )


def decode_device_info(body: bytes) -> DeviceInfo:
    """Decode a ``<device-info>`` document.

    Unknown elements are ignored, absent ones keep their zero value and a
    repeated element keeps the last occurrence.

    Raises:
        DecodeError: Empty/malformed body, wrong root, or a boolean/integer
            element whose text does not parse.
    """
    root = _parse_root(body, DEVICE_INFO_ROOT)
    table = {element: (name, kind) for element, name, kind in device_info_elements()}
    values: Dict[str, Any] = {}
    for child in root:
        entry = table.get(child.tag)
        if entry is None:
            continue
        name, kind = entry
        text = _chardata(child)
        if kind is bool:
            values[name] = _as_bool(text, child.tag)
        elif kind is int:
            values[name] = _as_int(text, child.tag)
        else:
            values[name] = text
    return DeviceInfo(**values)


def decode_active_app(body: bytes) -> ActiveAppInfo:
    """Decode an ``<active-app>`` document.

    A document without an ``<app>`` child yields an empty ``AppInfo``.

    Raises:
        DecodeError: Empty/malformed body or wrong root.
    """
    root = _parse_root(body, ACTIVE_APP_ROOT)
    element = root.find("app")
    if element is None:
        return ActiveAppInfo(app=AppInfo())
    return ActiveAppInfo(app=_app_from_element(element))


def decode_apps(body: bytes) -> List[AppInfo]:
    """Decode an ``<apps>`` document, preserving on-device order.

    A document without ``<app>`` children is valid and yields ``[]``.

    Raises:
        DecodeError: Empty/malformed body or wrong root.
    """
    root = _parse_root(body, APPS_ROOT)
    return [_app_from_element(element) for element in root.findall("app")]


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------
def _to_bytes(root: ET.Element) -> bytes:
    return ET.tostring(root, encoding="utf-8", xml_declaration=True)


def _app_element(parent: ET.Element, app: AppInfo) -> ET.Element:
    attrs = {key: getattr(app, key) for key in _APP_ATTRS if getattr(app, key)}
    element = ET.SubElement(parent, "app", attrs)
    element.text = app.name
    return element


def encode_device_info(info: DeviceInfo) -> bytes:
    """Encode ``info`` as a ``<device-info>`` document."""
    root = ET.Element(DEVICE_INFO_ROOT)
    for element, name, kind in device_info_elements():
        value = getattr(info, name)
        child = ET.SubElement(root, element)
        if kind is bool:
            child.text = "true" if value else "false"
        else:
            child.text = str(value)
    return _to_bytes(root)


def encode_active_app(active: ActiveAppInfo) -> bytes:
    """Encode ``active`` as an ``<active-app>`` document."""
    root = ET.Element(ACTIVE_APP_ROOT)
    _app_element(root, active.app)
    return _to_bytes(root)


def encode_apps(apps: Iterable[AppInfo]) -> bytes:
    """Encode ``apps`` as an ``<apps>`` document in the given order."""
    root = ET.Element(APPS_ROOT)
    for app in apps:
        _app_element(root, app)
    return _to_bytes(root)


__all__ = [
    "ACTIVE_APP_ROOT",
    "APPS_ROOT",
    "DEVICE_INFO_ROOT",
    "decode_active_app",
    "decode_apps",
    "decode_device_info",
    "encode_active_app",
    "encode_apps",
    "encode_device_info",
]
