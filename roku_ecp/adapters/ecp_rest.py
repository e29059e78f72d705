from __future__ import annotations

import logging
from typing import Callable, List, Optional, TypeVar

from requests import exceptions as req_exc

from roku_ecp.domain.apps import ActiveAppInfo, AppInfo
from roku_ecp.domain.device_info import DeviceInfo
from roku_ecp.domain.errors import DecodeError, TransportError
from roku_ecp.domain.ports import DeviceQueryPort, HttpTransportPort

from .ecp_xml import decode_active_app, decode_apps, decode_device_info
from .http_client import HttpTransport

DEVICE_INFO_PATH = "/query/device-info"
ACTIVE_APP_PATH = "/query/active-app"
APPS_PATH = "/query/apps"

T = TypeVar("T")


class EcpRestAdapter(DeviceQueryPort):
    """HTTP adapter for the read-only ECP ``/query/*`` endpoints.

    One adapter (and its transport) is shared by every device handle built
    from the same discovery call. Results are never cached.
    """

    def __init__(self, transport: Optional[HttpTransportPort] = None) -> None:
        self.transport = transport if transport is not None else HttpTransport()
        self._log = logging.getLogger(__name__)

    def device_info(self, base_url: str) -> DeviceInfo:
        return self._query(base_url, DEVICE_INFO_PATH, decode_device_info)

    def active_app(self, base_url: str) -> ActiveAppInfo:
        return self._query(base_url, ACTIVE_APP_PATH, decode_active_app)

    def installed_apps(self, base_url: str) -> List[AppInfo]:
        return self._query(base_url, APPS_PATH, decode_apps)

    def close(self) -> None:
        """Release the transport. Handles bound to this adapter stop working."""
        self.transport.close()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _query(self, base_url: str, path: str, decode: Callable[[bytes], T]) -> T:
        # The URL is used verbatim; an empty base yields a scheme-less URL
        # that the transport rejects.
        url = f"{base_url}{path}"
        ctx = f"GET {url}"
        try:
            resp = self.transport.get(url)
        except TransportError:
            raise
        except (req_exc.RequestException, OSError, ValueError) as exc:
            raise TransportError(
                f"Request to {url!r} failed: {exc}", context=ctx, cause=exc
            ) from exc

        try:
            try:
                body = resp.content
            except (req_exc.RequestException, OSError) as exc:
                raise TransportError(
                    f"Reading response from {url!r} failed: {exc}", context=ctx, cause=exc
                ) from exc
            try:
                return decode(body)
            except DecodeError as exc:
                self._log.debug("%s: undecodable body (%s)", ctx, exc)
                raise DecodeError(str(exc), context=ctx, cause=exc.cause) from exc
        finally:
            resp.close()


__all__ = ["EcpRestAdapter", "DEVICE_INFO_PATH", "ACTIVE_APP_PATH", "APPS_PATH"]
