"""Domain-level error types shared by adapters and use cases.

Every failure surfaced by the ECP client is one of the subclasses below, so
callers can tell a roster-wide discovery failure apart from a per-device
query failure, and a network failure apart from an undecodable response.
"""

from __future__ import annotations

from typing import Optional


class EcpError(RuntimeError):
    """Base class for ECP client failures."""

    def __init__(
        self,
        message: str,
        *,
        context: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.context = context
        self.cause = cause


class TransportError(EcpError):
    """The HTTP request could not be completed (unreachable, timeout, bad URL)."""


class DecodeError(EcpError):
    """A response body was received but could not be decoded."""


class DiscoveryError(EcpError):
    """Network discovery of the device roster failed."""


__all__ = ["EcpError", "TransportError", "DecodeError", "DiscoveryError"]
