"""Root logging setup for programs that embed ``roku_ecp``.

Library modules only create ``__name__`` loggers. A host script or service
calls ``configure_root()`` once at startup (it is re-exported as
``roku_ecp.configure_logging``).

Environment overrides:
    - ``ROKU_ECP_LOG_LEVEL``: explicit level, by name (``debug``) or number.
    - ``ROKU_ECP_DEBUG``: truthy value forces DEBUG.
"""

from __future__ import annotations

import logging
import os
from typing import Optional, Union

LEVEL_ENV = "ROKU_ECP_LOG_LEVEL"
DEBUG_ENV = "ROKU_ECP_DEBUG"

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_DATEFMT = "%H:%M:%S"
_TRANSPORT_LOGGERS = ("urllib3", "ssdpy")


def _coerce_level(value: Union[int, str, None], fallback: int) -> int:
    if isinstance(value, int):
        return value
    text = (value or "").strip()
    if not text:
        return fallback
    try:
        return int(text)
    except ValueError:
        pass
    candidate = logging.getLevelName(text.upper())
    return candidate if isinstance(candidate, int) else fallback


def env_level() -> Optional[int]:
    """Return the level forced by the environment, or ``None``."""
    explicit = os.getenv(LEVEL_ENV, "")
    if explicit.strip():
        return _coerce_level(explicit, logging.INFO)
    if os.getenv(DEBUG_ENV, "").strip().lower() in {"1", "true", "yes", "on"}:
        return logging.DEBUG
    return None


def configure_root(default_level: Union[int, str] = logging.INFO) -> int:
    """Configure the root logger and return the effective level.

    The environment wins over ``default_level``. ``urllib3`` and ``ssdpy``
    stay at WARNING unless the effective level is DEBUG, so request-level
    chatter only shows up when asked for.
    """
    forced = env_level()
    effective = forced if forced is not None else _coerce_level(default_level, logging.INFO)

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=effective, format=_FORMAT, datefmt=_DATEFMT)
    root.setLevel(effective)
    transport_level = logging.DEBUG if effective <= logging.DEBUG else logging.WARNING
    for name in _TRANSPORT_LOGGERS:
        logging.getLogger(name).setLevel(transport_level)
    return effective


__all__ = ["DEBUG_ENV", "LEVEL_ENV", "configure_root", "env_level"]
