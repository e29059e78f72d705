from __future__ import annotations
from dataclasses import dataclass

ECP_SERVICE_TYPE = "roku:ecp"


@dataclass(frozen=True)
class ServiceRecord:
    """One SSDP search response."""
    location: str                 # e.g. "http://192.168.1.20:8060/", may be empty
    st: str = ""
    usn: str = ""                 # e.g. "uuid:roku:ecp:X00000PGAVCY"
    server: str = ""
