"""Adapter package for external I/O implementations.

Purpose:
    Collect concrete implementations for domain ports (HTTP queries, SSDP
    discovery, the XML wire codec and an in-memory test double).

Dependencies:
    Individual submodules depend on ``requests``, ``ssdpy``, the standard
    library XML parser and domain protocol definitions.

Call context:
    Imported by use cases (for default wiring) and by tests (for doubles and
    transport-level behavior verification).
"""
