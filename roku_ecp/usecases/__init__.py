"""Use-case layer for discovery and device queries.

Each module coordinates domain objects and ports without performing
transport I/O directly.
"""
