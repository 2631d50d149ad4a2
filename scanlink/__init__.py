"""Angles, laser scans, start/stop requests, scan messages and zone set markers for a safety laser scanner."""

__version__ = "0.1.0"

__all__ = [
    "angles",
    "formatting",
    "laserscan",
    "requests",
    "frames",
    "scan_message",
    "markers",
]