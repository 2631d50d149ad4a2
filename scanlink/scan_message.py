"""Conversion of laser scans into the common laser scan message layout."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from scanlink.frames import TIME_PER_SCAN_IN_S
from scanlink.laserscan import LaserScan

RANGE_MIN_IN_M = 0.0
RANGE_MAX_IN_M = 10.0


@dataclass
class Header:
    """Message header: sequence number, stamp in nanoseconds and frame id."""

    seq: int = 0
    stamp: int = 0
    frame_id: str = ""


@dataclass
class LaserScanMessage:
    """A laser scan in the layout of a planar range-finder message."""

    header: Header = field(default_factory=Header)
    angle_min: float = 0.0
    angle_max: float = 0.0
    angle_increment: float = 0.0
    time_increment: float = 0.0
    scan_time: float = 0.0
    range_min: float = 0.0
    range_max: float = 0.0
    ranges: list[float] = field(default_factory=list)
    intensities: list[float] = field(default_factory=list)


def to_laserscan_msg(
    laserscan: LaserScan, frame_id: str, x_axis_rotation: float
) -> LaserScanMessage:
    """Build a laser scan message from a scan, rotated by ``x_axis_rotation``."""
    if laserscan.timestamp < 0:
        raise ValueError(
            f"Laserscan message has an invalid timestamp: {laserscan.timestamp}"
        )
    resolution = laserscan.resolution.to_rad()
    return LaserScanMessage(
        header=Header(stamp=laserscan.timestamp, frame_id=frame_id),
        angle_min=laserscan.min_scan_angle.to_rad() - x_axis_rotation,
        angle_max=laserscan.max_scan_angle.to_rad() - x_axis_rotation,
        angle_increment=resolution,
        time_increment=TIME_PER_SCAN_IN_S / (2 * math.pi) * resolution,
        scan_time=TIME_PER_SCAN_IN_S,
        range_min=RANGE_MIN_IN_M,
        range_max=RANGE_MAX_IN_M,
        ranges=list(laserscan.measurements),
        intensities=list(laserscan.intensities),
    )