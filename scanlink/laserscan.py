"""The laser scan handed to users of the scanner."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from scanlink.angles import TenthOfDegree
from scanlink.formatting import format_range

MAX_X_AXIS_ROTATION = TenthOfDegree(275)


def _degrees(angle: TenthOfDegree) -> str:
    return f"{angle.value / 10.0:g}"


@dataclass
class LaserScan:
    """One complete scan: angles, counters, timestamp and measured data."""

    resolution: TenthOfDegree
    min_scan_angle: TenthOfDegree
    max_scan_angle: TenthOfDegree
    scan_counter: int
    active_zoneset: int
    timestamp: int
    measurements: list[float] = field(default_factory=list)
    intensities: list[float] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.resolution == TenthOfDegree(0):
            raise ValueError("Resolution must not be 0")
        if self.resolution > MAX_X_AXIS_ROTATION:
            raise ValueError("Resolution out of possible angle range")
        if self.min_scan_angle > self.max_scan_angle:
            raise ValueError(
                "Attention: Start angle has to be smaller or equal to the end angle!"
            )
        self.measurements = list(self.measurements)
        self.intensities = list(self.intensities)

    def __str__(self) -> str:
        return (
            f"LaserScan(timestamp = {self.timestamp} nsec, "
            f"scanCounter = {self.scan_counter}, "
            f"minScanAngle = {_degrees(self.min_scan_angle)} deg, "
            f"maxScanAngle = {_degrees(self.max_scan_angle)} deg, "
            f"resolution = {_degrees(self.resolution)} deg, "
            f"active_zoneset = {self.active_zoneset}, "
            f"measurements = {format_range(self.measurements)}, "
            f"intensities = {format_range(self.intensities)})"
        )


LaserScanCallback = Callable[[LaserScan], None]