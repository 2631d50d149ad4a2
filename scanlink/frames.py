"""Monitoring frames and their assembly into complete laser scans."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from scanlink.angles import TenthOfDegree
from scanlink.laserscan import LaserScan

TIME_PER_SCAN_IN_S = 0.03

_UINT16_MASK = 0xFFFF


class ScannerProtocolViolationError(RuntimeError):
    """Raised when data received from the scanner does not follow the protocol."""


@dataclass(frozen=True)
class MonitoringFrame:
    """One part of a scan round as sent by the scanner."""

    from_theta: TenthOfDegree
    resolution: TenthOfDegree
    scan_counter: int
    active_zoneset: int = 0
    measurements: tuple[float, ...] = ()
    intensities: tuple[float, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "measurements", tuple(self.measurements))
        object.__setattr__(self, "intensities", tuple(self.intensities))


@dataclass(frozen=True)
class MonitoringFrameStamped:
    """A monitoring frame together with its reception time in nanoseconds."""

    msg: MonitoringFrame
    stamp: int


def _round_half_away_from_zero(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _first_ray_time(stamped: MonitoringFrameStamped) -> int:
    time_per_scan_in_ns = TIME_PER_SCAN_IN_S * 1_000_000_000.0
    scan_interval_in_degree = (
        stamped.msg.resolution.value * (len(stamped.msg.measurements) - 1) / 10.0
    )
    return stamped.stamp - _round_half_away_from_zero(
        scan_interval_in_degree * time_per_scan_in_ns / 360.0
    )


def _theta_angles_fit_together(filled: Sequence[MonitoringFrameStamped]) -> bool:
    last_end = filled[0].msg.from_theta
    for stamped in filled:
        if stamped.msg.from_theta != last_end:
            return False
        last_end = stamped.msg.from_theta + stamped.msg.resolution * len(
            stamped.msg.measurements
        )
    return True


def _validate(
    stamped_msgs: Sequence[MonitoringFrameStamped],
    filled: Sequence[MonitoringFrameStamped],
) -> None:
    resolution = stamped_msgs[0].msg.resolution
    if any(stamped.msg.resolution != resolution for stamped in stamped_msgs):
        raise ScannerProtocolViolationError(
            "The resolution of all monitoring frames has to be the same."
        )
    scan_counter = stamped_msgs[0].msg.scan_counter
    if any(stamped.msg.scan_counter != scan_counter for stamped in stamped_msgs):
        raise ScannerProtocolViolationError(
            "The scan counters of all monitoring frames have to be the same."
        )
    if not filled:
        raise ScannerProtocolViolationError(
            "At least one monitoring frame with measurements is necessary to create a LaserScan"
        )
    if not _theta_angles_fit_together(filled):
        raise ScannerProtocolViolationError(
            "The monitoring frame ranges do not cover the whole scan range"
        )


def to_laserscan(stamped_msgs: Iterable[MonitoringFrameStamped]) -> LaserScan:
    """Combine the monitoring frames of one scan round into a laser scan."""
    stamped_msgs = list(stamped_msgs)
    if not stamped_msgs:
        raise ScannerProtocolViolationError(
            "At least one monitoring frame is necessary to create a LaserScan"
        )

    filled = sorted(
        (stamped for stamped in stamped_msgs if stamped.msg.measurements),
        key=lambda stamped: stamped.msg.from_theta.value,
    )
    _validate(stamped_msgs, filled)

    first = stamped_msgs[0].msg
    min_angle = filled[0].msg.from_theta
    number_of_samples = (
        sum(len(stamped.msg.measurements) for stamped in stamped_msgs) & _UINT16_MASK
    )
    max_angle = min_angle + first.resolution * (number_of_samples - 1)

    earliest = min(filled, key=lambda stamped: stamped.stamp)
    timestamp = _first_ray_time(earliest)

    measurements = [value for stamped in filled for value in stamped.msg.measurements]
    intensities = [value for stamped in filled for value in stamped.msg.intensities]

    return LaserScan(
        resolution=first.resolution,
        min_scan_angle=min_angle,
        max_scan_angle=max_angle,
        scan_counter=first.scan_counter,
        active_zoneset=filled[-1].msg.active_zoneset,
        timestamp=timestamp,
        measurements=measurements,
        intensities=intensities,
    )