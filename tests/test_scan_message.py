import math

import pytest

from scanlink.angles import TenthOfDegree
from scanlink.frames import TIME_PER_SCAN_IN_S
from scanlink.laserscan import LaserScan
from scanlink.scan_message import RANGE_MAX_IN_M, RANGE_MIN_IN_M, to_laserscan_msg

EPSILON = 1.0e-8


def create_scan(stamp=1):
    return LaserScan(
        resolution=TenthOfDegree(1),
        min_scan_angle=TenthOfDegree(0),
        max_scan_angle=TenthOfDegree(20),
        scan_counter=1,
        active_zoneset=0,
        timestamp=stamp,
        measurements=[1.0, 2.0, 3.0],
        intensities=[707.0, 304.0, 0.0],
    )


def test_header_is_correct():
    scan = create_scan()
    msg = to_laserscan_msg(scan, "prefix", 0)
    assert msg.header.seq == 0
    assert msg.header.stamp == scan.timestamp
    assert msg.header.frame_id == "prefix"


def test_scan_resolution():
    scan = create_scan()
    msg = to_laserscan_msg(scan, "", 0)
    assert msg.angle_increment == pytest.approx(scan.resolution.to_rad(), abs=EPSILON)


@pytest.mark.parametrize("x_axis_rotation", [0.0, 0.5])
def test_min_max_scan_angle(x_axis_rotation):
    scan = create_scan()
    msg = to_laserscan_msg(scan, "", x_axis_rotation)
    assert msg.angle_min == pytest.approx(
        scan.min_scan_angle.to_rad() - x_axis_rotation, abs=EPSILON
    )
    assert msg.angle_max == pytest.approx(
        scan.max_scan_angle.to_rad() - x_axis_rotation, abs=EPSILON
    )


def test_time_increment():
    scan = create_scan()
    msg = to_laserscan_msg(scan, "", 0)
    time_per_rad = TIME_PER_SCAN_IN_S / (2 * math.pi)
    assert msg.time_increment == pytest.approx(
        time_per_rad * scan.resolution.to_rad(), abs=EPSILON
    )


def test_min_max_range():
    msg = to_laserscan_msg(create_scan(), "", 0)
    assert msg.range_min == pytest.approx(RANGE_MIN_IN_M, abs=EPSILON)
    assert msg.range_max == pytest.approx(RANGE_MAX_IN_M, abs=EPSILON)


def test_scan_time():
    msg = to_laserscan_msg(create_scan(), "", 0)
    assert msg.scan_time == pytest.approx(TIME_PER_SCAN_IN_S, abs=EPSILON)


def test_ranges():
    scan = create_scan()
    msg = to_laserscan_msg(scan, "", 0)
    assert len(msg.ranges) == len(scan.measurements)
    assert msg.ranges == pytest.approx(scan.measurements, abs=EPSILON)


def test_intensities():
    scan = create_scan()
    msg = to_laserscan_msg(scan, "", 0)
    assert len(msg.intensities) == len(scan.intensities)
    assert msg.intensities == pytest.approx(scan.intensities, abs=EPSILON)


def test_negative_timestamp_raises():
    with pytest.raises(ValueError, match="invalid timestamp"):
        to_laserscan_msg(create_scan(-1), "", 0)