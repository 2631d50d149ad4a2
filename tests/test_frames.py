import pytest

from scanlink.angles import TenthOfDegree
from scanlink.frames import (
    MonitoringFrame,
    MonitoringFrameStamped,
    ScannerProtocolViolationError,
    to_laserscan,
)


def _frame(theta, measurements, *, resolution=10, counter=7, zoneset=0, intensities=()):
    return MonitoringFrame(
        from_theta=TenthOfDegree(theta),
        resolution=TenthOfDegree(resolution),
        scan_counter=counter,
        active_zoneset=zoneset,
        measurements=measurements,
        intensities=intensities,
    )


def _stamped(frame, stamp=1000):
    return MonitoringFrameStamped(msg=frame, stamp=stamp)


def test_empty_input_raises():
    with pytest.raises(ScannerProtocolViolationError):
        to_laserscan([])


def test_single_frame_with_one_measurement_keeps_stamp_and_data():
    scan = to_laserscan([_stamped(_frame(20, [1.5], intensities=[3.0]), stamp=4242)])
    assert scan.timestamp == 4242
    assert scan.measurements == [1.5]
    assert scan.intensities == [3.0]
    assert scan.min_scan_angle == TenthOfDegree(20)
    assert scan.max_scan_angle == TenthOfDegree(20)


def test_frames_are_sorted_by_theta():
    frames = [
        _stamped(_frame(30, [4.0, 5.0, 6.0], intensities=[40.0, 50.0, 60.0])),
        _stamped(_frame(0, [1.0, 2.0, 3.0], intensities=[10.0, 20.0, 30.0])),
    ]
    scan = to_laserscan(frames)
    assert scan.measurements == [1.0, 2.0, 3.0, 4.0, 5.0, 6.0]
    assert scan.intensities == [10.0, 20.0, 30.0, 40.0, 50.0, 60.0]
    assert scan.min_scan_angle == TenthOfDegree(0)


def test_max_angle_covers_all_samples():
    frames = [
        _stamped(_frame(0, [1.0, 2.0, 3.0])),
        _stamped(_frame(30, [4.0, 5.0, 6.0])),
    ]
    scan = to_laserscan(frames)
    assert scan.max_scan_angle == TenthOfDegree(50)


def test_resolution_and_counter_taken_from_frames():
    scan = to_laserscan([_stamped(_frame(0, [1.0, 2.0], resolution=5, counter=99))])
    assert scan.resolution == TenthOfDegree(5)
    assert scan.scan_counter == 99


def test_active_zoneset_taken_from_last_frame_by_theta():
    frames = [
        _stamped(_frame(10, [2.0], zoneset=4)),
        _stamped(_frame(0, [1.0], zoneset=2)),
    ]
    assert to_laserscan(frames).active_zoneset == 4


def test_timestamp_uses_earliest_frame():
    frames = [
        _stamped(_frame(0, [1.0]), stamp=500),
        _stamped(_frame(10, [2.0]), stamp=300),
    ]
    assert to_laserscan(frames).timestamp == 300


def test_timestamp_is_moved_back_to_first_ray():
    scan = to_laserscan([_stamped(_frame(0, [1.0, 2.0, 3.0, 4.0]), stamp=10_000_000)])
    assert scan.timestamp < 10_000_000


def test_empty_frames_are_skipped():
    frames = [
        _stamped(_frame(0, [1.0, 2.0])),
        _stamped(_frame(500, [])),
        _stamped(_frame(20, [3.0])),
    ]
    scan = to_laserscan(frames)
    assert scan.measurements == [1.0, 2.0, 3.0]


def test_only_empty_frames_raise():
    with pytest.raises(ScannerProtocolViolationError):
        to_laserscan([_stamped(_frame(0, []))])


def test_differing_resolutions_raise():
    frames = [
        _stamped(_frame(0, [1.0], resolution=10)),
        _stamped(_frame(10, [2.0], resolution=5)),
    ]
    with pytest.raises(ScannerProtocolViolationError, match="resolution"):
        to_laserscan(frames)


def test_differing_scan_counters_raise():
    frames = [
        _stamped(_frame(0, [1.0], counter=1)),
        _stamped(_frame(10, [2.0], counter=2)),
    ]
    with pytest.raises(ScannerProtocolViolationError, match="scan counters"):
        to_laserscan(frames)


def test_gap_between_frames_raises():
    frames = [
        _stamped(_frame(0, [1.0, 2.0])),
        _stamped(_frame(40, [3.0])),
    ]
    with pytest.raises(ScannerProtocolViolationError, match="cover"):
        to_laserscan(frames)


def test_monitoring_frame_stores_sequences_as_tuples():
    frame = _frame(0, [1.0, 2.0], intensities=[3.0])
    assert frame.measurements == (1.0, 2.0)
    assert frame.intensities == (3.0,)