# scanlink

Data types and conversions for a safety laser scanner that sends its
measurements as monitoring frames. Pure Python, standard library only.

## Modules

- `scanlink.angles`: `TenthOfDegree`, an immutable, ordered angle in whole
  tenths of a degree with `from_rad()`, `to_rad()` and arithmetic (`+`, `-`,
  `*` with another angle or an `int`, `/` truncating towards zero). Also the
  plain functions `radian_to_degree`, `degree_to_radian`,
  `degree_to_tenth_degree`, `rad_to_tenth_degree` and `tenth_degree_to_rad`.
  `degree_to_tenth_degree` rounds half away from zero and raises `ValueError`
  when the result does not fit in a signed 16-bit integer.
- `scanlink.formatting`: `format_range(values)` renders a sequence as
  `{1, 2, 3}`, or `{}` when it is empty; whole floats print without `.0`.
- `scanlink.laserscan`: `LaserScan`, a dataclass holding resolution, minimum
  and maximum scan angle, scan counter, active zone set, timestamp in
  nanoseconds, measurements and intensities. It raises `ValueError` for a zero
  resolution, a resolution above 27.5°, or a start angle greater than the end
  angle. `str()` gives a one-line summary. `LaserScanCallback` is the type of
  a function taking a `LaserScan`.
- `scanlink.requests`: `DeviceSettings`, `StartRequest`, `calculate_crc`
  (CRC-32), `serialize_start_request(request, seq_number=0)` and
  `serialize_stop_request()`. Both serializers return `bytes` prefixed with the
  little-endian CRC of the rest. A start request is always 58 bytes: the host
  IP in network byte order, the data port, the feature flags (intensities and
  diagnostics follow the master's `DeviceSettings`), and start, end and
  resolution of the master and three slaves. When the master's range is an
  exact multiple of its resolution, the end angle is sent one tenth of a degree
  higher so that the last point is included.
- `scanlink.frames`: `MonitoringFrame`, `MonitoringFrameStamped` and
  `to_laserscan(stamped_msgs)`, which joins the frames of one scan round into a
  single `LaserScan`. Frames without measurements are skipped, the rest are
  ordered by start angle, and the timestamp is that of the first ray of the
  earliest-received frame. Mismatched resolutions or scan counters, gaps
  between frames, or no frames at all raise `ScannerProtocolViolationError`.
- `scanlink.scan_message`: `to_laserscan_msg(laserscan, frame_id,
  x_axis_rotation)` builds a `LaserScanMessage` with a `Header`: angles in
  radian shifted by `x_axis_rotation`, scan time 0.03 s, range 0 to 10 m. A
  negative timestamp raises `ValueError`.
- `scanlink.markers`: `Point`, `ColorRGBA`, `Polygon`, `ZoneSet` and `Marker`,
  plus `create_point`, `create_rgba`, `create_marker`, `get_range_info` and
  `to_markers`. `to_markers(zoneset)` returns one triangle-list marker for
  every non-empty polygon (safety red, warn yellow, muting blue; warn and
  muting raised by 0.01 and 0.02), each triangle fanned from the origin over
  two consecutive polygon points.

## Example

```python
from scanlink.angles import TenthOfDegree
from scanlink.frames import MonitoringFrame, MonitoringFrameStamped, to_laserscan
from scanlink.requests import DeviceSettings, StartRequest, serialize_start_request
from scanlink.scan_message import to_laserscan_msg

frame = MonitoringFrame(
    from_theta=TenthOfDegree(0),
    resolution=TenthOfDegree(10),
    scan_counter=42,
    active_zoneset=1,
    measurements=[1.0, 2.0, 3.0],
)
scan = to_laserscan([MonitoringFrameStamped(frame, stamp=1_000_000_000)])
print(scan)

message = to_laserscan_msg(scan, "scanner_frame", 0.0)
print(message.angle_min, message.angle_max, message.ranges)

request = StartRequest(
    host_ip="192.168.0.50",
    host_udp_port_data=55115,
    master=DeviceSettings(TenthOfDegree(0), TenthOfDegree(2750), TenthOfDegree(10)),
)
payload = serialize_start_request(request)  # 58 bytes, starting with the CRC-32
```

## What it does not do

The package only builds and converts data. It opens no sockets and does not
talk to a scanner: there is no driver that sends the requests, no handling of
scanner replies, no decoding of raw monitoring frames from bytes, and no
command-line program.

## Installation

```
pip install .
```

The tests use pytest, available through the `test` extra.