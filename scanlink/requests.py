"""Serialization of the start and stop requests sent to the scanner."""

from __future__ import annotations

import ipaddress
import struct
import zlib
from dataclasses import dataclass, field

from scanlink.angles import TenthOfDegree

MAX_UDP_PAKET_SIZE = 65507

DEFAULT_SEQ_NUMBER = 0
START_REQUEST_OPCODE = 0x35
START_REQUEST_SIZE = 58
NUM_SLAVES = 3

STOP_REQUEST_OPCODE = 0x36
NUM_RESERVED_FIELDS = 12

_DEVICE_ENABLED = 0b00001000
_FEATURE_DISABLED = 0b00000000


def calculate_crc(data: bytes) -> int:
    """Return the CRC-32 checksum of ``data``."""
    return zlib.crc32(bytes(data)) & 0xFFFFFFFF


@dataclass(frozen=True)
class DeviceSettings:
    """Scan range, resolution and enabled features of one device."""

    start: TenthOfDegree = TenthOfDegree(0)
    end: TenthOfDegree = TenthOfDegree(0)
    resolution: TenthOfDegree = TenthOfDegree(0)
    intensities_enabled: bool = False
    diagnostics_enabled: bool = False


def _default_slaves() -> tuple[DeviceSettings, ...]:
    return tuple(DeviceSettings() for _ in range(NUM_SLAVES))


@dataclass(frozen=True)
class StartRequest:
    """Content of a start request: where to send data and what to measure."""

    host_ip: str | int | ipaddress.IPv4Address
    host_udp_port_data: int
    master: DeviceSettings
    slaves: tuple[DeviceSettings, ...] = field(default_factory=_default_slaves)

    @property
    def host_ip_bytes(self) -> bytes:
        """The host IP address in network byte order."""
        return ipaddress.IPv4Address(self.host_ip).packed


def _flag(enabled: bool) -> int:
    return _DEVICE_ENABLED if enabled else _FEATURE_DISABLED


def serialize_start_request(
    request: StartRequest, seq_number: int = DEFAULT_SEQ_NUMBER
) -> bytes:
    """Serialize a start request, prefixed with its CRC."""
    master = request.master
    start = master.start.value
    end = master.end.value
    resolution = master.resolution.value
    if resolution == 0:
        raise ValueError("Resolution must not be 0")
    # The scanner needs an end value strictly greater than the last wanted point.
    if (end - start) % resolution == 0:
        end += 1

    body = bytearray()
    body += struct.pack("<IQI", seq_number, 0, START_REQUEST_OPCODE)
    body += request.host_ip_bytes
    body += struct.pack("<H", request.host_udp_port_data)
    body += bytes(
        [
            _DEVICE_ENABLED,
            _flag(master.intensities_enabled),
            _FEATURE_DISABLED,  # point in safety
            _DEVICE_ENABLED,  # active zoneset
            _FEATURE_DISABLED,  # io pins
            _DEVICE_ENABLED,  # scan counter
            _FEATURE_DISABLED,  # speed encoder
            _flag(master.diagnostics_enabled),
        ]
    )
    body += struct.pack("<hhh", start, end, resolution)
    for slave in request.slaves:
        body += struct.pack(
            "<hhh", slave.start.value, slave.end.value, slave.resolution.value
        )

    raw = struct.pack("<I", calculate_crc(body)) + bytes(body)
    if len(raw) != START_REQUEST_SIZE:
        raise ValueError(
            "Message data of start request has not the size expected by protocol"
        )
    return raw


def serialize_stop_request() -> bytes:
    """Serialize a stop request, prefixed with its CRC."""
    body = bytes(NUM_RESERVED_FIELDS) + struct.pack("<I", STOP_REQUEST_OPCODE)
    return struct.pack("<I", calculate_crc(body)) + body