"""Matching devices to drivers and bringing up secondary CPUs."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Optional, Sequence


class DriverType(enum.Enum):
    """The kinds of driver the loader knows about."""

    UART = "uart"
    SMP = "smp"


def _normalise_match(entry) -> tuple[str, Any]:
    if isinstance(entry, str):
        return (entry, None)
    compatible, match_data = entry
    return (compatible, match_data)


@dataclass(eq=False)
class Driver:
    """A driver: the compatible strings it handles, its kind, init hook and operations.

    ``match_table`` holds compatible strings or ``(compatible, match_data)`` pairs.
    ``init`` is called as ``init(device, match_data)``.
    """

    match_table: Sequence
    type: DriverType
    init: Callable[["Device", Any], Any]
    ops: Any = None
    name: str = ""

    def __post_init__(self):
        self.match_table = tuple(_normalise_match(e) for e in self.match_table)


@dataclass(eq=False)
class Device:
    """A device node: its compatible string, register regions and bound driver."""

    compat: str
    region_bases: list = field(default_factory=list)
    drv: Optional[Driver] = None
    name: str = ""


@dataclass
class Cpu:
    """A CPU that can be started, with the method used to enable it."""

    enable_method: Optional[str] = None
    cpu_id: int = 0


def table_has_match(compat: str, table: Iterable) -> Optional[int]:
    """Return the index of ``compat`` in a match table, or None if absent."""
    for index, entry in enumerate(table):
        if _normalise_match(entry)[0] == compat:
            return index
    return None


def init_device(device: Device, drivers: Iterable[Driver]) -> None:
    """Bind and initialise ``device`` with every driver whose table names it."""
    for drv in drivers:
        index = table_has_match(device.compat, drv.match_table)
        if index is not None:
            device.drv = drv
            drv.init(device, drv.match_table[index][1])


def initialise_devices(devices: Iterable[Device], drivers: Sequence[Driver]) -> None:
    """Initialise every device against the given drivers, in order."""
    drivers = list(drivers)
    for device in devices:
        init_device(device, drivers)


class SmpRegistry:
    """Holds the device whose driver starts secondary CPUs."""

    def __init__(self):
        self.ops_device: Optional[Device] = None

    def register_handler(self, device: Device) -> None:
        """Use ``device`` for CPU bring-up if its driver is an SMP driver."""
        if device.drv is None or device.drv.type is not DriverType.SMP:
            return
        self.ops_device = device

    def cpu_on(self, cpu: Cpu, entry, stack):
        """Start ``cpu`` at ``entry`` with ``stack`` through the registered driver."""
        device = self.ops_device
        if device is None:
            raise RuntimeError("no SMP driver registered")
        ops = device.drv.ops
        if cpu.enable_method != ops.enable_method:
            raise ValueError(
                f"cpu enable method {cpu.enable_method!r} does not match "
                f"driver enable method {ops.enable_method!r}"
            )
        return ops.cpu_on(device, cpu, entry, stack)