from types import SimpleNamespace

import pytest

from bootkit.devices import (
    Cpu,
    Device,
    Driver,
    DriverType,
    SmpRegistry,
    init_device,
    initialise_devices,
    table_has_match,
)


def _recording_driver(table, calls, kind=DriverType.UART, ops=None, name=""):
    def init(device, match_data):
        calls.append((name, device, match_data))
    return Driver(match_table=table, type=kind, init=init, ops=ops, name=name)


def test_table_has_match_finds_index():
    table = [("vendor,a", 1), ("vendor,b", 2)]
    assert table_has_match("vendor,b", table) == 1
    assert table_has_match("vendor,a", table) == 0


def test_table_has_match_absent():
    assert table_has_match("vendor,c", [("vendor,a", 1)]) is None
    assert table_has_match("vendor,a", []) is None


def test_driver_normalises_plain_strings():
    drv = Driver(match_table=["x,y"], type=DriverType.UART, init=lambda d, m: None)
    assert drv.match_table == (("x,y", None),)


def test_init_device_binds_and_passes_match_data():
    calls = []
    drv = _recording_driver([("x,one", "first"), ("x,two", "second")], calls, name="d")
    dev = Device(compat="x,two")
    init_device(dev, [drv])
    assert dev.drv is drv
    assert calls == [("d", dev, "second")]


def test_init_device_skips_non_matching():
    calls = []
    drv = _recording_driver(["x,one"], calls)
    dev = Device(compat="x,other")
    init_device(dev, [drv])
    assert dev.drv is None
    assert calls == []


def test_init_device_all_matching_drivers_run_last_wins():
    calls = []
    first = _recording_driver(["x,dup"], calls, name="first")
    second = _recording_driver(["x,dup"], calls, name="second")
    dev = Device(compat="x,dup")
    init_device(dev, [first, second])
    assert [c[0] for c in calls] == ["first", "second"]
    assert dev.drv is second


def test_initialise_devices_visits_each_device():
    calls = []
    drv = _recording_driver(["x,a", "x,b"], calls)
    devs = [Device(compat="x,a"), Device(compat="x,none"), Device(compat="x,b")]
    initialise_devices(devs, [drv])
    assert [c[1] for c in calls] == [devs[0], devs[2]]
    assert devs[1].drv is None


def _smp_device(enable_method, result="started"):
    calls = []

    def cpu_on(device, cpu, entry, stack):
        calls.append((device, cpu, entry, stack))
        return result

    ops = SimpleNamespace(enable_method=enable_method, cpu_on=cpu_on)
    drv = Driver(match_table=["x,smp"], type=DriverType.SMP,
                 init=lambda d, m: None, ops=ops)
    return Device(compat="x,smp", drv=drv), calls


def test_cpu_on_without_handler_raises():
    with pytest.raises(RuntimeError):
        SmpRegistry().cpu_on(Cpu(enable_method="psci"), 0, 0)


def test_register_handler_ignores_non_smp_device():
    registry = SmpRegistry()
    drv = Driver(match_table=["x,u"], type=DriverType.UART, init=lambda d, m: None)
    registry.register_handler(Device(compat="x,u", drv=drv))
    assert registry.ops_device is None


def test_cpu_on_matching_method_calls_driver():
    registry = SmpRegistry()
    dev, calls = _smp_device("psci")
    registry.register_handler(dev)
    cpu = Cpu(enable_method="psci", cpu_id=1)
    assert registry.cpu_on(cpu, "entry", "stack") == "started"
    assert calls == [(dev, cpu, "entry", "stack")]


def test_cpu_on_mismatched_method_raises():
    registry = SmpRegistry()
    dev, calls = _smp_device("psci")
    registry.register_handler(dev)
    with pytest.raises(ValueError):
        registry.cpu_on(Cpu(enable_method="spin-table"), 0, 0)
    assert calls == []


def test_cpu_on_none_against_named_method_raises():
    registry = SmpRegistry()
    dev, _ = _smp_device("psci")
    registry.register_handler(dev)
    with pytest.raises(ValueError):
        registry.cpu_on(Cpu(enable_method=None), 0, 0)


def test_cpu_on_both_none_is_accepted():
    registry = SmpRegistry()
    dev, calls = _smp_device(None, result=7)
    registry.register_handler(dev)
    assert registry.cpu_on(Cpu(), 1, 2) == 7
    assert len(calls) == 1