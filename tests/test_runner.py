import logging

import pytest

from oscillator.Vec2 import Vec2
from oscillator.errors import InvalidParameter
from oscillator.runner import RunController, build_panels


@pytest.fixture
def controller():
    return RunController(delta_time=0.02, charges_count=10, charges_value=1.0,
                         loop_size=Vec2(100, 50), loop_origin=Vec2(10, 10))


def test_tick_does_nothing_before_start(controller):
    assert controller.tick() is False
    assert controller.time == 0.0
    assert controller.readouts() == {}


def test_start_builds_circuit_and_panels(controller):
    circuit = controller.start(1.0, 1.0, 10.0)
    assert controller.running
    assert controller.circuit is circuit
    assert circuit.lattice.count == 10
    assert circuit.path.total_length == pytest.approx(300)
    assert len(controller.panels) == 4
    assert [s.label for p in controller.panels for s in p.series] == ["U, V", "I, A", "Wl, J", "Wc, J", "q, C"]


def test_tick_advances_time_and_markers(controller):
    circuit = controller.start(1.0, 1.0, 10.0)
    for _ in range(5):
        assert controller.tick()
    assert controller.time == pytest.approx(0.1)
    assert circuit.lattice.shift > 0.0


def test_stop_freezes_state(controller):
    circuit = controller.start(1.0, 1.0, 10.0)
    controller.tick()
    controller.stop()
    frozen = (controller.time, circuit.lattice.shift)
    assert controller.tick() is False
    assert (controller.time, circuit.lattice.shift) == frozen


def test_restart_resets_clock(controller):
    first = controller.start(1.0, 1.0, 10.0)
    controller.tick()
    controller.stop()
    second = controller.start(2.0, 0.5, 3.0)
    assert second is not first
    assert controller.time == 0.0
    assert second.lattice.shift == 0.0


def test_toggle(controller):
    assert controller.toggle(1.0, 1.0, 1.0) is True
    assert controller.toggle(1.0, 1.0, 1.0) is False


def test_start_rejects_invalid_parameters(controller):
    with pytest.raises(InvalidParameter):
        controller.start(0.0, 1.0, 1.0)
    assert not controller.running
    assert controller.circuit is None


def test_invalid_delta_time():
    with pytest.raises(InvalidParameter):
        RunController(delta_time=0)


def test_sync_starts_and_publishes_readouts(controller):
    shared = {'toggle_run': True, 'capacitance': 1e-6, 'inductance': 1e-3, 'max_voltage': 10.0}
    controller.sync(shared)
    assert shared['running'] is True
    assert shared['toggle_run'] is False
    assert shared['error'] == ''
    assert shared['frequency'] == pytest.approx(31622.7766, rel=1e-6)
    assert shared['max_energy'] == pytest.approx(5e-5)
    assert shared['max_charge'] == pytest.approx(1e-5)

    shared['toggle_run'] = True
    controller.sync(shared)
    assert shared['running'] is False


def test_sync_without_request_only_reports(controller):
    shared = {}
    controller.sync(shared)
    assert shared == {'running': False}


def test_sync_reports_bad_parameters(controller, caplog):
    shared = {'toggle_run': True, 'capacitance': -1.0, 'inductance': 1.0, 'max_voltage': 1.0}
    with caplog.at_level(logging.WARNING, logger="oscillator"):
        controller.sync(shared)
    assert shared['running'] is False
    assert "capacitance" in shared['error']
    assert "cannot start simulation" in caplog.text


def test_build_panels_windows(circuit):
    panels = build_panels(circuit, Vec2(300, 200), [Vec2(0, 0)] * 4, periods=2)
    period = circuit.period()
    assert panels[0].time_interval == pytest.approx(2 * period)
    assert panels[2].time_interval == pytest.approx(period)
    assert panels[2].min_value == 0.0
    assert panels[2].max_value == pytest.approx(circuit.total_energy())
    assert panels[3].max_value == pytest.approx(circuit.peak_charge())


def test_sync_reports_parameters_out_of_float_range(controller):
    shared = {'toggle_run': True, 'capacitance': 1e-200, 'inductance': 1e-200, 'max_voltage': 1.0}
    controller.sync(shared)
    assert shared['running'] is False
    assert shared['error']
    assert controller.circuit is None
