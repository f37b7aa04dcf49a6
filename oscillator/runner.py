import logging
import math

from .Vec2 import Vec2
from .circuit import OscillatingCircuit
from .errors import InvalidParameter
from .graph import GraphPanel, SampledFunctionSeries

logger = logging.getLogger(__name__)

# series colours, kept here so the model side never imports pygame
AQUA = (0, 255, 255)
MAGENTA = (255, 0, 255)
RED = (255, 0, 0)
GREEN = (0, 128, 0)
BLUE = (0, 0, 255)


def build_panels(circuit, panel_size, panel_origins, periods=1, sample_density=200):
    """
    The four standard plots: voltage, current, energy split and charge.
    `panel_origins` holds the top-left screen position of each plot in that order.
    """
    period = circuit.period()
    window = periods * period
    voltage_pos, current_pos, energy_pos, charge_pos = panel_origins

    return [
        GraphPanel(voltage_pos, panel_size, [
            SampledFunctionSeries(circuit.voltage, window, sample_density, "U, V", AQUA),
        ], max_value=circuit.peak_voltage(), time_interval=window, period=period),
        GraphPanel(current_pos, panel_size, [
            SampledFunctionSeries(circuit.current, window, sample_density, "I, A", MAGENTA),
        ], max_value=circuit.peak_current(), time_interval=window, period=period),
        # energies repeat twice per oscillation
        GraphPanel(energy_pos, panel_size, [
            SampledFunctionSeries(circuit.inductor_energy, window * 0.5, sample_density, "Wl, J", RED),
            SampledFunctionSeries(circuit.capacitor_energy, window * 0.5, sample_density, "Wc, J", GREEN),
        ], max_value=circuit.total_energy(), min_value=0, time_interval=window * 0.5, period=period * 0.5),
        GraphPanel(charge_pos, panel_size, [
            SampledFunctionSeries(circuit.charge, window, sample_density, "q, C", BLUE),
        ], max_value=circuit.peak_charge(), time_interval=window, period=period),
    ]


class RunController:
    """
    Drives one circuit with a fixed tick length.

    Holds the simulated clock; `tick` only advances it while running, so
    stopping simply freezes the picture. Starting again builds a new circuit
    from the supplied parameters and restarts the clock at zero.
    """

    def __init__(self, delta_time=0.02, charges_count=20, charges_value=50.0,
                 loop_size=None, loop_origin=None, panel_size=None, panel_origins=None,
                 periods=1, sample_density=200):
        if not (delta_time > 0 and math.isfinite(delta_time)):
            raise InvalidParameter(f"delta time must be finite and positive, got {delta_time!r}")
        self.delta_time = float(delta_time)
        self.charges_count = charges_count
        self.charges_value = charges_value
        self.loop_size = loop_size if loop_size is not None else Vec2(300, 300)
        self.loop_origin = loop_origin if loop_origin is not None else Vec2(100, 100)
        self.panel_size = panel_size if panel_size is not None else Vec2(334, 212)
        self.panel_origins = panel_origins if panel_origins is not None else [Vec2(18, 18)] * 4
        self.periods = periods
        self.sample_density = sample_density

        self.circuit = None
        self.panels = []
        self.time = 0.0
        self.running = False

    def start(self, capacitance, inductance, peak_voltage):
        circuit = OscillatingCircuit(
            capacitance, inductance, peak_voltage,
            charges_count=self.charges_count,
            charges_value=self.charges_value,
            size=self.loop_size,
            origin=self.loop_origin,
        )
        self.panels = build_panels(circuit, self.panel_size, self.panel_origins,
                                   periods=self.periods, sample_density=self.sample_density)
        self.circuit = circuit
        self.time = 0.0
        self.running = True
        logger.info("simulation started")
        return circuit

    def stop(self):
        if self.running:
            logger.info("simulation stopped at t=%g s", self.time)
        self.running = False

    def toggle(self, capacitance, inductance, peak_voltage):
        if self.running:
            self.stop()
        else:
            self.start(capacitance, inductance, peak_voltage)
        return self.running

    def tick(self):
        if not self.running or self.circuit is None:
            return False
        self.time += self.delta_time
        self.circuit.step(self.time, self.delta_time)
        return True

    def readouts(self):
        if self.circuit is None:
            return {}
        return {
            'max_charge': self.circuit.peak_charge(),
            'max_energy': self.circuit.total_energy(),
            'frequency': self.circuit.angular_frequency(),
        }

    def sync(self, shared):
        """
        Apply requests from the control panel. `shared` is any mutable mapping;
        the panel sets 'toggle_run' and the three parameter values, and reads
        back 'running', the readouts and 'error'.
        """
        if shared.get('toggle_run', False):
            shared['toggle_run'] = False
            try:
                self.toggle(
                    shared.get('capacitance'),
                    shared.get('inductance'),
                    shared.get('max_voltage'),
                )
                shared['error'] = ''
                shared.update(self.readouts())
            except InvalidParameter as e:
                logger.warning("cannot start simulation: %s", e)
                shared['error'] = str(e)
                self.running = False
        shared['running'] = self.running
