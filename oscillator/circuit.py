import logging
import math

from .Vec2 import Vec2
from .errors import InvalidParameter, require_positive
from .lattice import ChargeLattice
from .path import ClosedPath

logger = logging.getLogger(__name__)


class OscillatingCircuit:
    """
    Ideal LC circuit: a charged capacitor discharging through an inductor
    with no resistance, so the oscillation never decays.

    At t = 0 the capacitor holds its peak voltage and no current flows:

        voltage(t) = V0 * cos(w t)
        current(t) = I0 * sin(w t)
        charge(t)  = -Q0 * cos(w t)

    The wire is a rectangle of `size` whose top-left corner sits at `origin`.
    Charge markers are spread along it and moved by `step`, which is the only
    call that changes state. Every other query is a pure function of the
    construction parameters (and of `t` where it takes one).
    """

    def __init__(self, capacitance, inductance, peak_voltage,
                 charges_count=20, charges_value=50.0, size=None, origin=None):
        self.capacitance = require_positive("capacitance", capacitance)
        self.inductance = require_positive("inductance", inductance)
        self._peak_voltage = require_positive("peak voltage", peak_voltage)

        self.size = size if size is not None else Vec2(300, 300)
        self.origin = origin if origin is not None else Vec2(0, 0)

        self.path = ClosedPath.rectangle(self.size, self.origin)
        self.lattice = ChargeLattice(charges_count, self.path.total_length, charges_value)

        # derived constants never change for a given circuit
        try:
            self._angular_frequency = (self.inductance * self.capacitance) ** -0.5
            self._peak_current = self._peak_voltage * math.sqrt(self.capacitance / self.inductance)
            self._peak_charge = self._peak_current / self._angular_frequency
            self._total_energy = self._peak_voltage ** 2 * self.capacitance / 2
        except (ZeroDivisionError, OverflowError) as e:
            raise InvalidParameter(f"circuit constants out of floating point range: {e}") from None

        for name, value in (('angular frequency', self._angular_frequency),
                            ('peak current', self._peak_current),
                            ('peak charge', self._peak_charge),
                            ('total energy', self._total_energy)):
            if not (math.isfinite(value) and value > 0.0):
                raise InvalidParameter(f"{name} is {value!r} for C={self.capacitance}, L={self.inductance}, V0={self._peak_voltage}")

        logger.info("LC circuit C=%g F, L=%g H, V0=%g V: w=%g rad/s, E=%g J",
                    self.capacitance, self.inductance, self._peak_voltage,
                    self._angular_frequency, self._total_energy)

    def peak_voltage(self):
        return self._peak_voltage

    def angular_frequency(self):
        return self._angular_frequency

    def period(self):
        return 2 * math.pi / self._angular_frequency

    def peak_current(self):
        return self._peak_current

    def peak_charge(self):
        return self._peak_charge

    def total_energy(self):
        return self._total_energy

    def voltage(self, t):
        return self._peak_voltage * math.cos(self._angular_frequency * t)

    def current(self, t):
        return self._peak_current * math.sin(self._angular_frequency * t)

    def charge(self, t):
        return -self._peak_charge * math.cos(self._angular_frequency * t)

    def capacitor_energy(self, t):
        return self._total_energy * math.cos(self._angular_frequency * t) ** 2

    def inductor_energy(self, t):
        return self._total_energy * math.sin(self._angular_frequency * t) ** 2

    def step(self, t, dt):
        """Move the charge markers by the current flowing at time `t` over `dt` seconds."""
        self.lattice.advance(self.current(t), dt)

    def marker_positions(self):
        return [self.path.locate(d) for d in self.lattice.positions()]

    @property
    def segments(self):
        return self.path.segments

    def __repr__(self):
        return (f"OscillatingCircuit(capacitance={self.capacitance}, inductance={self.inductance}, "
                f"peak_voltage={self._peak_voltage})")
