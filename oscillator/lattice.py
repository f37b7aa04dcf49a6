import logging

from .errors import InvalidParameter, require_positive
from .path import wrap

logger = logging.getLogger(__name__)


class ChargeLattice:
    """
    A fixed number of charge markers evenly spaced along a loop.

    All markers share a single `shift`, the distance they have collectively
    travelled along the loop. The markers move at a speed proportional to
    the current through the wire, each one standing for `charge_value`
    coulombs.
    """

    def __init__(self, count, loop_length, charge_value=1.0, shift=0.0):
        if isinstance(count, bool) or not isinstance(count, int) or count <= 0:
            raise InvalidParameter(f"charge count must be a positive integer, got {count!r}")
        self.count = count
        self.loop_length = require_positive("loop length", loop_length)
        self.charge_value = require_positive("charge value", charge_value)
        self.shift = wrap(float(shift), self.loop_length)
        logger.debug("lattice of %d charges on a loop of %g, spacing %g", count, self.loop_length, self.spacing)

    @property
    def spacing(self):
        return self.loop_length / self.count

    def positions(self):
        spacing = self.spacing
        return [wrap(i * spacing + self.shift, self.loop_length) for i in range(self.count)]

    def speed(self, current):
        return current * self.spacing / self.charge_value

    def advance(self, current, dt):
        # negative current moves the markers backwards; wrap keeps shift in range
        self.shift = wrap(self.shift + self.speed(current) * dt, self.loop_length)
        return self.shift

    def __repr__(self):
        return f"<ChargeLattice count={self.count} loop_length={self.loop_length} shift={self.shift:.4g}>"
