import math

import numpy as np

from .Vec2 import Vec2
from .errors import InvalidParameter, require_positive

AXIS_MARK_HEIGHT = 0.7


class SampledFunctionSeries:
    """
    Samples a function of simulated time over a sliding window ending at `t_end`.

    `function` is any callable taking a time in seconds and returning a float;
    `sample_density` is the number of intervals the window is divided into.
    Samples never reach before t = 0, and `t_end` is always the last one.
    """

    def __init__(self, function, window_length, sample_density=200, label="", color=(0, 0, 0)):
        if not callable(function):
            raise InvalidParameter(f"series function must be callable, got {function!r}")
        if isinstance(sample_density, bool) or not isinstance(sample_density, int) or sample_density <= 0:
            raise InvalidParameter(f"sample density must be a positive integer, got {sample_density!r}")
        self.function = function
        self.window_length = float(window_length)
        if not math.isfinite(self.window_length):
            raise InvalidParameter(f"window length must be finite, got {window_length!r}")
        self.sample_density = sample_density
        self.label = label
        self.color = color

    def sample_times(self, t_end):
        if not self.window_length > 0.0:
            return []
        lower = max(0.0, t_end - self.window_length)
        if t_end < lower:
            lower = t_end
        step = self.window_length / self.sample_density
        # count back from t_end so the grid slides with the window
        ks = np.arange(self.sample_density, -1, -1)
        times = t_end - ks * step
        # allow a hair of rounding at the lower bound
        keep = times >= lower - step * 1e-9
        return [float(t) for t in times[keep]]

    def sample(self, t_end):
        return [(t, float(self.function(t))) for t in self.sample_times(t_end)]

    def __repr__(self):
        return f"<SampledFunctionSeries label={self.label!r} window={self.window_length:.4g} density={self.sample_density}>"


class GraphPanel:
    """
    Plot geometry for one or more series sharing a time axis.

    Works in screen coordinates (y grows downwards). The x axis is placed so
    that the range [min_value, max_value] fills AXIS_MARK_HEIGHT of the panel.
    """

    def __init__(self, pos, size, series, max_value, time_interval, period, min_value=None):
        self.pos = pos
        self.size = size
        self.series = list(series)
        self.max_value = float(max_value)
        self.min_value = -self.max_value if min_value is None else float(min_value)
        self.time_interval = require_positive("time interval", time_interval)
        self.period = require_positive("period", period)

        if not self.max_value > self.min_value:
            raise InvalidParameter(f"max value {self.max_value} must exceed min value {self.min_value}")

        self.scale = Vec2(
            size.x / self.time_interval,
            AXIS_MARK_HEIGHT * size.y / (self.max_value - self.min_value),
        )
        self.x_axis_start = Vec2(
            pos.x,
            pos.y + 0.5 * size.y + self.scale.y * 0.5 * (self.max_value + self.min_value) / AXIS_MARK_HEIGHT,
        )

    def to_screen(self, t, value, t_end):
        t_start = t_end - self.time_interval
        return self.x_axis_start + Vec2((t - t_start) * self.scale.x, -value * self.scale.y)

    def curves(self, t_end):
        """Yield (series, screen points) for every series in the panel."""
        for s in self.series:
            points = [self.to_screen(t, value, t_end) for t, value in s.sample(t_end)]
            yield s, points

    def x_axis_end(self):
        return self.x_axis_start + Vec2(self.size.x, 0)

    def y_axis(self):
        return Vec2(self.pos.x, self.pos.y + self.size.y), self.pos

    def max_mark(self):
        """Screen position of the y-axis mark labelled with max_value."""
        return self.pos + Vec2(0, (self.x_axis_start.y - self.pos.y) * (1 - AXIS_MARK_HEIGHT))

    def tick_marks(self, t_end):
        """(time, screen position) of each quarter-period mark inside the window."""
        t_start = t_end - self.time_interval
        quarter = self.period / 4
        marks = []
        for n in range(math.ceil(t_start / quarter), math.floor(t_end / quarter) + 1):
            mark_t = quarter * n
            marks.append((mark_t, self.x_axis_start + Vec2((mark_t - t_start) * self.scale.x, 0)))
        return marks
