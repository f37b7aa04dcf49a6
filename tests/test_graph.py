import math

import pytest

from oscillator.Vec2 import Vec2
from oscillator.errors import InvalidParameter
from oscillator.graph import AXIS_MARK_HEIGHT, GraphPanel, SampledFunctionSeries


def square(t):
    return t * t


def test_sample_covers_full_window():
    series = SampledFunctionSeries(square, window_length=2.0, sample_density=4)
    samples = series.sample(5.0)
    times = [t for t, _ in samples]
    assert times == pytest.approx([3.0, 3.5, 4.0, 4.5, 5.0])
    assert [v for _, v in samples] == pytest.approx([t * t for t in times])


def test_sample_never_before_zero():
    series = SampledFunctionSeries(square, window_length=2.0, sample_density=4)
    times = [t for t, _ in series.sample(0.75)]
    assert times == pytest.approx([0.25, 0.75])
    assert series.sample(0.0) == [(0.0, 0.0)]


def test_sample_is_restartable():
    calls = []

    def f(t):
        calls.append(t)
        return math.sin(t)

    series = SampledFunctionSeries(f, window_length=1.0, sample_density=10)
    first = series.sample(3.0)
    series.sample(100.0)
    assert series.sample(3.0) == first
    assert len(first) == 11


def test_empty_for_non_positive_window():
    assert SampledFunctionSeries(square, window_length=0.0).sample(1.0) == []
    assert SampledFunctionSeries(square, window_length=-1.0).sample(1.0) == []


def test_series_validation():
    with pytest.raises(InvalidParameter):
        SampledFunctionSeries(42, window_length=1.0)
    with pytest.raises(InvalidParameter):
        SampledFunctionSeries(square, window_length=1.0, sample_density=0)


def make_panel(min_value=None):
    series = SampledFunctionSeries(math.cos, window_length=2 * math.pi, sample_density=100, label="U, V")
    return GraphPanel(Vec2(10, 20), Vec2(300, 200), [series], max_value=1.0, min_value=min_value,
                      time_interval=2 * math.pi, period=2 * math.pi)


def test_symmetric_panel_axis_in_the_middle():
    panel = make_panel()
    assert panel.min_value == -1.0
    assert panel.x_axis_start == Vec2(10, 120)
    assert panel.scale.x == pytest.approx(300 / (2 * math.pi))
    assert panel.scale.y == pytest.approx(AXIS_MARK_HEIGHT * 100)


def test_max_mark_matches_peak_of_curve():
    panel = make_panel()
    peak = panel.to_screen(0.0, 1.0, t_end=2 * math.pi)
    assert panel.max_mark().y == pytest.approx(peak.y)

    energy_panel = make_panel(min_value=0.0)
    assert energy_panel.x_axis_start.y == pytest.approx(220)
    peak = energy_panel.to_screen(0.0, 1.0, t_end=2 * math.pi)
    assert energy_panel.max_mark().y == pytest.approx(peak.y)


def test_curves_span_panel_width():
    panel = make_panel()
    t_end = 10.0
    [(series, points)] = list(panel.curves(t_end))
    assert series.label == "U, V"
    assert points[0].x == pytest.approx(10)
    assert points[-1].x == pytest.approx(310)
    assert points[-1].y == pytest.approx(120 - math.cos(t_end) * panel.scale.y)


def test_tick_marks_every_quarter_period():
    panel = GraphPanel(Vec2(0, 0), Vec2(400, 100), [], max_value=1, time_interval=4.0, period=4.0)
    marks = panel.tick_marks(6.0)
    assert [t for t, _ in marks] == pytest.approx([2.0, 3.0, 4.0, 5.0, 6.0])
    assert [p.x for _, p in marks] == pytest.approx([0, 100, 200, 300, 400])


@pytest.mark.parametrize("kwargs", [
    dict(max_value=1, time_interval=0, period=1),
    dict(max_value=1, time_interval=1, period=-1),
    dict(max_value=0, time_interval=1, period=1),
    dict(max_value=1, min_value=2, time_interval=1, period=1),
])
def test_panel_validation(kwargs):
    with pytest.raises(InvalidParameter):
        GraphPanel(Vec2(0, 0), Vec2(100, 100), [], **kwargs)


@pytest.mark.parametrize("window", [float("inf"), float("-inf"), float("nan")])
def test_non_finite_window_rejected(window):
    with pytest.raises(InvalidParameter):
        SampledFunctionSeries(square, window_length=window)
