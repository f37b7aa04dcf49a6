"""
pygame drawing for the circuit and its plots.

Only reads from the model: marker positions, segment end points and
sampled series. Text is drawn only when a pygame font is supplied.
"""
import math

import pygame

from .Vec2 import Vec2

BLACK = (0, 0, 0)
YELLOW = (255, 255, 0)

HUMP_RADIUS = 10
CAPACITOR_PLATES_DISTANCE = 10
CAPACITOR_PLATES_SIZE = 20
MARKER_SIZE = 4
MARK_WIDTH = 6
ARROW_SIZE = 5


def _pt(v):
    return (int(round(v.x)), int(round(v.y)))


def draw_segment(screen, segment, color=BLACK, width=2):
    pygame.draw.line(screen, color, _pt(segment.start), _pt(segment.end), width)


def draw_inductor(screen, length, pos, color=BLACK, width=2):
    """Coil of three humps running down from `pos` over `length` pixels."""
    lead = (length - HUMP_RADIUS * 2 * 3) / 2
    centers = [
        Vec2(pos.x, pos.y + length / 2 + HUMP_RADIUS * 2),
        Vec2(pos.x, pos.y + length / 2),
        Vec2(pos.x, pos.y + length / 2 - HUMP_RADIUS * 2),
    ]

    pygame.draw.line(screen, color, _pt(pos), _pt(Vec2(pos.x, pos.y + lead)), width)
    for center in centers:
        rect = pygame.Rect(0, 0, HUMP_RADIUS * 2, HUMP_RADIUS * 2)
        rect.center = _pt(center)
        # left half circle, bulging away from the loop
        pygame.draw.arc(screen, color, rect, math.pi / 2, 3 * math.pi / 2, width)
    pygame.draw.line(screen, color, _pt(Vec2(pos.x, pos.y + length - lead)), _pt(Vec2(pos.x, pos.y + length)), width)


def draw_capacitor(screen, length, pos, color=BLACK, width=2):
    """Two plates across the wire running down from `pos` over `length` pixels."""
    line_length = (length - CAPACITOR_PLATES_DISTANCE) / 2
    half = CAPACITOR_PLATES_SIZE / 2

    pygame.draw.line(screen, color, _pt(pos), _pt(Vec2(pos.x, pos.y + line_length)), width)
    for y in (pos.y + line_length, pos.y + length - line_length):
        pygame.draw.line(screen, color, _pt(Vec2(pos.x - half, y)), _pt(Vec2(pos.x + half, y)), width)
    pygame.draw.line(screen, color, _pt(Vec2(pos.x, pos.y + length - line_length)), _pt(Vec2(pos.x, pos.y + length)), width)


def draw_markers(screen, positions, color=YELLOW):
    for p in positions:
        screen.fill(color, pygame.Rect(int(p.x - MARKER_SIZE / 2), int(p.y - MARKER_SIZE / 2), MARKER_SIZE, MARKER_SIZE))


def draw_circuit(screen, circuit, wire_color=BLACK, marker_color=YELLOW):
    top, _right, bottom, _left = circuit.segments
    left_up, right_up = top.start, top.end

    draw_capacitor(screen, circuit.size.y, right_up, wire_color)
    draw_inductor(screen, circuit.size.y, left_up, wire_color)
    draw_segment(screen, top, wire_color)
    draw_segment(screen, bottom, wire_color)

    draw_markers(screen, circuit.marker_positions(), marker_color)


def _text(screen, font, text, pos, color=BLACK):
    if font is None:
        return 0
    surf = font.render(text, True, color)
    # anchor bottom-left like canvas fillText
    screen.blit(surf, (int(pos.x), int(pos.y) - surf.get_height()))
    return surf.get_width()


def draw_panel(screen, panel, t_end, font=None, axis_color=BLACK):
    for series, points in panel.curves(t_end):
        if len(points) >= 2:
            pygame.draw.lines(screen, series.color, False, [_pt(p) for p in points], 2)

    # y axis with its max value mark and arrow
    start, end = panel.y_axis()
    pygame.draw.line(screen, axis_color, _pt(start), _pt(end), 2)
    mark = panel.max_mark()
    pygame.draw.line(screen, axis_color, _pt(mark - Vec2(MARK_WIDTH / 2, 0)), _pt(mark + Vec2(MARK_WIDTH / 2, 0)), 2)
    _text(screen, font, f"{panel.max_value:.3g}", mark + Vec2(MARK_WIDTH / 2, 0), axis_color)
    pygame.draw.polygon(screen, axis_color, [
        _pt(end), _pt(end + Vec2(-ARROW_SIZE, ARROW_SIZE)), _pt(end + Vec2(ARROW_SIZE, ARROW_SIZE)),
    ])

    shift = 0
    for series in panel.series:
        shift += _text(screen, font, series.label, end + Vec2(shift, 0), series.color) + 10

    # x axis with quarter period marks
    x_start, x_end = panel.x_axis_start, panel.x_axis_end()
    pygame.draw.line(screen, axis_color, _pt(x_start), _pt(x_end), 2)
    pygame.draw.polygon(screen, axis_color, [
        _pt(x_end), _pt(x_end + Vec2(-ARROW_SIZE, ARROW_SIZE)), _pt(x_end + Vec2(-ARROW_SIZE, -ARROW_SIZE)),
    ])
    for mark_t, mark_pos in panel.tick_marks(t_end):
        pygame.draw.line(screen, axis_color,
                         _pt(mark_pos - Vec2(0, MARK_WIDTH / 2)), _pt(mark_pos + Vec2(0, MARK_WIDTH / 2)), 1)
        _text(screen, font, f"{mark_t:.3g}", mark_pos - Vec2(0, MARK_WIDTH / 2), axis_color)
    _text(screen, font, "t, s", x_end, axis_color)
