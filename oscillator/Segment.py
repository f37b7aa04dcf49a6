from .Vec2 import Vec2


class Segment:
    """Directed piece of wire running from `start` to `end`."""

    def __init__(self, start, end):
        self.start = start if isinstance(start, Vec2) else Vec2(start[0], start[1])
        self.end = end if isinstance(end, Vec2) else Vec2(end[0], end[1])

    def length(self):
        return (self.end - self.start).length()

    def direction(self):
        """Angle of the segment in radians; meaningless for a degenerate segment."""
        return (self.end - self.start).angle()

    def is_degenerate(self):
        return self.start == self.end

    def point_at(self, offset):
        # offset is measured from start along the segment
        return self.start + Vec2.from_polar(self.direction(), offset)

    def __repr__(self):
        return f"<Segment {self.start} -> {self.end}>"

    def __str__(self):
        return self.__repr__()
