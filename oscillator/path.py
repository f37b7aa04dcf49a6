import logging

from .Segment import Segment
from .Vec2 import Vec2
from .errors import InvalidParameter, require_positive

logger = logging.getLogger(__name__)


def wrap(value, length):
    """
    Reduce `value` into [0, length) with a non-negative result for either sign.
    Python's float % can round up to exactly `length` for tiny negative values,
    so that case is folded back to 0.
    """
    result = value % length
    if result >= length:
        return 0.0
    return result


class ClosedPath:
    """
    Ordered loop of segments. Maps an arc-length offset measured from the
    start of the first segment to a point on the loop.
    """

    def __init__(self, segments, tolerance=1e-9):
        self.segments = list(segments)
        if not self.segments:
            raise InvalidParameter("a closed path needs at least one segment")

        n = len(self.segments)
        for i, seg in enumerate(self.segments):
            following = self.segments[(i + 1) % n]
            gap = (following.start - seg.end).length()
            if gap > tolerance:
                raise InvalidParameter(f"segment {i} ends at {seg.end} but segment {(i + 1) % n} starts at {following.start}")

        # accumulated in walk order so locate sees the same running total
        total = 0.0
        for seg in self.segments:
            total += seg.length()
        self.total_length = total
        if not self.total_length > 0.0:
            raise InvalidParameter("a closed path must have a non-zero length")

    @classmethod
    def rectangle(cls, size, origin=None):
        """Clockwise (on screen) rectangle starting at the top-left corner `origin`."""
        origin = origin if origin is not None else Vec2(0.0, 0.0)
        require_positive("loop width", size.x)
        require_positive("loop height", size.y)
        corners = [Vec2(0, 0), Vec2(size.x, 0), Vec2(size.x, size.y), Vec2(0, size.y)]
        points = [origin + corner for corner in corners]
        return cls(Segment(points[i], points[(i + 1) % 4]) for i in range(4))

    def locate(self, distance):
        if not (0.0 <= distance < self.total_length):
            wrapped = wrap(distance, self.total_length)
            logger.debug("distance %r outside path of length %r, wrapped to %r", distance, self.total_length, wrapped)
            distance = wrapped

        consumed = 0.0
        for seg in self.segments:
            if seg.is_degenerate():
                continue
            seg_length = seg.length()
            if consumed + seg_length >= distance:
                return seg.point_at(distance - consumed)
            consumed += seg_length

        # unreachable while total_length matches the walk; kept for a path whose
        # length was changed after construction
        logger.debug("walk exhausted at distance %r, falling back to path start", distance)
        return self.start()

    def start(self):
        for seg in self.segments:
            if not seg.is_degenerate():
                return seg.start
        return self.segments[0].start

    def corners(self):
        return [seg.start for seg in self.segments]

    def __len__(self):
        return len(self.segments)

    def __repr__(self):
        return f"<ClosedPath segments={len(self.segments)} length={self.total_length:.4g}>"
