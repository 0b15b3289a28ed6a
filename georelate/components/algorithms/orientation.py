"""
Robust orientation predicate.

The determinant is first evaluated in floating point; when its magnitude is
below the forward error bound it is recomputed exactly with rational
arithmetic, so the sign returned is always the true sign for the given
double coordinates.
"""
from fractions import Fraction
from typing import Optional, Sequence

from georelate.core import Orientation
from georelate.components.geometry.coordinate import Coordinate

# Half an ulp of 1.0 and the orient2d error bound derived from it
_EPSILON = 2.0 ** -53
_CCW_ERRBOUND_A = (3.0 + 16.0 * _EPSILON) * _EPSILON


def _sign(value) -> Orientation:
    if value > 0:
        return Orientation.COUNTER_CLOCKWISE
    if value < 0:
        return Orientation.CLOCKWISE
    return Orientation.COLLINEAR


def _exact_determinant(pa: Coordinate, pb: Coordinate, pc: Coordinate) -> Fraction:
    acx = Fraction(pa.x) - Fraction(pc.x)
    bcx = Fraction(pb.x) - Fraction(pc.x)
    acy = Fraction(pa.y) - Fraction(pc.y)
    bcy = Fraction(pb.y) - Fraction(pc.y)
    return acx * bcy - acy * bcx


def orientation_index(p1: Coordinate, p2: Coordinate, q: Coordinate) -> Orientation:
    """
    Orientation of q relative to the directed segment p1 -> p2

    Args:
        p1: Segment start
        p2: Segment end
        q: Point to classify

    Returns:
        COUNTER_CLOCKWISE if q is left of the segment, CLOCKWISE if right,
        COLLINEAR otherwise
    """
    detleft = (p1.x - q.x) * (p2.y - q.y)
    detright = (p1.y - q.y) * (p2.x - q.x)
    det = detleft - detright

    if detleft > 0.0:
        if detright <= 0.0:
            return _sign(det)
        detsum = detleft + detright
    elif detleft < 0.0:
        if detright >= 0.0:
            return _sign(det)
        detsum = -detleft - detright
    else:
        return _sign(det)

    errbound = _CCW_ERRBOUND_A * detsum
    if det >= errbound or -det >= errbound:
        return _sign(det)

    return _sign(_exact_determinant(p1, p2, q))


def winding_order(ring: Sequence[Coordinate]) -> Optional[Orientation]:
    """
    Winding order of a closed ring

    Looks at the edges around the highest vertex, which is robust for rings
    with repeated points or flat tops.

    Args:
        ring: Closed coordinate list (first == last)

    Returns:
        COUNTER_CLOCKWISE or CLOCKWISE, or None for a collapsed ring
    """
    n_pts = len(ring) - 1
    if n_pts < 3:
        return None

    up_hi = ring[0]
    up_low = None
    prev_y = up_hi.y
    i_up_hi = 0
    for i in range(1, n_pts + 1):
        py = ring[i].y
        if py > prev_y and py >= up_hi.y:
            up_hi = ring[i]
            i_up_hi = i
            up_low = ring[i - 1]
        prev_y = py

    # flat ring
    if i_up_hi == 0:
        return None

    i_down_low = i_up_hi
    while True:
        i_down_low = (i_down_low + 1) % n_pts
        if i_down_low == i_up_hi or ring[i_down_low].y != up_hi.y:
            break
    down_low = ring[i_down_low]
    i_down_hi = i_down_low - 1 if i_down_low > 0 else n_pts - 1
    down_hi = ring[i_down_hi]

    if up_hi == down_hi:
        if up_low == up_hi or down_low == up_hi or up_low == down_low:
            return None
        index = orientation_index(up_low, up_hi, down_low)
        if index == Orientation.COLLINEAR:
            return None
        return index

    return Orientation.COUNTER_CLOCKWISE if down_hi.x - up_hi.x < 0 else Orientation.CLOCKWISE
