"""Route geometry utilities.

Distance approximation and curve smoothing for polylines expressed as
(lat, lng) pairs in degrees.
"""

import math
from typing import List, Sequence, Tuple

from app.config import KM_PER_DEGREE, ROAD_DETOUR_FACTOR

LatLng = Tuple[float, float]

START_CURVE_INTENSITY = 0.1
END_CURVE_INTENSITY = 0.1
MIDDLE_CURVE_INTENSITY = 0.2


def road_distance_km(start: LatLng, end: LatLng) -> float:
    """Approximate road distance between two points.

    Straight-line distance in degrees converted to kilometres, plus 20%
    for road detours.

    Args:
        start: (lat, lng) of the first point
        end: (lat, lng) of the second point

    Returns:
        Distance in kilometres
    """
    degrees = math.sqrt((end[0] - start[0]) ** 2 + (end[1] - start[1]) ** 2)
    return degrees * KM_PER_DEGREE * ROAD_DETOUR_FACTOR


def curve_intensity(position: str) -> float:
    """Curve offset for a leg at the given position of the path.

    Args:
        position: "start", "end" or "middle"
    """
    if position == "start":
        return START_CURVE_INTENSITY
    if position == "end":
        return END_CURVE_INTENSITY
    return MIDDLE_CURVE_INTENSITY


def quadratic_curve_points(
    start: LatLng, end: LatLng, intensity: float, num_points: int = 4
) -> List[LatLng]:
    """Interior points of a quadratic Bezier curve between two points.

    The control point is the chord midpoint pushed perpendicular to the
    chord by `intensity` times the chord vector. The endpoints themselves
    are not included.

    Args:
        start: (lat, lng) where the curve begins
        end: (lat, lng) where the curve ends
        intensity: Perpendicular offset of the control point
        num_points: Number of subdivisions; num_points - 1 points are returned

    Returns:
        List of (lat, lng) points strictly between start and end
    """
    mid_lat = (start[0] + end[0]) / 2
    mid_lng = (start[1] + end[1]) / 2

    d_lat = end[0] - start[0]
    d_lng = end[1] - start[1]

    # (-d_lng, d_lat) is the chord rotated by 90 degrees
    ctrl_lat = mid_lat - d_lng * intensity
    ctrl_lng = mid_lng + d_lat * intensity

    points = []
    for i in range(1, num_points):
        t = i / num_points
        lat = (1 - t) ** 2 * start[0] + 2 * (1 - t) * t * ctrl_lat + t**2 * end[0]
        lng = (1 - t) ** 2 * start[1] + 2 * (1 - t) * t * ctrl_lng + t**2 * end[1]
        points.append((lat, lng))

    return points


def smooth_path(stops: Sequence[LatLng]) -> List[LatLng]:
    """Build a curved polyline visiting every stop in order.

    Each leg between consecutive stops gets interpolated curve points; the
    first leg is gentle, later legs are stronger, and the leg into the final
    stop is gentle again. Every stop appears exactly once, so consecutive
    legs share their joining point.

    Args:
        stops: At least two (lat, lng) points, origin first

    Returns:
        Polyline starting at stops[0] and ending at stops[-1]
    """
    if len(stops) < 2:
        raise ValueError("A path needs at least two stops")

    path: List[LatLng] = [stops[0]]
    last_leg = len(stops) - 2

    for index in range(len(stops) - 1):
        if index == last_leg:
            position = "end"
        elif index == 0:
            position = "start"
        else:
            position = "middle"

        intensity = curve_intensity(position)
        path.extend(quadratic_curve_points(stops[index], stops[index + 1], intensity))
        path.append(stops[index + 1])

    return path
