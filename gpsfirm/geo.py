"""Great-circle distance, bearing and speed unit conversion for GPS data."""

from __future__ import annotations

import math
from enum import IntEnum

_DEG_TO_RAD = 0.01745329251994
_RAD_TO_DEG = 57.29577951308232
EARTH_RADIUS_KM = 6371.0


class SpeedUnit(IntEnum):
    """Target units for converting a speed given in knots."""

    # Metric
    KPS = 0  # kilometres per second
    KPH = 1  # kilometres per hour
    MPS = 2  # metres per second
    MPM = 3  # metres per minute
    # Imperial
    MIPS = 4  # miles per second
    MPH = 5  # miles per hour
    FPS = 6  # feet per second
    FPM = 7  # feet per minute
    # Runners and joggers
    MPK = 8  # minutes per kilometre
    SPK = 9  # seconds per kilometre
    SP100M = 10  # seconds per 100 metres
    MIPM = 11  # minutes per mile
    SPM = 12  # seconds per mile
    SP100Y = 13  # seconds per 100 yards
    # Nautical
    SMPH = 14  # sea miles per hour


_SPEED_FACTORS = {
    SpeedUnit.KPS: 0.000514,
    SpeedUnit.KPH: 1.852,
    SpeedUnit.MPS: 0.5144,
    SpeedUnit.MPM: 30.87,
    SpeedUnit.MIPS: 0.0003197,
    SpeedUnit.MPH: 1.151,
    SpeedUnit.FPS: 1.688,
    SpeedUnit.FPM: 101.3,
    SpeedUnit.MPK: 32.4,
    SpeedUnit.SPK: 1944.0,
    SpeedUnit.SP100M: 194.4,
    SpeedUnit.MIPM: 52.14,
    SpeedUnit.SPM: 3128.0,
    SpeedUnit.SP100Y: 177.7,
    SpeedUnit.SMPH: 1.0,
}


def distance_bearing(
    lat_start: float, lon_start: float, lat_end: float, lon_end: float
) -> tuple[float, float]:
    """Return ``(distance_m, bearing_deg)`` from the start to the end point.

    Coordinates are in degrees. The distance is in metres along the
    great circle; the bearing is measured clockwise from north and lies
    in ``[0, 360)``.
    """
    d_lat = (lat_end - lat_start) * _DEG_TO_RAD
    d_lon = (lon_end - lon_start) * _DEG_TO_RAD
    las = lat_start * _DEG_TO_RAD
    los = lon_start * _DEG_TO_RAD
    lae = lat_end * _DEG_TO_RAD
    loe = lon_end * _DEG_TO_RAD

    a = (
        math.sin(d_lat * 0.5) ** 2
        + math.sin(d_lon * 0.5) ** 2 * math.cos(las) * math.cos(lae)
    )
    distance = EARTH_RADIUS_KM * 2.0 * math.atan2(math.sqrt(a), math.sqrt(1.0 - a)) * 1000.0

    y = math.sin(loe - los) * math.cos(lae)
    x = math.cos(las) * math.sin(lae) - math.sin(las) * math.cos(lae) * math.cos(loe - los)
    bearing = math.atan2(y, x) * _RAD_TO_DEG
    if bearing < 0:
        bearing += 360.0
    return distance, bearing


def to_speed(knots: float, unit: SpeedUnit | int) -> float:
    """Convert a speed in knots to ``unit``; an unknown unit yields 0.0."""
    try:
        factor = _SPEED_FACTORS[SpeedUnit(unit)]
    except ValueError:
        return 0.0
    return knots * factor