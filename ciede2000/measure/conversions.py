# Copyright (c) 2026 ciede2000 contributors
# SPDX-License-Identifier: MIT

"""
Angle conversions.

ΔE00 works in degrees for hue bookkeeping and in radians for the
trigonometric calls; these helpers are the only place the two meet.
"""

from __future__ import annotations

import numpy as np


def deg2rad(deg: float) -> float:
    """Convert degrees to radians."""
    return float(np.radians(deg))


def rad2deg(rad: float) -> float:
    """Convert radians to degrees."""
    return float(np.degrees(rad))


def hue_angle(b: float, a: float) -> float:
    """
    Hue angle of (a, b) in degrees, normalized to [0, 360).

    atan2 is undefined at the origin and yields ±180 for signed zeros
    (arctan2(0.0, -0.0) == pi), so the neutral axis is pinned to 0.

    Args:
        b: Blue-yellow component
        a: Green-red component (possibly chroma-adjusted)

    Returns:
        Hue in degrees [0, 360)
    """
    if a == 0.0 and b == 0.0:
        return 0.0
    h = float(np.degrees(np.arctan2(b, a)) % 360.0)
    # -tiny % 360 rounds to 360
    if h >= 360.0:
        h -= 360.0
    return h
