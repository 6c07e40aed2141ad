# Copyright (c) 2026 ciede2000 contributors
# SPDX-License-Identifier: MIT

"""
Color difference core for ciede2000.

All operations are pure functions of their arguments.
"""

from ciede2000.measure.conversions import deg2rad, hue_angle, rad2deg
from ciede2000.measure.difference import DeltaETerms, ciede2000, ciede2000_terms

__all__ = [
    "ciede2000",
    "ciede2000_terms",
    "DeltaETerms",
    "deg2rad",
    "rad2deg",
    "hue_angle",
]
