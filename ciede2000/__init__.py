# Copyright (c) 2026 ciede2000 contributors
# SPDX-License-Identifier: MIT

"""
ciede2000 -- CIEDE2000 color difference for CIELAB colors.

Returns a single non-negative scalar approximating the perceptual
difference a human observer would report between two colors.

Quick start::

    from ciede2000 import LAB, ciede2000

    ciede2000(LAB(50.0, 2.6772, -79.7751), LAB(50.0, 0.0, -82.7485))
    # 2.0425...
"""

from __future__ import annotations

__version__ = "1.0.0"

from ciede2000.measure import (
    DeltaETerms,
    ciede2000,
    ciede2000_terms,
    deg2rad,
    rad2deg,
)
from ciede2000.runtime import LabFormat, format_lab
from ciede2000.schema import LAB, as_lab

__all__ = [
    # Core API
    "ciede2000",
    "LAB",
    # Diagnostics
    "ciede2000_terms",
    "DeltaETerms",
    "format_lab",
    "LabFormat",
    # Helpers
    "deg2rad",
    "rad2deg",
    "as_lab",
    # Version
    "__version__",
]
