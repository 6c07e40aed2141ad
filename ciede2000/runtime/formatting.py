# Copyright (c) 2026 ciede2000 contributors
# SPDX-License-Identifier: MIT

"""
Text rendering for LAB values.

Used for logs, diagnostics and test failure messages. Formatting never
touches the stored components: precision only affects the text.
"""

from __future__ import annotations

import json
from enum import Enum
from typing import Optional

from ciede2000.schema.lab import LAB


class LabFormat(Enum):
    """Output format for LAB text."""

    NATURAL = "natural"
    COMPACT = "compact"
    JSON = "json"


def format_lab(
    lab: LAB,
    *,
    format: LabFormat = LabFormat.NATURAL,
    precision: Optional[int] = None,
) -> str:
    """Render a LAB value as text.

    Args:
        lab: The color to render.
        format: NATURAL, COMPACT or JSON.
        precision: Fixed number of decimals. None renders each component
            with repr(), which round-trips to the stored float.

    Returns:
        Formatted string.

    Example::

        >>> format_lab(LAB(50.0, 2.6772, -79.7751))
        'LAB(l=50.0, a=2.6772, b=-79.7751)'
        >>> format_lab(LAB(50.0, 2.6772, -79.7751), format=LabFormat.COMPACT, precision=1)
        '50.0/2.7/-79.8'
    """
    if precision is not None and precision < 0:
        raise ValueError(f"precision must be >= 0, got {precision}")

    if format == LabFormat.JSON:
        return _to_json(lab, precision)

    l, a, b = (_fmt(v, precision) for v in (lab.l, lab.a, lab.b))
    if format == LabFormat.COMPACT:
        return f"{l}/{a}/{b}"
    return f"LAB(l={l}, a={a}, b={b})"


def _fmt(value: float, precision: Optional[int]) -> str:
    if precision is None:
        return repr(float(value))
    return f"{value:.{precision}f}"


def _to_json(lab: LAB, precision: Optional[int]) -> str:
    """JSON object; rounding applies to the emitted numbers only."""
    d = lab.to_dict()
    if precision is not None:
        d = {k: round(v, precision) for k, v in d.items()}
    return json.dumps(d, separators=(",", ":"))
