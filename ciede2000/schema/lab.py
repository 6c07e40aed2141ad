# Copyright (c) 2026 ciede2000 contributors
# SPDX-License-Identifier: MIT

"""
LAB value type.

Design principles:
- Immutable: LAB is a frozen dataclass
- Unvalidated: no range is enforced on any component
- Plain: construction, field access, and conversion helpers only

CIELAB:
- l (Lightness): 0 = black, 100 = white by convention
- a: green (negative) to red (positive)
- b: blue (negative) to yellow (positive)

Values outside the conventional ranges are accepted and passed through
unchanged. NaN/Inf are accepted too; they propagate through ΔE.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Union

import numpy as np
from numpy.typing import ArrayLike, NDArray


# =============================================================================
# Core Color Type
# =============================================================================


@dataclass(frozen=True, slots=True)
class LAB:
    """
    A single color in CIELAB color space.

    Attributes:
        l: Lightness (conventionally 0-100)
        a: Green-red opponent axis
        b: Blue-yellow opponent axis
    """
    l: float
    a: float
    b: float

    @property
    def chroma(self) -> float:
        """Radial distance from neutral in the a-b plane."""
        return math.hypot(self.a, self.b)

    @property
    def hue(self) -> float:
        """Hue angle in degrees [0, 360); 0 for neutral colors."""
        from ciede2000.measure.conversions import hue_angle
        return hue_angle(self.b, self.a)

    def __str__(self) -> str:
        from ciede2000.runtime.formatting import format_lab
        return format_lab(self)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"l": self.l, "a": self.a, "b": self.b}

    @classmethod
    def from_dict(cls, data: Mapping) -> LAB:
        """
        Deserialize from a mapping.

        Lightness may be keyed as "l" or "L".

        Raises:
            ValueError: If a component is missing
        """
        l = data.get("l", data.get("L"))
        if l is None or "a" not in data or "b" not in data:
            raise ValueError(
                f"LAB mapping needs 'l', 'a' and 'b' keys, got {sorted(data)}"
            )
        return cls(l=float(l), a=float(data["a"]), b=float(data["b"]))

    def to_array(self) -> NDArray[np.float64]:
        """Return the components as a float64 array of shape (3,)."""
        return np.array([self.l, self.a, self.b], dtype=np.float64)

    @classmethod
    def from_array(cls, values: ArrayLike) -> LAB:
        """
        Build from any array-like holding exactly three numbers.

        Raises:
            ValueError: If values does not hold exactly three numbers
        """
        arr = np.asarray(values, dtype=np.float64)
        if arr.shape != (3,):
            raise ValueError(f"LAB needs exactly 3 components, got shape {arr.shape}")
        l, a, b = (float(v) for v in arr)
        return cls(l=l, a=a, b=b)


LabLike = Union[LAB, Mapping, Sequence[float], NDArray]


def as_lab(value: LabLike) -> LAB:
    """
    Coerce a LAB-like value to LAB.

    Accepts a LAB (returned unchanged), a mapping with l/a/b keys, or a
    sequence / numpy array of three numbers.

    Raises:
        TypeError: If value is not one of the accepted kinds
        ValueError: If the mapping or sequence is malformed
    """
    if isinstance(value, LAB):
        return value
    if isinstance(value, Mapping):
        return LAB.from_dict(value)
    if isinstance(value, (str, bytes)) or not isinstance(value, (tuple, list, np.ndarray)):
        raise TypeError(f"Cannot interpret {type(value).__name__} as LAB")
    return LAB.from_array(value)
