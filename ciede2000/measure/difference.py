# Copyright (c) 2026 ciede2000 contributors
# SPDX-License-Identifier: MIT

"""
CIEDE2000 color difference (ΔE00).

References:
- Sharma, Wu, Dalal (2005), "The CIEDE2000 Color-Difference Formula:
  Implementation Notes, Supplementary Test Data, and Mathematical
  Observations", http://www.ece.rochester.edu/~gsharma/ciede2000/

Reference thresholds (ΔE00):
- ΔE ≈ 1: just noticeable difference
- ΔE ≈ 2-3: perceptible at a glance
- ΔE > 10: clearly different colors

Hue wraparound (steps 6 and 8 below) follows the paper exactly; that is
where most ΔE00 implementations go wrong.
"""

from __future__ import annotations

import logging
import math
from dataclasses import asdict, dataclass

from ciede2000.measure.conversions import deg2rad, hue_angle
from ciede2000.schema.lab import LabLike, as_lab

logger = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

_POW7_25 = 25.0 ** 7
_SQRT_20 = math.sqrt(20.0)

# Parametric weighting factors for reference conditions
K_L = 1.0
K_C = 1.0
K_H = 1.0


# =============================================================================
# Intermediate Terms
# =============================================================================


@dataclass(frozen=True, slots=True)
class DeltaETerms:
    """
    Every intermediate quantity of one ΔE00 evaluation.

    Field names follow the columns of the Sharma supplementary data table;
    a trailing "p" marks a primed quantity. Angles are in degrees.
    """
    C1: float
    C2: float
    Cbar: float
    G: float
    a1p: float
    a2p: float
    C1p: float
    C2p: float
    h1p: float
    h2p: float
    dLp: float
    dCp: float
    dhp: float
    dHp: float
    Lbarp: float
    Cbarp: float
    hbarp: float
    T: float
    SL: float
    SC: float
    SH: float
    dtheta: float
    RC: float
    RT: float
    delta_e: float

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return asdict(self)


# =============================================================================
# ΔE00
# =============================================================================


def _chroma_ratio(c: float) -> float:
    """sqrt(c^7 / (c^7 + 25^7)), saturating to 1 once c^7 overflows."""
    # float ** raises OverflowError; products overflow to inf instead
    c2 = c * c
    c7 = c2 * c2 * c2 * c
    if c7 == math.inf:
        return 1.0
    return math.sqrt(c7 / (c7 + _POW7_25))


def _weighted_norm(lightness: float, chroma: float, hue: float, rt: float) -> float:
    """
    sqrt(l^2 + c^2 + h^2 + rt*c*h), scaled by the largest term.

    Squaring directly overflows past ~1e154 and flushes to 0 below ~1e-162.
    """
    scale = max(abs(lightness), abs(chroma), abs(hue))
    if scale == 0.0 or not math.isfinite(scale):
        return math.sqrt(
            lightness * lightness + chroma * chroma + hue * hue + rt * chroma * hue
        )
    l, c, h = lightness / scale, chroma / scale, hue / scale
    return scale * math.sqrt(l * l + c * c + h * h + rt * c * h)


def _check_factor(name: str, value: float) -> float:
    if not value > 0.0:
        raise ValueError(f"{name} must be > 0, got {value}")
    return float(value)


def ciede2000_terms(
    lab1: LabLike,
    lab2: LabLike,
    *,
    k_l: float = K_L,
    k_c: float = K_C,
    k_h: float = K_H,
) -> DeltaETerms:
    """
    Evaluate ΔE00 and return all intermediate terms.

    Args:
        lab1: First color (LAB, or anything as_lab accepts)
        lab2: Second color
        k_l, k_c, k_h: Parametric factors for lightness, chroma and hue

    Returns:
        DeltaETerms, with the final distance in ``delta_e``

    Raises:
        TypeError / ValueError: If a color cannot be coerced to LAB
        ValueError: If a parametric factor is not positive
    """
    k_l = _check_factor("k_l", k_l)
    k_c = _check_factor("k_c", k_c)
    k_h = _check_factor("k_h", k_h)
    c1 = as_lab(lab1)
    c2 = as_lab(lab2)
    L1, a1, b1 = c1.l, c1.a, c1.b
    L2, a2, b2 = c2.l, c2.a, c2.b

    # 1-3. Chroma-adjusted a' and C'
    C1 = math.hypot(a1, b1)
    C2 = math.hypot(a2, b2)
    Cbar = C1 / 2.0 + C2 / 2.0
    G = 0.5 * (1.0 - _chroma_ratio(Cbar))

    a1p = (1.0 + G) * a1
    a2p = (1.0 + G) * a2
    C1p = math.hypot(a1p, b1)
    C2p = math.hypot(a2p, b2)

    # 4. Hue angles, 0 on the neutral axis
    h1p = 0.0 if C1p == 0.0 else hue_angle(b1, a1p)
    h2p = 0.0 if C2p == 0.0 else hue_angle(b2, a2p)

    # 5-6. Differences
    dLp = L2 - L1
    dCp = C2p - C1p

    # C1' * C2' can underflow to 0 for distinct non-neutral colors
    neutral = C1p == 0.0 or C2p == 0.0
    if neutral:
        dhp = 0.0
    else:
        dhp = h2p - h1p
        if dhp > 180.0:
            dhp -= 360.0
        elif dhp < -180.0:
            dhp += 360.0
    dHp = 2.0 * math.sqrt(C1p) * math.sqrt(C2p) * math.sin(deg2rad(dhp) / 2.0)

    # 7-8. Means
    Lbarp = L1 / 2.0 + L2 / 2.0
    Cbarp = C1p / 2.0 + C2p / 2.0

    hbarp = h1p + h2p
    if not neutral:
        if abs(h1p - h2p) > 180.0:
            if hbarp < 360.0:
                hbarp += 360.0
            else:
                hbarp -= 360.0
        hbarp /= 2.0

    # 9. Weighting functions
    T = (
        1.0
        - 0.17 * math.cos(deg2rad(hbarp - 30.0))
        + 0.24 * math.cos(deg2rad(2.0 * hbarp))
        + 0.32 * math.cos(deg2rad(3.0 * hbarp + 6.0))
        - 0.20 * math.cos(deg2rad(4.0 * hbarp - 63.0))
    )

    # 0.015 d^2 / sqrt(20 + d^2), with d^2 never formed
    d = abs(Lbarp - 50.0)
    SL = 1.0 + 0.015 * d * (d / math.hypot(_SQRT_20, d))
    SC = 1.0 + 0.045 * Cbarp
    SH = 1.0 + 0.015 * Cbarp * T

    hue_offset = (hbarp - 275.0) / 25.0
    dtheta = 30.0 * math.exp(-hue_offset * hue_offset)
    RC = 2.0 * _chroma_ratio(Cbarp)
    RT = -math.sin(deg2rad(2.0 * dtheta)) * RC

    # 10. Distance
    delta_e = _weighted_norm(
        dLp / (k_l * SL),
        dCp / (k_c * SC),
        dHp / (k_h * SH),
        RT,
    )

    return DeltaETerms(
        C1=C1, C2=C2, Cbar=Cbar, G=G,
        a1p=a1p, a2p=a2p, C1p=C1p, C2p=C2p,
        h1p=h1p, h2p=h2p,
        dLp=dLp, dCp=dCp, dhp=dhp, dHp=dHp,
        Lbarp=Lbarp, Cbarp=Cbarp, hbarp=hbarp,
        T=T, SL=SL, SC=SC, SH=SH,
        dtheta=dtheta, RC=RC, RT=RT,
        delta_e=delta_e,
    )


def ciede2000(
    lab1: LabLike,
    lab2: LabLike,
    *,
    k_l: float = K_L,
    k_c: float = K_C,
    k_h: float = K_H,
) -> float:
    """
    Calculate the CIEDE2000 color difference between two CIELAB colors.

    Symmetric in its arguments, exactly 0 for identical colors, positive
    otherwise. Non-finite inputs propagate to a NaN/Inf result.

    Args:
        lab1: First color (LAB, or anything as_lab accepts)
        lab2: Second color
        k_l, k_c, k_h: Parametric factors (1.0 under reference conditions)

    Returns:
        ΔE00 value (lower = more similar)
    """
    c1 = as_lab(lab1)
    c2 = as_lab(lab2)
    delta_e = ciede2000_terms(c1, c2, k_l=k_l, k_c=k_c, k_h=k_h).delta_e
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("ciede2000(%s, %s) = %r", c1, c2, delta_e)
    return delta_e
