# Copyright (c) 2026 ciede2000 contributors
# SPDX-License-Identifier: MIT

"""
Schema definitions for CIELAB colors.

LAB is immutable (frozen dataclass) and carries no range validation.
"""

from ciede2000.schema.lab import LAB, LabLike, as_lab

__all__ = [
    "LAB",
    "LabLike",
    "as_lab",
]
