# Copyright (c) 2026 ciede2000 contributors
# SPDX-License-Identifier: MIT

"""
Diagnostic rendering for ciede2000.

The rendering layer never modifies the values it prints.
"""

from ciede2000.runtime.formatting import LabFormat, format_lab

__all__ = [
    "format_lab",
    "LabFormat",
]
