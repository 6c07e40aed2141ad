# Copyright (c) 2026 ciede2000 contributors
# SPDX-License-Identifier: MIT

"""Tests for the LAB value type and input coercion."""

import dataclasses
import math
from typing import get_args

import numpy as np
import pytest

from ciede2000.schema import LAB, LabLike, as_lab


class TestLAB:

    def test_fields(self):
        c = LAB(l=50.0, a=2.6772, b=-79.7751)
        assert c.l == 50.0
        assert c.a == 2.6772
        assert c.b == -79.7751

    def test_positional_construction(self):
        assert LAB(50.0, 1.0, -1.0) == LAB(l=50.0, a=1.0, b=-1.0)

    def test_immutable(self):
        c = LAB(50.0, 0.0, 0.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            c.l = 60.0

    def test_hashable_value(self):
        assert len({LAB(50.0, 0.0, 0.0), LAB(50.0, 0.0, 0.0)}) == 1

    def test_no_range_validation(self):
        """Out-of-convention values are the caller's business."""
        c = LAB(l=-20.0, a=500.0, b=-500.0)
        assert c.l == -20.0

    def test_non_finite_accepted(self):
        c = LAB(float("nan"), float("inf"), 0.0)
        assert math.isnan(c.l)

    def test_chroma(self):
        assert LAB(50.0, 3.0, 4.0).chroma == pytest.approx(5.0)

    def test_hue_range(self):
        h = LAB(50.0, -0.1, -0.1).hue
        assert 0.0 <= h < 360.0
        assert h == pytest.approx(225.0)

    def test_neutral_hue_is_zero(self):
        assert LAB(50.0, -0.0, 0.0).hue == 0.0

    def test_str_contains_components(self):
        s = str(LAB(50.0, 2.6772, -79.7751))
        assert "50.0" in s
        assert "2.6772" in s
        assert "-79.7751" in s


class TestLABSerialization:

    def test_to_dict_roundtrip(self):
        c = LAB(60.2574, -34.0099, 36.2677)
        assert LAB.from_dict(c.to_dict()) == c

    def test_from_dict_upper_case_lightness(self):
        assert LAB.from_dict({"L": 50.0, "a": 1.0, "b": 2.0}) == LAB(50.0, 1.0, 2.0)

    def test_from_dict_missing_key(self):
        with pytest.raises(ValueError, match="'l', 'a' and 'b'"):
            LAB.from_dict({"l": 50.0, "a": 1.0})

    def test_to_array(self):
        arr = LAB(50.0, 1.0, -2.0).to_array()
        assert arr.dtype == np.float64
        np.testing.assert_array_equal(arr, [50.0, 1.0, -2.0])

    def test_from_array_roundtrip(self):
        c = LAB(22.7233, 20.0904, -46.6940)
        assert LAB.from_array(c.to_array()) == c

    def test_from_array_returns_python_floats(self):
        c = LAB.from_array(np.array([50, 1, 2], dtype=np.int32))
        assert type(c.l) is float

    def test_from_array_wrong_shape(self):
        with pytest.raises(ValueError, match="exactly 3"):
            LAB.from_array([[50.0, 0.0, 0.0]])


class TestAsLab:

    def test_passthrough(self):
        c = LAB(50.0, 0.0, 0.0)
        assert as_lab(c) is c

    def test_tuple(self):
        assert as_lab((50.0, 1.0, 2.0)) == LAB(50.0, 1.0, 2.0)

    def test_list(self):
        assert as_lab([50.0, 1.0, 2.0]) == LAB(50.0, 1.0, 2.0)

    def test_ndarray(self):
        assert as_lab(np.array([50.0, 1.0, 2.0])) == LAB(50.0, 1.0, 2.0)

    def test_mapping(self):
        assert as_lab({"l": 50.0, "a": 1.0, "b": 2.0}) == LAB(50.0, 1.0, 2.0)

    def test_string_rejected(self):
        with pytest.raises(TypeError, match="str"):
            as_lab("50 1 2")

    def test_number_rejected(self):
        with pytest.raises(TypeError):
            as_lab(50.0)

    def test_wrong_length_rejected(self):
        with pytest.raises(ValueError):
            as_lab((50.0, 1.0, 2.0, 3.0))

    def test_lab_like_lists_accepted_kinds(self):
        """LabLike names exactly the kinds as_lab accepts."""
        args = get_args(LabLike)
        assert LAB in args
        assert len(args) == 4
