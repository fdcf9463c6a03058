"""Tests for distance-matrix presentation."""

import json

import numpy as np

from apsp.export import format_matrix, matrix_to_json, to_numpy


class TestFormatMatrix:
    def test_inf_for_unreachable(self):
        assert format_matrix([[0, None], [-3, 0]]) == (
            "0 -> 0: 0\n0 -> 1: Inf\n---\n1 -> 0: -3\n1 -> 1: 0\n---\n"
        )

    def test_empty(self):
        assert format_matrix([]) == ""


class TestMatrixToJson:
    def test_null_for_unreachable(self):
        data = json.loads(matrix_to_json([[0, None], [None, 0]]))
        assert data == {"n": 2, "distances": [[0, None], [None, 0]]}


class TestToNumpy:
    def test_inf_for_unreachable(self):
        arr = to_numpy([[0, -5], [None, 0]])
        assert arr.dtype == np.float64
        assert arr.shape == (2, 2)
        assert arr[0, 1] == -5.0
        assert np.isinf(arr[1, 0])
        np.testing.assert_array_equal(np.diag(arr), [0.0, 0.0])

    def test_empty(self):
        assert to_numpy([]).shape == (0, 0)
