"""
Тесты приведения и проверки точек.
"""

import numpy as np
import pytest
from lloyd_kmeans.data.points import as_points, is_signed_numeric, validate_means


class TestIsSignedNumeric:
    @pytest.mark.parametrize("dtype", [np.float32, np.float64, np.int8, np.int32, np.int64])
    def test_accepted(self, dtype):
        assert is_signed_numeric(dtype)

    @pytest.mark.parametrize("dtype", [np.uint8, np.uint64, np.bool_, np.complex128, object])
    def test_rejected(self, dtype):
        assert not is_signed_numeric(dtype)


class TestAsPoints:
    def test_from_lists(self):
        X = as_points([[1, 2], [3, 4]])
        assert X.shape == (2, 2)
        assert np.issubdtype(X.dtype, np.signedinteger)

    def test_explicit_dtype(self):
        X = as_points([[1, 2]], dtype=np.float32)
        assert X.dtype == np.float32

    def test_array_passthrough(self):
        data = np.zeros((3, 2))
        assert as_points(data) is data

    def test_ragged(self):
        with pytest.raises(ValueError, match="same dimension"):
            as_points([[1.0, 2.0], [3.0]])

    @pytest.mark.parametrize("data", [[1.0, 2.0], np.zeros((2, 2, 2)), []])
    def test_not_two_dimensional(self, data):
        with pytest.raises(ValueError):
            as_points(data)

    def test_zero_dimension(self):
        with pytest.raises(ValueError):
            as_points(np.zeros((3, 0)))

    @pytest.mark.parametrize(
        "data",
        [
            np.array([[1, 2]], dtype=np.uint16),
            np.array([[True, False]]),
            np.array([[1 + 2j, 0j]]),
            [["a", "b"]],
        ],
    )
    def test_wrong_scalar_type(self, data):
        with pytest.raises(TypeError):
            as_points(data)


class TestValidateMeans:
    def test_cast_to_data_dtype(self):
        M = validate_means([[1, 2], [3, 4]], 2, 2, np.float64)
        assert M.dtype == np.float64

    def test_wrong_shape(self):
        with pytest.raises(ValueError):
            validate_means([[1.0, 2.0]], 2, 2, np.float64)
