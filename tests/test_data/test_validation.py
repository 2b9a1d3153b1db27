"""
Unit tests for training data validation.
"""

import numpy as np
import pytest

from gd_regression.data.validation import (
    validate_features,
    validate_targets,
    validate_training_data,
)
from gd_regression.exceptions import DimensionMismatch


class TestValidateFeatures:
    def test_one_dimensional_is_single_feature(self):
        X = validate_features([1, 2, 3])
        assert X.shape == (3, 1)
        assert X.dtype == float

    def test_three_dimensional(self):
        with pytest.raises(DimensionMismatch):
            validate_features(np.zeros((2, 2, 2)))

    def test_non_numeric(self):
        with pytest.raises(ValueError):
            validate_features([["a"], ["b"]])


class TestValidateTargets:
    def test_flat_targets_become_column(self):
        assert validate_targets([1, 2, 3]).shape == (3, 1)

    def test_column_targets_unchanged(self):
        y = validate_targets([[1], [2]])
        np.testing.assert_array_equal(y, [[1.0], [2.0]])

    def test_multiple_outputs(self):
        with pytest.raises(DimensionMismatch):
            validate_targets(np.zeros((3, 2)))


class TestValidateTrainingData:
    def test_valid(self):
        X, y = validate_training_data([[1, 2], [3, 4]], [5, 6])
        assert X.shape == (2, 2)
        assert y.shape == (2, 1)

    def test_row_mismatch(self):
        with pytest.raises(DimensionMismatch, match="do not match"):
            validate_training_data([[1], [2], [3]], [1, 2])

    def test_dimension_mismatch_is_value_error(self):
        with pytest.raises(ValueError):
            validate_training_data([[1], [2]], [1])

    def test_empty(self):
        with pytest.raises(ValueError, match="at least one sample"):
            validate_training_data(np.zeros((0, 1)), np.zeros(0))
