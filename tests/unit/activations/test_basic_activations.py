"""
Unit tests for evoforage.activations.basic_activations module.
"""

import numpy as np
import pytest

from evoforage.activations import (activations, clamped_activation, identity_activation,
                                   relu_activation, sigmoid_activation, tanh_activation)


class TestActivations:

    def test_table_names(self):
        assert set(activations) == {"identity", "clamped", "relu", "sigmoid", "tanh"}
        assert activations["relu"] is relu_activation

    def test_relu(self):
        np.testing.assert_array_equal(relu_activation(np.array([-2.0, 0.0, 3.0])), [0.0, 0.0, 3.0])

    def test_identity(self):
        np.testing.assert_array_equal(identity_activation(np.array([-2.0, 3.0])), [-2.0, 3.0])

    def test_clamped(self):
        np.testing.assert_array_equal(clamped_activation(np.array([-2.0, 0.5, 3.0])), [-1.0, 0.5, 1.0])

    def test_sigmoid(self):
        assert sigmoid_activation(0.0) == pytest.approx(0.5)
        assert 0.0 <= sigmoid_activation(-1e6) < 1e-40
        assert sigmoid_activation(1e6) == pytest.approx(1.0)

    def test_tanh(self):
        assert tanh_activation(0.0) == pytest.approx(0.0)
