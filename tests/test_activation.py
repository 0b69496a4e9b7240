"""
test_activation.py
~~~~~~~~~~~~~~~~~~

Unit tests for the activation functions and the squared error metric.
"""

import pytest
import torch

from evonet import (
    binary_sigmoid,
    binary_sigmoid_derivative,
    bipolar_sigmoid,
    bipolar_sigmoid_derivative,
    squared_error,
)


@pytest.mark.unit
class TestSigmoids:
    """Test the sigmoid family."""

    def test_binary_sigmoid_at_zero(self):
        """Test that the binary sigmoid is centred on 0.5."""
        assert binary_sigmoid(0.0, 1.0).item() == 0.5

    def test_bipolar_sigmoid_at_zero(self):
        """Test that the bipolar sigmoid is centred on 0.0."""
        assert bipolar_sigmoid(0.0, 1.0).item() == 0.0

    @pytest.mark.parametrize("a", [0.5, 1.0, 2.0])
    def test_binary_sigmoid_range(self, a):
        """Test that binary sigmoid values stay strictly within (0, 1)."""
        values = binary_sigmoid(torch.linspace(-3.0, 3.0, 61), a)
        assert torch.all(values > 0.0)
        assert torch.all(values < 1.0)

    @pytest.mark.parametrize("a", [0.5, 1.0, 2.0])
    def test_bipolar_sigmoid_range(self, a):
        """Test that bipolar sigmoid values stay strictly within (-1, 1)."""
        values = bipolar_sigmoid(torch.linspace(-3.0, 3.0, 61), a)
        assert torch.all(values > -1.0)
        assert torch.all(values < 1.0)

    def test_bipolar_sigmoid_saturates(self):
        """Test that large arguments saturate to the bounds instead of failing."""
        assert bipolar_sigmoid(100.0, 10.0).item() == 1.0
        assert bipolar_sigmoid(-100.0, 10.0).item() == -1.0

    def test_amplification_steepens_curve(self):
        """Test that a larger amplification pushes values further from the centre."""
        assert bipolar_sigmoid(0.1, 10.0).item() > bipolar_sigmoid(0.1, 1.0).item()

    def test_results_are_float32(self):
        """Test that results use 32-bit floats."""
        assert binary_sigmoid(1.0, 1.0).dtype == torch.float32
        assert bipolar_sigmoid([1.0, 2.0], 1.0).dtype == torch.float32

    def test_elementwise_on_sequences(self):
        """Test that sequences are evaluated element by element."""
        values = bipolar_sigmoid([-1.0, 0.0, 1.0], 1.0)
        assert values.shape == (3,)
        assert values[1].item() == 0.0
        assert values[0].item() == pytest.approx(-values[2].item())


@pytest.mark.unit
class TestDerivatives:
    """Test derivatives computed from sigmoid outputs."""

    def test_binary_sigmoid_derivative(self):
        """Test the binary derivative at the centre of the curve."""
        assert binary_sigmoid_derivative(0.5, 1.0).item() == 0.25

    def test_binary_sigmoid_derivative_uses_result(self):
        """Test that the derivative is computed from the output, not the argument."""
        result = binary_sigmoid(0.7, 2.0)
        expected = result * 2.0 * (1.0 - result)
        assert torch.equal(binary_sigmoid_derivative(result, 2.0), expected)

    def test_bipolar_sigmoid_derivative(self):
        """Test the bipolar derivative at the centre and at the bounds."""
        assert bipolar_sigmoid_derivative(0.0, 10.0).item() == 5.0
        assert bipolar_sigmoid_derivative(1.0, 10.0).item() == 0.0
        assert bipolar_sigmoid_derivative(-1.0, 10.0).item() == 0.0


@pytest.mark.unit
class TestSquaredError:
    """Test the squared error metric."""

    def test_identical_sequences(self):
        """Test that identical sequences have zero error."""
        x = [0.25, -0.5, 0.75]
        assert squared_error(x, x).item() == 0.0

    def test_sums_squared_differences(self):
        """Test that differences are squared and summed."""
        assert squared_error([1.0, 2.0], [0.0, 0.0]).item() == 5.0
        assert squared_error([1.0, -1.0], [-1.0, 1.0]).item() == 8.0

    def test_longer_sequence_is_truncated(self):
        """Test that trailing values of the longer sequence are ignored."""
        assert squared_error([1.0, 2.0, 3.0], [1.0, 2.0]).item() == 0.0
        assert squared_error([1.0], [0.0, 100.0]).item() == 1.0

    def test_empty_sequence(self):
        """Test that an empty sequence has zero error."""
        assert squared_error([], [1.0, 2.0]).item() == 0.0

    def test_accepts_tensors(self):
        """Test that tensors and lists can be mixed."""
        assert squared_error(torch.tensor([0.5]), [1.5]).item() == 1.0
