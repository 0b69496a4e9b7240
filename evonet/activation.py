"""Activation functions and error metrics used by the forward pass.

All functions work on float32 tensors and accept Python scalars or sequences,
so a single value and a whole layer go through the same code.
"""
import torch


def _as_float32(x) -> torch.Tensor:
    return torch.as_tensor(x, dtype=torch.float32)


def binary_sigmoid(t, a) -> torch.Tensor:
    """sig(t, a) = 1 / (1 + e^(-t * a)), between 0.0 and 1.0."""
    t = _as_float32(t)
    return 1.0 / (1.0 + torch.exp(-t * a))


def binary_sigmoid_derivative(result, a) -> torch.Tensor:
    """Derivative computed from the sigmoid's output, not from t."""
    result = _as_float32(result)
    return result * a * (1.0 - result)


def bipolar_sigmoid(t, a) -> torch.Tensor:
    """sig(t, a) = 2 / (1 + e^(-t * a)) - 1, between -1.0 and 1.0."""
    t = _as_float32(t)
    return 2.0 / (1.0 + torch.exp(-t * a)) - 1.0


def bipolar_sigmoid_derivative(result, a) -> torch.Tensor:
    result = _as_float32(result)
    return 0.5 * a * (1.0 - result.pow(2))


def squared_error(ideal, actual) -> torch.Tensor:
    """
    E(ideal, actual) = sum((ideal - actual)^2)

    Only the overlapping prefix is compared: trailing values of the longer
    sequence are ignored.
    """
    ideal = _as_float32(ideal).flatten()
    actual = _as_float32(actual).flatten()

    n = min(ideal.numel(), actual.numel())
    return (ideal[:n] - actual[:n]).pow(2).sum()
