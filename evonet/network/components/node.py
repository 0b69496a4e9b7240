from typing import Optional

import torch


class Node:
    """Represents a neuron: its input weights followed by a trailing bias weight."""
    def __init__(self, weights: torch.Tensor):
        self.weights = weights

    @classmethod
    def with_weights(cls, n_weights: int, generator: Optional[torch.Generator] = None) -> "Node":
        """Draws every weight from U[-1, 1). The open upper bound differs from [-1, 1] by one float32 value."""
        weights = torch.empty(n_weights, dtype=torch.float32).uniform_(-1.0, 1.0, generator=generator)
        return cls(weights)

    @property
    def input_size(self) -> int:
        return self.weights.numel() - 1

    @property
    def input_weights(self) -> torch.Tensor:
        return self.weights[:-1]

    @property
    def bias(self) -> float:
        return self.weights[-1].item()

    def __repr__(self):
        return f"Node(inputs={self.input_size}, bias={self.bias:.2f})"
