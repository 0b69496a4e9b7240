from typing import List, Optional

import torch

from .node import Node


class Layer:
    """An ordered group of nodes reading the same inputs."""
    def __init__(self, node_count: int, weight_count: int, generator: Optional[torch.Generator] = None):
        self.nodes: List[Node] = [Node.with_weights(weight_count, generator) for _ in range(node_count)]

    @property
    def input_size(self) -> int:
        return self.nodes[0].input_size

    def weight_matrix(self) -> torch.Tensor:
        """Stacked node weights, one row per node."""
        return torch.stack([node.weights for node in self.nodes])

    def __len__(self):
        return len(self.nodes)

    def __repr__(self):
        return f"Layer(nodes={len(self.nodes)}, inputs={self.input_size})"
