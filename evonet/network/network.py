import copy
import logging
from typing import List, Optional, Sequence

import matplotlib.pyplot as plt
import networkx as nx
import torch

from .components import Layer
from .errors import InvalidProbability, NotEnoughLayers, TopologyMismatch, WrongInputCount
from ..activation import bipolar_sigmoid

logger = logging.getLogger(__name__)


class Network:
    """A fully connected feedforward network evolved through breeding and mutation."""

    AMPLIFICATION = 10.0

    def __init__(self, layer_sizes: Sequence[int], generator: Optional[torch.Generator] = None):
        layer_sizes = list(layer_sizes)
        Network.is_valid_type(layer_sizes)

        # First layer reads the raw input plus its bias
        self.layers: List[Layer] = [Layer(layer_sizes[1], layer_sizes[0] + 1, generator)]

        for node_count in layer_sizes[2:]:
            prev_node_count = len(self.layers[-1])
            self.layers.append(Layer(node_count, prev_node_count + 1, generator))

        logger.debug(f"Created network {self.topology} with {self.parameter_count} weights")

    @staticmethod
    def is_valid_type(layer_sizes: Sequence[int]) -> None:
        """Raises NotEnoughLayers unless the topology has an input size and at least one non-empty layer."""
        layer_sizes = list(layer_sizes)
        if len(layer_sizes) < 2 or any(size <= 0 for size in layer_sizes):
            raise NotEnoughLayers(layer_sizes)

    # --- evaluation ---
    def run(self, input: Sequence[float]) -> torch.Tensor:
        values = torch.as_tensor(input, dtype=torch.float32)
        if values.dim() != 1 or values.numel() != self.input_size:
            raise WrongInputCount(self.input_size, values.numel())

        for layer in self.layers:
            values = self._calculate_layer(values, layer)

        return values

    def _calculate_layer(self, values: torch.Tensor, layer: Layer) -> torch.Tensor:
        weights = layer.weight_matrix()

        # Accumulator starts at 1.0, weighted inputs are added in order, bias last
        total = torch.ones(len(layer), dtype=torch.float32)
        for i in range(values.numel()):
            total = total + values[i] * weights[:, i]
        total = total + weights[:, -1]

        return bipolar_sigmoid(total, self.AMPLIFICATION)

    # --- genetic operators ---
    @staticmethod
    def breed(father: "Network", mother: "Network", p: float, generator: Optional[torch.Generator] = None) -> "Network":
        """Clones the father, taking each weight from the mother with probability p."""
        Network._check_probability(p)
        if father.topology != mother.topology:
            raise TopologyMismatch(father.topology, mother.topology)

        child = copy.deepcopy(father)

        inherited = 0
        for c_layer, m_layer in zip(child.layers, mother.layers):
            for c_node, m_node in zip(c_layer.nodes, m_layer.nodes):
                mask = Network._sample_mask(c_node.weights, p, generator)
                c_node.weights[mask] = m_node.weights[mask]
                inherited += int(mask.sum())

        logger.debug(f"Bred child {child.topology}: {inherited}/{child.parameter_count} weights from mother")
        return child

    def mutate(self, p: float, generator: Optional[torch.Generator] = None) -> None:
        """Redraws each weight from U[-1, 1) with probability p, in place."""
        Network._check_probability(p)

        mutated = 0
        for layer in self.layers:
            for node in layer.nodes:
                mask = Network._sample_mask(node.weights, p, generator)
                fresh = torch.empty_like(node.weights).uniform_(-1.0, 1.0, generator=generator)
                node.weights[mask] = fresh[mask]
                mutated += int(mask.sum())

        logger.debug(f"Mutated {mutated}/{self.parameter_count} weights")

    @staticmethod
    def _check_probability(p: float) -> None:
        # NaN fails both comparisons
        if not 0.0 <= p <= 1.0:
            raise InvalidProbability(p)

    @staticmethod
    def _sample_mask(weights: torch.Tensor, p: float, generator: Optional[torch.Generator]) -> torch.Tensor:
        return torch.bernoulli(torch.full_like(weights, p), generator=generator).bool()

    # --- utils ---
    @property
    def topology(self) -> List[int]:
        return [self.input_size] + [len(layer) for layer in self.layers]

    @property
    def input_size(self) -> int:
        return self.layers[0].input_size

    @property
    def output_size(self) -> int:
        return len(self.layers[-1])

    @property
    def parameter_count(self) -> int:
        return sum(node.weights.numel() for layer in self.layers for node in layer.nodes)

    def flat_weights(self) -> torch.Tensor:
        """All weights in layer, node, weight order."""
        return torch.cat([node.weights for layer in self.layers for node in layer.nodes])

    def to_graph(self) -> nx.DiGraph:
        """Builds a directed graph with one edge per input weight."""
        G = nx.DiGraph()

        prev_nodes = []
        for i in range(self.input_size):
            G.add_node(("input", i), layer=0, type="input")
            prev_nodes.append(("input", i))

        for layer_idx, layer in enumerate(self.layers):
            node_type = "output" if layer_idx == len(self.layers) - 1 else "hidden"
            current_nodes = []
            for node_idx, node in enumerate(layer.nodes):
                node_id = (layer_idx, node_idx)
                G.add_node(node_id, layer=layer_idx + 1, type=node_type, bias=node.bias)
                for src, weight in zip(prev_nodes, node.input_weights.tolist()):
                    G.add_edge(src, node_id, weight=weight)
                current_nodes.append(node_id)
            prev_nodes = current_nodes

        return G

    @staticmethod
    def visualize_network(network: "Network", ax=None):
        """
        Visualize a Network as a directed graph.
        Inputs = green, hidden = blue, outputs = red.
        Edge width follows |weight|, negative weights are drawn in red.
        """
        G = network.to_graph()
        colors = {"input": "lightgreen", "hidden": "lightblue", "output": "salmon"}

        # Layout: one column per layer
        pos = {}
        layer_nodes = {}
        for node_id, data in G.nodes(data=True):
            layer_nodes.setdefault(data["layer"], []).append(node_id)

        for layer, nodes in layer_nodes.items():
            for i, n in enumerate(nodes):
                pos[n] = (layer, -i)

        # Draw nodes
        node_colors = [colors[G.nodes[n]["type"]] for n in G.nodes()]
        nx.draw_networkx_nodes(G, pos, node_color=node_colors, node_size=800, ax=ax)

        # Draw edges
        widths = []
        edge_colors = []
        for u, v, data in G.edges(data=True):
            widths.append(0.5 + 2.0 * abs(data["weight"]))
            edge_colors.append("black" if data["weight"] >= 0 else "red")
        nx.draw_networkx_edges(G, pos, edgelist=list(G.edges()), width=widths, edge_color=edge_colors, ax=ax)

        # Draw labels
        labels = {n: f"in{n[1]}" if n[0] == "input" else f"{n[0]}.{n[1]}" for n in G.nodes()}
        nx.draw_networkx_labels(G, pos, labels=labels, font_size=8, ax=ax)

        if ax is None:
            plt.show()

    def __repr__(self):
        return f"Network(topology={self.topology})"
