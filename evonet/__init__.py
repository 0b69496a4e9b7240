from .activation import (
    binary_sigmoid,
    binary_sigmoid_derivative,
    bipolar_sigmoid,
    bipolar_sigmoid_derivative,
    squared_error,
)
from .config import Config
from .evolution import EvolutionaryLoop, Individual
from .network import (
    CreationError,
    InvalidProbability,
    Layer,
    Network,
    Node,
    NotEnoughLayers,
    RunError,
    TopologyMismatch,
    WrongInputCount,
)

__all__ = [
    "Config",
    "CreationError",
    "EvolutionaryLoop",
    "Individual",
    "InvalidProbability",
    "Layer",
    "Network",
    "Node",
    "NotEnoughLayers",
    "RunError",
    "TopologyMismatch",
    "WrongInputCount",
    "binary_sigmoid",
    "binary_sigmoid_derivative",
    "bipolar_sigmoid",
    "bipolar_sigmoid_derivative",
    "squared_error",
]
