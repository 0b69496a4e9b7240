from .components import Layer, Node
from .errors import (
    CreationError,
    InvalidProbability,
    NotEnoughLayers,
    RunError,
    TopologyMismatch,
    WrongInputCount,
)
from .network import Network

__all__ = [
    "CreationError",
    "InvalidProbability",
    "Layer",
    "Network",
    "Node",
    "NotEnoughLayers",
    "RunError",
    "TopologyMismatch",
    "WrongInputCount",
]
