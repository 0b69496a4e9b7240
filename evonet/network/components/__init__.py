from .layer import Layer
from .node import Node

__all__ = ["Layer", "Node"]
