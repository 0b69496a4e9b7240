class CreationError(ValueError):
    """Raised when a network cannot be built from a topology."""


class NotEnoughLayers(CreationError):
    def __init__(self, layer_sizes):
        self.layer_sizes = list(layer_sizes)
        super().__init__(
            f"Topology {self.layer_sizes} needs an input size and at least one layer, all non-zero"
        )


class RunError(ValueError):
    """Raised when a network cannot be evaluated on an input."""


class WrongInputCount(RunError):
    def __init__(self, expected: int, received: int):
        self.expected = expected
        self.received = received
        super().__init__(f"Expected {expected} inputs, received {received}")


class InvalidProbability(ValueError):
    def __init__(self, p):
        self.p = p
        super().__init__(f"Probability must be within [0, 1], got {p}")


class TopologyMismatch(ValueError):
    def __init__(self, father_topology, mother_topology):
        self.father_topology = father_topology
        self.mother_topology = mother_topology
        super().__init__(f"Cannot breed {father_topology} with {mother_topology}")
