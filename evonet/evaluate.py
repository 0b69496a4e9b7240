from typing import Dict, List, Sequence, Tuple

import torch

from .activation import squared_error
from .network import Network

Sample = Tuple[Sequence[float], Sequence[float]]

# XOR in bipolar encoding, matching the output range of the network
XOR_SAMPLES: List[Sample] = [
    ([-1.0, -1.0], [-1.0]),
    ([-1.0, 1.0], [1.0]),
    ([1.0, -1.0], [1.0]),
    ([1.0, 1.0], [-1.0]),
]


def evaluate(network: Network, samples: Sequence[Sample]) -> Dict[str, float]:
    """Total squared error and sign accuracy of a network over a sample set."""
    loss = 0.0
    correct = 0

    for inputs, ideal in samples:
        output = network.run(inputs)
        ideal = torch.as_tensor(ideal, dtype=torch.float32)

        loss += squared_error(ideal, output).item()
        if torch.equal(torch.sign(output), torch.sign(ideal)):
            correct += 1

    return {
        "loss": loss,
        "accuracy": correct / len(samples) if samples else 0.0,
    }
