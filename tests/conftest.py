"""
conftest.py
~~~~~~~~~~~

Shared fixtures for the evonet test suite.
"""

import matplotlib

matplotlib.use("Agg")

import pytest
import torch

from evonet import Network


@pytest.fixture
def generator():
    """Seeded random source so every test is reproducible."""
    return torch.Generator().manual_seed(1234)


@pytest.fixture
def small_network(generator):
    """Create a [2, 3, 1] network."""
    return Network([2, 3, 1], generator)


@pytest.fixture
def parents(generator):
    """Two networks with the same [3, 4, 2] topology."""
    return Network([3, 4, 2], generator), Network([3, 4, 2], generator)
