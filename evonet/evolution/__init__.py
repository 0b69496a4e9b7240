from .individual import Individual
from .evolutionary_loop import EvolutionaryLoop

__all__ = ["EvolutionaryLoop", "Individual"]
