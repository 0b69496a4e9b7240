from typing import Dict, List
from dataclasses import dataclass, field
import time

from ..network import Network

@dataclass
class Individual:
    id: str
    network: Network

    generation: int = 0
    parent_ids: List[str] = field(default_factory=list)
    timestamp: float = field(default_factory=time.time)

    metrics: Dict[str, float] = field(default_factory=dict)

    @property
    def evaluated(self) -> bool:
        return "loss" in self.metrics
