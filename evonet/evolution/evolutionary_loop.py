from typing import List, Optional, Sequence
import uuid
import os
import logging

import pandas as pd
import torch

from ..config import Config
from ..evaluate import Sample, evaluate
from ..log import LOGGER_NAME
from ..network import Network
from .individual import Individual

logger = logging.getLogger(LOGGER_NAME)

STATS_HEADERS = ["generation", "best_id", "best_loss", "mean_loss", "best_accuracy"]


class EvolutionaryLoop:
    def __init__(self, config: Config, generator: Optional[torch.Generator] = None) -> None:
        self.config = config

        Network.is_valid_type(config.topology)
        if config.max_generations < 1:
            raise ValueError("max_generations must be >= 1")
        if config.population_size < 2:
            raise ValueError("population_size must be >= 2")
        if not 0 <= config.num_elites < config.population_size:
            raise ValueError("num_elites must be within [0, population_size)")
        if config.parent_pool < 1:
            raise ValueError("parent_pool must be >= 1")

        if generator is None and getattr(config, "seed", None) is not None:
            generator = torch.Generator().manual_seed(config.seed)
        self.generator = generator

        self.population: List[Individual] = []
        self.best: Optional[Individual] = None

    def initialise(self) -> None:
        self.population = [
            Individual(id=str(uuid.uuid4()), network=Network(self.config.topology, self.generator), generation=0)
            for _ in range(self.config.population_size)
        ]

    def run_evolution(self, samples: Sequence[Sample]) -> Individual:
        self._check_samples(samples)

        if not self.population:
            self.initialise()

        stats_path = getattr(self.config, "stats_path", None)
        if stats_path is not None and not os.path.exists(stats_path):
            stats_dir = os.path.dirname(stats_path)
            if stats_dir:
                os.makedirs(stats_dir, exist_ok=True)
            df = pd.DataFrame(columns=STATS_HEADERS)
            df.to_csv(stats_path, index=False)

        logger.info(f"Starting Genetic Evolution Loop: topology={self.config.topology}, population={len(self.population)}")

        for generation in range(self.config.max_generations):
            for individual in self.population:
                if not individual.evaluated:
                    individual.metrics = evaluate(individual.network, samples)

            self.population.sort(key=lambda x: x.metrics["loss"])
            self._update_best(self.population[0])
            self.log_stats(generation)

            best = self.best
            logger.info(
                f"Generation {generation}: best loss={best.metrics['loss']:.6f}, "
                f"accuracy={best.metrics['accuracy']:.2f}"
            )

            if best.metrics["loss"] <= self.config.target_loss:
                logger.info(f"Generation {generation}: reached target loss {self.config.target_loss}")
                break

            if generation < self.config.max_generations - 1:
                self.population = self._next_generation(generation + 1)

        logger.info(f"Genetic Evolution Loop Complete: best={self.best.id}, metrics={self.best.metrics}")
        return self.best

    def _next_generation(self, generation: int) -> List[Individual]:
        # Population is sorted by loss, best first
        new_population = self.population[:self.config.num_elites]
        pool = self.population[:min(self.config.parent_pool, len(self.population))]

        while len(new_population) < self.config.population_size:
            father = pool[self._randint(len(pool))]
            mother = pool[self._randint(len(pool))]

            child_network = Network.breed(father.network, mother.network, self.config.crossover_prob, self.generator)
            child_network.mutate(self.config.mutation_prob, self.generator)

            new_population.append(Individual(
                id=str(uuid.uuid4()),
                network=child_network,
                generation=generation,
                parent_ids=[father.id, mother.id],
            ))

        return new_population

    def _randint(self, high: int) -> int:
        return int(torch.randint(high, (1,), generator=self.generator).item())

    def _update_best(self, individual: Individual) -> None:
        if self.best is None or individual.metrics["loss"] < self.best.metrics["loss"]:
            self.best = individual

    def _check_samples(self, samples: Sequence[Sample]) -> None:
        if not samples:
            raise ValueError("At least one sample is required")

        input_size, output_size = self.config.topology[0], self.config.topology[-1]
        for inputs, ideal in samples:
            if len(inputs) != input_size or len(ideal) != output_size:
                raise ValueError(
                    f"Sample ({len(inputs)} inputs, {len(ideal)} outputs) does not fit topology {self.config.topology}"
                )

    def log_stats(self, generation: int) -> None:
        stats_path = getattr(self.config, "stats_path", None)
        if stats_path is None:
            return

        best = self.population[0]
        losses = [x.metrics["loss"] for x in self.population]
        df = pd.DataFrame(
            {
                "generation": [generation],
                "best_id": [best.id],
                "best_loss": [best.metrics["loss"]],
                "mean_loss": [sum(losses) / len(losses)],
                "best_accuracy": [best.metrics["accuracy"]],
            }
        )
        df.to_csv(stats_path, mode="a", header=False, index=False)
