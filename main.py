from evonet import EvolutionaryLoop, Config
from evonet.evaluate import XOR_SAMPLES
from evonet.log import setup_logging

if __name__ == "__main__":
    config = Config()
    setup_logging(config.log_path)
    evolutionary_loop = EvolutionaryLoop(config)
    evolutionary_loop.run_evolution(XOR_SAMPLES)
