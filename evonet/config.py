class Config:

    # =====================
    # Evolutionary Loop
    # =====================
    max_generations = 500
    population_size = 50
    num_elites = 2              # Ensure that num_elites < population_size
    parent_pool = 10            # Parents are drawn from the best parent_pool individuals
    target_loss = 0.01
    seed = 42                   # None draws from torch's default generator

    log_path = "out/evolution.log"
    stats_path = "out/stats.csv"

    # =====================
    # Network
    # =====================
    topology = [2, 4, 1]

    # =====================
    # Genetic Operators
    # =====================
    # Breeding
    crossover_prob = 0.5

    # Mutation
    mutation_prob = 0.05
