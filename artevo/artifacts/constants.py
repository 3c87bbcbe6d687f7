# Genome space
GENOME_MODULUS = 10**18

# Population / cadence defaults
DEFAULT_MAX_GENESIS = 10
DEFAULT_EVOLUTION_INTERVAL = 100

# Breeding
RANDOM_FACTOR_SCALE = 1000

# Mutation
MUTATION_ROLL_SCALE = 100
MUTATION_CHANCE_PERCENT = 10
MUTATION_FACTOR_BASE = 900
MUTATION_FACTOR_SPAN = 200
MUTATION_FACTOR_SCALE = 1000
