# config.py

# Grid and ranger parameters
GRID_SIZE = 10                # Side length of the square patrol area
NUM_RANGERS = 3               # Number of rangers
MAX_STEPS = 20                # Cells per route, start cell included
SEED = None                   # Seed for the random source (None → fresh entropy)

# Neighbor order: up, down, left, right. Ties go to the earliest entry.
DIRECTIONS = [(-1, 0), (1, 0), (0, -1), (0, 1)]

# Route scoring: (risk*RISK_WEIGHT + animal*ANIMAL_WEIGHT) / (coverage + 1)
RISK_WEIGHT = 2.0
ANIMAL_WEIGHT = 1.0

# Statistics
MITIGATION_FACTOR = 0.2       # Fraction of risk left on a patrolled cell (80% reduction)
HIGH_RISK_THRESHOLD = 0.7     # risk >= threshold → high-risk cell

# Map generation
IMPASSABLE_RATE = 0.1         # P(cell is impassable terrain)
ANIMAL_RATE = 0.2             # P(animal present) before the edge adjustment
EDGE_RISK_DAMPING = 0.5       # Risk falls off toward the centre by up to 50%
EDGE_ANIMAL_DAMPING = 0.3     # Animals thin out toward the edges by up to 30%
RISK_DECIMALS = 2             # Generated risk values are rounded to this many places

# Rendering
ROUTE_COLORS = ['tab:blue', 'tab:orange', 'tab:green', 'tab:purple', 'tab:brown']
