# ============================================================
# Elevator Controller - Configuration File
# ============================================================

# ------------------------
# Building Parameters
# ------------------------
N_FLOORS = 4  # number of floors, indexed 0 .. N_FLOORS - 1

# ------------------------
# Door Parameters
# ------------------------
DOOR_TIMER = 50  # ticks the door stays open once it opens
TEST_DOOR_TIMER = 20  # shorter dwell used by the test configurations

# ------------------------
# Simulation Parameters
# ------------------------
SIM_TICKS = 2000  # ticks per simulation run
SIM_RANDOM_SEED = 42
SIM_CALL_INTERVAL = 40.0  # mean ticks between synthetic calls (Poisson)
SIM_CABIN_SHARE = 0.5  # probability that a synthetic call is a cabin request

# ------------------------
# Environment Parameters
# ------------------------
ENV_MAX_EPISODE_STEPS = 3000  # ticks before an episode is truncated
ENV_PENDING_PENALTY = 0.1  # reward penalty per pending request per tick

# ------------------------
# Output Parameters
# ------------------------
VIS_DIR = "Visualizations"
STATS_DIR = "RunStats"
