"""
Configuration settings for the DeepWoods level RNG.
"""
import os
from dotenv import load_dotenv

load_dotenv()

# Seed derivation
MAGIC_SALT = 854574563  # xor'd into the root level seed
ROOT_LEVEL = 1

# In-game clock (HHMM time-of-day integers)
DAY_START_TIME = 600
DAY_END_TIME = 2600
HOURS_PER_DAY = 20
MINUTES_PER_TICK = 10
MS_PER_TICK = 7000  # real milliseconds per 10 in-game minutes

# Authoritative (server-side) generator
SIM_SEED = int(os.getenv("SIM_SEED", "1"))

# Debug logging
DEBUG_RNG = os.getenv("DEBUG_RNG", "").strip().lower() in ("1", "true", "yes", "on")
