import os
from dotenv import load_dotenv

load_dotenv()

LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()
LOG_FILE = os.environ.get('LOG_FILE')  # no file handler when unset

# simulated study sessions
SIMULATION_SEED = int(os.environ.get('SIMULATION_SEED', 0))
SIMULATION_DAYS = int(os.environ.get('SIMULATION_DAYS', 10))

# buckets created up front by the scheduler, EASY answers never promote past the last one
NUM_BUCKETS = int(os.environ.get('NUM_BUCKETS', 5))
