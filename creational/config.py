import os

from dotenv import load_dotenv

load_dotenv()

LOG_LEVEL = os.environ.get("CREATIONAL_LOG_LEVEL", "WARNING").upper()

# how long the naive demo's constructor sleeps, to make the race visible
RACE_DELAY_SECS = float(os.environ.get("CREATIONAL_RACE_DELAY", "0.01"))
