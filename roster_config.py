# roster_config.py — settings from the environment (or a .env file)

import os
from dotenv import load_dotenv

load_dotenv()

API_BASE_URL = os.getenv("ROSTER_API_URL", "http://localhost:5000").rstrip("/")

# unset -> let requests wait as long as the transport does
_timeout = os.getenv("ROSTER_API_TIMEOUT", "").strip()
REQUEST_TIMEOUT = float(_timeout) if _timeout else None

BRANCHES = [
    b.strip()
    for b in os.getenv("ROSTER_BRANCHES", "CS,IT,ECE,EEE,MECH,CIVIL").split(",")
    if b.strip()
]

LOG_LEVEL = os.getenv("ROSTER_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
