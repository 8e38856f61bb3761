# street_resolver/config.py
from dotenv import load_dotenv
import os

load_dotenv()

# Street store
STREETS_API_URL = os.getenv("STREETS_API_URL", "http://localhost:8080")
STREETS_API_KEY = os.getenv("STREETS_API_KEY")
DEFAULT_RESTAURANT_ID = os.getenv("DEFAULT_RESTAURANT_ID") or os.getenv("RESTAURANT_ID")

# Matching thresholds
MIN_MATCH_SCORE = 30
HIGH_CONFIDENCE_SCORE = 70
MAX_CANDIDATES = 3

# Runtime parameters
CACHE_TTL_SECONDS = int(os.getenv("CACHE_TTL_SECONDS", "600"))
HTTP_TIMEOUT_SECONDS = 10
BATCH_SIZE = 15
CONCURRENCY = 50
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# File names
INPUT_CSV = "lookups.csv"
OUTPUT_CSV = "lookup_results.csv"
