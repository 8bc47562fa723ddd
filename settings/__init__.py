"""Application settings."""

import os
from pathlib import Path

# Store
STORE_BACKEND = os.getenv("FLIP_STORE_BACKEND", "duckdb")
DB_PATH = os.getenv("FLIP_DB_PATH", "flip.duckdb")

# Supabase REST
SUPABASE_URL = os.getenv("SUPABASE_URL", "")
SUPABASE_SERVICE_ROLE_KEY = os.getenv("SUPABASE_SERVICE_ROLE_KEY", "")
API_TIMEOUT = float(os.getenv("FLIP_API_TIMEOUT", "30"))
API_MAX_ATTEMPTS = 3

# Logging
LOG_DIR = Path("logs")
LOG_LEVEL = os.getenv("FLIP_LOG_LEVEL", "INFO")

# Readers
HISTORY_DEFAULT_LIMIT = 20
LEADERBOARD_DEFAULT_LIMIT = 50
LEADERBOARD_MAX_LIMIT = 100
