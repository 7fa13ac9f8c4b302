"""
Configuration for the MaMa journal.

Toggle between PRODUCTION and DEVELOPMENT mode with the MAMA_MODE
environment variable.
"""
import os
from pathlib import Path

# ==================== MODE SELECTION ====================
# Options: "PRODUCTION" or "DEVELOPMENT"
MODE = os.environ.get("MAMA_MODE", "PRODUCTION").upper()
# ========================================================

# Base paths
PROJECT_ROOT = Path(__file__).parent
PRODUCTION_DATA_PATH = Path(os.environ.get("MAMA_DATA_PATH", Path.home() / ".mama"))
DEVELOPMENT_DATA_PATH = PROJECT_ROOT / "data"

# Select data path based on mode
if MODE == "PRODUCTION":
    DATA_PATH = PRODUCTION_DATA_PATH
elif MODE == "DEVELOPMENT":
    DATA_PATH = DEVELOPMENT_DATA_PATH
else:
    raise ValueError(f"Invalid MODE: {MODE}. Must be 'PRODUCTION' or 'DEVELOPMENT'")

# File paths
DATA_FILE = DATA_PATH / "mama.txt"
LOG_FILE = DATA_PATH / "mama.log"

# Application settings
LOG_LEVEL = os.environ.get("MAMA_LOG_LEVEL", "INFO").upper()


def ensure_data_path() -> Path:
    """Create the data directory if needed."""
    DATA_PATH.mkdir(parents=True, exist_ok=True)
    return DATA_PATH


if __name__ == "__main__":
    # Test configuration
    print(f"\nMode: {MODE}")
    print(f"Data Path: {DATA_PATH}")
    print(f"Data File: {DATA_FILE}")
    print(f"Log File: {LOG_FILE}")
    print(f"Log Level: {LOG_LEVEL}")
