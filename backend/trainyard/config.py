"""
Configuration - environment driven settings for the training yard
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

PROJECT_ROOT = Path(__file__).parent.parent.parent


def get_worlds_dir() -> Path:
    """Get the directory holding world definitions"""
    return Path(os.getenv("TRAINYARD_WORLDS_DIR", str(PROJECT_ROOT / "worlds")))


def get_world_id() -> str:
    """Get the default world identifier"""
    return os.getenv("TRAINYARD_WORLD", "classic-village")


def get_log_level() -> str:
    """Get the configured log level name"""
    return os.getenv("TRAINYARD_LOG_LEVEL", "INFO").upper()


def session_logs_enabled() -> bool:
    """Whether per-session turn logs should be written"""
    return os.getenv("TRAINYARD_SESSION_LOGS", "").lower() in ("1", "true", "yes")


def get_logs_dir() -> Path:
    """Get the directory session logs are written to"""
    return Path(os.getenv("TRAINYARD_LOGS_DIR", str(PROJECT_ROOT / "logs")))
