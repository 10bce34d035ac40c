"""
Configuration and constants for the pool readings webhook server.
"""
import os
import logging
from dotenv import load_dotenv

load_dotenv()

# Logging configuration
LOG_DIR = os.getenv("LOG_DIR", "logs")
LOG_FILE = os.path.join(LOG_DIR, "webhook_server.log")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

logger = logging.getLogger("pool_readings")

# Storage configuration
STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "sqlite")  # "sqlite" or "append_log"
READINGS_DB = os.getenv("READINGS_DB")
READINGS_LOG = os.getenv("READINGS_LOG", "webhook_payloads.jsonl")

# API server configuration
API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", "8080"))
DEBUG = os.getenv("DEBUG", "False").lower() == "true"

# CORS headers applied to every response
CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "OPTIONS, POST, GET",
    "Access-Control-Allow-Headers": "*",
    "Access-Control-Expose-Headers": "*",
}

WEBHOOK_SUCCESS_MESSAGE = "Payload received and stored."

# SQL Queries
TABLE_EXISTS_SQL = """
SELECT count(*) FROM sqlite_master WHERE type='table' AND name='water_tests'
"""


class ConfigError(Exception):
    """Raised when the server cannot start with the current configuration"""


def setup_logging(level=None):
    """Send log records to both the log file and stderr"""
    os.makedirs(LOG_DIR, exist_ok=True)
    logging.basicConfig(
        level=level or LOG_LEVEL,
        format='%(asctime)s - %(levelname)s - %(message)s',
        handlers=[
            logging.FileHandler(LOG_FILE),
            logging.StreamHandler()
        ]
    )


def validate_db_path(db_path):
    """
    Check that the SQLite database path is set, absolute, and already exists.
    Returns the path unchanged.
    """
    if not db_path:
        raise ConfigError("READINGS_DB environment variable is not set")
    if not os.path.isabs(db_path):
        raise ConfigError("The READINGS_DB environment variable must be an absolute file path")
    if not os.path.exists(db_path):
        raise ConfigError(f"Database file does not exist: {db_path}")
    return db_path


def validate_log_path(log_path):
    """Check that the append log's directory exists. Returns the absolute path."""
    if not log_path:
        raise ConfigError("READINGS_LOG must not be empty")
    log_path = os.path.abspath(log_path)
    parent = os.path.dirname(log_path)
    if not os.path.isdir(parent):
        raise ConfigError(f"Directory for append log does not exist: {parent}")
    if os.path.isdir(log_path):
        raise ConfigError(f"Append log path is a directory: {log_path}")
    return log_path
