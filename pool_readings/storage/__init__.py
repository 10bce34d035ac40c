"""
Storage backends for water test readings.
Each backend implements `StorageBackend` from `pool_readings.storage.base`.
"""
from pool_readings.config import (
    ConfigError,
    STORAGE_BACKEND,
    READINGS_DB,
    READINGS_LOG,
    validate_db_path,
    validate_log_path,
)
from pool_readings.storage.base import StorageBackend, StorageError
from pool_readings.storage.append_log import AppendLogBackend
from pool_readings.storage.relational import RelationalBackend


def create_backend(kind=None, db_path=None, log_path=None) -> StorageBackend:
    """Build the configured backend, validating its location first"""
    kind = kind or STORAGE_BACKEND
    if kind == "sqlite":
        return RelationalBackend(validate_db_path(db_path or READINGS_DB))
    if kind == "append_log":
        return AppendLogBackend(validate_log_path(log_path or READINGS_LOG))
    raise ConfigError(f"Unknown STORAGE_BACKEND '{kind}' (expected 'sqlite' or 'append_log')")


__all__ = [
    "AppendLogBackend",
    "RelationalBackend",
    "StorageBackend",
    "StorageError",
    "create_backend",
]
