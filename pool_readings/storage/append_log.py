"""
Append-only JSON Lines storage.
Each measurement becomes one line in the target file. The file is opened and
closed on every write, and a lock keeps concurrent writers from interleaving.
"""
import os
import threading

from pool_readings.config import logger
from pool_readings.models import Measurement
from pool_readings.storage.base import StorageBackend, StorageError


class AppendLogBackend(StorageBackend):
    name = "append_log"
    supports_listing = False

    def __init__(self, path):
        self.path = path
        self.lock = threading.Lock()

    def initialize(self):
        parent = os.path.dirname(os.path.abspath(self.path))
        if not os.path.isdir(parent):
            raise StorageError(f"Directory for append log does not exist: {parent}")
        logger.info(f"Appending readings to {self.path} ({self.count()} existing records)")

    def store(self, measurement: Measurement) -> None:
        try:
            line = measurement.model_dump_json(by_alias=True) + "\n"
        except ValueError as e:
            raise StorageError(f"Failed to serialize measurement: {e}") from e

        try:
            with self.lock:
                with open(self.path, "a", encoding="utf-8") as f:
                    f.write(line)
        except OSError as e:
            raise StorageError(f"Failed to append to {self.path}: {e}") from e

    def count(self) -> int:
        if not os.path.exists(self.path):
            return 0
        try:
            with self.lock:
                with open(self.path, "r", encoding="utf-8") as f:
                    return sum(1 for line in f if line.strip())
        except OSError as e:
            raise StorageError(f"Failed to read {self.path}: {e}") from e
