"""
Common interface for the storage backends.
"""
from abc import ABC, abstractmethod
from typing import List

from pool_readings.models import Measurement, StoredMeasurement


class StorageError(Exception):
    """Raised when a backend fails to persist or read back measurements"""


class StorageBackend(ABC):
    """
    A durable home for measurements. One instance is created at startup and
    shared by every request, so implementations must be safe to call from
    several threads at once.
    """
    name = "base"
    supports_listing = False

    def initialize(self):
        """Prepare the backing store before the server accepts requests"""

    @abstractmethod
    def store(self, measurement: Measurement) -> None:
        ...

    def list_all(self) -> List[StoredMeasurement]:
        raise StorageError(f"{self.name} backend does not support listing readings")

    @abstractmethod
    def count(self) -> int:
        ...

    def close(self):
        """Release any resources held by the backend"""
