"""
Client state repository interface

Local key/value store holding the shopper session between reloads.
Values are JSON-compatible.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, Optional


class ClientStateRepository(ABC):
    """Repository interface for the persisted client state"""

    @abstractmethod
    def get(self, key: str, default: Optional[Any] = None) -> Any:
        """Read a value"""

    @abstractmethod
    def get_many(self, keys: Iterable[str]) -> Dict[str, Any]:
        """Read several values at once; missing keys are omitted"""

    @abstractmethod
    def set_many(self, values: Dict[str, Any]) -> None:
        """Write several values in one transaction"""

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove a value; missing keys are ignored"""

    def set(self, key: str, value: Any) -> None:
        """Write a single value"""
        self.set_many({key: value})
