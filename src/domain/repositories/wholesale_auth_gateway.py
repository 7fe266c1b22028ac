"""
Wholesale authentication interface
"""

from abc import ABC, abstractmethod
from typing import Any, Dict


class WholesaleAuthGateway(ABC):
    """Checks a wholesale access code against an email"""

    @abstractmethod
    async def authenticate(self, code: str, email: str) -> Dict[str, Any]:
        """Return the wholesale user on success, raise otherwise"""
