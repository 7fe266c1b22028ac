"""
HTTP Wholesale Auth Gateway
"""

from typing import Any, Dict

from src.domain.repositories.wholesale_auth_gateway import WholesaleAuthGateway
from src.infrastructure.http.api_client import StorefrontApiClient
from src.infrastructure.utilities.constants import ApiPaths
from src.infrastructure.utilities.exceptions import ApiResponseError, WholesaleAuthenticationError

SERVICE_NAME = "wholesale_auth"


class HttpWholesaleAuthGateway(WholesaleAuthGateway):
    """Checks wholesale credentials through POST auth/wholesale"""

    def __init__(self, api_client: StorefrontApiClient):
        self._api_client = api_client

    async def authenticate(self, code: str, email: str) -> Dict[str, Any]:
        try:
            data = await self._api_client.post(
                ApiPaths.WHOLESALE_AUTH, SERVICE_NAME, {"code": code, "email": email}
            )
        except ApiResponseError as e:
            if e.status_code in (400, 401, 403):
                raise WholesaleAuthenticationError(e.detail) from e
            raise

        user = (data or {}).get("user")
        if not user:
            raise WholesaleAuthenticationError("response carried no user")
        return user
