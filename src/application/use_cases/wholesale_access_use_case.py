"""
Wholesale access use case

Switches the shopper to wholesale pricing after the access code and email
have been checked by the authentication service.
"""

import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, Optional

from src.application.storefront_store import StorefrontStore
from src.domain.repositories.wholesale_auth_gateway import WholesaleAuthGateway
from src.infrastructure.logging.logging_config import SecurityLogger, security_logger
from src.infrastructure.utilities.constants import ValidationRules
from src.infrastructure.utilities.exceptions import (
    ApiResponseError,
    ClientStateError,
    ExternalServiceError,
    ValidationError,
    WholesaleAuthenticationError,
    validate_and_raise,
)
from src.infrastructure.utilities.i18n import tr

WHOLESALE_RESOURCE = "wholesale_tier"


@dataclass
class WholesaleAccessResponse:
    """Response for wholesale access operations"""

    success: bool
    is_wholesale_tier: bool = False
    user: Optional[Dict[str, Any]] = None
    message: Optional[str] = None
    error_message: Optional[str] = None
    retryable: bool = False


class WholesaleAccessUseCase:
    """
    Use case for the wholesale tier gate

    Handles:
    1. Local validation of the code/email form
    2. Remote credential check
    3. Tier switch and session persistence
    4. Security logging of every attempt
    """

    def __init__(
        self,
        store: StorefrontStore,
        auth_gateway: WholesaleAuthGateway,
        audit_logger: Optional[SecurityLogger] = None,
        language: Optional[str] = None,
    ):
        self._store = store
        self._auth_gateway = auth_gateway
        self._audit_logger = audit_logger or security_logger
        self._language = language
        self._logger = logging.getLogger(self.__class__.__name__)

    async def authenticate(self, code: str, email: str) -> WholesaleAccessResponse:
        """Check the code/email pair and enter the wholesale tier on success"""
        code = (code or "").strip()
        email = (email or "").strip()

        try:
            self._validate_form(code, email)
        except ValidationError as e:
            self._logger.info("🔒 WHOLESALE FORM REJECTED: %s", e.field)
            return self._denied(email, e.user_message, "validation")

        try:
            user = await self._auth_gateway.authenticate(code, email)
            if not user:
                raise WholesaleAuthenticationError("no user returned")
        except WholesaleAuthenticationError as e:
            self._logger.warning("🔒 WHOLESALE REJECTED for %s: %s", email, e)
            return self._denied(email, tr("WHOLESALE_INVALID", self._language), "rejected")
        except ApiResponseError as e:
            self._logger.warning("🔒 WHOLESALE REJECTED for %s: %s", email, e)
            if e.retryable:
                return self._denied(email, tr("SERVICE_UNAVAILABLE", self._language), "service_error", True)
            return self._denied(email, tr("WHOLESALE_INVALID", self._language), "rejected")
        except ExternalServiceError as e:
            self._logger.error("💥 WHOLESALE AUTH UNAVAILABLE: %s", e)
            return self._denied(email, tr("SERVICE_UNAVAILABLE", self._language), "unavailable", e.retryable)

        self._store.session.enter_wholesale_tier(user)
        self._persist()

        user_id = self._store.session.user_id
        self._audit_logger.log_access_attempt(user_id, WHOLESALE_RESOURCE, True, {"email": email})
        self._logger.info("🏷️ WHOLESALE TIER ENABLED for user %s", user_id)
        return WholesaleAccessResponse(
            success=True,
            is_wholesale_tier=True,
            user=user,
            message=tr("WHOLESALE_SUCCESS", self._language),
        )

    def revoke(self) -> WholesaleAccessResponse:
        """Drop back to retail pricing; the identity stays"""
        self._store.session.leave_wholesale_tier()
        self._persist()
        self._logger.info("🏷️ WHOLESALE TIER DISABLED for user %s", self._store.session.user_id)
        return WholesaleAccessResponse(
            success=True, is_wholesale_tier=False, user=self._store.session.user
        )

    def _validate_form(self, code: str, email: str):
        validate_and_raise(
            bool(code),
            ValidationError,
            "wholesale access code missing",
            field="code",
            user_message=tr("WHOLESALE_CODE_REQUIRED", self._language),
        )
        validate_and_raise(
            bool(re.match(ValidationRules.EMAIL_PATTERN, email)),
            ValidationError,
            "wholesale email malformed",
            field="email",
            user_message=tr("WHOLESALE_INVALID_EMAIL", self._language),
        )

    def _denied(
        self, email: str, error_message: str, reason: str, retryable: bool = False
    ) -> WholesaleAccessResponse:
        self._audit_logger.log_access_attempt(
            self._store.session.user_id, WHOLESALE_RESOURCE, False, {"email": email, "reason": reason}
        )
        return WholesaleAccessResponse(
            success=False,
            is_wholesale_tier=self._store.session.is_wholesale_tier,
            user=self._store.session.user,
            error_message=error_message,
            retryable=retryable,
        )

    def _persist(self):
        try:
            self._store.persist()
        except ClientStateError as e:
            self._logger.error("💥 CLIENT STATE NOT SAVED: %s", e, exc_info=True)
