# -*- coding: utf-8 -*-
"""
Registration Service - submits the registration wizard to the API and
approves pending registrations for teachers.

Submission and approval never raise on server or transport failures; the
outcome carries the message to show the user. Listing pending registrations
raises like the other list calls.
"""

from dataclasses import dataclass
from typing import Any, List, Optional

from app.api_config import build_api_url
from app.config import Config
from models.registration import PendingRegistration, RegistrationForm
from services.api_client import PortalApiClient
from services.error_mapper import (
    ServerErrorKind,
    decode_error_body,
    format_registration_error,
    server_message,
)
from services.exceptions import ApiException, InvalidResponseException, NetworkException
from services.translation_manager import tr
from utils.logger import get_logger

logger = get_logger(__name__)


class OutcomeKind:
    SUCCESS = "success"
    VALIDATION = "validation"
    DUPLICATE = "duplicate"
    DATABASE_VALIDATION = "database_validation"
    FAILED = "failed"
    NETWORK = "network"
    UNEXPECTED = "unexpected"


_KIND_BY_SERVER_ERROR = {
    ServerErrorKind.VALIDATION: OutcomeKind.VALIDATION,
    ServerErrorKind.DUPLICATE_ACCOUNT: OutcomeKind.DUPLICATE,
    ServerErrorKind.DATABASE_VALIDATION: OutcomeKind.DATABASE_VALIDATION,
    ServerErrorKind.MESSAGE: OutcomeKind.FAILED,
    ServerErrorKind.UNKNOWN: OutcomeKind.FAILED,
}


@dataclass
class RegistrationOutcome:
    success: bool
    kind: str
    message: str = ""
    data: Optional[Any] = None

    @property
    def is_duplicate(self) -> bool:
        return self.kind == OutcomeKind.DUPLICATE


@dataclass
class ApprovalResult:
    success: bool
    message: str = ""


class RegistrationService:
    """Submits registration forms and lets teachers approve them."""

    def __init__(self, client: PortalApiClient):
        self.client = client

    def submit(self, form: RegistrationForm) -> RegistrationOutcome:
        payload = form.to_payload()
        url = self.client.endpoints.REGISTRATION.SUBMIT
        logger.info(f"Submitting registration for {form.email} to {url}")

        try:
            data = self.client.post_json(url, payload, require_json=True)

        except InvalidResponseException as e:
            logger.error(f"Registration response was not JSON: {e}")
            return RegistrationOutcome(False, OutcomeKind.UNEXPECTED, tr("error.registration.unexpected"))

        except ApiException as e:
            error = decode_error_body(e.response_data, e.status_code)
            kind = _KIND_BY_SERVER_ERROR[error.kind]
            logger.warning(f"Registration rejected ({e.status_code}, {error.kind.value}): {error.message}")
            return RegistrationOutcome(False, kind, format_registration_error(error))

        except NetworkException as e:
            logger.error(f"Registration could not reach server: {e}")
            return RegistrationOutcome(False, OutcomeKind.NETWORK, tr("error.registration.network"))

        except Exception as e:
            logger.error(f"Unexpected registration error: {e}", exc_info=True)
            return RegistrationOutcome(False, OutcomeKind.UNEXPECTED, tr("error.registration.unexpected"))

        logger.info(f"Registration submitted for {form.email}")
        return RegistrationOutcome(True, OutcomeKind.SUCCESS, data=data)

    def list_pending(self) -> List[PendingRegistration]:
        """
        Registrations still waiting for approval (teacher only).

        Raises:
            ApiException: server rejected the request
            NetworkException: transport failure or timeout
        """
        data = self.client.get_json(self.client.endpoints.REGISTRATION.PENDING)
        if not isinstance(data, dict) or data.get("status") != "success":
            logger.warning("Pending registrations response had no success status")
            return []
        inner = data.get("data")
        items = inner.get("registrations") if isinstance(inner, dict) else None
        if not isinstance(items, list):
            return []
        return [PendingRegistration.from_api(r) for r in items if isinstance(r, dict)]

    def approve(self, registration_id: str, fee_amount: int = None,
                notes: str = None) -> ApprovalResult:
        url = build_api_url(self.client.endpoints.REGISTRATION.APPROVE, id=registration_id)
        payload = {
            "feeAmount": Config.DEFAULT_REGISTRATION_FEE if fee_amount is None else fee_amount,
            "notes": tr("registration.pending.approval_note") if notes is None else notes,
        }

        try:
            data = self.client.put_json(url, payload)
        except ApiException as e:
            logger.warning(f"Approval of {registration_id} rejected ({e.status_code}): {e.response_data}")
            return ApprovalResult(False, server_message(e, tr("error.registration.approve_failed")))
        except NetworkException as e:
            logger.error(f"Approval of {registration_id} could not reach server: {e}")
            return ApprovalResult(False, tr("error.registration.approve_network"))

        message = data.get("message") if isinstance(data, dict) else None
        logger.info(f"Registration approved: {registration_id}")
        return ApprovalResult(True, message or tr("success.registration.approved"))
