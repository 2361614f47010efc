# -*- coding: utf-8 -*-
"""Attendance check-in: submits a scanned or pasted session token."""

from dataclasses import dataclass
from typing import Optional

from services.api_client import PortalApiClient
from services.error_mapper import server_message
from services.exceptions import ApiException, NetworkException
from services.translation_manager import tr
from utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class CheckInResult:
    success: bool
    message: str = ""
    submitted: bool = True


class AttendanceService:
    """Marks attendance for the signed-in student."""

    def __init__(self, client: PortalApiClient):
        self.client = client

    def check_in(self, token_text: Optional[str]) -> CheckInResult:
        cleaned = (token_text or "").strip()
        if not cleaned:
            return CheckInResult(False, submitted=False)

        try:
            data = self.client.post_json(
                self.client.endpoints.SCHEDULE.STUDENT_CHECK,
                {"token": cleaned},
                auth=True
            )
        except ApiException as e:
            logger.warning(f"Check-in rejected ({e.status_code}): {e.response_data}")
            return CheckInResult(False, server_message(e, tr("error.attendance.failed")))
        except NetworkException as e:
            logger.error(f"Check-in network failure: {e}")
            return CheckInResult(False, tr("error.attendance.network"))

        message = data.get("message") if isinstance(data, dict) else None
        logger.info("Attendance check-in accepted")
        return CheckInResult(True, message or tr("success.attendance.marked"))
