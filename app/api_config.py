# -*- coding: utf-8 -*-
"""
API Configuration - endpoint table for the portal backend.
==========================================================

Every endpoint URL is derived from a single base URL so that a team
member only has to set API_BASE_URL in their .env file.

Usage:
    endpoints = ApiEndpoints.from_config()
    endpoints.REGISTRATION.SUBMIT
    build_api_url(f"{endpoints.TEACHER.MATERIALS}/:id", id="abc")
"""

from dataclasses import dataclass
from typing import Any

from app.config import Config


@dataclass(frozen=True)
class AuthEndpoints:
    LOGIN: str
    LOGOUT: str


@dataclass(frozen=True)
class RegistrationEndpoints:
    BASE: str
    SUBMIT: str
    PENDING: str
    APPROVE: str


@dataclass(frozen=True)
class TeacherEndpoints:
    MATERIALS: str


@dataclass(frozen=True)
class StudentEndpoints:
    MATERIALS: str


@dataclass(frozen=True)
class ScheduleEndpoints:
    STUDENT_CHECK: str


@dataclass(frozen=True)
class ApiEndpoints:
    """All endpoints consumed by the desktop client."""

    BASE_URL: str
    AUTH: AuthEndpoints
    REGISTRATION: RegistrationEndpoints
    TEACHER: TeacherEndpoints
    STUDENT: StudentEndpoints
    SCHEDULE: ScheduleEndpoints

    @classmethod
    def for_base_url(cls, base_url: str) -> 'ApiEndpoints':
        base = base_url.rstrip("/")
        api = f"{base}/api"
        return cls(
            BASE_URL=base,
            AUTH=AuthEndpoints(
                LOGIN=f"{api}/auth/login",
                LOGOUT=f"{api}/auth/logout",
            ),
            REGISTRATION=RegistrationEndpoints(
                BASE=f"{api}/registration",
                SUBMIT=f"{api}/registration/submit",
                PENDING=f"{api}/registration/pending",
                APPROVE=f"{api}/registration/:id/approve",
            ),
            TEACHER=TeacherEndpoints(
                MATERIALS=f"{api}/teacher/materials",
            ),
            STUDENT=StudentEndpoints(
                MATERIALS=f"{api}/student/materials",
            ),
            SCHEDULE=ScheduleEndpoints(
                STUDENT_CHECK=f"{api}/schedule/attendance/check",
            ),
        )

    @classmethod
    def from_config(cls) -> 'ApiEndpoints':
        """Build endpoints from Config.API_BASE_URL (.env aware)."""
        return cls.for_base_url(Config.API_BASE_URL)


def build_api_url(endpoint: str, **params: Any) -> str:
    """Replace ``:name`` placeholders in an endpoint with parameter values."""
    url = endpoint
    for key, value in params.items():
        url = url.replace(f":{key}", str(value))
    return url
