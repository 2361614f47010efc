# -*- coding: utf-8 -*-
"""
Portal user returned by the authentication API.
"""

from dataclasses import dataclass, field
from typing import Any, Dict

DASHBOARD_URLS = {
    "teacher": "/teacher-dashboard",
    "student": "/student-dashboard",
    "parent": "/parent-dashboard",
}


@dataclass
class PortalUser:
    """Signed-in user as described by the login response."""

    id: str = ""
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    role: str = "student"
    dashboard_url: str = "/"
    raw: Dict[str, Any] = field(default_factory=dict)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip() or self.email

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> 'PortalUser':
        """Build a user from the API's camelCase payload."""
        role = data.get("role") or "student"
        return cls(
            id=str(data.get("id") or data.get("_id") or ""),
            first_name=data.get("firstName") or "",
            last_name=data.get("lastName") or "",
            email=data.get("email") or "",
            role=role,
            dashboard_url=data.get("dashboardUrl") or DASHBOARD_URLS.get(role, "/"),
            raw=dict(data),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize back to the API shape for session persistence."""
        data = dict(self.raw)
        data.update({
            "id": self.id,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "email": self.email,
            "role": self.role,
            "dashboardUrl": self.dashboard_url,
        })
        return data
