# -*- coding: utf-8 -*-
"""
AT-ICT Portal Service Layer
"""

# Lazy imports to avoid circular dependencies
__all__ = [
    "AuthService",
    "RegistrationService",
    "MaterialsService",
    "AttendanceService",
]


def __getattr__(name):
    """Lazy import to avoid circular dependencies."""
    if name == "AuthService":
        from .auth_service import AuthService
        return AuthService
    elif name == "RegistrationService":
        from .registration_service import RegistrationService
        return RegistrationService
    elif name == "MaterialsService":
        from .materials_service import MaterialsService
        return MaterialsService
    elif name == "AttendanceService":
        from .attendance_service import AttendanceService
        return AttendanceService
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
