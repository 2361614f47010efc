# -*- coding: utf-8 -*-
"""
AT-ICT Portal UI Pages
"""

from .login_page import LoginPage
from .home_page import HomePage
from .portal_page import PortalPage
from .materials_page import MaterialsPage
from .attendance_page import AttendancePage

__all__ = [
    "LoginPage",
    "HomePage",
    "PortalPage",
    "MaterialsPage",
    "AttendancePage",
]
