# -*- coding: utf-8 -*-
"""
AT-ICT Portal Data Models
"""

from .registration import Address, RegistrationForm
from .user import PortalUser
from .material import Material, MaterialDraft

__all__ = [
    "Address",
    "RegistrationForm",
    "PortalUser",
    "Material",
    "MaterialDraft",
]
