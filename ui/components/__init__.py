# -*- coding: utf-8 -*-
"""
AT-ICT Portal UI Components
"""

from .toast import OperationToast, Toast

__all__ = [
    "OperationToast",
    "Toast",
]
