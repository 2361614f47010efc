# -*- coding: utf-8 -*-
"""
AT-ICT Portal Application Core Module
"""

from .config import Config

__all__ = ["Config"]
