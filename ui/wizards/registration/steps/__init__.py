# -*- coding: utf-8 -*-
"""
Registration Steps Package.

- Step 1: Personal Info
- Step 2: Academic Journey
- Step 3: Contact Info
- Step 4: Tech Knowledge & Summary
"""

from .personal_info_step import PersonalInfoStep
from .academic_step import AcademicStep
from .contact_step import ContactStep
from .tech_knowledge_step import TechKnowledgeStep

__all__ = [
    'PersonalInfoStep',
    'AcademicStep',
    'ContactStep',
    'TechKnowledgeStep'
]
