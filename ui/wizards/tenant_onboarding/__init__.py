# -*- coding: utf-8 -*-
"""
Tenant Onboarding Wizard Package.

This package contains:
- Step declarations and validation schemas
- Field layouts of the step forms
- DocumentsStep: verification document uploads
- TenantOnboardingWizard: Main wizard class
"""

from .schemas import create_tenant_steps
from .documents_step import DocumentsStep
from .tenant_onboarding_wizard import TenantOnboardingWizard

__all__ = [
    'create_tenant_steps',
    'DocumentsStep',
    'TenantOnboardingWizard'
]
