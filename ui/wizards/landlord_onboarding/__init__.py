# -*- coding: utf-8 -*-
"""Landlord Onboarding Wizard Package."""

from .schemas import create_landlord_steps
from .landlord_onboarding_wizard import LandlordOnboardingWizard

__all__ = [
    'create_landlord_steps',
    'LandlordOnboardingWizard'
]
