# -*- coding: utf-8 -*-
"""
PropertyHub Application Core Module
"""

from .config import Config, Vocabularies, WizardTypes

__all__ = ["Config", "Vocabularies", "WizardTypes"]
