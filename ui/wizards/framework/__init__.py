# -*- coding: utf-8 -*-
"""
Wizard Framework - multi-step onboarding wizards for PropertyHub.

Provides the step state machine, step forms and the wizard shell with
consistent navigation, validation, drafts and submission.
"""

from .base_step import BaseStep, WizardStep
from .form_step import FieldSpec, FormStep
from .wizard_context import COMPLETE, REVIEW, ProgressInfo, WizardSnapshot, WizardState
from .wizard_controller import WizardController
from .submission_worker import SubmissionWorker
from .review_step import CompletionPanel, ReviewPanel
from .base_wizard import BaseWizard

__all__ = [
    'BaseWizard',
    'BaseStep',
    'WizardStep',
    'FieldSpec',
    'FormStep',
    'WizardState',
    'WizardSnapshot',
    'ProgressInfo',
    'WizardController',
    'SubmissionWorker',
    'ReviewPanel',
    'CompletionPanel',
    'REVIEW',
    'COMPLETE',
]
