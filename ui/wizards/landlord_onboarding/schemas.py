# -*- coding: utf-8 -*-
"""
Landlord onboarding - step declarations and validation schemas.
"""

from typing import List

from app.config import Vocabularies
from services.validation import (
    BooleanField, ChoiceField, EmailField, MultiChoiceField, NumberField, StepSchema, TextField
)
from ui.wizards.framework.base_step import WizardStep

PERSONAL = "personal"
PROPERTIES = "properties"
FINANCIAL = "financial"
PREFERENCES = "preferences"

PERSONAL_SCHEMA = StepSchema([
    TextField("firstName", min_length=2, message="landlord.error.first_name"),
    TextField("lastName", min_length=2, message="landlord.error.last_name"),
    EmailField("email", message="landlord.error.email"),
    TextField("phone", min_length=5, message="validation.phone_invalid"),
])

PROPERTIES_SCHEMA = StepSchema([
    NumberField("numberOfProperties", min_value=1, integer=True),
    MultiChoiceField(
        "propertyTypes",
        Vocabularies.codes(Vocabularies.PROPERTY_TYPES),
        min_items=1,
        required_message="landlord.error.property_types",
    ),
    TextField("mainPropertyAddress", min_length=5, message="landlord.error.address"),
])

FINANCIAL_SCHEMA = StepSchema([
    TextField("bankName", min_length=2, message="landlord.error.bank_name"),
    TextField("iban", min_length=15, max_length=42, message="validation.iban_invalid"),
    TextField("taxId", required=False),
    NumberField("monthlyRentCollection", min_value=0, message="landlord.error.amount"),
])

PREFERENCES_SCHEMA = StepSchema([
    ChoiceField(
        "preferredCommunication",
        Vocabularies.codes(Vocabularies.COMMUNICATION_CHANNELS),
        required_message="landlord.error.communication",
    ),
    BooleanField("receiveReports"),
    BooleanField("automaticReminders"),
    TextField("additionalNotes", required=False, max_length=1000),
])


def create_landlord_steps() -> List[WizardStep]:
    """Step declarations in display order."""
    return [
        WizardStep(PERSONAL, "landlord.step.personal", PERSONAL_SCHEMA),
        WizardStep(PROPERTIES, "landlord.step.properties", PROPERTIES_SCHEMA),
        WizardStep(FINANCIAL, "landlord.step.financial", FINANCIAL_SCHEMA),
        WizardStep(PREFERENCES, "landlord.step.preferences", PREFERENCES_SCHEMA),
    ]
