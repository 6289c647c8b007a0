# -*- coding: utf-8 -*-
"""
Tenant onboarding - step forms.
"""

from typing import Dict, List

from app.config import Vocabularies
from ui.wizards.framework.form_step import (
    CHECKBOX, CHOICE, DATE, NUMBER, TEXTAREA, FieldSpec
)
from .schemas import (
    AGREEMENT, BANKING, DOCUMENTS, EMPLOYER, EMPLOYMENT, LEASE, PERSONAL, PETS, REFERENCES
)

TENANT_FIELDS: Dict[str, List[FieldSpec]] = {
    PERSONAL: [
        FieldSpec("firstName", "tenant.field.first_name"),
        FieldSpec("lastName", "tenant.field.last_name"),
        FieldSpec("email", "tenant.field.email", placeholder="placeholder.email"),
        FieldSpec("phone", "tenant.field.phone", placeholder="placeholder.phone"),
        FieldSpec("dateOfBirth", "tenant.field.date_of_birth", DATE),
        FieldSpec("idNumber", "tenant.field.id_number"),
    ],
    EMPLOYMENT: [
        FieldSpec("employmentStatus", "tenant.field.employment_status", CHOICE,
                  Vocabularies.EMPLOYMENT_STATUS),
    ],
    EMPLOYER: [
        FieldSpec("employerName", "tenant.field.employer_name"),
        FieldSpec("employerPhone", "tenant.field.employer_phone"),
        FieldSpec("occupation", "tenant.field.occupation"),
        FieldSpec("monthlyIncome", "tenant.field.monthly_income", NUMBER),
        FieldSpec("employmentDuration", "tenant.field.employment_duration"),
    ],
    REFERENCES: [
        FieldSpec("reference1Name", "tenant.field.reference1_name"),
        FieldSpec("reference1Relationship", "tenant.field.reference1_relationship"),
        FieldSpec("reference1Phone", "tenant.field.reference1_phone"),
        FieldSpec("reference1Email", "tenant.field.reference1_email"),
        FieldSpec("reference2Name", "tenant.field.reference2_name"),
        FieldSpec("reference2Relationship", "tenant.field.reference2_relationship"),
        FieldSpec("reference2Phone", "tenant.field.reference2_phone"),
        FieldSpec("reference2Email", "tenant.field.reference2_email"),
    ],
    BANKING: [
        FieldSpec("accountHolder", "tenant.field.account_holder"),
        FieldSpec("bankName", "tenant.field.bank_name"),
        FieldSpec("accountNumber", "tenant.field.account_number"),
        FieldSpec("iban", "tenant.field.iban", placeholder="placeholder.iban"),
        FieldSpec("bic", "tenant.field.bic"),
        FieldSpec("paymentMethod", "tenant.field.payment_method", CHOICE,
                  Vocabularies.PAYMENT_METHODS),
    ],
    LEASE: [
        FieldSpec("moveInDate", "tenant.field.move_in_date", DATE),
        FieldSpec("leaseStartDate", "tenant.field.lease_start_date", DATE),
        FieldSpec("leaseDuration", "tenant.field.lease_duration", CHOICE,
                  Vocabularies.LEASE_DURATIONS),
        FieldSpec("customDuration", "tenant.field.custom_duration"),
        FieldSpec("rentAmount", "tenant.field.rent_amount", NUMBER),
        FieldSpec("depositAmount", "tenant.field.deposit_amount", NUMBER),
        FieldSpec("petPolicy", "tenant.field.pet_policy", CHOICE, Vocabularies.PET_POLICIES),
        FieldSpec("hasPets", "tenant.field.has_pets", CHECKBOX),
    ],
    PETS: [
        FieldSpec("petDetails", "tenant.field.pet_details", TEXTAREA,
                  placeholder="placeholder.pet_details"),
    ],
    DOCUMENTS: [
        FieldSpec("backgroundCheckConsent", "tenant.field.background_check_consent", CHECKBOX),
        FieldSpec("creditCheckConsent", "tenant.field.credit_check_consent", CHECKBOX),
    ],
    AGREEMENT: [
        FieldSpec("agreeToTerms", "tenant.field.agree_terms", CHECKBOX),
        FieldSpec("agreeToRules", "tenant.field.agree_rules", CHECKBOX),
        FieldSpec("agreeToPrivacyPolicy", "tenant.field.agree_privacy", CHECKBOX),
        FieldSpec("signature", "tenant.field.signature", placeholder="placeholder.signature"),
    ],
}
