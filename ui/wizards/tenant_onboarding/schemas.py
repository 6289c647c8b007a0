# -*- coding: utf-8 -*-
"""
Tenant onboarding - step declarations and validation schemas.

Step keys double as section keys of the submitted payload.
"""

from typing import Any, List, Mapping

from app.config import Vocabularies
from services.validation import (
    BooleanField, ChoiceField, DateField, EmailField, MultiChoiceField, NotBefore,
    NumberField, RequiredWhen, StepSchema, TextField
)
from ui.wizards.framework.base_step import WizardStep

PERSONAL = "personal"
EMPLOYMENT = "employment"
EMPLOYER = "employer"
REFERENCES = "references"
BANKING = "banking"
LEASE = "lease"
PETS = "pets"
DOCUMENTS = "documents"
AGREEMENT = "agreement"

EMPLOYED_STATUSES = ("employed", "self-employed")
REQUIRED_DOCUMENTS = ("id_proof", "employment_proof")

IBAN_PATTERN = r"^[A-Za-z]{2}[0-9]{2}[A-Za-z0-9 ]{11,40}$"


def has_employer(values: Mapping[str, Any]) -> bool:
    return values.get("employmentStatus") in EMPLOYED_STATUSES


def has_pets(values: Mapping[str, Any]) -> bool:
    return bool(values.get("hasPets"))


PERSONAL_SCHEMA = StepSchema([
    TextField("firstName", min_length=2, max_length=100, message="tenant.error.first_name"),
    TextField("lastName", min_length=2, max_length=100, message="tenant.error.last_name"),
    EmailField("email"),
    TextField("phone", min_length=8, max_length=30, message="validation.phone_invalid"),
    DateField("dateOfBirth", required=False),
    TextField("idNumber", required=False, max_length=50),
])

EMPLOYMENT_SCHEMA = StepSchema([
    ChoiceField(
        "employmentStatus",
        Vocabularies.codes(Vocabularies.EMPLOYMENT_STATUS),
        required_message="tenant.error.employment_status",
    ),
])

EMPLOYER_SCHEMA = StepSchema([
    TextField("employerName", min_length=2, message="tenant.error.employer_name"),
    TextField("employerPhone", required=False),
    TextField("occupation", required=False),
    NumberField("monthlyIncome", required=False, min_value=0),
    TextField("employmentDuration", required=False),
])

REFERENCES_SCHEMA = StepSchema([
    TextField("reference1Name", min_length=2, message="tenant.error.reference_name"),
    TextField("reference1Relationship", min_length=2, message="tenant.error.relationship"),
    TextField("reference1Phone", min_length=8, message="validation.phone_invalid"),
    EmailField("reference1Email", required=False),
    TextField("reference2Name", required=False),
    TextField("reference2Relationship", required=False),
    TextField("reference2Phone", required=False),
    EmailField("reference2Email", required=False),
])

BANKING_SCHEMA = StepSchema(
    [
        TextField("accountHolder", min_length=2, message="tenant.error.account_holder"),
        TextField("bankName", min_length=2, message="tenant.error.bank_name"),
        TextField("accountNumber", min_length=5, message="tenant.error.account_number"),
        TextField("iban", required=False, pattern=IBAN_PATTERN, message="validation.iban_invalid"),
        TextField("bic", required=False, max_length=11),
        ChoiceField(
            "paymentMethod",
            Vocabularies.codes(Vocabularies.PAYMENT_METHODS),
            required_message="tenant.error.payment_method",
        ),
    ],
    [
        RequiredWhen(
            "iban",
            lambda values: values.get("paymentMethod") == "direct_debit",
            "tenant.error.iban_required_for_debit",
        ),
    ],
)

LEASE_SCHEMA = StepSchema(
    [
        DateField("moveInDate", required_message="tenant.error.move_in_date"),
        DateField("leaseStartDate", required_message="tenant.error.lease_start_date"),
        ChoiceField(
            "leaseDuration",
            Vocabularies.codes(Vocabularies.LEASE_DURATIONS),
            required_message="tenant.error.lease_duration",
        ),
        TextField("customDuration", required=False),
        NumberField("rentAmount", min_value=1, required_message="tenant.error.rent_amount"),
        NumberField("depositAmount", min_value=0, required_message="tenant.error.deposit_amount"),
        ChoiceField(
            "petPolicy",
            Vocabularies.codes(Vocabularies.PET_POLICIES),
            required_message="tenant.error.pet_policy",
        ),
        BooleanField("hasPets"),
    ],
    [
        RequiredWhen(
            "customDuration",
            lambda values: values.get("leaseDuration") == "other",
            "tenant.error.custom_duration",
        ),
        NotBefore("moveInDate", "leaseStartDate", "tenant.error.move_in_before_start"),
    ],
)

PETS_SCHEMA = StepSchema([
    TextField("petDetails", min_length=2, max_length=500, message="tenant.error.pet_details"),
])

DOCUMENTS_SCHEMA = StepSchema([
    MultiChoiceField(
        "uploadedDocuments",
        Vocabularies.codes(Vocabularies.DOCUMENT_TYPES),
        required_choices=REQUIRED_DOCUMENTS,
        required_message="tenant.error.required_documents",
    ),
    BooleanField("backgroundCheckConsent"),
    BooleanField("creditCheckConsent"),
])

AGREEMENT_SCHEMA = StepSchema([
    BooleanField("agreeToTerms", must_be_true=True, message="tenant.error.agree_terms"),
    BooleanField("agreeToRules", must_be_true=True, message="tenant.error.agree_rules"),
    BooleanField("agreeToPrivacyPolicy", must_be_true=True, message="tenant.error.agree_privacy"),
    TextField("signature", min_length=2, message="tenant.error.signature"),
])


def create_tenant_steps() -> List[WizardStep]:
    """Step declarations in display order."""
    return [
        WizardStep(PERSONAL, "tenant.step.personal", PERSONAL_SCHEMA,
                   description="tenant.step.personal.description"),
        WizardStep(EMPLOYMENT, "tenant.step.employment", EMPLOYMENT_SCHEMA),
        WizardStep(EMPLOYER, "tenant.step.employer", EMPLOYER_SCHEMA, predicate=has_employer),
        WizardStep(REFERENCES, "tenant.step.references", REFERENCES_SCHEMA,
                   description="tenant.step.references.description"),
        WizardStep(BANKING, "tenant.step.banking", BANKING_SCHEMA),
        WizardStep(LEASE, "tenant.step.lease", LEASE_SCHEMA),
        WizardStep(PETS, "tenant.step.pets", PETS_SCHEMA, predicate=has_pets),
        WizardStep(DOCUMENTS, "tenant.step.documents", DOCUMENTS_SCHEMA,
                   description="tenant.step.documents.description"),
        WizardStep(AGREEMENT, "tenant.step.agreement", AGREEMENT_SCHEMA,
                   description="tenant.step.agreement.description"),
    ]
