# -*- coding: utf-8 -*-
"""English translations."""

EN_TRANSLATIONS = {
    # Dialogs
    "dialog.error": "Error",
    "dialog.warning": "Warning",
    "dialog.success": "Success",
    "dialog.confirm": "Confirm",

    # Common
    "common.yes": "Yes",
    "common.no": "No",
    "common.select": "Please select...",

    # Error Messages - API
    "error.api.connection": "Connection error. Please check your internet connection.",
    "error.api.timeout": "Connection timeout. Please try again.",
    "error.api.unauthorized": "Unauthorized. Please login again.",

    # Error Messages - Submission
    "error.submission.generic": "Submission failed. Please try again.",
    "error.submission.no_identifier": "The server did not confirm the submission. Please try again.",

    # Error Messages - General
    "error.unexpected": "An unexpected error occurred.",

    # Validation Messages
    "validation.required": "This field is required",
    "validation.invalid_value": "Invalid value",
    "validation.too_long": "Must not exceed {max_length} characters",
    "validation.email_invalid": "Invalid email address",
    "validation.phone_invalid": "Valid phone number is required",
    "validation.iban_invalid": "Please enter a valid IBAN",
    "validation.invalid_choice": "Please select a valid option",
    "validation.invalid_number": "Please enter a valid number",
    "validation.number_too_small": "Must be at least {min_value}",
    "validation.number_too_large": "Must not exceed {max_value}",
    "validation.invalid_date": "Please enter a valid date",
    "validation.date_order": "Date is before the related date",
    "validation.check_data": "Please check the entered data",

    # Placeholders
    "placeholder.email": "name@example.com",
    "placeholder.phone": "+49 170 1234567",
    "placeholder.iban": "DE89 3704 0044 0532 0130 00",
    "placeholder.pet_details": "Type, breed and number of pets",
    "placeholder.signature": "Type your full name",

    # Wizard
    "wizard.progress": "Step {current} of {total}",
    "wizard.button.cancel": "Cancel",
    "wizard.button.close": "Close",
    "wizard.button.save_draft": "Save draft",
    "wizard.button.back": "Back",
    "wizard.button.next": "Next",
    "wizard.button.submit": "Submit",
    "wizard.button.retry": "Retry",
    "wizard.button.edit": "Edit",
    "wizard.review.title": "Review",
    "wizard.review.intro": "Please check your details before submitting. Use \"Edit\" to change a section.",
    "wizard.review.not_completed": "This section has not been completed yet.",
    "wizard.review.submitting": "Submitting...",
    "wizard.complete.title": "Thank you!",
    "wizard.complete.message": "Your details were submitted successfully (reference {id}).",
    "wizard.confirm_cancel": "Are you sure you want to cancel?\nAll entered data will be lost.",
    "wizard.draft_saved": "Draft saved",
    "wizard.error.submission_in_flight": "Please wait until the submission has finished.",
    "wizard.error.nothing_to_advance": "There is no further step.",
    "wizard.error.incomplete_steps": "Please complete the following sections first: {steps}",

    # Tenant onboarding
    "tenant.wizard.title": "Tenant Onboarding",
    "tenant.wizard.submit": "Complete onboarding",
    "tenant.step.personal": "Personal Information",
    "tenant.step.personal.description": "Tell us who you are and how we can reach you.",
    "tenant.step.employment": "Employment",
    "tenant.step.employer": "Employer Details",
    "tenant.step.references": "References",
    "tenant.step.references.description": "Please provide at least one personal or professional reference.",
    "tenant.step.banking": "Banking Information",
    "tenant.step.lease": "Lease Details",
    "tenant.step.pets": "Pet Details",
    "tenant.step.documents": "Documents",
    "tenant.step.documents.description": "Upload required documents for tenant verification. Accepted formats: PDF, JPG, PNG.",
    "tenant.step.agreement": "Agreement",
    "tenant.step.agreement.description": "Please read and accept the terms before signing.",

    "tenant.field.first_name": "First name",
    "tenant.field.last_name": "Last name",
    "tenant.field.email": "Email",
    "tenant.field.phone": "Phone",
    "tenant.field.date_of_birth": "Date of birth",
    "tenant.field.id_number": "ID / passport number",
    "tenant.field.employment_status": "Employment status",
    "tenant.field.employer_name": "Employer name",
    "tenant.field.employer_phone": "Employer phone",
    "tenant.field.occupation": "Occupation",
    "tenant.field.monthly_income": "Monthly income (EUR)",
    "tenant.field.employment_duration": "Employed since",
    "tenant.field.reference1_name": "Reference name",
    "tenant.field.reference1_relationship": "Relationship",
    "tenant.field.reference1_phone": "Reference phone",
    "tenant.field.reference1_email": "Reference email",
    "tenant.field.reference2_name": "Second reference name",
    "tenant.field.reference2_relationship": "Second reference relationship",
    "tenant.field.reference2_phone": "Second reference phone",
    "tenant.field.reference2_email": "Second reference email",
    "tenant.field.account_holder": "Account holder",
    "tenant.field.bank_name": "Bank name",
    "tenant.field.account_number": "Account number",
    "tenant.field.iban": "IBAN",
    "tenant.field.bic": "BIC",
    "tenant.field.payment_method": "Payment method",
    "tenant.field.move_in_date": "Move-in date",
    "tenant.field.lease_start_date": "Lease start date",
    "tenant.field.lease_duration": "Lease duration",
    "tenant.field.custom_duration": "Custom duration",
    "tenant.field.rent_amount": "Monthly rent (EUR)",
    "tenant.field.deposit_amount": "Deposit (EUR)",
    "tenant.field.pet_policy": "Pet policy",
    "tenant.field.has_pets": "I have pets",
    "tenant.field.pet_details": "Pet details",
    "tenant.field.agree_terms": "I agree to the terms and conditions",
    "tenant.field.agree_rules": "I agree to the house rules",
    "tenant.field.agree_privacy": "I agree to the privacy policy",
    "tenant.field.signature": "Signature",
    "tenant.field.uploaded_documents": "Uploaded documents",
    "tenant.field.background_check_consent": "I consent to a background check",
    "tenant.field.credit_check_consent": "I consent to a credit check",
    "tenant.documents.choose_file": "Choose file",
    "tenant.documents.dialog_title": "Select document",
    "tenant.documents.status.uploading": "Uploading...",
    "tenant.documents.status.success": "Uploaded",
    "tenant.documents.status.error": "Upload failed",

    "tenant.error.first_name": "First name is required",
    "tenant.error.last_name": "Last name is required",
    "tenant.error.employment_status": "Please select your employment status",
    "tenant.error.employer_name": "Employer name is required",
    "tenant.error.reference_name": "Reference name is required",
    "tenant.error.relationship": "Relationship is required",
    "tenant.error.account_holder": "Account holder name is required",
    "tenant.error.bank_name": "Bank name is required",
    "tenant.error.account_number": "Account number is required",
    "tenant.error.payment_method": "Please select a payment method",
    "tenant.error.iban_required_for_debit": "IBAN is required for direct debit",
    "tenant.error.move_in_date": "Move-in date is required",
    "tenant.error.lease_start_date": "Lease start date is required",
    "tenant.error.move_in_before_start": "Move-in date cannot be before the lease start date",
    "tenant.error.lease_duration": "Please select a lease duration",
    "tenant.error.custom_duration": "Please describe the lease duration",
    "tenant.error.rent_amount": "Rent amount is required",
    "tenant.error.deposit_amount": "Deposit amount is required",
    "tenant.error.pet_policy": "Please select a pet policy",
    "tenant.error.pet_details": "Please describe your pets",
    "tenant.error.agree_terms": "You must agree to the terms",
    "tenant.error.agree_rules": "You must agree to the house rules",
    "tenant.error.agree_privacy": "You must agree to the privacy policy",
    "tenant.error.signature": "Signature is required",
    "tenant.error.required_documents": "Please upload your ID proof and proof of employment",

    # Landlord onboarding
    "landlord.wizard.title": "Landlord Onboarding",
    "landlord.step.personal": "Personal Information",
    "landlord.step.properties": "Properties",
    "landlord.step.financial": "Financial Details",
    "landlord.step.preferences": "Preferences",

    "landlord.field.first_name": "First name",
    "landlord.field.last_name": "Last name",
    "landlord.field.email": "Email",
    "landlord.field.phone": "Phone",
    "landlord.field.number_of_properties": "Number of properties",
    "landlord.field.property_types": "Property types",
    "landlord.field.main_address": "Main property address",
    "landlord.field.bank_name": "Bank name",
    "landlord.field.iban": "IBAN",
    "landlord.field.tax_id": "Tax ID",
    "landlord.field.monthly_rent": "Monthly rent collection (EUR)",
    "landlord.field.communication": "Preferred communication",
    "landlord.field.receive_reports": "Receive monthly reports",
    "landlord.field.automatic_reminders": "Send automatic payment reminders",
    "landlord.field.notes": "Additional notes",

    "landlord.error.first_name": "First name must be at least 2 characters",
    "landlord.error.last_name": "Last name must be at least 2 characters",
    "landlord.error.email": "Please enter a valid email address",
    "landlord.error.property_types": "Select at least one property type",
    "landlord.error.address": "Please enter a valid address",
    "landlord.error.bank_name": "Bank name is required",
    "landlord.error.amount": "Please enter a valid amount",
    "landlord.error.communication": "Please select a communication preference",
}
