# -*- coding: utf-8 -*-
"""German translations."""

DE_TRANSLATIONS = {
    # Dialogs
    "dialog.error": "Fehler",
    "dialog.warning": "Warnung",
    "dialog.success": "Erfolg",
    "dialog.confirm": "Bestätigen",

    # Common
    "common.yes": "Ja",
    "common.no": "Nein",
    "common.select": "Bitte auswählen...",

    # Error Messages - API
    "error.api.connection": "Verbindungsfehler. Bitte prüfen Sie Ihre Internetverbindung.",
    "error.api.timeout": "Zeitüberschreitung. Bitte versuchen Sie es erneut.",
    "error.api.unauthorized": "Nicht autorisiert. Bitte melden Sie sich erneut an.",

    # Error Messages - Submission
    "error.submission.generic": "Übermittlung fehlgeschlagen. Bitte versuchen Sie es erneut.",
    "error.submission.no_identifier": "Der Server hat die Übermittlung nicht bestätigt. Bitte versuchen Sie es erneut.",

    # Error Messages - General
    "error.unexpected": "Ein unerwarteter Fehler ist aufgetreten.",

    # Validation Messages
    "validation.required": "Dieses Feld ist erforderlich",
    "validation.invalid_value": "Ungültiger Wert",
    "validation.too_long": "Darf höchstens {max_length} Zeichen lang sein",
    "validation.email_invalid": "Ungültige E-Mail-Adresse",
    "validation.phone_invalid": "Gültige Telefonnummer erforderlich",
    "validation.iban_invalid": "Bitte geben Sie eine gültige IBAN ein",
    "validation.invalid_choice": "Bitte wählen Sie eine gültige Option",
    "validation.invalid_number": "Bitte geben Sie eine gültige Zahl ein",
    "validation.number_too_small": "Muss mindestens {min_value} sein",
    "validation.number_too_large": "Darf höchstens {max_value} sein",
    "validation.invalid_date": "Bitte geben Sie ein gültiges Datum ein",
    "validation.date_order": "Datum liegt vor dem zugehörigen Datum",
    "validation.check_data": "Bitte überprüfen Sie die eingegebenen Daten",

    # Placeholders
    "placeholder.email": "name@beispiel.de",
    "placeholder.phone": "+49 170 1234567",
    "placeholder.iban": "DE89 3704 0044 0532 0130 00",
    "placeholder.pet_details": "Art, Rasse und Anzahl der Haustiere",
    "placeholder.signature": "Vollständiger Name",

    # Wizard
    "wizard.progress": "Schritt {current} von {total}",
    "wizard.button.cancel": "Abbrechen",
    "wizard.button.close": "Schließen",
    "wizard.button.save_draft": "Entwurf speichern",
    "wizard.button.back": "Zurück",
    "wizard.button.next": "Weiter",
    "wizard.button.submit": "Absenden",
    "wizard.button.retry": "Erneut senden",
    "wizard.button.edit": "Bearbeiten",
    "wizard.review.title": "Überprüfung",
    "wizard.review.intro": "Bitte prüfen Sie Ihre Angaben vor dem Absenden. Mit \"Bearbeiten\" ändern Sie einen Abschnitt.",
    "wizard.review.not_completed": "Dieser Abschnitt ist noch nicht ausgefüllt.",
    "wizard.review.submitting": "Wird übermittelt...",
    "wizard.complete.title": "Vielen Dank!",
    "wizard.complete.message": "Ihre Angaben wurden erfolgreich übermittelt (Referenz {id}).",
    "wizard.confirm_cancel": "Möchten Sie wirklich abbrechen?\nAlle eingegebenen Daten gehen verloren.",
    "wizard.draft_saved": "Entwurf gespeichert",
    "wizard.error.submission_in_flight": "Bitte warten Sie, bis die Übermittlung abgeschlossen ist.",
    "wizard.error.nothing_to_advance": "Es gibt keinen weiteren Schritt.",
    "wizard.error.incomplete_steps": "Bitte füllen Sie zuerst folgende Abschnitte aus: {steps}",

    # Tenant onboarding
    "tenant.wizard.title": "Mieter-Onboarding",
    "tenant.wizard.submit": "Onboarding abschließen",
    "tenant.step.personal": "Persönliche Angaben",
    "tenant.step.personal.description": "Wer sind Sie und wie erreichen wir Sie?",
    "tenant.step.employment": "Beschäftigung",
    "tenant.step.employer": "Arbeitgeber",
    "tenant.step.references": "Referenzen",
    "tenant.step.references.description": "Bitte geben Sie mindestens eine private oder berufliche Referenz an.",
    "tenant.step.banking": "Bankverbindung",
    "tenant.step.lease": "Mietvertrag",
    "tenant.step.pets": "Haustiere",
    "tenant.step.documents": "Dokumente",
    "tenant.step.documents.description": "Laden Sie die erforderlichen Nachweise hoch. Erlaubte Formate: PDF, JPG, PNG.",
    "tenant.step.agreement": "Vereinbarung",
    "tenant.step.agreement.description": "Bitte lesen und akzeptieren Sie die Bedingungen vor der Unterschrift.",

    "tenant.field.first_name": "Vorname",
    "tenant.field.last_name": "Nachname",
    "tenant.field.email": "E-Mail",
    "tenant.field.phone": "Telefon",
    "tenant.field.date_of_birth": "Geburtsdatum",
    "tenant.field.id_number": "Ausweis-/Passnummer",
    "tenant.field.employment_status": "Beschäftigungsstatus",
    "tenant.field.employer_name": "Arbeitgeber",
    "tenant.field.employer_phone": "Telefon des Arbeitgebers",
    "tenant.field.occupation": "Beruf",
    "tenant.field.monthly_income": "Monatliches Einkommen (EUR)",
    "tenant.field.employment_duration": "Beschäftigt seit",
    "tenant.field.reference1_name": "Name der Referenz",
    "tenant.field.reference1_relationship": "Beziehung",
    "tenant.field.reference1_phone": "Telefon der Referenz",
    "tenant.field.reference1_email": "E-Mail der Referenz",
    "tenant.field.reference2_name": "Name der zweiten Referenz",
    "tenant.field.reference2_relationship": "Beziehung der zweiten Referenz",
    "tenant.field.reference2_phone": "Telefon der zweiten Referenz",
    "tenant.field.reference2_email": "E-Mail der zweiten Referenz",
    "tenant.field.account_holder": "Kontoinhaber",
    "tenant.field.bank_name": "Bank",
    "tenant.field.account_number": "Kontonummer",
    "tenant.field.iban": "IBAN",
    "tenant.field.bic": "BIC",
    "tenant.field.payment_method": "Zahlungsart",
    "tenant.field.move_in_date": "Einzugsdatum",
    "tenant.field.lease_start_date": "Mietbeginn",
    "tenant.field.lease_duration": "Mietdauer",
    "tenant.field.custom_duration": "Abweichende Mietdauer",
    "tenant.field.rent_amount": "Monatsmiete (EUR)",
    "tenant.field.deposit_amount": "Kaution (EUR)",
    "tenant.field.pet_policy": "Haustierregelung",
    "tenant.field.has_pets": "Ich habe Haustiere",
    "tenant.field.pet_details": "Angaben zu Haustieren",
    "tenant.field.agree_terms": "Ich akzeptiere die Geschäftsbedingungen",
    "tenant.field.agree_rules": "Ich akzeptiere die Hausordnung",
    "tenant.field.agree_privacy": "Ich akzeptiere die Datenschutzerklärung",
    "tenant.field.signature": "Unterschrift",
    "tenant.field.uploaded_documents": "Hochgeladene Dokumente",
    "tenant.field.background_check_consent": "Ich stimme einer Hintergrundprüfung zu",
    "tenant.field.credit_check_consent": "Ich stimme einer Bonitätsprüfung zu",
    "tenant.documents.choose_file": "Datei wählen",
    "tenant.documents.dialog_title": "Dokument auswählen",
    "tenant.documents.status.uploading": "Wird hochgeladen...",
    "tenant.documents.status.success": "Hochgeladen",
    "tenant.documents.status.error": "Hochladen fehlgeschlagen",

    "tenant.error.first_name": "Vorname ist erforderlich",
    "tenant.error.last_name": "Nachname ist erforderlich",
    "tenant.error.employment_status": "Bitte wählen Sie Ihren Beschäftigungsstatus",
    "tenant.error.employer_name": "Arbeitgeber ist erforderlich",
    "tenant.error.reference_name": "Name der Referenz ist erforderlich",
    "tenant.error.relationship": "Beziehung ist erforderlich",
    "tenant.error.account_holder": "Kontoinhaber ist erforderlich",
    "tenant.error.bank_name": "Bank ist erforderlich",
    "tenant.error.account_number": "Kontonummer ist erforderlich",
    "tenant.error.payment_method": "Bitte wählen Sie eine Zahlungsart",
    "tenant.error.iban_required_for_debit": "Für Lastschrift ist eine IBAN erforderlich",
    "tenant.error.move_in_date": "Einzugsdatum ist erforderlich",
    "tenant.error.lease_start_date": "Mietbeginn ist erforderlich",
    "tenant.error.move_in_before_start": "Einzugsdatum darf nicht vor dem Mietbeginn liegen",
    "tenant.error.lease_duration": "Bitte wählen Sie eine Mietdauer",
    "tenant.error.custom_duration": "Bitte beschreiben Sie die Mietdauer",
    "tenant.error.rent_amount": "Miete ist erforderlich",
    "tenant.error.deposit_amount": "Kaution ist erforderlich",
    "tenant.error.pet_policy": "Bitte wählen Sie eine Haustierregelung",
    "tenant.error.pet_details": "Bitte beschreiben Sie Ihre Haustiere",
    "tenant.error.agree_terms": "Sie müssen den Bedingungen zustimmen",
    "tenant.error.agree_rules": "Sie müssen der Hausordnung zustimmen",
    "tenant.error.agree_privacy": "Sie müssen der Datenschutzerklärung zustimmen",
    "tenant.error.signature": "Unterschrift ist erforderlich",
    "tenant.error.required_documents": "Bitte laden Sie Ausweis und Beschäftigungsnachweis hoch",

    # Landlord onboarding
    "landlord.wizard.title": "Vermieter-Onboarding",
    "landlord.step.personal": "Persönliche Angaben",
    "landlord.step.properties": "Immobilien",
    "landlord.step.financial": "Finanzangaben",
    "landlord.step.preferences": "Einstellungen",

    "landlord.field.first_name": "Vorname",
    "landlord.field.last_name": "Nachname",
    "landlord.field.email": "E-Mail",
    "landlord.field.phone": "Telefon",
    "landlord.field.number_of_properties": "Anzahl der Immobilien",
    "landlord.field.property_types": "Immobilienarten",
    "landlord.field.main_address": "Adresse der Hauptimmobilie",
    "landlord.field.bank_name": "Bank",
    "landlord.field.iban": "IBAN",
    "landlord.field.tax_id": "Steuernummer",
    "landlord.field.monthly_rent": "Monatliche Mieteinnahmen (EUR)",
    "landlord.field.communication": "Bevorzugter Kontaktweg",
    "landlord.field.receive_reports": "Monatliche Berichte erhalten",
    "landlord.field.automatic_reminders": "Automatische Zahlungserinnerungen senden",
    "landlord.field.notes": "Weitere Hinweise",

    "landlord.error.first_name": "Vorname muss mindestens 2 Zeichen lang sein",
    "landlord.error.last_name": "Nachname muss mindestens 2 Zeichen lang sein",
    "landlord.error.email": "Bitte geben Sie eine gültige E-Mail-Adresse ein",
    "landlord.error.property_types": "Bitte wählen Sie mindestens eine Immobilienart",
    "landlord.error.address": "Bitte geben Sie eine gültige Adresse ein",
    "landlord.error.bank_name": "Bank ist erforderlich",
    "landlord.error.amount": "Bitte geben Sie einen gültigen Betrag ein",
    "landlord.error.communication": "Bitte wählen Sie einen Kontaktweg",
}
