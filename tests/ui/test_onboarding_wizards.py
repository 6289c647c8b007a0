# -*- coding: utf-8 -*-
"""
Tests for the tenant and landlord onboarding wizards.

Forms are filled with populate_data() and navigated with the footer buttons;
HTTP is isolated by patching requests.request.
"""

from unittest.mock import patch

import pytest

from ui.wizards.framework import COMPLETE, REVIEW
from ui.wizards.landlord_onboarding import LandlordOnboardingWizard
from ui.wizards.tenant_onboarding import TenantOnboardingWizard

TENANT_KEYS = [
    "personal", "employment", "employer", "references",
    "banking", "lease", "pets", "documents", "agreement",
]


@pytest.fixture
def tenant_wizard(qtbot, draft_repository):
    wizard = TenantOnboardingWizard(
        context_values={"propertyId": 7},
        draft_repository=draft_repository,
        run_in_background=False,
    )
    qtbot.addWidget(wizard)
    return wizard


def fill_and_next(wizard, values):
    form = wizard.current_form()
    form.populate_data(values)
    wizard.btn_next.click()


def fill_until(wizard, results, stop_key):
    while wizard.controller.current_key != stop_key:
        key = wizard.controller.current_key
        fill_and_next(wizard, results[key])
        assert wizard.controller.current_key != key, f"stuck on {key}"


def fill_all(wizard, results):
    while wizard.controller.current_key not in (REVIEW, COMPLETE):
        key = wizard.controller.current_key
        fill_and_next(wizard, results[key])
        assert wizard.controller.current_key != key, f"stuck on {key}"


class TestTenantWizardNavigation:
    """Test step navigation through the UI."""

    def test_initial_header(self, tenant_wizard):
        assert tenant_wizard.windowTitle() == "Tenant Onboarding"
        assert tenant_wizard.step_title_label.text() == "Personal Information"
        assert tenant_wizard.progress_label.text() == "Step 1 of 8"
        assert tenant_wizard.progress_bar.value() == 13
        assert tenant_wizard.btn_previous.isEnabled() is False

    def test_invalid_email_shown_under_field(self, tenant_wizard, tenant_results):
        fill_and_next(tenant_wizard, dict(tenant_results["personal"], email="not-an-email"))

        form = tenant_wizard.forms["personal"]
        assert tenant_wizard.controller.current_key == "personal"
        assert form.field_error("email") == "Invalid email address"
        assert form.field_error("firstName") == ""

    def test_errors_cleared_after_correction(self, tenant_wizard, tenant_results):
        fill_and_next(tenant_wizard, dict(tenant_results["personal"], email="not-an-email"))
        fill_and_next(tenant_wizard, tenant_results["personal"])
        tenant_wizard.btn_previous.click()

        assert tenant_wizard.controller.current_key == "personal"
        assert tenant_wizard.forms["personal"].field_error("email") == ""

    def test_live_input_updates_progress(self, tenant_wizard, tenant_results):
        fill_and_next(tenant_wizard, tenant_results["personal"])
        assert tenant_wizard.progress_label.text() == "Step 2 of 8"

        form = tenant_wizard.current_form()
        form.populate_data({"employmentStatus": "employed"})
        form.emit_input_changed()

        assert tenant_wizard.progress_label.text() == "Step 2 of 9"
        assert tenant_wizard.controller.state.has_result("employment") is False

    def test_back_shows_stored_values(self, tenant_wizard, tenant_results):
        fill_and_next(tenant_wizard, tenant_results["personal"])
        tenant_wizard.forms["personal"].populate_data({"firstName": "Changed"})

        tenant_wizard.btn_previous.click()

        assert tenant_wizard.controller.current_key == "personal"
        assert tenant_wizard.forms["personal"].collect_data()["firstName"] == "Anna"

    def test_review_lists_visible_sections(self, tenant_wizard, tenant_results):
        fill_all(tenant_wizard, tenant_results)

        assert tenant_wizard.controller.current_key == REVIEW
        assert tenant_wizard.review_panel.section_keys() == TENANT_KEYS
        assert tenant_wizard.btn_next.text() == "Complete onboarding"
        assert tenant_wizard.progress_label.text() == "Step 10 of 10"

    def test_review_edit_link_jumps_to_step(self, tenant_wizard, tenant_results):
        fill_all(tenant_wizard, tenant_results)

        tenant_wizard.review_panel.edit_buttons["banking"].click()

        assert tenant_wizard.controller.current_key == "banking"
        assert tenant_wizard.current_form().collect_data()["iban"] == "DE89370400440532013000"

    def test_summary_uses_display_values(self, tenant_wizard, tenant_results):
        fill_all(tenant_wizard, tenant_results)
        form = tenant_wizard.forms["lease"]
        summary = dict(form.format_summary(tenant_wizard.controller.state.get_result("lease")))

        assert summary["Monthly rent (EUR)"] == "950"
        assert summary["Pet policy"] == "Cats only"
        assert summary["I have pets"] == "Yes"


class TestTenantWizardSubmission:
    """Test submitting through the UI."""

    def test_submit_posts_and_completes(self, tenant_wizard, tenant_results, make_response, qtbot):
        fill_all(tenant_wizard, tenant_results)

        with patch("services.api_client.requests.request",
                   return_value=make_response(201, {"id": 42})) as request:
            with qtbot.waitSignal(tenant_wizard.wizard_completed, timeout=1000) as blocker:
                tenant_wizard.btn_next.click()

        assert blocker.args == [{"id": 42}]
        payload = request.call_args.kwargs["json"]
        assert list(payload) == TENANT_KEYS + ["propertyId"]
        assert payload["lease"]["moveInDate"] == "2026-11-01"
        assert payload["employer"]["monthlyIncome"] == 4200.0
        assert request.call_args.kwargs["url"].endswith("/api/tenants/onboarding")

        assert tenant_wizard.controller.current_key == COMPLETE
        assert "42" in tenant_wizard.completion_panel.message_label.text()
        assert tenant_wizard.btn_cancel.text() == "Close"
        assert tenant_wizard.btn_next.isEnabled() is False

    def test_server_error_offers_retry(self, tenant_wizard, tenant_results, make_response):
        fill_all(tenant_wizard, tenant_results)

        with patch("services.api_client.requests.request",
                   return_value=make_response(500, {"message": "DB unavailable"})) as request:
            tenant_wizard.btn_next.click()

            assert tenant_wizard.controller.current_key == REVIEW
            assert tenant_wizard.review_panel.error_label.text() == "DB unavailable"
            assert tenant_wizard.btn_next.text() == "Retry"

            tenant_wizard.btn_next.click()

        assert request.call_count == 2
        first, second = request.call_args_list
        assert first.kwargs["json"] == second.kwargs["json"]

    def test_existing_tenant_is_updated(self, qtbot, draft_repository, tenant_results, make_response):
        wizard = TenantOnboardingWizard(
            context_values={"propertyId": 7, "tenantId": 42},
            draft_repository=draft_repository,
            run_in_background=False,
        )
        qtbot.addWidget(wizard)
        fill_all(wizard, tenant_results)

        with patch("services.api_client.requests.request",
                   return_value=make_response(200, {"id": 42})) as request:
            wizard.btn_next.click()

        assert request.call_args.kwargs["method"] == "PUT"
        assert request.call_args.kwargs["url"].endswith("/api/tenants/42/onboarding")


class TestTenantWizardLifecycle:
    """Test drafts and cancellation."""

    def test_save_and_resume_draft(self, tenant_wizard, tenant_results, draft_repository, qtbot):
        fill_and_next(tenant_wizard, tenant_results["personal"])
        fill_and_next(tenant_wizard, tenant_results["employment"])

        with qtbot.waitSignal(tenant_wizard.draft_saved, timeout=1000):
            draft_id = tenant_wizard.save_draft()
        assert tenant_wizard.status_label.text() == "Draft saved"

        restored = TenantOnboardingWizard.load_from_draft(
            draft_id, draft_repository=draft_repository, run_in_background=False
        )
        qtbot.addWidget(restored)

        assert restored.controller.current_key == "employer"
        assert restored.controller.state.context_values == {"propertyId": 7}
        restored.btn_previous.click()
        assert restored.current_form().collect_data()["employmentStatus"] == "employed"

    def test_draft_keeps_unvalidated_input(self, tenant_wizard, tenant_results, draft_repository, qtbot):
        fill_and_next(tenant_wizard, tenant_results["personal"])
        tenant_wizard.current_form().populate_data({"employmentStatus": "student"})

        draft_id = tenant_wizard.save_draft()
        restored = TenantOnboardingWizard.load_from_draft(
            draft_id, draft_repository=draft_repository, run_in_background=False
        )
        qtbot.addWidget(restored)

        assert restored.controller.current_key == "employment"
        assert restored.controller.state.has_result("employment") is False
        assert restored.current_form().collect_data()["employmentStatus"] == "student"

    def test_unknown_draft(self, draft_repository):
        with pytest.raises(ValueError):
            TenantOnboardingWizard.load_from_draft("missing", draft_repository=draft_repository)

    def test_successful_submission_removes_draft(self, tenant_wizard, tenant_results,
                                                 draft_repository, make_response):
        fill_all(tenant_wizard, tenant_results)
        draft_id = tenant_wizard.save_draft()

        with patch("services.api_client.requests.request",
                   return_value=make_response(201, {"id": 1})):
            tenant_wizard.btn_next.click()

        assert draft_repository.load(draft_id) is None

    def test_cancel_after_confirmation(self, tenant_wizard, tenant_results, qtbot, monkeypatch):
        fill_and_next(tenant_wizard, tenant_results["personal"])
        monkeypatch.setattr(tenant_wizard, "confirm_cancel", lambda: True)

        with qtbot.waitSignal(tenant_wizard.wizard_cancelled, timeout=1000):
            tenant_wizard.btn_cancel.click()

        assert tenant_wizard.controller.state.results == {}

    def test_cancel_declined(self, tenant_wizard, tenant_results, monkeypatch):
        fill_and_next(tenant_wizard, tenant_results["personal"])
        monkeypatch.setattr(tenant_wizard, "confirm_cancel", lambda: False)

        tenant_wizard.btn_cancel.click()

        assert tenant_wizard.controller.state.has_result("personal") is True


class TestTenantDocuments:
    """Test the verification documents step."""

    @pytest.fixture
    def passport(self, tmp_path):
        path = tmp_path / "passport.pdf"
        path.write_bytes(b"%PDF-1.4")
        return str(path)

    def test_upload_success(self, tenant_wizard, passport, make_response):
        form = tenant_wizard.forms["documents"]

        with patch("services.api_client.requests.request",
                   return_value=make_response(201, {"id": 3})) as request:
            assert form.upload_document("id_proof", passport) is True

        kwargs = request.call_args.kwargs
        assert kwargs["url"].endswith("/api/tenant-documents/upload")
        assert kwargs["data"] == {"documentType": "id_proof", "propertyId": "7"}
        assert kwargs["files"]["file"][0] == "passport.pdf"
        assert form.status_of("id_proof") == "success"
        assert form.upload_buttons["id_proof"].isEnabled() is False
        assert form.upload_buttons["employment_proof"].isEnabled() is True
        assert form.collect_data()["uploadedDocuments"] == ["id_proof"]

    def test_upload_failure_can_be_retried(self, tenant_wizard, passport, make_response):
        form = tenant_wizard.forms["documents"]

        with patch("services.api_client.requests.request",
                   return_value=make_response(500, {"message": "Storage full"})):
            assert form.upload_document("employment_proof", passport) is False

        assert form.status_of("employment_proof") == "error"
        assert form.last_upload_error == "Storage full"
        assert form.upload_buttons["employment_proof"].isEnabled() is True
        assert form.collect_data()["uploadedDocuments"] == []

    def test_missing_file_is_not_sent(self, tenant_wizard, tmp_path):
        form = tenant_wizard.forms["documents"]

        with patch("services.api_client.requests.request") as request:
            assert form.upload_document("id_proof", str(tmp_path / "gone.pdf")) is False

        request.assert_not_called()
        assert form.status_of("id_proof") == "error"

    def test_required_documents_block_next(self, tenant_wizard, tenant_results, passport, make_response):
        fill_until(tenant_wizard, tenant_results, "documents")
        form = tenant_wizard.current_form()

        tenant_wizard.btn_next.click()
        assert tenant_wizard.controller.current_key == "documents"
        assert form.field_error("uploadedDocuments") == (
            "Please upload your ID proof and proof of employment"
        )

        with patch("services.api_client.requests.request",
                   return_value=make_response(201, {"id": 3})):
            form.upload_document("id_proof", passport)
            form.upload_document("employment_proof", passport)
        tenant_wizard.btn_next.click()

        assert tenant_wizard.controller.current_key == "agreement"
        assert tenant_wizard.controller.state.get_result("documents")["uploadedDocuments"] == [
            "id_proof", "employment_proof"
        ]


class TestLandlordWizard:
    """Test the landlord wizard and its flat payload."""

    RESULTS = {
        "personal": {
            "firstName": "Klaus",
            "lastName": "Becker",
            "email": "klaus.becker@example.com",
            "phone": "+49 30 1234567",
        },
        "properties": {
            "numberOfProperties": "2",
            "propertyTypes": ["house", "apartment"],
            "mainPropertyAddress": "Hauptstraße 1, 10115 Berlin",
        },
        "financial": {
            "bankName": "Sparkasse",
            "iban": "DE89370400440532013000",
            "taxId": "",
            "monthlyRentCollection": "1800",
        },
        "preferences": {
            "preferredCommunication": "email",
            "receiveReports": True,
            "automaticReminders": False,
            "additionalNotes": "",
        },
    }

    def test_checkbox_defaults(self, qtbot, draft_repository):
        wizard = LandlordOnboardingWizard(draft_repository=draft_repository, run_in_background=False)
        qtbot.addWidget(wizard)
        data = wizard.forms["preferences"].collect_data()

        assert data["receiveReports"] is True
        assert data["automaticReminders"] is True

    def test_submit_flat_payload(self, qtbot, draft_repository, make_response):
        wizard = LandlordOnboardingWizard(draft_repository=draft_repository, run_in_background=False)
        qtbot.addWidget(wizard)
        assert wizard.progress_label.text() == "Step 1 of 5"
        fill_all(wizard, self.RESULTS)

        with patch("services.api_client.requests.request",
                   return_value=make_response(200, {"userId": 5})) as request:
            wizard.btn_next.click()

        payload = request.call_args.kwargs["json"]
        assert request.call_args.kwargs["url"].endswith("/api/onboarding")
        assert payload["firstName"] == "Klaus"
        assert payload["numberOfProperties"] == 2
        assert payload["propertyTypes"] == ["apartment", "house"]
        assert payload["monthlyRentCollection"] == 1800.0
        assert payload["automaticReminders"] is False
        assert payload["taxId"] is None
        assert "personal" not in payload
        assert wizard.controller.snapshot().submission_id == 5
