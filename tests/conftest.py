# -*- coding: utf-8 -*-
"""
Shared fixtures for the PropertyHub test suite.

The `qapp` and `qtbot` fixtures come from pytest-qt.
"""

import json
import os
import sys
from pathlib import Path

import pytest
import requests

# Run Qt headless when no display is available
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from repositories.database import Database
from repositories.draft_repository import DraftRepository
from services.submission_gateway import SubmissionGateway
from services.translation_manager import set_language


@pytest.fixture(autouse=True)
def english():
    """Run every test with English messages."""
    set_language("en")
    yield
    set_language("en")


@pytest.fixture
def test_db(tmp_path):
    """Create test database instance."""
    db = Database(db_path=tmp_path / "test_drafts.db")
    yield db
    db.close()


@pytest.fixture
def draft_repository(test_db):
    return DraftRepository(test_db)


class RecordingGateway(SubmissionGateway):
    """Gateway double that records submissions and replays scripted outcomes."""

    def __init__(self, outcomes=None):
        self.outcomes = list(outcomes or [{"id": 1}])
        self.submissions = []

    def submit(self, submission):
        self.submissions.append(submission)
        outcome = self.outcomes.pop(0) if len(self.outcomes) > 1 else self.outcomes[0]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


@pytest.fixture
def make_gateway():
    """Factory: make_gateway([{"id": 1}, GatewayError("...")])."""
    return RecordingGateway


@pytest.fixture
def make_response():
    """Factory for real requests.Response objects with a JSON body."""
    def _make(status_code, body=None, url="http://localhost:5000/api"):
        response = requests.Response()
        response.status_code = status_code
        response.url = url
        response.encoding = "utf-8"
        response.headers["Content-Type"] = "application/json"
        response._content = json.dumps(body).encode("utf-8") if body is not None else b""
        return response
    return _make


@pytest.fixture
def tenant_results():
    """Valid raw input for every tenant onboarding step (employed, with pets)."""
    return {
        "personal": {
            "firstName": "Anna",
            "lastName": "Schmidt",
            "email": "anna.schmidt@example.com",
            "phone": "+49 170 1234567",
            "dateOfBirth": "1990-04-12",
            "idNumber": "",
        },
        "employment": {"employmentStatus": "employed"},
        "employer": {
            "employerName": "Muster GmbH",
            "employerPhone": "",
            "occupation": "Engineer",
            "monthlyIncome": "4200",
            "employmentDuration": "3 years",
        },
        "references": {
            "reference1Name": "Peter Meier",
            "reference1Relationship": "Former landlord",
            "reference1Phone": "+49 30 9876543",
            "reference1Email": "",
            "reference2Name": "",
            "reference2Relationship": "",
            "reference2Phone": "",
            "reference2Email": "",
        },
        "banking": {
            "accountHolder": "Anna Schmidt",
            "bankName": "Sparkasse",
            "accountNumber": "12345678",
            "iban": "DE89370400440532013000",
            "bic": "",
            "paymentMethod": "direct_debit",
        },
        "lease": {
            "moveInDate": "2026-11-01",
            "leaseStartDate": "2026-11-01",
            "leaseDuration": "1_year",
            "customDuration": "",
            "rentAmount": "950",
            "depositAmount": "2850",
            "petPolicy": "cats_only",
            "hasPets": True,
        },
        "pets": {"petDetails": "One indoor cat"},
        "documents": {
            "uploadedDocuments": ["id_proof", "employment_proof"],
            "backgroundCheckConsent": True,
            "creditCheckConsent": False,
        },
        "agreement": {
            "agreeToTerms": True,
            "agreeToRules": True,
            "agreeToPrivacyPolicy": True,
            "signature": "Anna Schmidt",
        },
    }
