# -*- coding: utf-8 -*-


from pathlib import Path
from dataclasses import dataclass
from typing import Optional
import os

# ============================================================================
# Load .env file for local environment configuration
# ============================================================================
from dotenv import load_dotenv

load_dotenv()  # Load from .env file in project root

# ============================================================================
# Read settings from environment variables (from .env or system)
# ============================================================================
# API Settings
_API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:5000")
_API_TIMEOUT = int(os.getenv("API_TIMEOUT", "30"))
_API_TOKEN = os.getenv("API_TOKEN", None)
_API_VERIFY_SSL = os.getenv("API_VERIFY_SSL", "true").lower() in ("true", "1", "yes")

# UI language: "en" or "de"
_APP_LANGUAGE = os.getenv("APP_LANGUAGE", "en")


@dataclass
class Config:
    """Application configuration."""

    # Application Info
    APP_NAME: str = "PropertyHub"
    APP_TITLE: str = "PropertyHub Onboarding"
    VERSION: str = "1.0.0"
    ORGANIZATION: str = "PropertyHub"

    # HTTP API Backend Settings
    # Reads from .env file (API_BASE_URL, API_TIMEOUT, API_TOKEN, API_VERIFY_SSL)
    API_BASE_URL: str = _API_BASE_URL
    API_TIMEOUT: int = _API_TIMEOUT
    API_TOKEN: Optional[str] = _API_TOKEN
    API_VERIFY_SSL: bool = _API_VERIFY_SSL

    # Onboarding endpoints
    TENANT_ONBOARDING_ENDPOINT: str = "/api/tenants/onboarding"
    TENANT_ONBOARDING_UPDATE_ENDPOINT: str = "/api/tenants/{record_id}/onboarding"
    LANDLORD_ONBOARDING_ENDPOINT: str = "/api/onboarding"
    TENANT_DOCUMENT_UPLOAD_ENDPOINT: str = "/api/tenant-documents/upload"
    DOCUMENT_FILE_FILTER: str = "Documents (*.pdf *.jpg *.jpeg *.png)"

    # Language
    LANGUAGE: str = _APP_LANGUAGE

    # Paths
    PROJECT_ROOT: Path = Path(__file__).parent.parent
    DATA_DIR: Path = PROJECT_ROOT / "data"
    LOGS_DIR: Path = PROJECT_ROOT / "logs"

    # Drafts database (SQLite)
    DB_NAME: str = "drafts.db"
    DB_PATH: Path = DATA_DIR / DB_NAME

    # Logging
    LOG_FILE: str = "app.log"
    LOG_PATH: Path = LOGS_DIR / LOG_FILE
    LOG_MAX_BYTES: int = 5 * 1024 * 1024  # 5MB
    LOG_BACKUP_COUNT: int = 3

    # UI Settings
    WINDOW_MIN_WIDTH: int = 900
    WINDOW_MIN_HEIGHT: int = 680

    PRIMARY_COLOR: str = "#2563EB"
    TEXT_COLOR: str = "#1F2937"
    TEXT_LIGHT: str = "#6B7280"
    BORDER_COLOR: str = "#E5E7EB"
    ERROR_COLOR: str = "#DC2626"
    SUCCESS_COLOR: str = "#16A34A"
    HEADER_BG: str = "#F8F9FA"

    # Date Formats
    DATE_FORMAT: str = "%Y-%m-%d"
    DATE_FORMAT_DISPLAY: str = "%d/%m/%Y"


# Wizard identifiers (also used as draft types)
class WizardTypes:
    TENANT_ONBOARDING = "tenant_onboarding"
    LANDLORD_ONBOARDING = "landlord_onboarding"


# Controlled vocabularies
class Vocabularies:
    # Value (code), Name (English), Name (German)
    EMPLOYMENT_STATUS = [
        ("employed", "Employed", "Angestellt"),
        ("self-employed", "Self-employed", "Selbstständig"),
        ("student", "Student", "Student"),
        ("unemployed", "Unemployed", "Arbeitslos"),
        ("retired", "Retired", "Im Ruhestand"),
    ]

    PAYMENT_METHODS = [
        ("bank_transfer", "Bank transfer", "Überweisung"),
        ("direct_debit", "Direct debit", "Lastschrift"),
        ("standing_order", "Standing order", "Dauerauftrag"),
        ("other", "Other", "Sonstiges"),
    ]

    LEASE_DURATIONS = [
        ("month_to_month", "Month to month", "Monatlich kündbar"),
        ("6_months", "6 months", "6 Monate"),
        ("1_year", "1 year", "1 Jahr"),
        ("2_years", "2 years", "2 Jahre"),
        ("other", "Other", "Sonstiges"),
    ]

    PET_POLICIES = [
        ("no_pets", "No pets", "Keine Haustiere"),
        ("cats_only", "Cats only", "Nur Katzen"),
        ("small_dogs", "Small dogs", "Kleine Hunde"),
        ("all_pets", "All pets", "Alle Haustiere"),
        ("case_by_case", "Case by case", "Nach Absprache"),
    ]

    DOCUMENT_TYPES = [
        ("id_proof", "ID Proof / Passport", "Ausweis / Reisepass"),
        ("employment_proof", "Proof of Employment / Income", "Beschäftigungs- / Einkommensnachweis"),
        ("credit_check", "Credit Check (Optional)", "Bonitätsauskunft (optional)"),
        ("previous_landlord_reference", "Previous Landlord Reference (Optional)",
         "Referenz des Vorvermieters (optional)"),
    ]

    PROPERTY_TYPES = [
        ("apartment", "Apartment", "Wohnung"),
        ("house", "House", "Haus"),
        ("commercial", "Commercial", "Gewerbe"),
        ("land", "Land", "Grundstück"),
        ("mixed_use", "Mixed Use", "Gemischt genutzt"),
    ]

    COMMUNICATION_CHANNELS = [
        ("email", "Email", "E-Mail"),
        ("phone", "Phone", "Telefon"),
        ("whatsapp", "WhatsApp", "WhatsApp"),
    ]

    @staticmethod
    def codes(vocabulary) -> tuple:
        """Return the codes of a vocabulary as a tuple."""
        return tuple(code for code, _, _ in vocabulary)

    @staticmethod
    def get_display_name(vocabulary, code: str, german: bool = False) -> str:
        for value, name_en, name_de in vocabulary:
            if value == code:
                return name_de if german else name_en
        return code
