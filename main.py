#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
PropertyHub - Onboarding Desktop
Main entry point for the application

Usage:
    python main.py tenant --property-id 7
    python main.py tenant --property-id 7 --tenant-id 42
    python main.py landlord
    python main.py --draft <draft-id>
    python main.py --list-drafts
"""

import argparse
import sys

from PyQt5.QtWidgets import QApplication
from PyQt5.QtCore import Qt

from app.config import Config, WizardTypes
from repositories.database import Database
from repositories.draft_repository import DraftRepository
from services.translation_manager import SUPPORTED_LANGUAGES, set_language
from utils.logger import setup_logger

WIZARDS = {
    "tenant": WizardTypes.TENANT_ONBOARDING,
    "landlord": WizardTypes.LANDLORD_ONBOARDING,
}


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=f"{Config.APP_NAME} onboarding wizards")
    parser.add_argument("wizard", nargs="?", choices=sorted(WIZARDS), help="Wizard to open")
    parser.add_argument("--property-id", type=int, help="Property the tenant moves into")
    parser.add_argument("--tenant-id", help="Existing tenant record to complete")
    parser.add_argument("--draft", help="Resume a saved draft")
    parser.add_argument("--list-drafts", action="store_true", help="Print saved drafts and exit")
    parser.add_argument("--lang", choices=SUPPORTED_LANGUAGES, default=Config.LANGUAGE, help="UI language")
    args = parser.parse_args(argv)
    if not (args.wizard or args.draft or args.list_drafts):
        parser.error("choose a wizard, --draft or --list-drafts")
    return args


def get_wizard_class(wizard_type: str):
    if wizard_type == WizardTypes.TENANT_ONBOARDING:
        from ui.wizards.tenant_onboarding import TenantOnboardingWizard
        return TenantOnboardingWizard
    if wizard_type == WizardTypes.LANDLORD_ONBOARDING:
        from ui.wizards.landlord_onboarding import LandlordOnboardingWizard
        return LandlordOnboardingWizard
    raise ValueError(f"Unknown wizard type: {wizard_type}")


def build_wizard(args: argparse.Namespace, drafts: DraftRepository):
    """Create the requested wizard, either fresh or from a draft."""
    if args.draft:
        wizard_type = drafts.get_wizard_type(args.draft)
        if wizard_type is None:
            raise ValueError(f"Draft not found: {args.draft}")
        return get_wizard_class(wizard_type).load_from_draft(args.draft, draft_repository=drafts)

    context_values = {}
    if args.property_id is not None:
        context_values["propertyId"] = args.property_id
    if args.tenant_id:
        context_values["tenantId"] = args.tenant_id
    return get_wizard_class(WIZARDS[args.wizard])(
        context_values=context_values,
        draft_repository=drafts,
    )


def main(argv=None):
    """Main application entry point."""
    args = parse_args(argv)

    # Set Qt attributes BEFORE creating QApplication
    QApplication.setAttribute(Qt.AA_EnableHighDpiScaling, True)
    QApplication.setAttribute(Qt.AA_UseHighDpiPixmaps, True)

    # Initialize logging
    logger = setup_logger()

    try:
        drafts = DraftRepository(Database())

        if args.list_drafts:
            for draft in drafts.list_drafts():
                print(f"{draft['draft_id']}  {draft['wizard_type']:<20} "
                      f"{draft['current_step'] or '-':<12} {draft['updated_at']}")
            return 0

        app = QApplication(sys.argv)
        app.setApplicationName(Config.APP_NAME)
        set_language(args.lang)

        logger.info("=" * 80)
        logger.info(f"Starting {Config.APP_NAME} onboarding ({args.wizard or 'draft ' + args.draft})")
        logger.info("=" * 80)

        wizard = build_wizard(args, drafts)
        wizard.wizard_completed.connect(
            lambda response: logger.info(f"Onboarding stored with id {response.get('id')}")
        )
        wizard.show()

        exit_code = app.exec_()
        logger.info(f"Application closed with exit code: {exit_code}")
        return exit_code

    except Exception as e:
        error_msg = f"Fatal error during application startup: {e}"
        print(f"\n[ERROR] {error_msg}")
        print(f"\nPlease check {Config.LOG_PATH} for details")
        logger.exception(error_msg)
        return 1


if __name__ == "__main__":
    sys.exit(main())
